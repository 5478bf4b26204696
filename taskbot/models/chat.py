"""
Pydantic models for the chat webhook payloads.

Inbound: a chat event with the message text, the sender, and an optional
card action (button click). Outbound: either a plain text reply or a list
of cards built from sections of widgets.

Wire keys are camelCase; Python attributes are snake_case.
"""

from typing import Optional, List, Dict
from pydantic import BaseModel, ConfigDict, Field


class ChatModel(BaseModel):
    """Base for all webhook models (accepts both alias and field names)."""
    model_config = ConfigDict(populate_by_name=True)


# ============================================
# INBOUND
# ============================================

class Sender(ChatModel):
    """Identity of the message author as supplied by the chat platform."""
    name: str = ""
    email: str = ""


class Message(ChatModel):
    text: str = ""
    sender: Sender = Field(default_factory=Sender)


class ActionParameter(ChatModel):
    key: str
    value: str = ""


class Action(ChatModel):
    """A card action (button click)."""
    action_method_name: str = Field("", alias="actionMethodName")
    parameters: List[ActionParameter] = Field(default_factory=list)

    def parameter_map(self) -> Dict[str, str]:
        """Parameters as a dict; later keys win on duplicates."""
        return {param.key: param.value for param in self.parameters}


class ChatRequest(ChatModel):
    """Incoming chat webhook request."""
    message: Message = Field(default_factory=Message)
    action: Optional[Action] = None


# ============================================
# OUTBOUND
# ============================================

class CardAction(ChatModel):
    """Action sent back by the client when a button is clicked."""
    action_method_name: str = Field(..., alias="actionMethodName")
    parameters: Dict[str, str] = Field(default_factory=dict)


class OnClick(ChatModel):
    action: CardAction


class TextButton(ChatModel):
    text: str
    on_click: OnClick = Field(..., alias="onClick")


class Button(ChatModel):
    text_button: Optional[TextButton] = Field(None, alias="textButton")


class ButtonList(ChatModel):
    buttons: List[Button] = Field(default_factory=list)


class TextParagraph(ChatModel):
    text: str


class Divider(ChatModel):
    pass


class TextInput(ChatModel):
    name: str
    label: str
    type: str = "SINGLE_LINE"
    value: Optional[str] = None
    on_change_action: Optional[OnClick] = Field(None, alias="onChangeAction")


class Widget(ChatModel):
    """Exactly one of the widget kinds is set."""
    text_paragraph: Optional[TextParagraph] = Field(None, alias="textParagraph")
    button_list: Optional[ButtonList] = Field(None, alias="buttonList")
    divider: Optional[Divider] = None
    text_input: Optional[TextInput] = Field(None, alias="textInput")


class CardSection(ChatModel):
    widgets: List[Widget] = Field(default_factory=list)


class CardHeader(ChatModel):
    title: str
    subtitle: Optional[str] = None


class Card(ChatModel):
    header: Optional[CardHeader] = None
    sections: List[CardSection] = Field(default_factory=list)


class ChatResponse(ChatModel):
    """Reply to the chat platform: plain text or cards."""
    text: Optional[str] = None
    cards: Optional[List[Card]] = None

    def to_payload(self) -> dict:
        """Wire representation with camelCase keys and unset fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)

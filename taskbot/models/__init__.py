from .chat import (
    ChatRequest,
    ChatResponse,
    Message,
    Sender,
    Action,
    ActionParameter,
    Card,
    CardHeader,
    CardSection,
    Widget,
    TextParagraph,
    ButtonList,
    Button,
    TextButton,
    OnClick,
    CardAction,
    Divider,
    TextInput,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "Message",
    "Sender",
    "Action",
    "ActionParameter",
    "Card",
    "CardHeader",
    "CardSection",
    "Widget",
    "TextParagraph",
    "ButtonList",
    "Button",
    "TextButton",
    "OnClick",
    "CardAction",
    "Divider",
    "TextInput",
]

"""
Response rendering for chat replies.

Two presentation modes:
- text: one string per reply, tasks as a numbered list with a status glyph
- cards: one card per task with Mark as Done / Edit / Delete buttons

The edit form is always a card since it needs a text input.
"""

from enum import Enum
from typing import Dict, List, Optional, Sequence

from ..database.models import TaskDB
from ..models.chat import (
    Button,
    ButtonList,
    Card,
    CardAction,
    CardHeader,
    CardSection,
    ChatResponse,
    Divider,
    OnClick,
    TextButton,
    TextInput,
    TextParagraph,
    Widget,
)
from .actions import ActionName
from .parser import HELP_TEXT

DONE_GLYPH = "✅"
OPEN_GLYPH = "❌"

EMPTY_LIST_TEXT = "📝 No tasks found. Use 'add <task>' to create your first task!"
EMPTY_CONTENT_TEXT = "❌ Task content cannot be empty"
INVALID_TASK_ID_TEXT = "❌ Invalid task ID"
UNKNOWN_ACTION_TEXT = "❌ Unknown action"
INVALID_ACTION_TEXT = "❌ Invalid action"


class ResponseMode(str, Enum):
    TEXT = "text"
    CARDS = "cards"


def text_reply(text: str) -> ChatResponse:
    return ChatResponse(text=text)


def help_reply() -> ChatResponse:
    return text_reply(HELP_TEXT)


def not_found_reply(task_id: int) -> ChatResponse:
    return text_reply(f"❌ Task with ID {task_id} not found or doesn't belong to you")


def status_glyph(done: bool) -> str:
    return DONE_GLYPH if done else OPEN_GLYPH


# ==================== CARD BUILDING BLOCKS ====================

def _button(label: str, action: ActionName, params: Optional[Dict[str, str]] = None) -> Button:
    return Button(
        text_button=TextButton(
            text=label,
            on_click=OnClick(
                action=CardAction(action_method_name=action.value, parameters=params or {})
            ),
        )
    )


def task_buttons(task_id: int, done: bool) -> List[Button]:
    """Action buttons for a task; Mark as Done is left out once done."""
    params = {"taskId": str(task_id)}
    buttons = []
    if not done:
        buttons.append(_button("Mark as Done", ActionName.MARK_DONE, params))
    buttons.append(_button("Edit", ActionName.EDIT_TASK, params))
    buttons.append(_button("Delete", ActionName.DELETE_TASK, params))
    return buttons


def task_card(task_id: int, content: str, done: bool, header: CardHeader) -> Card:
    return Card(
        header=header,
        sections=[
            CardSection(
                widgets=[
                    Widget(text_paragraph=TextParagraph(text=content)),
                    Widget(divider=Divider()),
                    Widget(button_list=ButtonList(buttons=task_buttons(task_id, done))),
                ]
            )
        ],
    )


def edit_form_card(task_id: int, content: str) -> Card:
    """Form with the current content prefilled, plus Save and Cancel."""
    save_action = OnClick(
        action=CardAction(
            action_method_name=ActionName.EDIT_TASK.value,
            parameters={"taskId": str(task_id)},
        )
    )
    return Card(
        header=CardHeader(title=f"✏️ Edit Task #{task_id}"),
        sections=[
            CardSection(
                widgets=[
                    Widget(
                        text_input=TextInput(
                            name="content",
                            label="Task content:",
                            type="SINGLE_LINE",
                            value=content,
                            on_change_action=save_action,
                        )
                    ),
                    Widget(divider=Divider()),
                    Widget(
                        button_list=ButtonList(
                            buttons=[
                                Button(text_button=TextButton(text="Save", on_click=save_action)),
                                _button("Cancel", ActionName.LIST),
                            ]
                        )
                    ),
                ]
            )
        ],
    )


# ==================== RENDERER ====================

class ResponseRenderer:
    """Turns store results into chat replies in the configured mode."""

    def __init__(self, mode: ResponseMode = ResponseMode.CARDS):
        self.mode = ResponseMode(mode)

    def task_added(self, task: TaskDB) -> ChatResponse:
        if self.mode == ResponseMode.TEXT:
            return text_reply(f"{DONE_GLYPH} Task #{task.id} added: {task.content}")

        header = CardHeader(title=f"{DONE_GLYPH} Task Added", subtitle=f"Task ID: {task.id}")
        return ChatResponse(cards=[task_card(task.id, task.content, task.done, header)])

    def task_list(self, tasks: Sequence[TaskDB], notice: Optional[str] = None) -> ChatResponse:
        """
        Render an owner's tasks.

        notice is a one-line confirmation shown above the list in text mode;
        card mode shows the refreshed cards on their own.
        """
        if not tasks:
            if notice and self.mode == ResponseMode.TEXT:
                return text_reply(f"{notice}\n\n{EMPTY_LIST_TEXT}")
            return text_reply(EMPTY_LIST_TEXT)

        if self.mode == ResponseMode.TEXT:
            lines = ["📋 Your tasks:"]
            for index, task in enumerate(tasks, start=1):
                lines.append(f"{index}. {status_glyph(task.done)} #{task.id} {task.content}")
            body = "\n".join(lines)
            return text_reply(f"{notice}\n\n{body}" if notice else body)

        cards = [
            task_card(
                task.id,
                task.content,
                task.done,
                CardHeader(title=f"{status_glyph(task.done)} Task #{task.id}"),
            )
            for task in tasks
        ]
        return ChatResponse(cards=cards)

    def edit_form(self, task_id: int, content: str) -> ChatResponse:
        return ChatResponse(cards=[edit_form_card(task_id, content)])

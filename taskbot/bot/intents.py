"""
Intent type shared by the text command parser and the card action dispatcher.

An intent is the classified meaning of an inbound command, decoupled from
whether it arrived as typed text or as a button click.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class IntentKind(str, Enum):
    """Every request resolves to exactly one of these."""

    ADD = "add"                          # "add Buy milk"
    LIST = "list"                        # "list", Cancel button
    DONE = "done"                        # "done 3", Mark as Done button
    EDIT = "edit"                        # "edit 3 Buy oat milk", Save button
    DELETE = "delete"                    # "delete 3", Delete button
    SHOW_EDIT_FORM = "show_edit_form"    # Edit button without content
    HELP = "help"                        # anything unrecognised

    # Dispatcher validation outcomes, answered without touching the store
    INVALID_TASK_ID = "invalid_task_id"
    UNKNOWN_ACTION = "unknown_action"
    INVALID_ACTION = "invalid_action"


@dataclass(frozen=True)
class Intent:
    kind: IntentKind
    task_id: Optional[int] = None
    content: Optional[str] = None

    @classmethod
    def add(cls, content: str) -> "Intent":
        return cls(IntentKind.ADD, content=content)

    @classmethod
    def list(cls) -> "Intent":
        return cls(IntentKind.LIST)

    @classmethod
    def done(cls, task_id: int) -> "Intent":
        return cls(IntentKind.DONE, task_id=task_id)

    @classmethod
    def edit(cls, task_id: int, content: str) -> "Intent":
        return cls(IntentKind.EDIT, task_id=task_id, content=content)

    @classmethod
    def delete(cls, task_id: int) -> "Intent":
        return cls(IntentKind.DELETE, task_id=task_id)

    @classmethod
    def show_edit_form(cls, task_id: int) -> "Intent":
        return cls(IntentKind.SHOW_EDIT_FORM, task_id=task_id)

    @classmethod
    def help(cls) -> "Intent":
        return cls(IntentKind.HELP)

"""
Card action dispatcher.

Maps a button click (action method name + parameter map) onto the same
intents the text parser produces.
"""

import logging
import re
from enum import Enum
from typing import Callable, Dict, Optional

from .intents import Intent, IntentKind

logger = logging.getLogger(__name__)

_TASK_ID_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


class ActionName(str, Enum):
    """Action method names carried by card buttons."""
    MARK_DONE = "markDone"
    DELETE_TASK = "deleteTask"
    EDIT_TASK = "editTask"
    LIST = "list"


class InvalidTaskId(ValueError):
    """taskId parameter missing or not an integer."""


def _task_id(params: Dict[str, str]) -> int:
    raw = params.get("taskId") or ""
    if not _TASK_ID_PATTERN.fullmatch(raw):
        raise InvalidTaskId(raw)
    return int(raw)


def _mark_done(params: Dict[str, str]) -> Intent:
    return Intent.done(_task_id(params))


def _delete_task(params: Dict[str, str]) -> Intent:
    return Intent.delete(_task_id(params))


def _edit_task(params: Dict[str, str]) -> Intent:
    task_id = _task_id(params)
    content = params.get("content", "")
    if content:
        return Intent.edit(task_id, content)
    return Intent.show_edit_form(task_id)


def _list(params: Dict[str, str]) -> Intent:
    return Intent.list()


ACTION_HANDLERS: Dict[ActionName, Callable[[Dict[str, str]], Intent]] = {
    ActionName.MARK_DONE: _mark_done,
    ActionName.DELETE_TASK: _delete_task,
    ActionName.EDIT_TASK: _edit_task,
    ActionName.LIST: _list,
}


def dispatch_action(name: Optional[str], params: Optional[Dict[str, str]] = None) -> Intent:
    """Classify a card action into an intent."""
    params = params or {}

    try:
        action = ActionName(name)
    except ValueError:
        logger.info(f"Unknown card action: {name!r}")
        return Intent(IntentKind.UNKNOWN_ACTION)

    try:
        return ACTION_HANDLERS[action](params)
    except InvalidTaskId as e:
        logger.info(f"Invalid taskId {str(e)!r} for action {action.value}")
        return Intent(IntentKind.INVALID_TASK_ID)

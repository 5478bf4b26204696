from .handler import ChatHandler, get_chat_handler
from .intents import Intent, IntentKind
from .parser import parse_command
from .actions import ActionName, dispatch_action
from .cards import ResponseMode, ResponseRenderer
from .identity import resolve_owner

__all__ = [
    "ChatHandler",
    "get_chat_handler",
    "Intent",
    "IntentKind",
    "parse_command",
    "ActionName",
    "dispatch_action",
    "ResponseMode",
    "ResponseRenderer",
    "resolve_owner",
]

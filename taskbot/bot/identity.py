"""Owner resolution for incoming chat events."""

from typing import Optional

from config import settings
from ..models.chat import Sender


def resolve_owner(sender: Optional[Sender], default: Optional[str] = None) -> str:
    """
    Owner identifier used to scope tasks.

    Precedence is sender email, then sender name, then the configured
    default owner. Always returns a value.
    """
    if sender is not None:
        if sender.email and sender.email.strip():
            return sender.email.strip()
        if sender.name and sender.name.strip():
            return sender.name.strip()
    return default if default is not None else settings.default_owner

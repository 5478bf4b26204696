"""
Text command parser.

Grammar (first match wins):
    add <content>
    list
    done <id>
    edit <id> <content>
    delete <id>
Anything else is a request for help.
"""

import re
from typing import Callable, List, Tuple

from .intents import Intent

HELP_TEXT = """Available commands:
• add <task> - Add a new task
• list - List all tasks
• done <id> - Mark task as done
• edit <id> <new text> - Change a task's text
• delete <id> - Delete a task"""


# Order matters: the first matching pattern classifies the message
_COMMANDS: List[Tuple[re.Pattern, Callable[[re.Match], Intent]]] = [
    (re.compile(r"^add\s+(.+)$", re.DOTALL | re.ASCII), lambda m: Intent.add(m.group(1).strip())),
    (re.compile(r"^list$", re.ASCII), lambda m: Intent.list()),
    (re.compile(r"^done\s+(\d+)$", re.ASCII), lambda m: Intent.done(int(m.group(1)))),
    # Content may be blank so the store can reject it with a clear reply
    (
        re.compile(r"^edit\s+(\d+)(?:\s+(.*))?$", re.DOTALL | re.ASCII),
        lambda m: Intent.edit(int(m.group(1)), (m.group(2) or "").strip()),
    ),
    (re.compile(r"^delete\s+(\d+)$", re.ASCII), lambda m: Intent.delete(int(m.group(1)))),
]


def parse_command(text: str) -> Intent:
    """Classify a message into an intent."""
    text = (text or "").strip()

    for pattern, build in _COMMANDS:
        match = pattern.match(text)
        if match:
            return build(match)

    return Intent.help()

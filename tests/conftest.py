"""
Pytest configuration and shared fixtures.
"""

import pytest
import pytest_asyncio

from taskbot.bot.cards import ResponseMode
from taskbot.bot.handler import ChatHandler
from taskbot.database import Database
from taskbot.database.repositories import TaskRepository
from taskbot.models.chat import ChatRequest


@pytest_asyncio.fixture
async def database():
    """Fresh in-memory SQLite task store."""
    db = Database("sqlite+aiosqlite:///:memory:")
    assert await db.initialize()
    yield db
    await db.close()


@pytest.fixture
def task_repo(database):
    """TaskRepository bound to the in-memory store."""
    return TaskRepository(database)


@pytest.fixture
def card_handler(task_repo):
    """Handler replying with cards."""
    return ChatHandler(task_repo=task_repo, mode=ResponseMode.CARDS)


@pytest.fixture
def text_handler(task_repo):
    """Handler replying with plain text."""
    return ChatHandler(task_repo=task_repo, mode=ResponseMode.TEXT)


@pytest.fixture
def chat_payload():
    """Build a raw webhook payload as the chat platform sends it."""
    def _build(text="", email="alice@example.com", name="Alice", action=None, params=None):
        payload = {
            "message": {
                "text": text,
                "sender": {"name": name, "email": email},
            }
        }
        if action is not None:
            payload["action"] = {
                "actionMethodName": action,
                "parameters": [{"key": k, "value": v} for k, v in (params or {}).items()],
            }
        return payload
    return _build


@pytest.fixture
def chat_request(chat_payload):
    """Build a validated ChatRequest."""
    def _build(*args, **kwargs):
        return ChatRequest.model_validate(chat_payload(*args, **kwargs))
    return _build

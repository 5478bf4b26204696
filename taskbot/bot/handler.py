"""
Chat request handler.

Flow per request:
    payload -> parse text | dispatch action -> intent -> store -> render

Validation and not-found outcomes are answered as text. Storage failures
propagate to the web layer.
"""

import logging
from typing import Optional

from config import settings
from ..database.exceptions import EntityNotFoundError, ValidationError
from ..database.repositories import TaskRepository, get_task_repository
from ..models.chat import ChatRequest, ChatResponse
from .actions import dispatch_action
from .cards import (
    EMPTY_CONTENT_TEXT,
    INVALID_ACTION_TEXT,
    INVALID_TASK_ID_TEXT,
    UNKNOWN_ACTION_TEXT,
    ResponseMode,
    ResponseRenderer,
    help_reply,
    not_found_reply,
    text_reply,
)
from .identity import resolve_owner
from .intents import Intent, IntentKind
from .parser import parse_command

logger = logging.getLogger(__name__)


class ChatHandler:
    """Handles text commands and card actions for one chat integration."""

    def __init__(
        self,
        task_repo: Optional[TaskRepository] = None,
        mode: Optional[ResponseMode] = None,
    ):
        self.task_repo = task_repo or get_task_repository()
        self.renderer = ResponseRenderer(mode or settings.response_mode)

    async def handle(self, request: ChatRequest) -> ChatResponse:
        """Entry point for /chat: card actions take precedence over text."""
        if request.action is not None:
            return await self.handle_action(request)

        owner = resolve_owner(request.message.sender)
        intent = parse_command(request.message.text)
        return await self.execute(intent, owner)

    async def handle_action(self, request: ChatRequest) -> ChatResponse:
        """Entry point for /card-action."""
        owner = resolve_owner(request.message.sender)

        if request.action is None:
            intent = Intent(IntentKind.INVALID_ACTION)
        else:
            intent = dispatch_action(
                request.action.action_method_name,
                request.action.parameter_map(),
            )
        return await self.execute(intent, owner)

    async def execute(self, intent: Intent, owner: str) -> ChatResponse:
        """Run an intent against the store and render the result."""
        logger.debug(f"Intent {intent.kind.value} from {owner} (task={intent.task_id})")

        try:
            if intent.kind == IntentKind.ADD:
                task = await self.task_repo.create(intent.content, owner)
                return self.renderer.task_added(task)

            if intent.kind == IntentKind.LIST:
                return await self._list(owner)

            if intent.kind == IntentKind.DONE:
                await self.task_repo.set_done(intent.task_id, owner)
                return await self._list(owner, f"✅ Task #{intent.task_id} marked as done")

            if intent.kind == IntentKind.EDIT:
                await self.task_repo.edit(intent.task_id, owner, intent.content)
                return await self._list(owner, f"✏️ Task #{intent.task_id} updated")

            if intent.kind == IntentKind.DELETE:
                await self.task_repo.delete(intent.task_id, owner)
                return await self._list(owner, f"🗑️ Task #{intent.task_id} deleted")

            if intent.kind == IntentKind.SHOW_EDIT_FORM:
                content = await self.task_repo.get_content(intent.task_id, owner)
                return self.renderer.edit_form(intent.task_id, content)

        except ValidationError as e:
            logger.debug(f"Rejected {intent.kind.value} from {owner}: {e}")
            return text_reply(EMPTY_CONTENT_TEXT)

        except EntityNotFoundError:
            logger.debug(f"Task {intent.task_id} not found for {owner}")
            return not_found_reply(intent.task_id)

        if intent.kind == IntentKind.INVALID_TASK_ID:
            return text_reply(INVALID_TASK_ID_TEXT)
        if intent.kind == IntentKind.UNKNOWN_ACTION:
            return text_reply(UNKNOWN_ACTION_TEXT)
        if intent.kind == IntentKind.INVALID_ACTION:
            return text_reply(INVALID_ACTION_TEXT)

        return help_reply()

    async def _list(self, owner: str, notice: Optional[str] = None) -> ChatResponse:
        tasks = await self.task_repo.list_for_owner(owner)
        return self.renderer.task_list(tasks, notice)


# Singleton
_chat_handler: Optional[ChatHandler] = None


def get_chat_handler() -> ChatHandler:
    """Get the chat handler singleton."""
    global _chat_handler
    if _chat_handler is None:
        _chat_handler = ChatHandler()
    return _chat_handler

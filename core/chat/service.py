"""Chat message sending with background translation."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

from core.chat.message_store import MessageNotFoundError
from core.trans.interface import EmptyInputError
from models.message_models import ChatMessage
from models.translation_models import AUTO_LANGUAGE
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable

    from core.chat.delivery import DeliveryReport, ProgressiveTranslationDelivery
    from core.chat.message_store import MessageStore

__all__: list[str] = ["ChatService"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ChatService:
    """Stores chat messages and translates them in the background.

    send_message() returns as soon as the message is stored. Translations are delivered
    progressively by ProgressiveTranslationDelivery in a background task.

    Attributes:
        store (MessageStore): Message persistence.
        delivery (ProgressiveTranslationDelivery): Per-language translation publisher.
        background_tasks (set[asyncio.Task[None]]): Deliveries still running.
    """

    def __init__(self, store: MessageStore, delivery: ProgressiveTranslationDelivery) -> None:
        self.store: MessageStore = store
        self.delivery: ProgressiveTranslationDelivery = delivery
        self.background_tasks: set[asyncio.Task[None]] = set()

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self.background_tasks if not task.done())

    async def send_message(
        self,
        room_id: str,
        user_id: str,
        user_name: str,
        text: str,
        target_languages: Iterable[str] = (),
        source_language: str | None = None,
    ) -> str:
        """Store a message and start translating it.

        Args:
            room_id (str): Room to post into.
            user_id (str): Sender ID.
            user_name (str): Sender display name.
            text (str): Message text.
            target_languages (Iterable[str]): Languages to translate into. Empty means no translation.
            source_language (str | None): Language of the text. None or "auto" detects it.

        Returns:
            str: The new message ID.

        Raises:
            EmptyInputError: If the text is empty after trimming.
        """
        if not text.strip():
            msg = "Empty text provided"
            raise EmptyInputError(msg)

        languages: list[str] = list(dict.fromkeys(target_languages))
        source: str | None = None if source_language in (None, AUTO_LANGUAGE) else source_language
        logger.debug("Sending message: room=%s user=%s targets=%s", room_id, user_id, languages)

        message = ChatMessage(
            user_id=user_id,
            user_name=user_name,
            original_text=text,
            original_language=source or AUTO_LANGUAGE,
            timestamp=int(time.time() * 1000),
            is_translating=bool(languages),
            translation_progress=0,
            translation_total=len(languages),
        )
        message_id: str = await self.store.create_message(room_id, message)

        if languages:
            logger.debug("Starting translations for languages: %s", languages)
            self._schedule_delivery(room_id, message_id, text, languages, source)

        logger.info("Message sent with ID: %s", message_id)
        return message_id

    async def retranslate_message(
        self, room_id: str, message_id: str, target_languages: Iterable[str]
    ) -> DeliveryReport:
        """Translate a stored message again, overwriting its translations.

        Raises:
            MessageNotFoundError: If the message does not exist.
        """
        languages: list[str] = list(dict.fromkeys(target_languages))
        message: ChatMessage | None = await self.store.get_message(room_id, message_id)
        if message is None:
            msg = f"Message '{message_id}' not found in room '{room_id}'"
            raise MessageNotFoundError(msg)

        await self.store.update_message(
            room_id,
            message_id,
            translations={},
            is_translating=bool(languages),
            translation_error=None,
            translation_progress=0,
            translation_total=len(languages),
        )
        source: str | None = None if message.original_language == AUTO_LANGUAGE else message.original_language
        return await self.delivery.deliver(room_id, message_id, message.original_text, languages, source)

    def _schedule_delivery(
        self, room_id: str, message_id: str, text: str, languages: list[str], source: str | None
    ) -> None:
        task: asyncio.Task[None] = asyncio.create_task(
            self._run_delivery(room_id, message_id, text, languages, source),
            name=f"translate_message_{message_id}",
        )
        self.background_tasks.add(task)
        task.add_done_callback(self.background_tasks.discard)

    async def _run_delivery(
        self, room_id: str, message_id: str, text: str, languages: list[str], source: str | None
    ) -> None:
        try:
            await self.delivery.deliver(room_id, message_id, text, languages, source)
        except Exception as err:  # noqa: BLE001
            logger.error("Background translation failed: %s", err)
            await self._update_translation_error(room_id, message_id, str(err))

    async def _update_translation_error(self, room_id: str, message_id: str, error_message: str) -> None:
        changes: dict[str, object] = {"is_translating": False}
        if error_message.strip():
            changes["translation_error"] = error_message
        try:
            await self.store.update_message(room_id, message_id, **changes)
        except Exception as err:  # noqa: BLE001
            logger.error("Error updating translation error: %s", err)

    async def wait_for_pending(self) -> None:
        """Wait until every background delivery has finished."""
        while self.background_tasks:
            await asyncio.gather(*list(self.background_tasks), return_exceptions=True)

    async def close(self, timeout: float = 2.0) -> None:
        """Wait briefly for background deliveries, then cancel the rest."""
        if not self.background_tasks:
            return

        logger.debug("Waiting for background deliveries to finish")
        _finished, remaining = await asyncio.wait(set(self.background_tasks), timeout=timeout)
        if remaining:
            logger.warning("Cancelling unfinished deliveries: %s", [task.get_name() for task in remaining])
            for task in remaining:
                task.cancel()
            await asyncio.gather(*remaining, return_exceptions=True)
        self.background_tasks.clear()

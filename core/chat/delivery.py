"""Progressive delivery of a chat message's translations.

Every target language is translated concurrently. Each result is merged into the stored message
as soon as it settles, so readers see translations appear one by one instead of all at the end.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from models.message_models import PARTIAL_FAILURE_WARNING, TRANSLATION_FAILED_PLACEHOLDER
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable

    from core.chat.message_store import MessageStore
    from core.trans.manager import TranslationEngine
    from models.translation_models import TranslationResult

__all__: list[str] = ["DeliveryReport", "ProgressiveTranslationDelivery"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass
class DeliveryReport:
    """Outcome of one progressive delivery.

    Attributes:
        message_id (str): The delivered message.
        translations (dict[str, str]): Final translations map, placeholders included.
        failed_languages (list[str]): Languages whose translation failed, in request order.
    """

    message_id: str
    translations: dict[str, str] = field(default_factory=dict)
    failed_languages: list[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.failed_languages)


class ProgressiveTranslationDelivery:
    """Fans a message out to its target languages and publishes each translation on arrival.

    Languages are independent: a failure in one neither cancels nor delays the others.
    """

    def __init__(self, engine: TranslationEngine, store: MessageStore) -> None:
        self.engine: TranslationEngine = engine
        self.store: MessageStore = store

    async def deliver(
        self,
        room_id: str,
        message_id: str,
        text: str,
        targets: Iterable[str],
        source_language: str | None = None,
    ) -> DeliveryReport:
        """Translate text into every target language and update the message progressively.

        Args:
            room_id (str): Room of the message.
            message_id (str): Message to update.
            text (str): Original text.
            targets (Iterable[str]): Target language codes. Duplicates are ignored.
            source_language (str | None): Source language code. None detects it per translation.

        Returns:
            DeliveryReport: Final translations and the languages that failed.

        Raises:
            MessageNotFoundError: If the final update cannot find the message.
        """
        languages: list[str] = list(dict.fromkeys(targets))
        translation_map: dict[str, str] = {}
        progress: int = 0

        async def _progressive_update(lang: str, translation: str) -> None:
            nonlocal progress
            translation_map[lang] = translation
            progress += 1
            await self.store.update_message(
                room_id,
                message_id,
                translations=dict(translation_map),
                translation_progress=progress,
            )
            logger.debug("Progressive translation updated for %s: %s", lang, message_id)

        async def _translate_one(lang: str) -> TranslationResult:
            try:
                result: TranslationResult = await self.engine.translate(text, lang, source_language)
            except Exception as err:  # noqa: BLE001
                logger.error("Translation failed for %s: %s", lang, err)
                await _progressive_update(lang, TRANSLATION_FAILED_PLACEHOLDER.format(lang=lang))
                raise
            await _progressive_update(lang, result.translated_text)
            return result

        outcomes: list[TranslationResult | BaseException] = await asyncio.gather(
            *(_translate_one(lang) for lang in languages), return_exceptions=True
        )
        failed: list[str] = [
            lang for lang, outcome in zip(languages, outcomes, strict=True) if isinstance(outcome, BaseException)
        ]

        final_update: dict[str, object] = {"translations": dict(translation_map), "is_translating": False}
        if failed:
            final_update["translation_error"] = PARTIAL_FAILURE_WARNING
        await self.store.update_message(room_id, message_id, **final_update)

        logger.info(
            "All message translations completed: %s (%d ok, %d failed)",
            message_id,
            len(languages) - len(failed),
            len(failed),
        )
        return DeliveryReport(message_id=message_id, translations=dict(translation_map), failed_languages=failed)

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from core.trans.engines.offline_dictionary import get_phrase_table
from core.trans.interface import TransInterface
from models.translation_models import TranslationResult
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

__all__: list[str] = ["OFFLINE_MATCH_CONFIDENCE", "OFFLINE_MISS_CONFIDENCE", "OfflineTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

OFFLINE_MATCH_CONFIDENCE: Final[float] = 0.6
OFFLINE_MISS_CONFIDENCE: Final[float] = 0.1
UNAVAILABLE_MARKER: Final[str] = "(translation unavailable)"


class OfflineTranslation(TransInterface):
    """Phrase-table lookup that works without network access and never fails.

    The first table phrase contained in the input (case-insensitive) wins. Without a match,
    or without a table for the language pair, the input comes back with an "unavailable" marker.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        # Same construction signature as the network adapters; nothing is needed.
        _ = args, kwargs

    @staticmethod
    def fetch_engine_name() -> str:
        return "offline"

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        lowered: str = text.lower()
        for phrase, translation in get_phrase_table(source_lang, target_lang):
            if phrase.lower() in lowered:
                logger.debug("Offline phrase match '%s' -> '%s'", phrase, translation)
                return TranslationResult(
                    translated_text=translation,
                    source_language=source_lang,
                    target_language=target_lang,
                    confidence=OFFLINE_MATCH_CONFIDENCE,
                    provider="offline",
                )

        logger.debug("No offline phrase for %s->%s: '%s'", source_lang, target_lang, text)
        return TranslationResult(
            translated_text=f"{text} {UNAVAILABLE_MARKER}",
            source_language=source_lang,
            target_language=target_lang,
            confidence=OFFLINE_MISS_CONFIDENCE,
            provider="offline",
        )

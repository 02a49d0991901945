"""Source language detection.

Short texts carry too little signal for statistical detection, so they are classified by
Unicode script. Longer texts go through langdetect, seeded for deterministic results.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar, Final

from langdetect import DetectorFactory, LangDetectException, detect

from models.language_models import SUPPORTED_LANGUAGES
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

__all__: list[str] = ["DEFAULT_LANGUAGE", "LanguageDetector", "get_language_name", "is_language_supported"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

DetectorFactory.seed = 0

DEFAULT_LANGUAGE: Final[str] = "en"

# Checked in order; kana decides Japanese before the shared Han range is considered.
_SCRIPT_PATTERNS: Final[tuple[tuple[str, re.Pattern[str]], ...]] = (
    ("ja", re.compile(r"[\u3040-\u309F\u30A0-\u30FF]")),
    ("ko", re.compile(r"[\uAC00-\uD7AF\u1100-\u11FF\u3130-\u318F]")),
    ("zh", re.compile(r"[\u4E00-\u9FFF]")),
    ("ar", re.compile(r"[\u0600-\u06FF]")),
    ("ru", re.compile(r"[\u0400-\u04FF]")),
)


class LanguageDetector:
    """Maps text to an ISO 639-1 language code.

    Attributes:
        SHORT_TEXT_LENGTH (ClassVar[int]): Texts shorter than this are classified by script.
        LANGDETECT_ALIASES (ClassVar[dict[str, str]]): langdetect codes folded into ISO 639-1.
    """

    SHORT_TEXT_LENGTH: ClassVar[int] = 10
    LANGDETECT_ALIASES: ClassVar[dict[str, str]] = {"zh-cn": "zh", "zh-tw": "zh"}

    def detect(self, text: str) -> str:
        """Detect the language of text, falling back to English.

        Args:
            text (str): Text to analyze.

        Returns:
            str: ISO 639-1 code, "en" when nothing better is found.
        """
        clean_text: str = StringUtils.compress_blanks(text)
        if len(clean_text) < self.SHORT_TEXT_LENGTH:
            return self._detect_by_script(clean_text)

        try:
            detected: str = detect(clean_text)
        except LangDetectException as err:
            logger.warning("Language detection failed: %s", err)
            return DEFAULT_LANGUAGE

        detected = self.LANGDETECT_ALIASES.get(detected.lower(), detected.lower())
        logger.debug("langdetect detected '%s' for text: '%s'", detected, clean_text)
        return detected if len(detected) == 2 else DEFAULT_LANGUAGE  # noqa: PLR2004

    @staticmethod
    def _detect_by_script(text: str) -> str:
        for lang, pattern in _SCRIPT_PATTERNS:
            if pattern.search(text):
                logger.debug("Short text detected as '%s' by character analysis", lang)
                return lang
        return DEFAULT_LANGUAGE


def get_language_name(code: str) -> str:
    """Return the English name of a supported language, or the upper-cased code."""
    for lang in SUPPORTED_LANGUAGES:
        if lang.code == code:
            return lang.name
    return code.upper()


def is_language_supported(code: str) -> bool:
    return any(lang.code == code for lang in SUPPORTED_LANGUAGES)

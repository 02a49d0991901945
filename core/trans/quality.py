"""Quality heuristics for machine translation answers.

MyMemory is a translation memory: besides genuine translations it sometimes returns
unrelated sentences contributed by users. The default filter rejects the patterns that
were observed in practice. Filters return a rejection reason, or None to accept.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from utils.string_utils import StringUtils

__all__: list[str] = ["MIN_CONFIDENCE", "SUSPICIOUS_PHRASES", "QualityFilter", "default_quality_filter"]

type QualityFilter = Callable[[str, str, str, str, float], str | None]

MIN_CONFIDENCE: Final[float] = 0.3

SUSPICIOUS_PHRASES: Final[tuple[str, ...]] = ("my name is", "제 이름은", "i am", "저는")


def default_quality_filter(
    source_text: str, translated_text: str, source_lang: str, target_lang: str, confidence: float
) -> str | None:
    """Judge a translation answer.

    Args:
        source_text (str): The text that was sent for translation.
        translated_text (str): The provider's answer.
        source_lang (str): Source language code.
        target_lang (str): Target language code.
        confidence (float): Provider confidence in the range 0.0-1.0.

    Returns:
        str | None: The reason for rejection, or None if the answer is acceptable.
    """
    _ = source_lang
    if confidence < MIN_CONFIDENCE:
        return f"low confidence ({confidence:.2f})"

    if StringUtils.contains_any(translated_text, SUSPICIOUS_PHRASES):
        return f"suspicious translation '{translated_text}'"

    if target_lang == "ko" and source_text.strip().lower() == "hello" and "안녕" not in translated_text:
        return f"unexpected greeting translation '{translated_text}'"

    return None

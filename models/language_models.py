"""Languages offered to chat users."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

__all__: list[str] = ["SUPPORTED_LANGUAGES", "LanguageInfo"]


@dataclass(frozen=True)
class LanguageInfo:
    """A selectable language.

    Attributes:
        code (str): ISO 639-1 code.
        name (str): English name.
        native (str): Name in the language itself.
    """

    code: str
    name: str
    native: str


SUPPORTED_LANGUAGES: Final[tuple[LanguageInfo, ...]] = (
    LanguageInfo("ko", "Korean", "한국어"),
    LanguageInfo("en", "English", "English"),
    LanguageInfo("ja", "Japanese", "日本語"),
    LanguageInfo("zh", "Chinese", "中文"),
    LanguageInfo("es", "Spanish", "Español"),
    LanguageInfo("fr", "French", "Français"),
    LanguageInfo("de", "German", "Deutsch"),
    LanguageInfo("it", "Italian", "Italiano"),
    LanguageInfo("pt", "Portuguese", "Português"),
    LanguageInfo("ru", "Russian", "Русский"),
    LanguageInfo("ar", "Arabic", "العربية"),
    LanguageInfo("hi", "Hindi", "हिन्दी"),
    LanguageInfo("th", "Thai", "ไทย"),
    LanguageInfo("vi", "Vietnamese", "Tiếng Việt"),
    LanguageInfo("nl", "Dutch", "Nederlands"),
    LanguageInfo("tr", "Turkish", "Türkçe"),
)

"""Configuration data models for the translation chat services.

Each data class mirrors one section of the INI configuration file. Field names are the INI keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = ["Config"]

DEFAULT_LIBRETRANSLATE_MIRRORS: list[str] = [
    "https://libretranslate.pussthecat.org/translate",
    "https://translate.argosopentech.com/translate",
    "https://libretranslate.com/translate",
    "https://libretranslate.de/translate",
]


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""
    STORAGE_PATH: str = "translation_chat.db"


@dataclass
class Translation:
    PREFERRED_PROVIDER: str = "auto"
    AUTO_DETECT_LANGUAGE: bool = True
    FALLBACK_TO_OFFLINE: bool = True
    CACHE_TRANSLATIONS: bool = True


@dataclass
class MyMemory:
    URL: str = "https://api.mymemory.translated.net/get"
    CONTACT_EMAIL: str = ""
    DAILY_LIMIT: int = 1000
    TIMEOUT: float = 10.0


@dataclass
class LibreTranslate:
    URL: str = ""  # Primary instance, tried before the public mirrors when set.
    MIRRORS: list[str] = field(default_factory=lambda: list(DEFAULT_LIBRETRANSLATE_MIRRORS))
    DAILY_LIMIT: int = 100
    TIMEOUT: float = 8.0


@dataclass
class Cache:
    MAX_SIZE: int = 2000
    MAX_AGE_HOURS: float = 24.0


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    TRANSLATION: Translation = field(default_factory=Translation)
    MYMEMORY: MyMemory = field(default_factory=MyMemory)
    LIBRETRANSLATE: LibreTranslate = field(default_factory=LibreTranslate)
    CACHE: Cache = field(default_factory=Cache)

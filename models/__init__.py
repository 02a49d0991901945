"""Data models for the translation chat services.

This package contains dataclass definitions for configuration, translation results and settings,
provider quotas, provider API payloads, cache entries, supported languages, and chat messages.
"""

from __future__ import annotations

from models.api_models import LibreTranslateRequest, LibreTranslateResponse, MyMemoryResponse, MyMemoryResponseData
from models.cache_models import CacheEntry, CacheStatistics
from models.config_models import Config
from models.language_models import SUPPORTED_LANGUAGES, LanguageInfo
from models.message_models import PARTIAL_FAILURE_WARNING, TRANSLATION_FAILED_PLACEHOLDER, ChatMessage
from models.translation_models import (
    AUTO_LANGUAGE,
    AUTO_PROVIDER,
    PROVIDER_NAMES,
    APIQuota,
    EngineStatistics,
    PreferredProvider,
    ProviderName,
    TranslationResult,
    TranslationSettings,
)

__all__: list[str] = [
    "AUTO_LANGUAGE",
    "AUTO_PROVIDER",
    "PARTIAL_FAILURE_WARNING",
    "PROVIDER_NAMES",
    "SUPPORTED_LANGUAGES",
    "TRANSLATION_FAILED_PLACEHOLDER",
    "APIQuota",
    "CacheEntry",
    "CacheStatistics",
    "ChatMessage",
    "Config",
    "EngineStatistics",
    "LanguageInfo",
    "LibreTranslateRequest",
    "LibreTranslateResponse",
    "MyMemoryResponse",
    "MyMemoryResponseData",
    "PreferredProvider",
    "ProviderName",
    "TranslationResult",
    "TranslationSettings",
]

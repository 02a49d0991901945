"""Models for translation-related data.

Defines the translation result passed between adapters, cache and engine, the per-provider
daily quota record, and the user-tunable translation settings. Quota and settings are persisted
as camelCase JSON blobs through dataclasses_json.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, Literal, get_args

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

if TYPE_CHECKING:
    from models.cache_models import CacheStatistics

__all__: list[str] = [
    "AUTO_LANGUAGE",
    "AUTO_PROVIDER",
    "PROVIDER_NAMES",
    "APIQuota",
    "EngineStatistics",
    "PreferredProvider",
    "ProviderName",
    "TranslationResult",
    "TranslationSettings",
]

type ProviderName = Literal["mymemory", "libretranslate", "offline"]
type PreferredProvider = Literal["auto", "mymemory", "libretranslate", "offline"]

PROVIDER_NAMES: Final[tuple[str, ...]] = get_args(ProviderName.__value__)
AUTO_PROVIDER: Final[str] = "auto"
AUTO_LANGUAGE: Final[str] = "auto"  # Source language not resolved at request time.


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of one translation by one provider.

    Immutable, so a cached result can be handed to any number of callers.

    Attributes:
        translated_text (str): Output text.
        source_language (str): Source language code, or "auto" if unresolved.
        target_language (str): Target language code.
        confidence (float | None): Quality estimate between 0.0 and 1.0, if known.
        provider (ProviderName): The adapter that actually produced this result.
    """

    translated_text: str
    source_language: str
    target_language: str
    confidence: float | None = None
    provider: ProviderName = "offline"

    def __str__(self) -> str:
        return self.translated_text


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class APIQuota(DataClassJsonMixin):
    """Daily call budget of one metered provider.

    Attributes:
        provider (str): Provider name.
        daily_limit (int): Calls allowed per calendar day.
        current_usage (int): Calls made today.
        last_reset (int): Epoch milliseconds of the last reset.
    """

    provider: str
    daily_limit: int
    current_usage: int = 0
    last_reset: int = 0

    @property
    def remaining(self) -> int:
        return max(self.daily_limit - self.current_usage, 0)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class TranslationSettings(DataClassJsonMixin):
    """Process-wide translation preferences.

    Attributes:
        preferred_provider (str): "auto" or one of the provider names.
        auto_detect_language (bool): Detect the source language when the caller gives none.
        fallback_to_offline (bool): Append the offline dictionary to the provider chain.
        cache_translations (bool): Read from and write to the translation cache.
    """

    preferred_provider: str = AUTO_PROVIDER
    auto_detect_language: bool = True
    fallback_to_offline: bool = True
    cache_translations: bool = True


@dataclass
class EngineStatistics:
    """Snapshot of the translation engine state.

    Attributes:
        cache_size (int): Number of cached results.
        cache (CacheStatistics): Cache counters.
        settings (TranslationSettings): Current settings.
        quotas (dict[str, APIQuota]): Daily usage per metered provider.
    """

    cache_size: int
    cache: CacheStatistics
    settings: TranslationSettings
    quotas: dict[str, APIQuota] = field(default_factory=dict)

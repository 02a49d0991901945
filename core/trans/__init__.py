"""Translation engine and provider interfaces.

This package provides translation through pluggable provider adapters (MyMemory, LibreTranslate,
offline phrase tables) tried in a fallback chain, with daily quota tracking for metered providers.
"""

from core.trans.interface import (
    AllProvidersFailedError,
    EmptyInputError,
    ProviderError,
    QuotaExceededError,
    TransInterface,
    TranslateExceptionError,
)
from core.trans.manager import TranslationEngine, create_providers
from core.trans.quota import QuotaLedger

__all__: list[str] = [
    "AllProvidersFailedError",
    "EmptyInputError",
    "ProviderError",
    "QuotaExceededError",
    "QuotaLedger",
    "TransInterface",
    "TranslateExceptionError",
    "TranslationEngine",
    "create_providers",
]

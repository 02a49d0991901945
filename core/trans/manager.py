from __future__ import annotations

import asyncio
from dataclasses import fields, replace
from typing import TYPE_CHECKING, Any, ClassVar, Final

import core.trans.engines  # noqa: F401  # Registers the provider adapters.
from core.detection import DEFAULT_LANGUAGE
from core.trans.interface import (
    AllProvidersFailedError,
    EmptyInputError,
    ProviderError,
    TransInterface,
    TranslateExceptionError,
)
from models.translation_models import (
    AUTO_LANGUAGE,
    AUTO_PROVIDER,
    PROVIDER_NAMES,
    EngineStatistics,
    TranslationResult,
    TranslationSettings,
)
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Mapping

    from config.loader import Config
    from core.cache.manager import TranslationCache
    from core.detection import LanguageDetector
    from core.storage import KeyValueStorage
    from core.trans.quota import QuotaLedger
    from handlers.async_comm import AsyncHttp


__all__: list[str] = ["SETTINGS_STORAGE_KEY", "TranslationEngine", "create_providers"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

SETTINGS_STORAGE_KEY: Final[str] = "translation-settings"
UNKNOWN_LANGUAGE: Final[str] = "unknown"


def create_providers(
    http: AsyncHttp,
    ledger: QuotaLedger,
    config: Config,
    names: Iterable[str] = PROVIDER_NAMES,
) -> dict[str, TransInterface]:
    """Instantiate the registered adapters.

    Args:
        http (AsyncHttp): Shared HTTP client.
        ledger (QuotaLedger): Shared quota ledger.
        config (Config): Application configuration.
        names (Iterable[str]): Provider names to build.

    Returns:
        dict[str, TransInterface]: Adapter instances keyed by provider name.
    """
    providers: dict[str, TransInterface] = {}
    for name in names:
        cls: type[TransInterface] | None = TransInterface.registered.get(name)
        if cls is None:
            logger.critical("Translation class not found: '%s'", name)
            continue
        providers[name] = cls(http, ledger, config)  # type: ignore[call-arg]
        logger.info("Translation provider initialized: '%s'", name)
    return providers


class TranslationEngine:
    """Translates text through a fallback chain of providers with result caching.

    A single call runs: trim, resolve the source language, short-circuit identical languages,
    clear the cache on common words, look up the cache, walk the provider chain, and cache
    the result.

    Attributes:
        CACHE_READ_MIN_CONFIDENCE (ClassVar[float]): Cached results must exceed this to be reused.
        CACHE_WRITE_MIN_CONFIDENCE (ClassVar[float]): Results must exceed this to be cached.
        COMMON_WORDS (ClassVar[tuple[str, ...]]): Substrings that clear the whole cache before lookup.
        AUTO_CHAIN (ClassVar[tuple[str, ...]]): Network providers tried in "auto" mode.
    """

    CACHE_READ_MIN_CONFIDENCE: ClassVar[float] = 0.5
    CACHE_WRITE_MIN_CONFIDENCE: ClassVar[float] = 0.3
    COMMON_WORDS: ClassVar[tuple[str, ...]] = ("hello", "hi", "thanks", "thank you", "bye", "goodbye")
    AUTO_CHAIN: ClassVar[tuple[str, ...]] = ("mymemory", "libretranslate")

    def __init__(
        self,
        *,
        providers: Mapping[str, TransInterface],
        cache: TranslationCache,
        storage: KeyValueStorage,
        detector: LanguageDetector,
        ledger: QuotaLedger | None = None,
        defaults: TranslationSettings | None = None,
    ) -> None:
        """Initialize the engine and load persisted settings.

        Args:
            providers (Mapping[str, TransInterface]): Adapter instances keyed by provider name.
            cache (TranslationCache): Result cache owned by this engine.
            storage (KeyValueStorage): Store holding the persisted settings.
            detector (LanguageDetector): Source language detector.
            ledger (QuotaLedger | None): Quota ledger, reported by get_statistics().
            defaults (TranslationSettings | None): Settings used where nothing is persisted.
        """
        self.providers: dict[str, TransInterface] = dict(providers)
        self.cache: TranslationCache = cache
        self.storage: KeyValueStorage = storage
        self.detector: LanguageDetector = detector
        self.ledger: QuotaLedger | None = ledger
        self._settings: TranslationSettings = self._load_settings(defaults or TranslationSettings())
        logger.debug("Translation providers: %s", list(self.providers))

    def _load_settings(self, defaults: TranslationSettings) -> TranslationSettings:
        stored: Any = self.storage.load(SETTINGS_STORAGE_KEY)
        settings: TranslationSettings = defaults
        if isinstance(stored, dict):
            try:
                settings = TranslationSettings.from_dict({**defaults.to_dict(), **stored}, infer_missing=True)
            except (KeyError, TypeError, ValueError) as err:
                logger.error("Error loading translation settings: %s", err)
                settings = defaults
        elif stored is not None:
            logger.error("Ignoring malformed translation settings: %r", stored)

        if settings.preferred_provider not in (AUTO_PROVIDER, *PROVIDER_NAMES):
            logger.warning("Unknown preferred provider '%s', using '%s'", settings.preferred_provider, AUTO_PROVIDER)
            settings = replace(settings, preferred_provider=AUTO_PROVIDER)
        return settings

    def get_settings(self) -> TranslationSettings:
        return replace(self._settings)

    def update_settings(self, **changes: Any) -> TranslationSettings:
        """Apply and persist settings changes.

        Args:
            **changes: TranslationSettings field values, e.g. `preferred_provider="offline"`.

        Returns:
            TranslationSettings: A copy of the updated settings.

        Raises:
            ValueError: If a field name or the preferred provider is unknown.
            TypeError: If a flag is not a bool.
        """
        known: dict[str, type] = {f.name: bool for f in fields(TranslationSettings)}
        known["preferred_provider"] = str
        for name, value in changes.items():
            if name not in known:
                msg: str = f"Unknown translation setting: '{name}'"
                raise ValueError(msg)
            if not isinstance(value, known[name]):
                msg = f"Invalid type for '{name}': {type(value).__name__}"
                raise TypeError(msg)
        if "preferred_provider" in changes:
            changes["preferred_provider"] = changes["preferred_provider"].lower()
            if changes["preferred_provider"] not in (AUTO_PROVIDER, *PROVIDER_NAMES):
                msg = f"Unknown provider: '{changes['preferred_provider']}'"
                raise ValueError(msg)

        self._settings = replace(self._settings, **changes)
        self.storage.save(SETTINGS_STORAGE_KEY, self._settings.to_dict())
        logger.info("Translation settings updated: %s", self._settings)
        return self.get_settings()

    def _resolve_source_language(self, text: str, source_language: str | None) -> str:
        if source_language and source_language != AUTO_LANGUAGE:
            return source_language
        if self._settings.auto_detect_language:
            return self.detector.detect(text)
        return DEFAULT_LANGUAGE

    async def translate(
        self, text: str, target_language: str, source_language: str | None = None
    ) -> TranslationResult:
        """Translate text into target_language.

        Args:
            text (str): Text to translate. Surrounding whitespace is ignored.
            target_language (str): Target language code.
            source_language (str | None): Source language code. None or "auto" means detect.

        Returns:
            TranslationResult: The result; `provider` names the adapter that produced it.

        Raises:
            EmptyInputError: If the text is empty after trimming.
            AllProvidersFailedError: If every provider in the chain failed.
        """
        clean_text: str = StringUtils.ensure_str(text).strip()
        if not clean_text:
            msg = "Empty text provided"
            raise EmptyInputError(msg)

        source: str = self._resolve_source_language(clean_text, source_language)

        if source == target_language:
            return TranslationResult(
                translated_text=clean_text,
                source_language=source,
                target_language=target_language,
                confidence=1.0,
                provider="offline",
            )

        if StringUtils.contains_any(clean_text, self.COMMON_WORDS):
            logger.debug("Clearing cache for common word to ensure fresh translation")
            self.cache.clear()

        if self._settings.cache_translations:
            cached: TranslationResult | None = self.cache.get(clean_text, source, target_language)
            if (
                cached is not None
                and cached.confidence is not None
                and cached.confidence > self.CACHE_READ_MIN_CONFIDENCE
            ):
                logger.debug("Translation cache hit")
                return cached

        result: TranslationResult = await self._translate_with_fallback(clean_text, source, target_language)

        if (
            self._settings.cache_translations
            and result.confidence is not None
            and result.confidence > self.CACHE_WRITE_MIN_CONFIDENCE
        ):
            self.cache.set(clean_text, source, target_language, result)

        return result

    def _get_provider_chain(self) -> list[str]:
        preferred: str = self._settings.preferred_provider
        fallback_to_offline: bool = self._settings.fallback_to_offline

        if preferred != AUTO_PROVIDER:
            chain: list[str] = [preferred]
            if fallback_to_offline and preferred != "offline":
                chain.append("offline")
            return chain

        chain = list(self.AUTO_CHAIN)
        if fallback_to_offline:
            chain.append("offline")
        return chain

    async def _translate_with_fallback(self, text: str, source: str, target: str) -> TranslationResult:
        errors: list[tuple[str, Exception]] = []

        for name in self._get_provider_chain():
            provider: TransInterface | None = self.providers.get(name)
            if provider is None:
                errors.append((name, ProviderError(f"Unknown provider: {name}")))
                continue
            logger.debug("Trying translation with %s", name)
            try:
                return await provider.translate(text, source, target)
            except TranslateExceptionError as err:
                logger.warning("%s translation failed: %s", name, err)
                errors.append((name, err))
            except Exception as err:  # noqa: BLE001
                logger.exception("%s translation failed with unexpected error.", name)
                errors.append((name, err))

        raise AllProvidersFailedError(errors)

    async def translate_to_multiple_languages(
        self, text: str, target_languages: Iterable[str], source_language: str | None = None
    ) -> dict[str, TranslationResult]:
        """Translate text into several languages concurrently.

        A failed language does not affect the others; it gets the original text with confidence 0.0.

        Returns:
            dict[str, TranslationResult]: Results keyed by target language.
        """
        languages: list[str] = list(dict.fromkeys(target_languages))

        async def _translate_one(lang: str) -> TranslationResult:
            try:
                return await self.translate(text, lang, source_language)
            except TranslateExceptionError as err:
                logger.error("Translation to %s failed: %s", lang, err)
            except Exception:  # noqa: BLE001
                logger.exception("Translation to %s failed with unexpected error.", lang)
            return TranslationResult(
                translated_text=text,
                source_language=source_language or UNKNOWN_LANGUAGE,
                target_language=lang,
                confidence=0.0,
                provider="offline",
            )

        results: list[TranslationResult] = await asyncio.gather(*(_translate_one(lang) for lang in languages))
        return dict(zip(languages, results, strict=True))

    def get_statistics(self) -> EngineStatistics:
        return EngineStatistics(
            cache_size=len(self.cache),
            cache=self.cache.statistics(),
            settings=self.get_settings(),
            quotas=self.ledger.get_quotas() if self.ledger is not None else {},
        )

    def clear_cache(self) -> None:
        self.cache.clear()

    async def close(self) -> None:
        """Close every provider adapter."""
        logger.info("Class '%s' termination process started.", self.__class__.__name__)
        for provider in self.providers.values():
            await provider.close()
        logger.info("Class '%s' termination process completed.", self.__class__.__name__)

"""Shared data management for the translation chat services.

This module defines the SharedData class, a centralized container for the long-lived services:
the key/value storage, quota ledger, translation cache, HTTP client, translation engine, and the
chat service with its message store. Each service is built once in async_init() and passed by
reference to the services that depend on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from core.cache.manager import TranslationCache
from core.chat.delivery import ProgressiveTranslationDelivery
from core.chat.message_store import InMemoryMessageStore, MessageStore
from core.chat.service import ChatService
from core.detection import LanguageDetector
from core.storage import KeyValueStorage
from core.trans.manager import TranslationEngine, create_providers
from core.trans.quota import QuotaLedger
from handlers.async_comm import AsyncHttp
from models.translation_models import TranslationSettings
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from config.loader import Config


__all__: list[str] = ["SharedData"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass
class SharedData:
    _config: Config = field()
    _message_store: MessageStore | None = field(default=None)
    _storage: KeyValueStorage = field(init=False)
    _quota_ledger: QuotaLedger = field(init=False)
    _cache: TranslationCache = field(init=False)
    _http: AsyncHttp = field(init=False)
    _engine: TranslationEngine = field(init=False)
    _delivery: ProgressiveTranslationDelivery = field(init=False)
    _chat_service: ChatService = field(init=False)

    async def async_init(self) -> None:
        config: Config = self.config
        self._storage = KeyValueStorage(config.GENERAL.STORAGE_PATH)
        self._quota_ledger = QuotaLedger(
            self._storage,
            {
                "mymemory": config.MYMEMORY.DAILY_LIMIT,
                "libretranslate": config.LIBRETRANSLATE.DAILY_LIMIT,
            },
        )
        self._cache = TranslationCache(
            max_size=config.CACHE.MAX_SIZE,
            max_age=config.CACHE.MAX_AGE_HOURS * 60 * 60,
        )
        self._http = AsyncHttp()
        self._engine = TranslationEngine(
            providers=create_providers(self._http, self._quota_ledger, config),
            cache=self._cache,
            storage=self._storage,
            detector=LanguageDetector(),
            ledger=self._quota_ledger,
            defaults=TranslationSettings(
                preferred_provider=config.TRANSLATION.PREFERRED_PROVIDER,
                auto_detect_language=config.TRANSLATION.AUTO_DETECT_LANGUAGE,
                fallback_to_offline=config.TRANSLATION.FALLBACK_TO_OFFLINE,
                cache_translations=config.TRANSLATION.CACHE_TRANSLATIONS,
            ),
        )
        if self._message_store is None:
            self._message_store = InMemoryMessageStore()
        self._delivery = ProgressiveTranslationDelivery(self._engine, self._message_store)
        self._chat_service = ChatService(self._message_store, self._delivery)
        logger.info("Shared services initialized")

    async def close(self) -> None:
        """Drain background deliveries and release network and storage resources."""
        await self._chat_service.close()
        await self._engine.close()
        await self._http.close()
        self._storage.close()
        logger.info("Shared services closed")

    @property
    def config(self) -> Config:
        return self._config

    @property
    def storage(self) -> KeyValueStorage:
        return self._storage

    @property
    def quota_ledger(self) -> QuotaLedger:
        return self._quota_ledger

    @property
    def cache(self) -> TranslationCache:
        return self._cache

    @property
    def http(self) -> AsyncHttp:
        return self._http

    @property
    def engine(self) -> TranslationEngine:
        return self._engine

    @property
    def message_store(self) -> MessageStore:
        if self._message_store is None:
            msg = "SharedData.async_init() has not been called"
            raise RuntimeError(msg)
        return self._message_store

    @property
    def chat_service(self) -> ChatService:
        return self._chat_service

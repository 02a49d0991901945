"""Translation cache manager.

Keeps recent translation results in memory, keyed by language pair and a digest of the text.
Entries expire lazily on read after `max_age` seconds and the least recently used entry is
evicted when the cache is full.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, ClassVar

from models.cache_models import CacheEntry, CacheStatistics
from models.translation_models import AUTO_LANGUAGE
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from models.translation_models import TranslationResult

__all__: list[str] = ["TranslationCache"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslationCache:
    """Bounded in-memory cache of translation results.

    All methods are synchronous, so a single get or set is atomic with respect to other
    tasks on the event loop.

    Attributes:
        DEFAULT_MAX_SIZE (ClassVar[int]): Default capacity.
        DEFAULT_MAX_AGE_SEC (ClassVar[float]): Default time to live in seconds (24 hours).
    """

    DEFAULT_MAX_SIZE: ClassVar[int] = 2000
    DEFAULT_MAX_AGE_SEC: ClassVar[float] = 24 * 60 * 60

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        max_age: float = DEFAULT_MAX_AGE_SEC,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize an empty cache.

        Args:
            max_size (int): Number of entries kept before eviction. Must be at least 1.
            max_age (float): Seconds since the last access after which an entry expires.
            clock (Callable[[], float]): Source of the current time in epoch seconds.

        Raises:
            ValueError: If max_size is less than 1.
        """
        if max_size < 1:
            msg: str = f"max_size must be at least 1: {max_size}"
            raise ValueError(msg)
        self.max_size: int = max_size
        self.max_age: float = max_age
        self._clock: Callable[[], float] = clock
        self._entries: dict[str, CacheEntry] = {}
        self._stats: CacheStatistics = CacheStatistics(max_size=max_size)
        logger.debug("TranslationCache created (max_size=%d, max_age=%.0fs)", max_size, max_age)

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def _generate_cache_key(text: str, source: str, target: str) -> str:
        return StringUtils.generate_translation_hash_key(text, source or AUTO_LANGUAGE, target)

    def get(self, text: str, source: str, target: str) -> TranslationResult | None:
        """Look up a stored result.

        A hit refreshes the entry's timestamp and access count. An expired entry is removed
        and reported as a miss.

        Args:
            text (str): Source text.
            source (str): Source language code.
            target (str): Target language code.

        Returns:
            TranslationResult | None: The stored result, or None on a miss.
        """
        key: str = self._generate_cache_key(text, source, target)
        entry: CacheEntry | None = self._entries.get(key)
        if entry is None:
            self._stats.misses += 1
            return None

        now: float = self._clock()
        if now - entry.timestamp > self.max_age:
            del self._entries[key]
            self._stats.expirations += 1
            self._stats.misses += 1
            logger.debug("Cache entry expired for key: %s", key[:24])
            return None

        entry.access_count += 1
        entry.timestamp = now
        self._stats.hits += 1
        logger.debug("Cache hit for key: %s (access_count: %d)", key[:24], entry.access_count)
        return entry.result

    def set(self, text: str, source: str, target: str, result: TranslationResult) -> None:
        """Store a result, evicting the least recently used entry if a new key would overflow the cache.

        An empty source language is stored as "auto".
        """
        key: str = self._generate_cache_key(text, source, target)
        if key not in self._entries and len(self._entries) >= self.max_size:
            self._evict_lru()

        self._entries[key] = CacheEntry(result=result, timestamp=self._clock(), access_count=1)
        logger.debug("Translation cached for key: %s", key[:24])

    def _evict_lru(self) -> None:
        """Remove the entry with the oldest timestamp, the lowest access count breaking ties."""
        if not self._entries:
            return
        oldest_key: str = min(
            self._entries,
            key=lambda k: (self._entries[k].timestamp, self._entries[k].access_count),
        )
        del self._entries[oldest_key]
        self._stats.evictions += 1
        logger.debug("Evicted LRU cache entry: %s", oldest_key[:24])

    def clear(self) -> None:
        """Remove every entry."""
        removed: int = len(self._entries)
        self._entries.clear()
        self._stats.clears += 1
        logger.debug("Translation cache cleared (%d entries removed)", removed)

    def statistics(self) -> CacheStatistics:
        """Return a snapshot of the cache counters."""
        return CacheStatistics(
            size=len(self._entries),
            max_size=self.max_size,
            hits=self._stats.hits,
            misses=self._stats.misses,
            evictions=self._stats.evictions,
            expirations=self._stats.expirations,
            clears=self._stats.clears,
        )

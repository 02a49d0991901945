"""Models for translation cache data.

Defines the in-memory cache entry and the cache usage statistics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.translation_models import TranslationResult

__all__: list[str] = ["CacheEntry", "CacheStatistics"]


@dataclass
class CacheEntry:
    """Translation cache entry data.

    Attributes:
        result (TranslationResult): Stored translation result.
        timestamp (float): Last access time in epoch seconds.
        access_count (int): Number of writes and hits for this entry.
    """

    result: TranslationResult
    timestamp: float
    access_count: int = 1


@dataclass
class CacheStatistics:
    """Cache usage statistics.

    Attributes:
        size (int): Current number of entries.
        max_size (int): Capacity before eviction.
        hits (int): Lookups answered from the cache.
        misses (int): Lookups that found nothing or an expired entry.
        evictions (int): Entries removed to make room.
        expirations (int): Entries removed on read because they outlived the TTL.
        clears (int): Number of full cache clears.
    """

    size: int = 0
    max_size: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0
    clears: int = 0

"""Translation cache package.

Provides the in-memory cache of translation results.
"""

from __future__ import annotations

from core.cache.manager import TranslationCache

__all__: list[str] = ["TranslationCache"]

"""Core services of the translation chat.

This package contains the shared service container, the translation engine and its providers,
the translation cache, key/value storage, language detection, and the chat delivery pipeline.
"""

from core.shared_data import SharedData
from core.version import VERSION

__all__: list[str] = [
    "VERSION",
    "SharedData",
]

"""Translation provider adapters.

This package contains the concrete implementations of TransInterface. Importing it registers
every adapter under its provider name:

Modules:
- MyMemoryTranslation: MyMemory translation memory API, with a quality filter.
- LibreTranslateTranslation: LibreTranslate with an ordered list of mirrors.
- OfflineTranslation: Static phrase tables, the terminal link of the fallback chain.
"""

from core.trans.engines.offline_dictionary import OFFLINE_PHRASES, get_phrase_table
from core.trans.engines.trans_libretranslate import LibreTranslateTranslation
from core.trans.engines.trans_mymemory import MyMemoryTranslation
from core.trans.engines.trans_offline import OfflineTranslation

__all__: list[str] = [
    "OFFLINE_PHRASES",
    "LibreTranslateTranslation",
    "MyMemoryTranslation",
    "OfflineTranslation",
    "get_phrase_table",
]

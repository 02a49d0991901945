from __future__ import annotations

import hashlib
import unicodedata
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__: list[str] = ["StringUtils"]


class StringUtils:
    """Small string helpers shared by the translation pipeline."""

    @staticmethod
    def ensure_str(value: str | None) -> str:
        """Return the value as a string, or an empty string if None.

        Whitespace is preserved; callers that want trimming do it themselves.
        """
        if not isinstance(value, str):
            value = str(value) if value is not None else ""
        return value

    @staticmethod
    def compress_blanks(value: str) -> str:
        """Collapse runs of whitespace into single spaces and strip both ends."""
        value = StringUtils.ensure_str(value)
        return " ".join(value.split())

    @staticmethod
    def normalize_text(text: str) -> str:
        """Normalize text using Unicode NFC normalization."""
        return unicodedata.normalize("NFC", text)

    @staticmethod
    def contains_any(text: str, words: Iterable[str]) -> bool:
        """Check whether any of the words occurs in text as a case-insensitive substring.

        Args:
            text (str): Text to search.
            words (Iterable[str]): Candidate substrings.

        Returns:
            bool: True on the first substring found.
        """
        lowered: str = StringUtils.ensure_str(text).lower()
        return any(word.lower() in lowered for word in words)

    @staticmethod
    def generate_hash_key(normalized_source: str, source_lang: str, target_lang: str) -> str:
        """Generate a cache key for a translation request.

        The language pair stays readable in the key; the text part is a SHA-256 digest of the
        full normalized text, so long texts never collide on a shared prefix or suffix.

        Args:
            normalized_source (str): NFC-normalized source text.
            source_lang (str): Source language code.
            target_lang (str): Target language code.

        Returns:
            str: Key of the form "<source>-<target>-<sha256 hex>".
        """
        digest: str = hashlib.sha256(normalized_source.encode("utf-8")).hexdigest()
        return f"{source_lang}-{target_lang}-{digest}"

    @staticmethod
    def generate_translation_hash_key(source_text: str, source_lang: str, target_lang: str) -> str:
        """Normalize the text and build its cache key."""
        return StringUtils.generate_hash_key(StringUtils.normalize_text(source_text), source_lang, target_lang)

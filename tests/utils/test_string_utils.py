from __future__ import annotations

import unicodedata

import pytest

from utils.string_utils import StringUtils


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        ("text", "text"),
        (12, "12"),
    ],
)
def test_ensure_str(value, expected: str) -> None:
    assert StringUtils.ensure_str(value) == expected


def test_compress_blanks() -> None:
    assert StringUtils.compress_blanks("  Hello \n\t world  ") == "Hello world"


def test_contains_any_is_case_insensitive() -> None:
    assert StringUtils.contains_any("Hi, My Name Is Bob", ["my name is"]) is True
    assert StringUtils.contains_any("Good morning", ["my name is", "i am"]) is False


def test_translation_hash_key_normalizes_text() -> None:
    decomposed: str = unicodedata.normalize("NFD", "안녕하세요")
    composed: str = unicodedata.normalize("NFC", "안녕하세요")

    assert decomposed != composed
    assert StringUtils.generate_translation_hash_key(decomposed, "ko", "en") == (
        StringUtils.generate_translation_hash_key(composed, "ko", "en")
    )


def test_hash_key_separates_language_pairs_and_long_texts() -> None:
    base: str = "x" * 500
    key_a: str = StringUtils.generate_hash_key(base + "a", "en", "ko")
    key_b: str = StringUtils.generate_hash_key(base + "b", "en", "ko")

    assert key_a != key_b
    assert key_a.startswith("en-ko-")
    assert StringUtils.generate_hash_key("Hello", "en", "ko") != StringUtils.generate_hash_key("Hello", "en", "ja")

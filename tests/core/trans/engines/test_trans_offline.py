from __future__ import annotations

import pytest

from core.trans.engines.offline_dictionary import OFFLINE_PHRASES, get_phrase_table
from core.trans.engines.trans_offline import OFFLINE_MATCH_CONFIDENCE, OFFLINE_MISS_CONFIDENCE, OfflineTranslation


def test_tables_cover_every_pair_of_core_languages() -> None:
    languages: tuple[str, ...] = ("ko", "en", "ja", "zh")
    expected = {(src, tgt) for src in languages for tgt in languages if src != tgt}

    assert set(OFFLINE_PHRASES) == expected
    assert all(OFFLINE_PHRASES[pair] for pair in expected)


def test_table_order_is_preserved() -> None:
    assert get_phrase_table("en", "ko")[:2] == (("Hello", "안녕하세요"), ("Hi", "안녕"))
    assert get_phrase_table("en", "fr") == ()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("text", "source", "target", "expected"),
    [
        ("Hello everyone", "en", "ko", "안녕하세요"),
        ("THANK YOU so much", "en", "ko", "감사합니다"),
        ("Good morning", "en", "ja", "おはようございます"),
        ("감사합니다!", "ko", "en", "Thank you"),
    ],
)
async def test_phrase_match(text: str, source: str, target: str, expected: str) -> None:
    result = await OfflineTranslation().translate(text, source, target)

    assert result.translated_text == expected
    assert result.confidence == pytest.approx(OFFLINE_MATCH_CONFIDENCE)
    assert result.provider == "offline"
    assert result.source_language == source
    assert result.target_language == target


@pytest.mark.asyncio
async def test_miss_returns_marked_input() -> None:
    result = await OfflineTranslation().translate("zzz", "en", "ko")

    assert result.translated_text == "zzz (translation unavailable)"
    assert result.confidence == pytest.approx(OFFLINE_MISS_CONFIDENCE)


@pytest.mark.asyncio
async def test_unknown_pair_never_raises() -> None:
    result = await OfflineTranslation(object(), object(), object()).translate("Hello", "en", "fr")

    assert result.translated_text == "Hello (translation unavailable)"
    assert result.provider == "offline"


def test_offline_is_not_metered() -> None:
    assert OfflineTranslation().is_metered is False

from __future__ import annotations

import pytest

import core.detection
from core.detection import DEFAULT_LANGUAGE, LanguageDetector, get_language_name, is_language_supported


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("こんにちは", "ja"),
        ("日本語です", "ja"),
        ("안녕", "ko"),
        ("你好", "zh"),
        ("مرحبا", "ar"),
        ("Привет", "ru"),
        ("hi", "en"),
        ("   ", "en"),
    ],
)
def test_short_text_is_classified_by_script(text: str, expected: str) -> None:
    assert LanguageDetector().detect(text) == expected


def test_long_text_uses_langdetect() -> None:
    detector = LanguageDetector()

    assert detector.detect("This is a reasonably long English sentence about the weather today.") == "en"
    assert detector.detect("오늘은 날씨가 정말 좋아서 공원에 산책하러 갔습니다") == "ko"


def test_langdetect_failure_falls_back_to_english(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING"):
        assert LanguageDetector().detect("1234567890 !!! ???") == DEFAULT_LANGUAGE

    assert "Language detection failed" in caplog.text


def test_langdetect_aliases_are_folded(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(core.detection, "detect", lambda _text: "zh-CN")

    assert LanguageDetector().detect("some long enough text") == "zh"


def test_unexpected_langdetect_code_falls_back_to_english(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(core.detection, "detect", lambda _text: "fil")

    assert LanguageDetector().detect("some long enough text") == "en"


def test_language_names() -> None:
    assert get_language_name("ko") == "Korean"
    assert get_language_name("xx") == "XX"
    assert is_language_supported("ja") is True
    assert is_language_supported("xx") is False

from __future__ import annotations

import pytest

from core.trans.quality import MIN_CONFIDENCE, default_quality_filter


def test_accepts_plausible_translation() -> None:
    assert default_quality_filter("Hello", "안녕하세요", "en", "ko", 0.9) is None


def test_rejects_low_confidence() -> None:
    reason: str | None = default_quality_filter("Good morning", "좋은 아침", "en", "ko", MIN_CONFIDENCE - 0.01)

    assert reason is not None
    assert "low confidence" in reason


@pytest.mark.parametrize("translated", ["My name is Tom", "제 이름은 철수입니다", "I AM here", "저는 학생입니다"])
def test_rejects_suspicious_phrases(translated: str) -> None:
    assert default_quality_filter("Good morning", translated, "ko", "en", 0.9) is not None


def test_rejects_hello_to_korean_without_greeting() -> None:
    assert default_quality_filter("Hello", "여보세요 친구", "en", "ko", 0.9) is not None
    assert default_quality_filter(" hello ", "안녕", "en", "ko", 0.9) is None


def test_greeting_rule_only_applies_to_korean_targets() -> None:
    assert default_quality_filter("Hello", "Bonjour", "en", "fr", 0.9) is None

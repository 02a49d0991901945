from __future__ import annotations

from models.message_models import PARTIAL_FAILURE_WARNING, TRANSLATION_FAILED_PLACEHOLDER, ChatMessage


def test_chat_message_serializes_with_camel_case_keys() -> None:
    message = ChatMessage(
        id="m1",
        room_id="room",
        user_id="u1",
        user_name="Alice",
        original_text="Hello",
        translations={"ko": "안녕하세요"},
        is_translating=True,
        translation_total=1,
    )

    data = message.to_dict()

    assert data["roomId"] == "room"
    assert data["originalText"] == "Hello"
    assert data["originalLanguage"] == "auto"
    assert data["isTranslating"] is True
    assert data["translationTotal"] == 1
    assert data["translationError"] is None
    assert ChatMessage.from_dict(data) == message


def test_copy_does_not_share_translations() -> None:
    message = ChatMessage(id="m1", translations={"ko": "안녕"})

    snapshot: ChatMessage = message.copy()
    snapshot.translations["ja"] = "こんにちは"

    assert message.translations == {"ko": "안녕"}
    assert snapshot.id == "m1"


def test_failure_markers() -> None:
    assert TRANSLATION_FAILED_PLACEHOLDER.format(lang="ja") == "[번역 실패: ja]"
    assert PARTIAL_FAILURE_WARNING == "일부 번역 실패"

"""Models for chat messages carried by the message store."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Final

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = ["PARTIAL_FAILURE_WARNING", "TRANSLATION_FAILED_PLACEHOLDER", "ChatMessage"]

TRANSLATION_FAILED_PLACEHOLDER: Final[str] = "[번역 실패: {lang}]"
PARTIAL_FAILURE_WARNING: Final[str] = "일부 번역 실패"


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class ChatMessage(DataClassJsonMixin):
    """A chat message record and its per-language translations.

    Attributes:
        id (str): Message ID assigned by the store.
        room_id (str): Room the message belongs to.
        user_id (str): Sender ID.
        user_name (str): Sender display name.
        original_text (str): Text as sent.
        original_language (str): Source language, "auto" until resolved.
        translations (dict[str, str]): Language code to translated text (or a failure placeholder).
        timestamp (int): Send time in epoch milliseconds.
        is_translating (bool): True while translations are still in flight.
        translation_error (str | None): Aggregate warning when one or more languages failed.
        translation_progress (int): Languages settled so far.
        translation_total (int): Languages requested.
        updated_at (int): Last update in epoch milliseconds.
    """

    id: str = ""
    room_id: str = ""
    user_id: str = ""
    user_name: str = ""
    original_text: str = ""
    original_language: str = "auto"
    translations: dict[str, str] = field(default_factory=dict)
    timestamp: int = 0
    is_translating: bool = False
    translation_error: str | None = None
    translation_progress: int = 0
    translation_total: int = 0
    updated_at: int = 0

    def copy(self) -> ChatMessage:
        """Return a snapshot that does not share the translations map."""
        return replace(self, translations=dict(self.translations))

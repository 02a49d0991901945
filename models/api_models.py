"""Data models for translation provider API payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = ["LibreTranslateRequest", "LibreTranslateResponse", "MyMemoryResponse", "MyMemoryResponseData"]


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class MyMemoryResponseData(DataClassJsonMixin):
    """The `responseData` object of a MyMemory reply. `match` is the provider's 0-100 score."""

    translated_text: str = ""
    match: Any = 0


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class MyMemoryResponse(DataClassJsonMixin):
    """Reply of the MyMemory `get` endpoint.

    `responseStatus` arrives either as a number or as a numeric string depending on the error path.
    """

    response_data: MyMemoryResponseData = field(default_factory=MyMemoryResponseData)
    response_status: Any = 200
    response_details: Any = ""

    @property
    def status_code(self) -> int:
        try:
            return int(self.response_status)
        except (TypeError, ValueError):
            return 0


@dataclass
class LibreTranslateRequest(DataClassJsonMixin):
    """JSON body of a LibreTranslate `translate` call."""

    q: str
    source: str
    target: str
    format: str = "text"


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class LibreTranslateResponse(DataClassJsonMixin):
    """Reply of a LibreTranslate mirror. Only the translated text is relied on."""

    translated_text: str | None = None

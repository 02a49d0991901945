from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from core.chat.delivery import DeliveryReport, ProgressiveTranslationDelivery
from core.chat.message_store import InMemoryMessageStore, MessageNotFoundError
from core.chat.service import ChatService
from core.trans.interface import EmptyInputError, ProviderError
from models.translation_models import TranslationResult

if TYPE_CHECKING:
    from collections.abc import Iterable


class EchoEngine:
    def __init__(self, *, failing: tuple[str, ...] = ()) -> None:
        self.failing: tuple[str, ...] = failing
        self.sources: list[str | None] = []

    async def translate(
        self, text: str, target_language: str, source_language: str | None = None
    ) -> TranslationResult:
        self.sources.append(source_language)
        await asyncio.sleep(0)
        if target_language in self.failing:
            msg = "down"
            raise ProviderError(msg)
        return TranslationResult(f"{text}@{target_language}", source_language or "en", target_language, 0.9)


class BrokenDelivery:
    async def deliver(
        self, room_id: str, message_id: str, text: str, targets: Iterable[str], source_language: str | None = None
    ) -> DeliveryReport:
        _ = room_id, message_id, text, targets, source_language
        msg = "store unavailable"
        raise RuntimeError(msg)


class StalledDelivery:
    def __init__(self) -> None:
        self.cancelled: bool = False

    async def deliver(
        self, room_id: str, message_id: str, text: str, targets: Iterable[str], source_language: str | None = None
    ) -> DeliveryReport:
        _ = room_id, text, targets, source_language
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return DeliveryReport(message_id)


def _service(engine: EchoEngine | None = None) -> tuple[ChatService, InMemoryMessageStore]:
    store = InMemoryMessageStore()
    delivery = ProgressiveTranslationDelivery(engine or EchoEngine(), store)  # type: ignore[arg-type]
    return ChatService(store, delivery), store


@pytest.mark.asyncio
async def test_send_message_returns_before_translation() -> None:
    service, store = _service()

    message_id = await service.send_message("room", "u1", "Alice", "Good morning", ["ko", "ja", "ko"])

    stored = await store.get_message("room", message_id)
    assert stored is not None
    assert stored.is_translating is True
    assert stored.translation_total == 2
    assert stored.translation_progress == 0
    assert stored.original_language == "auto"
    assert stored.translations == {}
    assert service.pending_count == 1

    await service.wait_for_pending()

    stored = await store.get_message("room", message_id)
    assert stored is not None
    assert stored.is_translating is False
    assert stored.translations == {"ko": "Good morning@ko", "ja": "Good morning@ja"}
    assert stored.translation_progress == 2
    assert service.background_tasks == set()


@pytest.mark.asyncio
async def test_given_source_language_reaches_the_engine() -> None:
    engine = EchoEngine()
    service, store = _service(engine)

    message_id = await service.send_message("room", "u1", "Alice", "おはよう", ["ko", "en"], source_language="ja")
    await service.wait_for_pending()

    stored = await store.get_message("room", message_id)
    assert stored is not None
    assert stored.original_language == "ja"
    assert engine.sources == ["ja", "ja"]

    await service.retranslate_message("room", message_id, ["zh"])

    assert engine.sources[-1] == "ja"


@pytest.mark.asyncio
async def test_auto_source_language_is_detected_per_translation() -> None:
    engine = EchoEngine()
    service, _store = _service(engine)

    await service.send_message("room", "u1", "Alice", "Good morning", ["ko"], source_language="auto")
    await service.wait_for_pending()

    assert engine.sources == [None]


@pytest.mark.asyncio
async def test_background_task_is_named_after_the_message() -> None:
    service, _store = _service()

    message_id = await service.send_message("room", "u1", "Alice", "Good morning", ["ko"])

    assert [task.get_name() for task in service.background_tasks] == [f"translate_message_{message_id}"]
    await service.wait_for_pending()


@pytest.mark.asyncio
async def test_message_without_targets_is_not_translated() -> None:
    service, store = _service()

    message_id = await service.send_message("room", "u1", "Alice", "Good morning")

    stored = await store.get_message("room", message_id)
    assert stored is not None
    assert stored.is_translating is False
    assert service.background_tasks == set()


@pytest.mark.asyncio
async def test_empty_message_is_rejected() -> None:
    service, store = _service()

    with pytest.raises(EmptyInputError):
        await service.send_message("room", "u1", "Alice", "   ", ["ko"])

    assert store.list_messages("room") == []


@pytest.mark.asyncio
async def test_partial_failure_is_flagged_on_the_message() -> None:
    service, store = _service(EchoEngine(failing=("ja",)))

    message_id = await service.send_message("room", "u1", "Alice", "Good morning", ["ko", "ja"])
    await service.wait_for_pending()

    stored = await store.get_message("room", message_id)
    assert stored is not None
    assert stored.translations == {"ko": "Good morning@ko", "ja": "[번역 실패: ja]"}
    assert stored.translation_error == "일부 번역 실패"
    assert stored.is_translating is False


@pytest.mark.asyncio
async def test_delivery_crash_is_recorded_on_the_message(caplog: pytest.LogCaptureFixture) -> None:
    store = InMemoryMessageStore()
    service = ChatService(store, BrokenDelivery())  # type: ignore[arg-type]

    with caplog.at_level("ERROR"):
        message_id = await service.send_message("room", "u1", "Alice", "Good morning", ["ko"])
        await service.wait_for_pending()

    stored = await store.get_message("room", message_id)
    assert stored is not None
    assert stored.is_translating is False
    assert stored.translation_error == "store unavailable"
    assert "Background translation failed" in caplog.text


@pytest.mark.asyncio
async def test_retranslate_replaces_translations() -> None:
    service, store = _service()
    message_id = await service.send_message("room", "u1", "Alice", "Good morning", ["ko"])
    await service.wait_for_pending()

    report = await service.retranslate_message("room", message_id, ["ja"])

    stored = await store.get_message("room", message_id)
    assert stored is not None
    assert report.translations == {"ja": "Good morning@ja"}
    assert stored.translations == {"ja": "Good morning@ja"}
    assert stored.translation_total == 1
    assert stored.is_translating is False


@pytest.mark.asyncio
async def test_retranslate_unknown_message_raises() -> None:
    service, _store = _service()

    with pytest.raises(MessageNotFoundError):
        await service.retranslate_message("room", "missing", ["ko"])


@pytest.mark.asyncio
async def test_close_cancels_stalled_deliveries() -> None:
    store = InMemoryMessageStore()
    delivery = StalledDelivery()
    service = ChatService(store, delivery)  # type: ignore[arg-type]
    await service.send_message("room", "u1", "Alice", "Good morning", ["ko"])
    await asyncio.sleep(0)

    await service.close(timeout=0.05)

    assert delivery.cancelled is True
    assert service.background_tasks == set()


@pytest.mark.asyncio
async def test_close_without_tasks_returns_immediately() -> None:
    service, _store = _service()

    await service.close()

    assert service.pending_count == 0

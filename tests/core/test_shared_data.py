from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from core.chat.message_store import InMemoryMessageStore
from core.shared_data import SharedData
from models.config_models import Config

if TYPE_CHECKING:
    from pathlib import Path


def _offline_config(tmp_path: Path) -> Config:
    config = Config()
    config.GENERAL.STORAGE_PATH = str(tmp_path / "chat.db")
    config.TRANSLATION.PREFERRED_PROVIDER = "offline"
    config.TRANSLATION.AUTO_DETECT_LANGUAGE = False
    config.MYMEMORY.DAILY_LIMIT = 7
    config.CACHE.MAX_SIZE = 5
    config.CACHE.MAX_AGE_HOURS = 0.5
    return config


@pytest.mark.asyncio
async def test_services_are_wired_from_config(tmp_path: Path) -> None:
    shared = SharedData(_offline_config(tmp_path))
    await shared.async_init()
    try:
        assert shared.cache.max_size == 5
        assert shared.cache.max_age == pytest.approx(1800.0)
        assert shared.quota_ledger.get_quota("mymemory").daily_limit == 7  # type: ignore[union-attr]
        assert set(shared.engine.providers) == {"mymemory", "libretranslate", "offline"}
        assert shared.engine.get_settings().preferred_provider == "offline"
        assert isinstance(shared.message_store, InMemoryMessageStore)
        assert shared.chat_service.store is shared.message_store
    finally:
        await shared.close()

    assert (tmp_path / "chat.db").exists()


@pytest.mark.asyncio
async def test_external_message_store_is_used(tmp_path: Path) -> None:
    store = InMemoryMessageStore()
    shared = SharedData(_offline_config(tmp_path), store)
    await shared.async_init()
    try:
        assert shared.message_store is store
    finally:
        await shared.close()


def test_message_store_requires_initialization(tmp_path: Path) -> None:
    shared = SharedData(_offline_config(tmp_path))

    with pytest.raises(RuntimeError):
        _ = shared.message_store


@pytest.mark.asyncio
async def test_chat_round_trip_with_offline_provider(tmp_path: Path) -> None:
    shared = SharedData(_offline_config(tmp_path))
    await shared.async_init()
    try:
        message_id = await shared.chat_service.send_message("room", "u1", "Alice", "Hello everyone", ["ko", "ja"])
        await shared.chat_service.wait_for_pending()

        message = await shared.message_store.get_message("room", message_id)
    finally:
        await shared.close()

    assert message is not None
    assert message.translations == {"ko": "안녕하세요", "ja": "こんにちは"}
    assert message.is_translating is False
    assert message.translation_error is None


@pytest.mark.asyncio
async def test_settings_survive_restart(tmp_path: Path) -> None:
    config = _offline_config(tmp_path)
    shared = SharedData(config)
    await shared.async_init()
    try:
        shared.engine.update_settings(cache_translations=False)
    finally:
        await shared.close()

    restarted = SharedData(config)
    await restarted.async_init()
    try:
        assert restarted.engine.get_settings().cache_translations is False
    finally:
        await restarted.close()

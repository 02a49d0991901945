"""Chat message storage.

MessageStore is the boundary to whatever persists chat messages. InMemoryMessageStore keeps
messages per room in process memory and notifies room subscribers after every write.
"""

from __future__ import annotations

import time
import uuid
from abc import ABC, abstractmethod
from dataclasses import fields, replace
from typing import TYPE_CHECKING, Any

from models.message_models import ChatMessage
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

__all__: list[str] = ["InMemoryMessageStore", "MessageListener", "MessageNotFoundError", "MessageStore"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

type MessageListener = Callable[[ChatMessage], None]

_UPDATABLE_FIELDS: frozenset[str] = frozenset(f.name for f in fields(ChatMessage)) - {"id", "room_id"}


class MessageNotFoundError(LookupError):
    """No message with the given ID exists in the room."""


class MessageStore(ABC):
    """Create, update and observe chat messages grouped by room."""

    @abstractmethod
    async def create_message(self, room_id: str, message: ChatMessage) -> str:
        """Store a new message and return its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    async def update_message(self, room_id: str, message_id: str, **changes: Any) -> ChatMessage:
        """Apply field changes to a stored message.

        Args:
            room_id (str): Room ID.
            message_id (str): Message ID.
            **changes: ChatMessage field values to overwrite.

        Returns:
            ChatMessage: A snapshot of the updated message.

        Raises:
            MessageNotFoundError: If the message does not exist.
            ValueError: If a field name is unknown or not updatable.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_message(self, room_id: str, message_id: str) -> ChatMessage | None:
        raise NotImplementedError

    @abstractmethod
    def subscribe(self, room_id: str, listener: MessageListener) -> Callable[[], None]:
        """Register a listener for every write in a room.

        Returns:
            Callable[[], None]: Function that removes the listener.
        """
        raise NotImplementedError


class InMemoryMessageStore(MessageStore):
    """MessageStore kept in process memory.

    Listeners are called synchronously with a snapshot right after each write, so a reader
    never observes an older state than the one just written.
    """

    def __init__(self) -> None:
        self._rooms: dict[str, dict[str, ChatMessage]] = {}
        self._listeners: dict[str, list[MessageListener]] = {}

    @staticmethod
    def _now_ms() -> int:
        return int(time.time() * 1000)

    async def create_message(self, room_id: str, message: ChatMessage) -> str:
        message_id: str = message.id or uuid.uuid4().hex
        now: int = self._now_ms()
        stored: ChatMessage = replace(
            message.copy(),
            id=message_id,
            room_id=room_id,
            timestamp=message.timestamp or now,
            updated_at=now,
        )
        self._rooms.setdefault(room_id, {})[message_id] = stored
        logger.debug("Message created: room=%s id=%s", room_id, message_id)
        self._notify(room_id, stored)
        return message_id

    async def update_message(self, room_id: str, message_id: str, **changes: Any) -> ChatMessage:
        unknown: set[str] = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            msg: str = f"Cannot update message fields: {sorted(unknown)}"
            raise ValueError(msg)

        current: ChatMessage | None = self._rooms.get(room_id, {}).get(message_id)
        if current is None:
            msg = f"Message '{message_id}' not found in room '{room_id}'"
            raise MessageNotFoundError(msg)

        if "translations" in changes:
            changes["translations"] = dict(changes["translations"])
        changes.setdefault("updated_at", self._now_ms())
        updated: ChatMessage = replace(current, **changes)
        self._rooms[room_id][message_id] = updated
        logger.debug("Message updated: room=%s id=%s fields=%s", room_id, message_id, sorted(changes))
        self._notify(room_id, updated)
        return updated.copy()

    async def get_message(self, room_id: str, message_id: str) -> ChatMessage | None:
        message: ChatMessage | None = self._rooms.get(room_id, {}).get(message_id)
        return message.copy() if message is not None else None

    def list_messages(self, room_id: str) -> list[ChatMessage]:
        """Return snapshots of a room's messages in send order."""
        return sorted((m.copy() for m in self._rooms.get(room_id, {}).values()), key=lambda m: m.timestamp)

    def subscribe(self, room_id: str, listener: MessageListener) -> Callable[[], None]:
        self._listeners.setdefault(room_id, []).append(listener)

        def _unsubscribe() -> None:
            listeners: list[MessageListener] = self._listeners.get(room_id, [])
            if listener in listeners:
                listeners.remove(listener)

        return _unsubscribe

    def _notify(self, room_id: str, message: ChatMessage) -> None:
        for listener in list(self._listeners.get(room_id, [])):
            try:
                listener(message.copy())
            except Exception as err:  # noqa: BLE001
                logger.error("Message listener failed: %s", err)

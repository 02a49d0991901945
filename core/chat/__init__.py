"""Chat messaging with progressive translation delivery."""

from core.chat.delivery import DeliveryReport, ProgressiveTranslationDelivery
from core.chat.message_store import InMemoryMessageStore, MessageNotFoundError, MessageStore
from core.chat.service import ChatService

__all__: list[str] = [
    "ChatService",
    "DeliveryReport",
    "InMemoryMessageStore",
    "MessageNotFoundError",
    "MessageStore",
    "ProgressiveTranslationDelivery",
]

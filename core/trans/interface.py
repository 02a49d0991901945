"""This module defines the abstract base class for translation provider adapters and related exceptions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.translation_models import ProviderName, TranslationResult

__all__: list[str] = [
    "AllProvidersFailedError",
    "EmptyInputError",
    "ProviderError",
    "QuotaExceededError",
    "TransInterface",
    "TranslateExceptionError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslateExceptionError(Exception):
    """An error occurred during the translation process."""


class EmptyInputError(TranslateExceptionError):
    """The text to translate is empty after trimming."""


class QuotaExceededError(TranslateExceptionError):
    """The provider's daily call budget is exhausted."""


class ProviderError(TranslateExceptionError):
    """A provider failed (network, HTTP status, unreadable payload, or rejected quality)."""


class AllProvidersFailedError(TranslateExceptionError):
    """Every provider in the fallback chain failed.

    Attributes:
        errors (list[tuple[str, Exception]]): Provider name and the error it raised, in chain order.
    """

    def __init__(self, errors: list[tuple[str, Exception]]) -> None:
        self.errors: list[tuple[str, Exception]] = list(errors)
        reasons: str = ", ".join(f"{name}: {err}" for name, err in self.errors)
        super().__init__(f"All translation providers failed. Errors: {reasons}")


class TransInterface(ABC):
    """Abstract base class for translation provider adapters.

    Every concrete adapter registers itself under its provider name when the class is defined.
    The engine builds its name -> instance lookup table from this registry.

    Attributes:
        registered (ClassVar[dict[str, type[TransInterface]]]): Registered adapter classes keyed by
            provider name.
    """

    registered: ClassVar[dict[str, type[TransInterface]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        """Register the subclass under its provider name.

        Args:
            **kwargs: Additional keyword arguments passed to parent class.
        """
        super().__init_subclass__(**kwargs)
        if not hasattr(cls, "fetch_engine_name") or not callable(cls.fetch_engine_name):
            msg = "Subclasses of TransInterface must implement the static method fetch_engine_name()."
            raise TypeError(msg)

        name = cls.fetch_engine_name()
        if not isinstance(name, str) or name == "":
            return  # Unnamed adapters (e.g. test doubles) are not registered.

        if name in cls.registered:
            msg: str = f"A translation engine with the name '{name}' is already registered."
            raise ValueError(msg)

        cls.registered[name] = cls

    @property
    def engine_name(self) -> ProviderName:
        return self.fetch_engine_name()  # type: ignore[return-value]

    @property
    def is_metered(self) -> bool:
        """Whether calls to this provider count against a daily quota."""
        return False

    @staticmethod
    @abstractmethod
    def fetch_engine_name() -> str:
        """Fetch the provider name of the adapter.

        This method is called during class registration in __init_subclass__,
        so the implementation must be available at subclass definition time.

        Returns:
            str: The provider name, e.g. "mymemory".
        """
        raise NotImplementedError

    @abstractmethod
    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        """Translate text from source_lang to target_lang.

        Args:
            text (str): Text to be translated, already trimmed.
            source_lang (str): Source language code.
            target_lang (str): Target language code.

        Returns:
            TranslationResult: The result, with `provider` set to this adapter's name.

        Raises:
            QuotaExceededError: If the daily budget is exhausted. Checked before any I/O.
            ProviderError: If the provider fails or its answer is rejected.
        """
        raise NotImplementedError

    async def close(self) -> None:
        """Release adapter resources. The default adapter holds none."""
        return

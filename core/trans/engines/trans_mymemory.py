from __future__ import annotations

from typing import TYPE_CHECKING, Any

from core.trans.interface import ProviderError, QuotaExceededError, TransInterface
from core.trans.quality import default_quality_filter
from handlers.async_comm import AsyncCommError
from models.api_models import MyMemoryResponse
from models.translation_models import TranslationResult
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from config.loader import Config
    from core.trans.quality import QualityFilter
    from core.trans.quota import QuotaLedger
    from handlers.async_comm import AsyncHttp


__all__: list[str] = ["MyMemoryTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

MYMEMORY_OK: int = 200


class MyMemoryTranslation(TransInterface):
    """Adapter for the free MyMemory translation memory API.

    The provider's 0-100 match score becomes the result confidence. Answers are passed through
    a replaceable quality filter; a rejected answer raises ProviderError so the chain moves on.
    """

    def __init__(
        self,
        http: AsyncHttp,
        ledger: QuotaLedger,
        config: Config,
        *,
        quality_filter: QualityFilter | None = None,
    ) -> None:
        self.http: AsyncHttp = http
        self.ledger: QuotaLedger = ledger
        self.url: str = config.MYMEMORY.URL
        self.contact_email: str = config.MYMEMORY.CONTACT_EMAIL
        self.timeout: float = config.MYMEMORY.TIMEOUT
        self.quality_filter: QualityFilter = quality_filter or default_quality_filter

    @staticmethod
    def fetch_engine_name() -> str:
        return "mymemory"

    @property
    def is_metered(self) -> bool:
        return True

    def _build_params(self, text: str, source_lang: str, target_lang: str) -> dict[str, str]:
        params: dict[str, str] = {"q": text, "langpair": f"{source_lang}|{target_lang}"}
        if self.contact_email:
            # A contact address raises the anonymous daily allowance.
            params["de"] = self.contact_email
        return params

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        if not self.ledger.try_acquire(self.fetch_engine_name()):
            msg = "MyMemory daily quota exceeded"
            raise QuotaExceededError(msg)

        try:
            payload: Any = await self.http.get(
                url=self.url,
                params=self._build_params(text, source_lang, target_lang),
                total_timeout=self.timeout,
            )
        except AsyncCommError as err:
            self.ledger.release(self.fetch_engine_name())
            msg = f"MyMemory request failed: {err}"
            raise ProviderError(msg) from err

        if not isinstance(payload, dict):
            msg = f"MyMemory returned an unexpected payload: {payload!r}"
            raise ProviderError(msg)
        try:
            response: MyMemoryResponse = MyMemoryResponse.from_dict(payload, infer_missing=True)
        except (KeyError, TypeError, ValueError) as err:
            msg = f"MyMemory payload could not be parsed: {err}"
            raise ProviderError(msg) from err

        if response.status_code != MYMEMORY_OK:
            msg = f"MyMemory translation failed: {response.response_details}"
            raise ProviderError(msg)

        translated_text: str = response.response_data.translated_text or ""
        if not translated_text.strip():
            msg = "MyMemory returned an empty translation"
            raise ProviderError(msg)

        try:
            confidence: float = float(response.response_data.match) / 100
        except (TypeError, ValueError):
            confidence = 0.0
        confidence = min(max(confidence, 0.0), 1.0)

        reason: str | None = self.quality_filter(text, translated_text, source_lang, target_lang, confidence)
        if reason is not None:
            logger.warning(
                "Low quality MyMemory translation rejected (%s): '%s' -> '%s'", reason, text, translated_text
            )
            msg = f"Low quality translation: {reason}"
            raise ProviderError(msg)

        return TranslationResult(
            translated_text=translated_text,
            source_language=source_lang,
            target_language=target_lang,
            confidence=confidence,
            provider="mymemory",
        )

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Final

from core.trans.interface import ProviderError, QuotaExceededError, TransInterface
from handlers.async_comm import AsyncCommError
from models.api_models import LibreTranslateRequest, LibreTranslateResponse
from models.translation_models import TranslationResult
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from config.loader import Config
    from core.trans.quota import QuotaLedger
    from handlers.async_comm import AsyncHttp


__all__: list[str] = ["LIBRETRANSLATE_CONFIDENCE", "LibreTranslateTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

LIBRETRANSLATE_CONFIDENCE: Final[float] = 0.7  # The service reports no score of its own.


class LibreTranslateTranslation(TransInterface):
    """Adapter for LibreTranslate, trying each configured mirror in order.

    The configured primary instance (if any) is tried first, then the public mirrors.
    A mirror that times out, answers with an error status, or omits `translatedText` is skipped.
    ProviderError is raised only once every mirror has failed.
    """

    def __init__(self, http: AsyncHttp, ledger: QuotaLedger, config: Config) -> None:
        self.http: AsyncHttp = http
        self.ledger: QuotaLedger = ledger
        self.timeout: float = config.LIBRETRANSLATE.TIMEOUT
        self.mirrors: list[str] = self._build_mirror_list(config.LIBRETRANSLATE.URL, config.LIBRETRANSLATE.MIRRORS)

    @staticmethod
    def _build_mirror_list(primary: str, mirrors: list[str]) -> list[str]:
        urls: list[str] = [primary] if primary else []
        urls.extend(url for url in mirrors if url and url not in urls)
        return urls

    @staticmethod
    def fetch_engine_name() -> str:
        return "libretranslate"

    @property
    def is_metered(self) -> bool:
        return True

    def get_authentication_key(self) -> str:
        """Return the API key from LIBRETRANSLATE_API_KEY, or an empty string if unset."""
        return os.getenv("LIBRETRANSLATE_API_KEY", "")

    def _build_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        api_key: str = self.get_authentication_key()
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        return headers

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        if not self.mirrors:
            msg = "No LibreTranslate instance is configured"
            raise ProviderError(msg)

        # One slot covers the whole mirror walk.
        if not self.ledger.try_acquire(self.fetch_engine_name()):
            msg = "LibreTranslate daily quota exceeded"
            raise QuotaExceededError(msg)

        request = LibreTranslateRequest(q=text, source=source_lang, target=target_lang)
        last_error: Exception | None = None

        for url in self.mirrors:
            logger.debug("Trying LibreTranslate instance: %s", url)
            try:
                payload: Any = await self.http.post(
                    url=url,
                    data=request.to_dict(),
                    headers=self._build_headers(),
                    total_timeout=self.timeout,
                )
                translated_text: str = self._extract_text(payload)
            except (AsyncCommError, ProviderError) as err:
                logger.warning("LibreTranslate instance failed (%s): %s", url, err)
                last_error = err
                continue

            logger.debug("LibreTranslate translation successful from: %s", url)
            return TranslationResult(
                translated_text=translated_text,
                source_language=source_lang,
                target_language=target_lang,
                confidence=LIBRETRANSLATE_CONFIDENCE,
                provider="libretranslate",
            )

        self.ledger.release(self.fetch_engine_name())
        logger.error("All LibreTranslate instances failed: %s", last_error)
        msg = f"All LibreTranslate instances failed: {last_error}"
        raise ProviderError(msg) from last_error

    @staticmethod
    def _extract_text(payload: Any) -> str:
        if not isinstance(payload, dict):
            msg = f"Unexpected LibreTranslate payload: {payload!r}"
            raise ProviderError(msg)
        try:
            response: LibreTranslateResponse = LibreTranslateResponse.from_dict(payload, infer_missing=True)
        except (KeyError, TypeError, ValueError) as err:
            msg = f"LibreTranslate payload could not be parsed: {err}"
            raise ProviderError(msg) from err
        if not isinstance(response.translated_text, str) or not response.translated_text:
            msg = "LibreTranslate payload has no 'translatedText'"
            raise ProviderError(msg)
        return response.translated_text

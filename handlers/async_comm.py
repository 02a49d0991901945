"""aiohttp client shared by the translation provider adapters.

Adapters only ever see decoded bodies or an ``AsyncCommError``. Timeouts, refused connections,
non-2xx statuses and undecodable bodies all map onto that family.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Final, Literal, Self

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from aiohttp.client import ClientResponse


__all__: list[str] = [
    "AsyncCommError",
    "AsyncCommInvalidContentTypeError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod = Literal["GET", "POST"]
Decoder = Callable[[bytes], Any]

CONNECT_TIMEOUT: Final[float] = 3.0
DEFAULT_TOTAL_TIMEOUT: Final[float] = 10.0


def _utf8(raw: bytes) -> str:
    return raw.decode("utf-8")


def _json(raw: bytes) -> Any:
    return json.loads(raw.decode("utf-8"))


class AsyncHttp:
    """Lazily opened aiohttp session with content-type based decoding.

    The session is created on first use, which lets ``SharedData`` build the client before an
    event loop exists. After ``close()`` the next request opens a fresh session.
    """

    def __init__(self, *, default_headers: dict[str, str] | None = None) -> None:
        self._session: ClientSession | None = None
        self.default_headers: dict[str, str] = {"Accept": "application/json", **(default_headers or {})}
        self.decoders: dict[str, Decoder] = {
            "application/json": _json,
            "text/plain": _utf8,
            "text/html": _utf8,
        }

    async def __aenter__(self) -> Self:
        self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    def open(self) -> ClientSession:
        """Return the live session, creating one when none is open."""
        if self._session is None or self._session.closed:
            self._session = ClientSession(headers=self.default_headers)
            logger.debug("HTTP session opened")
        return self._session

    @property
    def session(self) -> ClientSession:
        return self.open()

    @property
    def is_open(self) -> bool:
        return self._session is not None and not self._session.closed

    async def close(self) -> None:
        session, self._session = self._session, None
        if session is not None and not session.closed:
            await session.close()
            logger.debug("HTTP session closed")

    def register_decoder(self, content_type: str, decoder: Decoder) -> None:
        """Install the body decoder for a content type. An existing decoder is replaced."""
        if content_type in self.decoders:
            logger.warning("Replacing decoder for content type '%s'", content_type)
        self.decoders[content_type] = decoder

    async def get(
        self,
        *,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        total_timeout: float = DEFAULT_TOTAL_TIMEOUT,
    ) -> Any:
        """Send a GET request and return the decoded body (None for an empty body)."""
        return await self._request("GET", url=url, total_timeout=total_timeout, params=params, headers=headers)

    async def post(
        self,
        *,
        url: str,
        data: Any | None = None,
        headers: dict[str, str] | None = None,
        total_timeout: float = DEFAULT_TOTAL_TIMEOUT,
    ) -> Any:
        """Send ``data`` as a JSON body and return the decoded response.

        Args:
            url (str): Endpoint URL.
            data (Any | None): JSON-serializable request body.
            headers (dict[str, str] | None): Per-request headers merged over the defaults.
            total_timeout (float): Whole-request budget in seconds. Zero or less disables it.

        Raises:
            AsyncCommTimeoutError: No answer within ``total_timeout``.
            AsyncCommError: Connection failure or a non-2xx status.
            AsyncCommInvalidContentTypeError: The body could not be decoded.
        """
        return await self._request("POST", url=url, total_timeout=total_timeout, json=data, headers=headers)

    @staticmethod
    def _build_timeout(total_timeout: float) -> aiohttp.ClientTimeout:
        if total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        # The connect phase never gets more than the whole budget.
        connect: float | None = CONNECT_TIMEOUT if total_timeout >= CONNECT_TIMEOUT else None
        return aiohttp.ClientTimeout(connect=connect, total=total_timeout)

    async def _decode(self, resp: ClientResponse) -> Any:
        raw: bytes = await resp.read()
        if not raw:
            return None

        content_type: str = resp.content_type.lower()
        decoder: Decoder | None = self.decoders.get(content_type)
        if decoder is None:
            msg: str = f"No decoder for content type '{content_type}'"
            raise AsyncCommInvalidContentTypeError(msg)
        try:
            return decoder(raw)
        except (UnicodeDecodeError, ValueError) as err:
            msg = f"Body is not valid '{content_type}'"
            raise AsyncCommInvalidContentTypeError(msg) from err

    async def _request(self, method: HTTPMethod, *, url: str, total_timeout: float, **kwargs: Any) -> Any:
        logger.debug("%s %s (timeout %.1fs)", method, url, total_timeout)
        try:
            async with self.session.request(
                method, url, timeout=self._build_timeout(total_timeout), **kwargs
            ) as resp:
                resp.raise_for_status()
                return await self._decode(resp)
        except TimeoutError as err:
            logger.debug("%s %s timed out", method, url)
            msg = f"No response from {url} within {total_timeout}s"
            raise AsyncCommTimeoutError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug("%s %s answered %s", method, url, err.status)
            msg = f"{url} returned an error"
            raise AsyncCommError(msg, response=err) from err
        except (aiohttp.ClientError, ConnectionResetError) as err:
            logger.debug("%s %s failed: %s", method, url, err)
            msg = f"Cannot communicate with {url}: {err}"
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """Transport failure talking to a provider.

    Attributes:
        status (int | None): HTTP status when the server answered with an error response.
    """

    def __init__(self, msg: str | BaseException, *, response: aiohttp.ClientResponseError | None = None) -> None:
        self.status: int | None = response.status if response is not None else None
        self.msg: str = f"{msg} (status {self.status})" if self.status is not None else str(msg)
        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """A request did not complete within its timeout."""


class AsyncCommInvalidContentTypeError(AsyncCommError):
    """The response content type is unknown or its body could not be decoded."""

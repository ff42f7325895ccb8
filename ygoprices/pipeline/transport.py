"""
YGO Prices — HTTP Transport

One unauthenticated GET per call against the yugiohprices.com API. Text
responses are returned whatever their HTTP status: the service reports
failures inside the JSON envelope, which pipeline/envelope.py inspects.
Image responses must be 2xx, since an error page is not artwork.

No retries, no caching. Timeout comes from settings unless overridden.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from ygoprices.config import settings
from ygoprices.errors import TransportError

logger = structlog.get_logger(__name__)


def build_path(endpoint: str, name: str) -> str:
    """Append the percent-encoded card name to an endpoint path."""
    escaped = quote(name, safe="")
    # "." and ".." would be dropped as dot-segments by URL normalization
    if name and name.strip(".") == "":
        escaped = escaped.replace(".", "%2E")
    return endpoint + escaped


class HttpTransport:
    """
    Async GET transport over a pooled httpx.AsyncClient.

    Usage:
        async with HttpTransport() as transport:
            body = await transport.fetch_text(build_path(CARD_DATA_PATH, "Dark Magician"))

    A caller-owned ``client`` may be injected; it is used as-is and never
    closed here.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url or settings.YGOPRICES_BASE_URL
        self._timeout = timeout if timeout is not None else settings.YGOPRICES_TIMEOUT_SECONDS
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> HttpTransport:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "User-Agent": settings.YGOPRICES_USER_AGENT,
                    "Accept": "application/json",
                },
                timeout=self._timeout,
            )
            self._owns_client = True
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, path: str) -> str:
        """Absolute URL for ``path``; an injected client may have no base_url of its own."""
        return self._base_url.rstrip("/") + "/" + path.lstrip("/")

    async def _get(self, path: str) -> httpx.Response:
        if self._client is None:
            raise RuntimeError("Transport not initialized. Use 'async with'.")

        url = self.url_for(path)
        try:
            return await self._client.get(url)
        except httpx.RequestError as e:
            logger.error("ygoprices_transport_error", url=url, error=str(e))
            raise TransportError(f"GET {url} failed: {e}", url=url) from e

    # -----------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------

    async def fetch_text(self, path: str) -> str:
        """
        GET ``path`` and return the decoded body.

        Raises:
            TransportError: connection failure, timeout, or an undecodable body.
        """
        response = await self._get(path)
        logger.debug(
            "ygoprices_fetch_text_complete",
            path=path,
            status_code=response.status_code,
            size=len(response.content),
        )
        try:
            return response.content.decode(response.encoding or "utf-8")
        except (UnicodeDecodeError, LookupError) as e:
            logger.error("ygoprices_decode_error", path=path, encoding=response.encoding)
            raise TransportError(f"GET {path} returned an undecodable body", url=str(response.url)) from e

    async def fetch_bytes(self, path: str) -> bytes:
        """
        GET ``path`` and return the raw body.

        Raises:
            TransportError: connection failure, timeout, or a non-2xx status.
        """
        response = await self._get(path)
        if response.is_error:
            logger.error("ygoprices_fetch_bytes_http_error", path=path, status_code=response.status_code)
            raise TransportError(
                f"GET {path} returned HTTP {response.status_code}", url=str(response.url)
            )
        logger.debug("ygoprices_fetch_bytes_complete", path=path, size=len(response.content))
        return response.content

from typing import Any, Mapping, Optional

import httpx

from clinic_admin import __version__
from clinic_admin.config import Settings, get_settings
from clinic_admin.utils.logger import get_logger

logger = get_logger("api")

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class ApiError(RuntimeError):
    """A request to the backend failed.

    The message is the response body text when the server sent one,
    otherwise "HTTP <status>". Network and decode failures use the same type
    with ``status_code`` left as None.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """Thin JSON client over one backend base URL.

    One instance owns one ``httpx.AsyncClient``; it is created on first use
    and released by ``close()`` (or ``async with``).
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        user_agent: Optional[str] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent or f"clinic_admin/{__version__}"
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Send one request to ``<base_url><path>`` and return the decoded JSON.

        - An empty success body resolves to ``{}`` (e.g. DELETE).
        - Any non-2xx status raises ApiError; nothing is retried.
        """
        if not path.startswith("/"):
            raise ValueError(f"path must start with '/': {path!r}")

        merged = httpx.Headers(DEFAULT_HEADERS)
        if headers:
            # last write wins per header name
            merged.update(headers)

        method = method.upper()
        url = f"{self.base_url}{path}"
        client = await self._get_client()

        try:
            if body is None:
                resp = await client.request(method, url, headers=merged)
            else:
                resp = await client.request(method, url, headers=merged, json=body)
        except httpx.RequestError as e:
            logger.warning(f"{method} {url} failed: {e!r}")
            raise ApiError(str(e) or e.__class__.__name__) from e

        logger.debug(f"{method} {url} -> {resp.status_code}")
        text = resp.text

        if not resp.is_success:
            logger.warning(f"{method} {url} returned {resp.status_code}: {text[:200]}")
            raise ApiError(text or f"HTTP {resp.status_code}", status_code=resp.status_code)

        if not text:
            return {}
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON response: {e}", status_code=resp.status_code) from e


def build_api_client(
    settings: Settings | None = None,
    base_url: str | None = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ApiClient:
    """ApiClient configured from settings; ``base_url`` overrides API_BASE_URL."""
    settings = settings or get_settings()
    return ApiClient(
        base_url=base_url or settings.api_base_url,
        timeout=settings.API_TIMEOUT_SECONDS,
        transport=transport,
        user_agent=f"{settings.APP_NAME}/{__version__}",
    )

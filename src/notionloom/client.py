"""Asynchronous client for the Notion API.

This module provides `NotionClient`, which owns the client configuration and
one shared `httpx.AsyncClient`, dispatches `RequestSpec` objects as single
HTTP requests, and exposes the API resources (databases, pages, blocks,
users) as sub-clients.
"""

import asyncio
import ssl
from typing import Any, Self

import certifi
import httpx

from .auth import resolve_auth_header
from .config import ClientSettings, get_settings
from .constants import API_PATH_PREFIX
from .endpoints import SEARCH, build_request_spec
from .exceptions import (
    APIResponseError,
    NetworkError,
    NotionloomRequestError,
    RequestTimeoutError,
    ResponseParseError,
)
from .log_config import LoguruRequestLogger, LogLevel, RequestLogger, logger
from .resources import BlocksClient, DatabasesClient, PagesClient, UsersClient
from .types import HttpMethod, RequestSpec


class NotionClient:
    """Asynchronous client for interacting with the Notion API.

    Every API call made through this client is a single HTTP request: there is
    no retry, caching or rate limiting. Calls may run concurrently; the only
    state they share is the frozen settings and the underlying HTTP client.

    Typical usage:
    ```python
    async with NotionClient(auth="secret_...") as client:
        database = await client.databases.retrieve("abc123")
        rows = await client.databases.query("abc123", filter={...})
    ```

    Attributes:
        databases (DatabasesClient): Client for database endpoints.
        pages (PagesClient): Client for page endpoints.
        blocks (BlocksClient): Client for block endpoints.
        users (UsersClient): Client for user endpoints.
        _settings (ClientSettings): The resolved settings for this instance.
        _prefix_url (str): API origin joined with the versioned path prefix.
        _http_client (httpx.AsyncClient): The shared HTTP client.
        _request_logger (RequestLogger): Sink for request start/end events.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        auth: str | None = None,
        timeout_ms: int | None = None,
        base_url: str | None = None,
        log_level: LogLevel | str | None = None,
        http_client: httpx.AsyncClient | None = None,
        request_logger: RequestLogger | None = None,
    ):
        """Initializes the NotionClient.

        Keyword options take precedence over the values in `settings`.

        Args:
            settings: Optional `ClientSettings`. If None, settings are loaded
                from the environment via `notionloom.config.get_settings()`.
            auth: Default API key or access token for every call.
            timeout_ms: Whole-request timeout in milliseconds; 0 disables it.
            base_url: API origin; the versioned prefix is appended.
            log_level: Minimum level of request start/end log lines.
            http_client: Optional pre-configured `httpx.AsyncClient`. Its own
                base URL and headers are left untouched.
            request_logger: Optional sink replacing the Loguru-backed default.
        """
        overrides = {
            "auth": auth,
            "timeout_ms": timeout_ms,
            "base_url": base_url,
            "log_level": log_level,
        }
        base_settings = settings or get_settings()
        self._settings: ClientSettings = type(base_settings).model_validate(
            {
                **base_settings.model_dump(),
                **{k: v for k, v in overrides.items() if v is not None},
            }
        )

        self._prefix_url: str = self._settings.base_url.rstrip("/") + API_PATH_PREFIX
        self._timeout_seconds: float | None = (
            self._settings.timeout_ms / 1000 if self._settings.timeout_ms > 0 else None
        )
        if request_logger is None:
            request_logger = LoguruRequestLogger(
                type(self).__name__, self._settings.log_level
            )
        self._request_logger: RequestLogger = request_logger

        self._should_close_client = http_client is None
        self._http_client = http_client or self._create_default_http_client()

        self._databases = DatabasesClient(api_client=self)
        self._pages = PagesClient(api_client=self)
        self._blocks = BlocksClient(api_client=self)
        self._users = UsersClient(api_client=self)

        logger.trace(
            f"{type(self).__name__} initialized: prefix_url={self._prefix_url}, "
            f"timeout_ms={self._settings.timeout_ms}, "
            f"log_level={self._settings.log_level.value}"
        )

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create the default httpx.AsyncClient.

        Returns:
            httpx.AsyncClient: Client with certifi SSL verification, the
                configured timeout and a transport that never retries.
        """
        try:
            verify_ssl: ssl.SSLContext | bool = ssl.create_default_context(
                cafile=certifi.where()
            )
            logger.trace("Using certifi SSL context.")
        except Exception:
            verify_ssl = True
            logger.warning(
                "certifi not found or failed to load. Using default SSL verification."
            )

        return httpx.AsyncClient(
            timeout=self._timeout_seconds,
            transport=httpx.AsyncHTTPTransport(retries=0, verify=verify_ssl),
        )

    @property
    def settings(self) -> ClientSettings:
        """The resolved, read-only settings of this client."""
        return self._settings

    @property
    def databases(self) -> DatabasesClient:
        """Provides access to the DatabasesClient for database endpoints."""
        return self._databases

    @property
    def pages(self) -> PagesClient:
        """Provides access to the PagesClient for page endpoints."""
        return self._pages

    @property
    def blocks(self) -> BlocksClient:
        """Provides access to the BlocksClient for block endpoints."""
        return self._blocks

    @property
    def users(self) -> UsersClient:
        """Provides access to the UsersClient for user endpoints."""
        return self._users

    async def request(
        self,
        method: HttpMethod,
        path: str,
        *,
        query: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        auth: str | None = None,
    ) -> Any:
        """Send a request to an arbitrary API path.

        Args:
            method: HTTP method ("GET", "POST" or "PATCH").
            path: Path relative to the versioned API prefix.
            query: Query-string parameters.
            body: JSON body; when None no body is sent.
            auth: Per-call token overriding the client default.

        Returns:
            Any: The parsed JSON response.
        """
        spec = RequestSpec(path=path, method=method, query=query, body=body, auth=auth)
        return await self.dispatch(spec)

    async def dispatch(self, spec: RequestSpec) -> Any:
        """Issue exactly one HTTP request for `spec` and return its parsed JSON.

        Args:
            spec: The fully resolved request.

        Returns:
            Any: The parsed JSON body, unchanged.

        Raises:
            RequestTimeoutError: If the call exceeds the configured timeout.
            NetworkError: For connection-level failures.
            NotionloomRequestError: For any other transport failure.
            APIResponseError: For non-2xx responses.
            ResponseParseError: If a successful response is not valid JSON.
        """
        fields = {"method": spec.method, "path": spec.path}
        self._request_logger.log(LogLevel.INFO, "request start", fields)
        try:
            result = await self._send(spec)
        except Exception as e:
            self._request_logger.log(
                LogLevel.DEBUG,
                "request failed",
                {**fields, "error": type(e).__name__},
            )
            raise
        self._request_logger.log(LogLevel.INFO, "request end", fields)
        return result

    async def _send(self, spec: RequestSpec) -> Any:
        request = self._http_client.build_request(
            spec.method,
            self._prefix_url + spec.path.lstrip("/"),
            params=spec.query,
            json=spec.body,
            headers={
                "user-agent": self._settings.user_agent,
                **resolve_auth_header(spec.auth, self._settings.auth),
            },
        )
        logger.trace(f"Sending request: {request.method} {request.url}")

        try:
            async with asyncio.timeout(self._timeout_seconds):
                response = await self._http_client.send(request)
        except (TimeoutError, httpx.TimeoutException) as e:
            raise RequestTimeoutError(
                f"Request timed out after {self._settings.timeout_ms}ms",
                request=request,
            ) from e
        except httpx.NetworkError as e:
            raise NetworkError(
                f"Network error for {request.url}: {e}", request=request
            ) from e
        except httpx.RequestError as e:
            raise NotionloomRequestError(
                f"HTTP request error for {request.url}: {e}", request=request
            ) from e

        logger.trace(f"Received response: {response.status_code} for {request.url}")

        if not response.is_success:
            raise APIResponseError(
                f"API request failed with status {response.status_code}",
                response=response,
            )
        try:
            return response.json()
        except ValueError as e:
            raise ResponseParseError(
                f"Response body is not valid JSON: {e}", response=response
            ) from e

    async def search(
        self,
        *,
        query: str | None = None,
        sort: dict[str, Any] | None = None,
        filter: dict[str, Any] | None = None,
        start_cursor: str | None = None,
        page_size: int | None = None,
        auth: str | None = None,
    ) -> Any:
        """Search all pages and databases shared with the integration."""
        args = {
            "query": query,
            "sort": sort,
            "filter": filter,
            "start_cursor": start_cursor,
            "page_size": page_size,
        }
        return await self.dispatch(build_request_spec(SEARCH, args, auth=auth))

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug(f"{type(self).__name__} internal HTTP client closed.")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()

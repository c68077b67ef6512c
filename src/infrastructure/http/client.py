"""Async HTTP transport for the origin.

HttpClient issues exactly one request per call:

    send
        → build_url              (absolute URL; fully-qualified endpoints pass through)
        → build_headers          (JSON defaults, bearer token snapshot)
        → asyncio.wait_for       (network call raced against the deadline)
        → _parse                 (JSON when the content type says so, else text)
        → error_for_status       (non-2xx → HttpStatusError subclass)

There is no retry, backoff or queuing.  A call that loses the race against
its deadline is cancelled before RequestTimeoutError is raised, so nothing
is left running in the background.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from src.domain.credentials import CredentialProvider
from src.domain.errors import (
    InvalidResponseError,
    NetworkError,
    RequestTimeoutError,
    error_for_status,
)
from src.domain.models.enums import HttpMethod
from src.domain.models.queries import RequestOptions
from src.domain.services.urls import build_url, build_url_with_params

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
DEFAULT_TIMEOUT_MS = 30000


@dataclass(frozen=True)
class ApiResponse:
    """Status, headers and parsed body of a successful call."""

    status: int
    headers: httpx.Headers
    data: Any


class HttpClient:
    """One transport per configuration (base URL, timeout, credentials).

    Usable as an async context manager; aclose() releases the pooled
    connections.  transport is injectable for tests.
    """

    def __init__(
        self,
        base_url: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        credentials: CredentialProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.default_timeout_ms = timeout_ms
        self._credentials = credentials
        # Deadlines are enforced by wait_for, not by httpx.
        self._client = httpx.AsyncClient(transport=transport, timeout=None)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # --- URLs ---

    def build_url(self, endpoint: str) -> str:
        return build_url(self.base_url, endpoint)

    def build_url_with_params(self, endpoint: str, params: Mapping[str, Any] | None) -> str:
        return build_url_with_params(self.base_url, endpoint, params)

    # --- headers / payload ---

    def build_headers(self, options: RequestOptions) -> httpx.Headers:
        """Merge caller headers with the JSON defaults and the bearer token.

        Caller headers always win.  Multipart requests never carry a
        Content-Type here so httpx can add the boundary.
        """
        headers = httpx.Headers(options.headers)
        if options.is_multipart:
            headers.pop("Content-Type", None)
        elif "Content-Type" not in headers:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        if "Accept" not in headers:
            headers["Accept"] = JSON_CONTENT_TYPE

        if not options.skip_auth and "Authorization" not in headers:
            token = self._credentials.get_token() if self._credentials else None
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    @staticmethod
    def _payload(options: RequestOptions) -> dict[str, Any]:
        if options.is_multipart:
            return {"files": options.files, "data": options.body}
        if options.body is None:
            return {}
        if isinstance(options.body, (str, bytes)):
            return {"content": options.body}
        return {"json": options.body}

    @staticmethod
    def _parse(response: httpx.Response) -> Any:
        if JSON_CONTENT_TYPE not in response.headers.get("content-type", ""):
            return response.text
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Invalid JSON in response body: {e}",
                status=response.status_code,
                data=response.text,
            ) from e

    # --- requests ---

    async def send(self, endpoint: str, options: RequestOptions | None = None) -> ApiResponse:
        """Issue one request and return status, headers and parsed body.

        Raises RequestTimeoutError, NetworkError, InvalidResponseError or an
        HttpStatusError subclass.
        """
        options = options or RequestOptions()
        method = options.method.value
        url = self.build_url(endpoint)
        timeout_ms = options.timeout_ms or self.default_timeout_ms
        headers = self.build_headers(options)

        logger.debug("%s %s (timeout %d ms)", method, url, timeout_ms)
        try:
            response = await asyncio.wait_for(
                self._client.request(method, url, headers=headers, **self._payload(options)),
                timeout=timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning("%s %s timed out after %d ms", method, url, timeout_ms)
            raise RequestTimeoutError() from e
        except httpx.TransportError as e:
            raise NetworkError(str(e) or type(e).__name__) from e

        data = self._parse(response)
        if not response.is_success:
            raise error_for_status(response.status_code, data)
        return ApiResponse(status=response.status_code, headers=response.headers, data=data)

    async def request(self, endpoint: str, options: RequestOptions | None = None) -> Any:
        """Issue one request and return only the parsed body."""
        response = await self.send(endpoint, options)
        return response.data

    @staticmethod
    def _with(options: RequestOptions | None, **update: Any) -> RequestOptions:
        return (options or RequestOptions()).model_copy(update=update)

    async def get(self, endpoint: str, options: RequestOptions | None = None) -> Any:
        return await self.request(endpoint, self._with(options, method=HttpMethod.GET))

    async def post(self, endpoint: str, data: Any = None, options: RequestOptions | None = None) -> Any:
        return await self.request(endpoint, self._with(options, method=HttpMethod.POST, body=data))

    async def put(self, endpoint: str, data: Any = None, options: RequestOptions | None = None) -> Any:
        return await self.request(endpoint, self._with(options, method=HttpMethod.PUT, body=data))

    async def patch(self, endpoint: str, data: Any = None, options: RequestOptions | None = None) -> Any:
        return await self.request(endpoint, self._with(options, method=HttpMethod.PATCH, body=data))

    async def delete(self, endpoint: str, options: RequestOptions | None = None) -> Any:
        return await self.request(endpoint, self._with(options, method=HttpMethod.DELETE))

    async def upload(
        self,
        endpoint: str,
        files: Any,
        data: dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """POST a multipart payload.

        files uses the httpx format, e.g. {"file": ("scan.pdf", content, "application/pdf")};
        data holds plain form fields.
        """
        return await self.request(
            endpoint, self._with(options, method=HttpMethod.POST, body=data, files=files)
        )

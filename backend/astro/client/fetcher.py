"""
Astro — API Fetcher
====================

What:  Async HTTP client the stores use to talk to the backend.
How:   One httpx.AsyncClient per fetcher. GET requests are retried with
       tenacity on transport failures (connection refused, timeouts);
       writes are sent once. Non-2xx responses become `ApiError`.

Key convention (mirrors the dashboard's data hooks):
    fetch(["Service"])                → GET  /api/service
    fetch(["Service", 3])             → GET  /api/service/3
    fetch(["Service"], data={...})    → POST /api/service
"""

import logging
from typing import Any, Dict, Optional, Sequence

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from astro.config import settings
from astro.exceptions import ApiError
from astro.middleware.request_id import REQUEST_ID_HEADER, new_request_id

logger = logging.getLogger(__name__)

IDEMPOTENT_METHODS = {"GET", "HEAD", "OPTIONS"}


class ApiClient:
    """Thin async wrapper over the Astro REST API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        max_attempts: Optional[int] = None,
        min_wait: Optional[float] = None,
        max_wait: Optional[float] = None,
    ):
        """
        Args:
            base_url:     Backend origin; paths are always `/api/...`.
            transport:    Injected in tests (httpx.MockTransport, ASGITransport).
            max_attempts: Override settings.retry_max_attempts.
            min_wait:     Override settings.retry_min_wait (seconds).
            max_wait:     Override settings.retry_max_wait (seconds).
        """
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)
        self.max_attempts = max_attempts or settings.retry_max_attempts
        self.min_wait = settings.retry_min_wait if min_wait is None else min_wait
        self.max_wait = settings.retry_max_wait if max_wait is None else max_wait

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ── Core request ──────────────────────────────────────────────────────

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        files: Any = None,
    ) -> Any:
        """
        Send one API request and decode the JSON body.

        Returns:
            The decoded body, or None for 204 No Content.

        Raises:
            ApiError:            the server answered with a non-2xx status or a non-JSON body
            httpx.TransportError: the server stayed unreachable after retries
        """
        method = method.upper()
        headers = {REQUEST_ID_HEADER: new_request_id()}

        if method not in IDEMPOTENT_METHODS:
            response = await self._client.request(
                method, path, json=json, params=params, files=files, headers=headers
            )
            return self._decode(response)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.min_wait, max=self.max_wait)
            + wait_random(0, self.min_wait),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                response = await self._client.request(
                    method, path, params=params, headers=headers
                )
        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if response.is_success:
            if response.status_code == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError:
                raise ApiError(
                    status_code=response.status_code,
                    error="invalid_response",
                    message="The server returned a response that is not JSON",
                    request_id=response.headers.get(REQUEST_ID_HEADER),
                ) from None

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        error = ApiError(
            status_code=response.status_code,
            error=body.get("error", "http_error"),
            message=body.get("message") or response.reason_phrase or "Request failed",
            details=body.get("details"),
            request_id=body.get("request_id") or response.headers.get(REQUEST_ID_HEADER),
        )
        logger.warning(
            "[%s] %s %s failed: %d %s",
            error.request_id,
            response.request.method,
            response.request.url.path,
            response.status_code,
            error.message,
        )
        raise error

    # ── Convenience verbs ─────────────────────────────────────────────────

    async def get(self, path: str, **params: Any) -> Any:
        return await self.request("GET", path, params=params or None)

    async def post(self, path: str, data: Any = None) -> Any:
        return await self.request("POST", path, json=data)

    async def patch(self, path: str, data: Any) -> Any:
        return await self.request("PATCH", path, json=data)

    async def put(self, path: str, data: Any) -> Any:
        return await self.request("PUT", path, json=data)

    async def delete(self, path: str) -> None:
        await self.request("DELETE", path)

    async def fetch(self, key: Sequence[Any], data: Any = None) -> Any:
        """
        Fetch by entity key: POST when `data` is given, otherwise GET.

        The first key element names the entity (case-insensitive); an
        optional second element is an id.
        """
        if not key:
            raise ValueError("fetch() needs at least an entity name")
        path = f"/api/{str(key[0]).lower()}"
        if len(key) > 1:
            path = f"{path}/{key[1]}"
        if data is not None:
            return await self.post(path, data)
        return await self.get(path)

    async def upload_logo(self, filename: str, content: bytes, content_type: Optional[str] = None) -> str:
        """Upload a logo image and return the URL to store on a service."""
        file_tuple = (filename, content, content_type) if content_type else (filename, content)
        body = await self.request("POST", "/api/logo", files={"file": file_tuple})
        return body["url"]

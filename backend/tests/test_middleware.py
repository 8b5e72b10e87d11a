"""
Astro Backend — Middleware Tests
=================================

What:  Sliding-window rate limiting, request IDs and access-log levels.
How:   A bare FastAPI app per test so limits can be tiny.
"""

import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from astro.middleware.logging import level_for_status
from astro.middleware.rate_limit import RateLimitMiddleware
from astro.middleware.request_id import RequestIDMiddleware, request_id_var


def _app(max_requests: int = 2) -> FastAPI:
    app = FastAPI()

    @app.get("/api/ping")
    async def ping():
        return {"request_id": request_id_var.get("")}

    @app.get("/api/healthz")
    async def healthz():
        return {"status": "healthy"}

    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RateLimitMiddleware, max_requests=max_requests, window_seconds=60)
    return app


class TestRateLimitWindow:
    def test_allows_up_to_limit_then_reports_retry_after(self):
        limiter = RateLimitMiddleware(FastAPI(), max_requests=2, window_seconds=60)

        assert limiter.check("1.2.3.4", now=100.0) is None
        assert limiter.check("1.2.3.4", now=110.0) is None
        assert limiter.check("1.2.3.4", now=120.0) == 41

    def test_window_slides(self):
        limiter = RateLimitMiddleware(FastAPI(), max_requests=1, window_seconds=60)

        assert limiter.check("1.2.3.4", now=0.0) is None
        assert limiter.check("1.2.3.4", now=30.0) is not None
        assert limiter.check("1.2.3.4", now=61.0) is None

    def test_ips_are_counted_separately(self):
        limiter = RateLimitMiddleware(FastAPI(), max_requests=1, window_seconds=60)

        assert limiter.check("10.0.0.1", now=0.0) is None
        assert limiter.check("10.0.0.2", now=0.0) is None

    def test_inactive_ips_are_swept(self):
        limiter = RateLimitMiddleware(FastAPI(), max_requests=5, window_seconds=60)
        limiter.check("10.0.0.1", now=0.0)

        limiter._cleanup_inactive_ips(window_start=100.0)

        assert "10.0.0.1" not in limiter._requests


class TestRateLimitMiddleware:
    @pytest.mark.asyncio
    async def test_third_request_is_429(self):
        async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as client:
            assert (await client.get("/api/ping")).status_code == 200
            assert (await client.get("/api/ping")).status_code == 200
            limited = await client.get("/api/ping")

        assert limited.status_code == 429
        assert int(limited.headers["retry-after"]) > 0
        assert limited.json()["error"] == "rate_limit_exceeded"

    @pytest.mark.asyncio
    async def test_health_check_never_limited(self):
        async with AsyncClient(transport=ASGITransport(app=_app(max_requests=1)), base_url="http://test") as client:
            for _ in range(5):
                assert (await client.get("/api/healthz")).status_code == 200


class TestRequestId:
    @pytest.mark.asyncio
    async def test_id_visible_to_handler_and_header(self):
        async with AsyncClient(transport=ASGITransport(app=_app(max_requests=10)), base_url="http://test") as client:
            response = await client.get("/api/ping", headers={"X-Request-ID": "feedbeef"})

        assert response.json()["request_id"] == "feedbeef"
        assert response.headers["x-request-id"] == "feedbeef"


class TestAccessLogLevels:
    @pytest.mark.parametrize(
        "status, level",
        [(200, logging.INFO), (304, logging.INFO), (404, logging.WARNING), (503, logging.ERROR)],
    )
    def test_level_for_status(self, status, level):
        assert level_for_status(status) == level

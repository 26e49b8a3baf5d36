"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve probes.
"""

from __future__ import annotations

import httpx
import pytest

from stream_token_issuer.api.app import create_app
from stream_token_issuer.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoints(settings: Settings) -> None:
    app = create_app(settings=settings)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/healthz")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"

        r = await client.get("/readyz")
        assert r.status_code == 200
        assert r.json() == {"status": "ready", "issuers": ["dev", "signed"]}


@pytest.mark.asyncio
async def test_request_id_is_echoed_or_generated(settings: Settings) -> None:
    app = create_app(settings=settings)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        r = await client.get("/healthz", headers={"x-request-id": "req-123"})
        assert r.headers["x-request-id"] == "req-123"

        r = await client.get("/healthz")
        assert r.headers["x-request-id"]

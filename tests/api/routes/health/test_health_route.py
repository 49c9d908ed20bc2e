"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


def _channel_server(sealed: bool = True) -> SimpleNamespace:
    registry = SimpleNamespace(sealed=sealed, handlers={"ZV": object(), "FC": object()})
    return SimpleNamespace(registry=registry)


@pytest.mark.asyncio
async def test_health_reports_service_name() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "channel-gateway"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_before_startup() -> None:
    request = _build_request_with_state(SimpleNamespace(redis_client=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["adapters"]["error"] == "not_initialized"
    assert payload["checks"]["redis"]["status"] == "degraded"


@pytest.mark.asyncio
async def test_readiness_ready_with_memory_backend() -> None:
    request = _build_request_with_state(
        SimpleNamespace(channel_server=_channel_server(), redis_client=None)
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["checks"]["adapters"]["channel_types"] == ["FC", "ZV"]


@pytest.mark.asyncio
async def test_readiness_fails_when_redis_is_down() -> None:
    redis_client = MagicMock()
    redis_client.ping = AsyncMock(side_effect=ConnectionError("down"))
    request = _build_request_with_state(
        SimpleNamespace(channel_server=_channel_server(), redis_client=redis_client)
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["redis"]["error"] == "ConnectionError"


@pytest.mark.asyncio
async def test_readiness_ok_with_redis() -> None:
    redis_client = MagicMock()
    redis_client.ping = AsyncMock(return_value=True)
    request = _build_request_with_state(
        SimpleNamespace(channel_server=_channel_server(), redis_client=redis_client)
    )

    response = await readiness_check(request)

    assert response.status_code == 200

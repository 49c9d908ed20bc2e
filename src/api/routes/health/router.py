"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_gateway_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None
    detail: dict[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }
        if self.detail:
            data.update(self.detail)
        return data


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_gateway_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: adapters registrados e Redis (quando configurado)."""
    state = request.app.state
    adapters_check = _check_adapters(getattr(state, "channel_server", None))
    redis_check = await _check_redis(getattr(state, "redis_client", None))

    ready = adapters_check.status == "ok" and redis_check.status in {"ok", "degraded"}

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "adapters": adapters_check.as_dict(),
            "redis": redis_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_adapters(channel_server: Any | None) -> DependencyCheck:
    if channel_server is None:
        return DependencyCheck(status="failed", error="not_initialized")
    registry = channel_server.registry
    if not registry.sealed:
        return DependencyCheck(status="failed", error="registry_not_sealed")
    return DependencyCheck(
        status="ok",
        detail={"channel_types": sorted(registry.handlers)},
    )


async def _check_redis(redis_client: Any | None) -> DependencyCheck:
    # Backend em memória não usa Redis
    if redis_client is None:
        return DependencyCheck(status="degraded", error="not_configured")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(redis_client.ping(), timeout=2.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_redis_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))

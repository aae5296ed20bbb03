"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.dependencies import ContextDep
from app.domain.clock import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter()

STORE_PING_TIMEOUT_SECONDS = 3.0


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed", "disabled"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check(context: ContextDep) -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=context.base_settings.service_name,
        timestamp=utc_now_iso(),
    )


@router.get("/ready")
async def readiness_check(context: ContextDep) -> JSONResponse:
    """Readiness probe: store obrigatório, notificadores apenas informativos."""
    store_check = await _check_store(context.store)
    checks: dict[str, Any] = {"store": store_check.as_dict()}
    for notifier in context.notifiers:
        checks[notifier.name] = DependencyCheck(
            status="ok" if notifier.enabled else "disabled"
        ).as_dict()

    ready = store_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": checks,
        "timestamp": utc_now_iso(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_store(store: Any) -> DependencyCheck:
    started_at = time.perf_counter()
    try:
        reachable = await asyncio.wait_for(store.ping(), timeout=STORE_PING_TIMEOUT_SECONDS)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_store_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
    if not reachable:
        return DependencyCheck(status="failed", latency_ms=latency_ms, error="unreachable")
    return DependencyCheck(status="ok", latency_ms=latency_ms)

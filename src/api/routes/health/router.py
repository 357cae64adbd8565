"""Endpoints de health check.

- /health: liveness do processo (sem chamada externa)
- /api/health: probe real da LLM com alerta condicional (HealthMonitor)
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()

NO_CACHE_HEADER = "no-store, no-cache, must-revalidate"


class LivenessResponse(BaseModel):
    """Resposta do liveness probe."""

    status: str
    service: str
    timestamp: str


@router.get("/health", response_model=LivenessResponse)
async def liveness_check() -> LivenessResponse:
    """Liveness probe - verifica se o processo está rodando."""
    return LivenessResponse(
        status="healthy",
        service="sigblock-parser",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/api/health")
async def upstream_health_check(request: Request) -> JSONResponse:
    """Verifica configuração e acesso à API da LLM; 200 healthy, 503 unhealthy."""
    outcome = await request.app.state.health_monitor.check()
    return JSONResponse(
        content=outcome.report.to_payload(),
        status_code=outcome.status_code,
        headers={
            "Cache-Control": NO_CACHE_HEADER,
            "X-Response-Time": f"{outcome.duration_ms}ms",
        },
    )

"""Agregador de rotas - registra todos os routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.signature.router import router as signature_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (/health na raiz, /api/health com probe da LLM)
    api_router.include_router(health_router, tags=["health"])

    # Parsing de assinatura e export vCard
    api_router.include_router(signature_router, prefix="/api", tags=["signature"])

    return api_router

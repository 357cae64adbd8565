"""Entrypoint da aplicação SigBlock Parser.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import (
    create_health_monitor,
    create_signature_extractor_service,
    initialize_app,
    validate_runtime_settings,
)
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida settings e cria serviços que ainda não foram
    injetados em app.state (testes injetam fakes antes).
    """
    logger.info("app_starting", extra={"service": "sigblock-parser"})
    validate_runtime_settings()

    if getattr(app.state, "signature_extractor", None) is None:
        app.state.signature_extractor = create_signature_extractor_service()
    if getattr(app.state, "health_monitor", None) is None:
        app.state.health_monitor = create_health_monitor()

    yield

    logger.info("app_shutting_down", extra={"service": "sigblock-parser"})


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga X-Correlation-ID (ou gera um) para os logs da requisição."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="SigBlock Parser",
        description="Extração de contatos de assinaturas de e-mail e export vCard",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Frontend estático consome a API de outra origem
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "X-Response-Time", CORRELATION_ID_HEADER],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "sigblock-parser"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting SigBlock Parser in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()

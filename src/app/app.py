"""Entrypoint do serviço de calendário escolar.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 4100

Uso (desenvolvimento):
    school-calendar
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.middleware import correlation_id_middleware, cors_middleware
from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings, get_school_calendar_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from starlette.requests import Request
    from starlette.responses import Response

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

# Rota inexistente e método não suportado respondem igual
_NOT_FOUND_STATUSES = frozenset({404, 405})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida configurações no startup e registra o shutdown."""
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": service_name})


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code in _NOT_FOUND_STATUSES:
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="school-calendar",
        description="Ingestão do calendário acadêmico da instituição",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
    )

    # Último registrado fica mais externo: correlation envolve CORS
    fastapi_app.middleware("http")(cors_middleware)
    fastapi_app.middleware("http")(correlation_id_middleware)

    fastapi_app.add_exception_handler(StarletteHTTPException, not_found_handler)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_school_calendar_settings()
    logger.info(
        "server_listening",
        extra={
            "url": f"http://localhost:{settings.port}",
            "example": "GET /api/school-events?year=2025",
        },
    )
    uvicorn.run(
        "app.app:app",
        host=settings.host,
        port=settings.port,
        reload=get_base_settings().is_development,
    )


if __name__ == "__main__":
    main()

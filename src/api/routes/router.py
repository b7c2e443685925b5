"""Agregador de rotas — registra todos os routers sob /api.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.school_events.router import router as school_events_router

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter(prefix=API_PREFIX)

    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(school_events_router, tags=["school-events"])

    return api_router

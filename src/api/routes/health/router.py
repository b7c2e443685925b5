"""Endpoint de health check."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from app.domain.school_event import to_iso_timestamp

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    ok: bool = True
    time: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(ok=True, time=to_iso_timestamp(datetime.now(UTC)))

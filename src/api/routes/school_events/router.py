"""Endpoints de eventos do calendário escolar.

GET /school-events?year=2025&force=1
GET /school-events/range?start=2025-12-01&end=2026-01-11

Falhas de upstream viram 500 com {"error": true, "message": ...}; o
cache antigo nunca é servido no lugar de um refresh que falhou.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.bootstrap import get_school_events_use_case
from utils.errors import SchoolCalendarError

logger = logging.getLogger(__name__)

router = APIRouter()

_COMPONENT = "school_events_route"
_MIN_YEAR = 1
_MAX_YEAR = 9999


def resolve_year(raw_year: str | None, today: date | None = None) -> int:
    """Converte o parâmetro year; usa o ano corrente se ausente ou inválido."""
    current_year = (today or datetime.now(UTC).date()).year
    if raw_year is None:
        return current_year
    digits = raw_year.strip()
    # Só dígitos ASCII: sinal, "_" e dígitos full-width não são ano
    if not (digits.isascii() and digits.isdigit()):
        return current_year
    year = int(digits)
    if not _MIN_YEAR <= year <= _MAX_YEAR:
        return current_year
    return year


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(content={"error": True, "message": message}, status_code=status_code)


@router.get("/school-events")
async def get_school_events(request: Request) -> JSONResponse:
    """Eventos de um ano, do cache (dentro do TTL) ou do site da instituição."""
    year = resolve_year(request.query_params.get("year"))
    force = request.query_params.get("force") == "1"

    try:
        result = await get_school_events_use_case().execute(year, force=force)
    except SchoolCalendarError as exc:
        logger.warning(
            "school_events_failed",
            extra={
                "component": _COMPONENT,
                "result": "error",
                "year": year,
                "error_type": type(exc).__name__,
            },
        )
        return _error_response(500, str(exc))
    except Exception as exc:
        logger.exception(
            "school_events_unexpected_error",
            extra={"component": _COMPONENT, "result": "error", "year": year},
        )
        return _error_response(500, str(exc) or type(exc).__name__)

    return JSONResponse(content=result.to_payload(), status_code=200)


@router.get("/school-events/range")
async def get_school_events_range(request: Request) -> JSONResponse:
    """Eventos de todos os anos tocados pelo intervalo [start, end]."""
    try:
        start = date.fromisoformat(request.query_params.get("start", ""))
        end = date.fromisoformat(request.query_params.get("end", ""))
    except ValueError:
        return _error_response(422, "start and end must be YYYY-MM-DD dates")

    try:
        result = await get_school_events_use_case().execute_range(start, end)
    except ValueError as exc:
        return _error_response(422, str(exc))
    except SchoolCalendarError as exc:
        logger.warning(
            "school_events_range_failed",
            extra={
                "component": _COMPONENT,
                "result": "error",
                "start": start.isoformat(),
                "end": end.isoformat(),
                "error_type": type(exc).__name__,
            },
        )
        return _error_response(500, str(exc))
    except Exception as exc:
        logger.exception(
            "school_events_range_unexpected_error",
            extra={"component": _COMPONENT, "result": "error"},
        )
        return _error_response(500, str(exc) or type(exc).__name__)

    return JSONResponse(content=result.to_payload(), status_code=200)

"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.school_event_normalizer import (
    fix_invalid_end,
    normalize_school_events,
    normalize_season_start_only,
)

__all__ = [
    "fix_invalid_end",
    "normalize_school_events",
    "normalize_season_start_only",
]

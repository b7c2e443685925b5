"""Normalizacao dos eventos parseados do calendario escolar.

Corrige anomalias conhecidas do upstream antes de entregar ao cliente:
- fim invertido (ou vazio) vira evento de um dia;
- titulos de temporada que so publicam o inicio viram marcador "(시작)";
- o upstream repete "신정" em 1o de janeiro: a segunda ocorrencia
  encerra o processamento da lista.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.school_event import add_days, parse_iso_date

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.school_event import CalendarEvent

logger = logging.getLogger(__name__)

_COMPONENT = "school_event_normalizer"

SEASON_START_ONLY_TITLES = frozenset(
    {
        "동계방학",
        "하계방학",
        "동계 계절수업 기간",
        "하계 계절수업 기간",
    }
)
SEASON_START_SUFFIX = " (시작)"
NEW_YEAR_TITLE = "신정"


def fix_invalid_end(event: CalendarEvent | None) -> CalendarEvent | None:
    """Remove `end` quando ele nao e posterior ao `start`.

    Como `end` e exclusivo, end == start seria um intervalo vazio.
    Datas que nao parseiam deixam o evento intocado.
    """
    if event is None or not event.end:
        return event
    start = parse_iso_date(event.start)
    end = parse_iso_date(event.end)
    if start is None or end is None:
        return event
    if end <= start:
        return event.model_copy(update={"end": None})
    return event


def normalize_season_start_only(event: CalendarEvent | None) -> CalendarEvent | None:
    """Converte titulos de temporada em marcador de um dia com sufixo."""
    if event is None:
        return event
    title = event.title.strip()
    if title not in SEASON_START_ONLY_TITLES:
        return event
    return event.model_copy(
        update={
            "end": add_days(event.start, 1),
            "all_day": True,
            "title": f"{title}{SEASON_START_SUFFIX}",
        }
    )


def _is_new_year_entry(event: CalendarEvent | None, year: int) -> bool:
    if event is None:
        return False
    return event.title.strip() == NEW_YEAR_TITLE and event.start.startswith(f"{year:04d}-01-01")


def normalize_school_events(
    events: Iterable[CalendarEvent | None] | None,
    year: int,
) -> list[CalendarEvent | None]:
    """Aplica as regras de normalizacao na ordem original.

    Args:
        events: Saida do parser (None e tratado como lista vazia).
        year: Ano alvo, usado para reconhecer o 신정 de 1o de janeiro.

    Returns:
        Nova lista com a mesma ordem relativa. Pode ser menor que a
        entrada por causa do corte no segundo 신정.
    """
    normalized: list[CalendarEvent | None] = []
    new_year_count = 0
    truncated = False

    for raw in events or ():
        if _is_new_year_entry(raw, year):
            new_year_count += 1
            if new_year_count >= 2:
                truncated = True
                break

        event = fix_invalid_end(raw)
        event = normalize_season_start_only(event)
        normalized.append(event)

    logger.debug(
        "school_events_normalized",
        extra={
            "component": _COMPONENT,
            "action": "normalize",
            "result": "truncated" if truncated else "ok",
            "year": year,
            "event_count": len(normalized),
        },
    )
    return normalized


__all__ = [
    "NEW_YEAR_TITLE",
    "SEASON_START_ONLY_TITLES",
    "SEASON_START_SUFFIX",
    "fix_invalid_end",
    "normalize_school_events",
    "normalize_season_start_only",
]

"""Modelos de dominio do calendario academico.

CalendarEvent e o contrato entregue aos clientes; YearCacheEntry e o que o
cache guarda por ano. As datas trafegam como texto YYYY-MM-DD e o `end`,
quando presente, e exclusivo (primeiro dia em que o evento ja nao ocorre).
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SCHOOL_SCOPE = "SCHOOL"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class CalendarEvent(BaseModel):
    """Evento de dia inteiro extraido do calendario academico."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: str = Field(..., description="SCHOOL-{ano}-{MM}-{DD}-{titulo}, nao e unico.")
    title: str = Field(..., description="Titulo com espacos colapsados.")
    start: str = Field(..., pattern=DATE_PATTERN, description="Inicio (YYYY-MM-DD).")
    end: str | None = Field(
        default=None,
        pattern=DATE_PATTERN,
        description="Fim exclusivo (YYYY-MM-DD) ou None para evento de um dia.",
    )
    all_day: bool = Field(default=True, alias="allDay")
    scope: str = Field(default=SCHOOL_SCOPE, description="Origem do evento.")

    def to_payload(self) -> dict[str, Any]:
        """Serializa no formato JSON exposto pela API (allDay em camelCase)."""
        return self.model_dump(by_alias=True)


class YearCacheEntry(BaseModel):
    """Ultima lista normalizada de um ano e o instante em que foi obtida."""

    model_config = ConfigDict(frozen=True)

    events: tuple[CalendarEvent, ...] = ()
    fetched_at: datetime

    def age_seconds(self, now: datetime | None = None) -> float:
        current = now or datetime.now(UTC)
        return (current - self.fetched_at).total_seconds()

    def is_fresh(self, ttl_seconds: float, now: datetime | None = None) -> bool:
        """True enquanto a entrada for mais nova que o TTL."""
        return self.age_seconds(now) < ttl_seconds


def parse_iso_date(value: str | None) -> date | None:
    """Converte YYYY-MM-DD em date; None se ausente ou invalido."""
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def add_days(value: str, days: int) -> str | None:
    """Soma dias a uma data YYYY-MM-DD, None se a data for invalida."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return None
    try:
        return (parsed + timedelta(days=days)).isoformat()
    except OverflowError:
        return None


def to_iso_timestamp(moment: datetime) -> str:
    """Formata instante UTC como 2025-03-02T10:30:00.120Z."""
    utc_moment = moment.astimezone(UTC)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = [
    "DATE_PATTERN",
    "SCHOOL_SCOPE",
    "CalendarEvent",
    "YearCacheEntry",
    "add_days",
    "parse_iso_date",
    "to_iso_timestamp",
]

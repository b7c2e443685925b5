"""Cache em memoria de eventos por ano.

Store passivo: nao expira nada sozinho. Quem consulta decide se a
entrada ainda esta fresca (YearCacheEntry.is_fresh). Uma entrada por ano,
viva enquanto o processo viver.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.school_event import YearCacheEntry
from app.protocols.school_calendar import YearCacheProtocol

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from app.domain.school_event import CalendarEvent

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class MemoryYearCache(YearCacheProtocol):
    """Mapa ano -> YearCacheEntry."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._entries: dict[int, YearCacheEntry] = {}
        self._clock = clock or _utc_now

    def get(self, year: int) -> YearCacheEntry | None:
        return self._entries.get(int(year))

    def put(self, year: int, events: Sequence[CalendarEvent]) -> YearCacheEntry:
        """Grava (ou sobrescreve) a entrada do ano com fetched_at = agora."""
        entry = YearCacheEntry(events=tuple(events), fetched_at=self._clock())
        self._entries[int(year)] = entry
        logger.debug(
            "school_events_cache_write",
            extra={
                "component": "year_cache",
                "action": "put",
                "result": "ok",
                "year": year,
                "event_count": len(entry.events),
            },
        )
        return entry

    def years(self) -> list[int]:
        """Anos presentes no cache, em ordem crescente."""
        return sorted(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["MemoryYearCache"]

"""Use case que entrega os eventos escolares de um ano.

Fluxo por requisicao:
    CACHE_CHECK -> HIT: responde do cache
                -> MISS / STALE / FORCED: FETCH -> PARSE -> NORMALIZE -> CACHE_WRITE

Falhas de fetch/parse sobem para o chamador; uma entrada antiga no cache
nunca e usada como fallback.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Literal

from app.domain.school_event import to_iso_timestamp
from app.observability import record_cache_result, record_event_counts, record_latency
from app.services.school_event_normalizer import normalize_school_events

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from datetime import date

    from app.domain.school_event import CalendarEvent, YearCacheEntry
    from app.observability.metrics import CacheResult
    from app.protocols.school_calendar import (
        ScheduleHtmlSourceProtocol,
        ScheduleParserProtocol,
        YearCacheProtocol,
    )

logger = logging.getLogger(__name__)

_COMPONENT = "get_school_events"

DEFAULT_CACHE_TTL_SECONDS = 6 * 60 * 60

# Uma visao de calendario cruza no maximo a virada de um ano.
MAX_RANGE_YEARS = 2

EventSource = Literal["cache", "school"]


@dataclass(frozen=True, slots=True)
class SchoolEventsResult:
    """Resposta de um ano, vinda do cache ou do upstream."""

    source: EventSource
    year: int
    fetched_at: datetime
    events: tuple[CalendarEvent, ...]

    def to_payload(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "year": self.year,
            "fetchedAt": to_iso_timestamp(self.fetched_at),
            "events": [event.to_payload() for event in self.events],
        }


@dataclass(frozen=True, slots=True)
class SchoolEventsRangeResult:
    """Eventos de todos os anos tocados por um intervalo de datas."""

    years: tuple[SchoolEventsResult, ...]

    @property
    def events(self) -> list[CalendarEvent]:
        return [event for result in self.years for event in result.events]

    def to_payload(self) -> dict[str, Any]:
        return {
            "years": [
                {
                    "year": result.year,
                    "source": result.source,
                    "fetchedAt": to_iso_timestamp(result.fetched_at),
                }
                for result in self.years
            ],
            "events": [event.to_payload() for event in self.events],
        }


def _utc_now() -> datetime:
    return datetime.now(UTC)


class GetSchoolEventsUseCase:
    """Orquestra cache, fetch, parse e normalizacao por ano."""

    def __init__(
        self,
        *,
        source: ScheduleHtmlSourceProtocol,
        parser: ScheduleParserProtocol,
        cache: YearCacheProtocol,
        normalizer: Callable[
            [Iterable[CalendarEvent | None], int], list[CalendarEvent | None]
        ] = normalize_school_events,
        cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        coalesce_inflight: bool = True,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._source = source
        self._parser = parser
        self._cache = cache
        self._normalizer = normalizer
        self._cache_ttl_seconds = cache_ttl_seconds
        self._coalesce_inflight = coalesce_inflight
        self._clock = clock or _utc_now
        self._inflight: dict[int, asyncio.Task[YearCacheEntry]] = {}

    async def execute(self, year: int, *, force: bool = False) -> SchoolEventsResult:
        """Retorna os eventos do ano.

        Args:
            year: Ano alvo.
            force: Ignora a validade do cache e sempre refaz o fetch.

        Raises:
            ConfigurationError: Upstream nao configurado.
            FetchError: Falha de rede/timeout/status do upstream.
        """
        cached = self._cache.get(year)
        if not force and cached is not None and cached.is_fresh(
            self._cache_ttl_seconds, self._clock()
        ):
            record_cache_result(year, "hit")
            logger.info(
                "school_events_cache_hit",
                extra={
                    "component": _COMPONENT,
                    "action": "execute",
                    "result": "cache",
                    "year": year,
                },
            )
            return SchoolEventsResult(
                source="cache",
                year=year,
                fetched_at=cached.fetched_at,
                events=cached.events,
            )

        reason: CacheResult
        if force:
            reason = "forced"
        elif cached is None:
            reason = "miss"
        else:
            reason = "stale"
        logger.info(
            "school_events_cache_miss",
            extra={"component": _COMPONENT, "action": "execute", "result": reason, "year": year},
        )

        entry = await self._refresh_coalesced(year, reason)
        return SchoolEventsResult(
            source="school",
            year=year,
            fetched_at=entry.fetched_at,
            events=entry.events,
        )

    async def execute_range(self, start: date, end: date) -> SchoolEventsRangeResult:
        """Garante cada ano entre start e end e junta os eventos em ordem de ano.

        Raises:
            ValueError: end anterior a start ou intervalo com anos demais.
        """
        if end < start:
            raise ValueError("end must not be earlier than start")
        years = list(range(start.year, end.year + 1))
        if len(years) > MAX_RANGE_YEARS:
            raise ValueError(f"range must span at most {MAX_RANGE_YEARS} years")

        results = await asyncio.gather(*(self.execute(year) for year in years))
        return SchoolEventsRangeResult(years=tuple(results))

    async def _refresh_coalesced(self, year: int, reason: CacheResult) -> YearCacheEntry:
        if not self._coalesce_inflight:
            record_cache_result(year, reason)
            return await self._refresh(year)

        task = self._inflight.get(year)
        if task is None:
            record_cache_result(year, reason)
            task = asyncio.create_task(self._refresh(year))
            self._inflight[year] = task
            task.add_done_callback(lambda done, y=year: self._forget_inflight(y, done))
        else:
            record_cache_result(year, "joined")
            logger.info(
                "school_events_inflight_joined",
                extra={"component": _COMPONENT, "action": "refresh", "result": "joined", "year": year},
            )
        # shield: uma requisicao cancelada nao derruba o fetch compartilhado
        return await asyncio.shield(task)

    def _forget_inflight(self, year: int, task: asyncio.Task[YearCacheEntry]) -> None:
        if self._inflight.get(year) is task:
            del self._inflight[year]
        if not task.cancelled() and task.exception() is not None:
            # task.exception() marca a excecao como recuperada
            logger.debug(
                "school_events_refresh_failed",
                extra={"component": _COMPONENT, "action": "refresh", "result": "error", "year": year},
            )

    async def _refresh(self, year: int) -> YearCacheEntry:
        """FETCH -> PARSE -> NORMALIZE -> CACHE_WRITE."""
        html = await self._source.fetch_year_html(year)

        started_at = time.perf_counter()
        parsed = self._parser.parse(html, year)
        normalized = [event for event in self._normalizer(parsed, year) if event is not None]
        record_latency(_COMPONENT, "parse_normalize", (time.perf_counter() - started_at) * 1000, year)
        record_event_counts(year, parsed=len(parsed), delivered=len(normalized))

        entry = self._cache.put(year, normalized)
        logger.info(
            "school_events_refreshed",
            extra={
                "component": _COMPONENT,
                "action": "refresh",
                "result": "ok",
                "year": year,
                "event_count": len(entry.events),
            },
        )
        return entry


__all__ = [
    "DEFAULT_CACHE_TTL_SECONDS",
    "MAX_RANGE_YEARS",
    "GetSchoolEventsUseCase",
    "SchoolEventsRangeResult",
    "SchoolEventsResult",
]

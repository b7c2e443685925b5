"""Contratos da ingestao do calendario escolar.

O caso de uso depende apenas destes protocolos; fetcher HTTP, parser
BeautifulSoup e cache em memoria sao plugados no bootstrap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.school_event import CalendarEvent, YearCacheEntry


@runtime_checkable
class ScheduleHtmlSourceProtocol(Protocol):
    """Fonte do HTML da pagina de calendario anual."""

    async def fetch_year_html(self, year: int) -> str:
        """Retorna o HTML bruto do ano.

        Raises:
            ConfigurationError: endpoint nao configurado.
            FetchError: timeout, erro de rede ou status nao-2xx.
        """
        ...


@runtime_checkable
class ScheduleParserProtocol(Protocol):
    """Converte HTML do calendario anual em eventos ainda nao normalizados."""

    def parse(self, html: str, year: int) -> list[CalendarEvent]: ...


@runtime_checkable
class YearCacheProtocol(Protocol):
    """Store passivo ano -> ultima lista de eventos; TTL fica com o chamador."""

    def get(self, year: int) -> YearCacheEntry | None: ...

    def put(self, year: int, events: Sequence[CalendarEvent]) -> YearCacheEntry: ...

"""Parser posicional da pagina de calendario anual.

Estrutura esperada do upstream:

    <div id="timeTableList" class="yearSchdul">
      <ul>
        <li>
          <h3>1월</h3>
          <dl>
            <dt><span>01-28 ~ 01-30</span></dt>
            <dd><a>설 연휴</a></dd>
          </dl>
        </li>
      </ul>
    </div>

O parse acontece em duas etapas: primeiro extraimos entradas brutas
(mes, rotulo de data, titulo) e depois validamos cada uma em
CalendarEvent. Qualquer lacuna estrutural vira "pular entrada"; o parser
so levanta erro quando recebe None no lugar do HTML.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from app.domain.school_event import SCHOOL_SCOPE, CalendarEvent, add_days, parse_iso_date
from app.protocols.school_calendar import ScheduleParserProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "year_schedule_parser"

CONTAINER_SELECTOR = "#timeTableList.yearSchdul"
DEFAULT_TITLE = "학사일정"

_MONTH_RE = re.compile(r"(\d{1,2})\s*월", re.ASCII)
_DATE_FRAGMENT_RE = re.compile(r"\b(\d{2})-(\d{2})\b", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class RawScheduleEntry:
    """Entrada extraida do DOM antes de qualquer validacao de data."""

    month: str
    date_label: str
    title: str


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def parse_month(heading_text: str) -> str | None:
    """Extrai o mes com zero a esquerda de um titulo como "1월"."""
    match = _MONTH_RE.search(heading_text)
    if not match:
        return None
    return match.group(1).zfill(2)


def find_day_fragments(date_label: str) -> list[str]:
    """Retorna os dias (DD) de cada fragmento MM-DD do rotulo, em ordem."""
    return [day for _, day in _DATE_FRAGMENT_RE.findall(date_label)]


def build_event_id(year: int, month: str, start_day: str, title: str) -> str:
    return _WHITESPACE_RE.sub("_", f"{SCHOOL_SCOPE}-{year}-{month}-{start_day}-{title}")


class YearScheduleParser(ScheduleParserProtocol):
    """Converte o HTML do calendario anual em CalendarEvent."""

    def parse(self, html: str, year: int) -> list[CalendarEvent]:
        """Parseia o HTML de um ano.

        Args:
            html: HTML bruto retornado pelo upstream.
            year: Ano alvo; compoe todas as datas geradas.

        Returns:
            Eventos na ordem do documento. Lista vazia se o container
            nao existir.

        Raises:
            TypeError: Se html for None.
        """
        if html is None:
            raise TypeError("html must not be None")

        entries = extract_raw_entries(html)
        events: list[CalendarEvent] = []
        skipped = 0
        for entry in entries:
            event = build_event(entry, year)
            if event is None:
                skipped += 1
                continue
            events.append(event)

        logger.info(
            "school_schedule_parsed",
            extra={
                "component": _COMPONENT,
                "action": "parse",
                "result": "ok" if entries else "empty",
                "year": year,
                "entry_count": len(entries),
                "event_count": len(events),
                "skipped_count": skipped,
            },
        )
        return events


def extract_raw_entries(html: str) -> list[RawScheduleEntry]:
    """Percorre o DOM e coleta (mes, rotulo, titulo) de cada dt/dd."""
    soup = BeautifulSoup(html, "html.parser")
    root = soup.select_one(CONTAINER_SELECTOR)
    if root is None:
        return []

    entries: list[RawScheduleEntry] = []
    for month_block in root.select("ul > li"):
        heading = month_block.find("h3")
        month = parse_month(heading.get_text()) if heading is not None else None
        if month is None:
            continue

        for dt in month_block.select("dl > dt"):
            date_label = collapse_whitespace(
                " ".join(span.get_text() for span in dt.find_all("span"))
            )
            entries.append(
                RawScheduleEntry(month=month, date_label=date_label, title=_extract_title(dt))
            )
    return entries


def build_event(entry: RawScheduleEntry, year: int) -> CalendarEvent | None:
    """Valida uma entrada bruta; None quando o rotulo nao forma uma data."""
    days = find_day_fragments(entry.date_label)
    if not days:
        return None

    start_day = days[0]
    start = f"{year:04d}-{entry.month}-{start_day}"
    if parse_iso_date(start) is None:
        return None

    end = None
    if len(days) >= 2:
        # Os dois fragmentos sao assumidos no mes do bloco; o fim e exclusivo.
        end = add_days(f"{year:04d}-{entry.month}-{days[1]}", 1)

    return CalendarEvent(
        id=build_event_id(year, entry.month, start_day, entry.title),
        title=entry.title,
        start=start,
        end=end,
        all_day=True,
        scope=SCHOOL_SCOPE,
    )


def _extract_title(dt: Tag) -> str:
    detail = dt.find_next_sibling()
    if detail is None or detail.name != "dd":
        return DEFAULT_TITLE
    anchor = detail.find("a")
    if anchor is None:
        return DEFAULT_TITLE
    return collapse_whitespace(anchor.get_text()) or DEFAULT_TITLE


__all__ = [
    "CONTAINER_SELECTOR",
    "DEFAULT_TITLE",
    "RawScheduleEntry",
    "YearScheduleParser",
    "build_event",
    "build_event_id",
    "extract_raw_entries",
    "find_day_fragments",
    "parse_month",
]

"""Fonte de HTML em memória para testes deterministas do use case."""

from __future__ import annotations

import asyncio


def build_year_page(year: int, entries: list[tuple[int, str, str]]) -> str:
    """Monta uma página yearSchdul mínima.

    Args:
        year: Apenas documental; o parser recebe o ano à parte.
        entries: (mês, rótulo de data, título) em ordem.
    """
    blocks: dict[int, list[str]] = {}
    for month, label, title in entries:
        blocks.setdefault(month, []).append(
            f"<dt><span>{label}</span></dt><dd><a href='#'>{title}</a></dd>"
        )
    items = "".join(
        f"<li><h3>{month}월</h3><dl>{''.join(rows)}</dl></li>" for month, rows in blocks.items()
    )
    return (
        f"<html><body><!-- {year} -->"
        f"<div id='timeTableList' class='yearSchdul'><ul>{items}</ul></div>"
        "</body></html>"
    )


class FakeScheduleSource:
    """Implementa ScheduleHtmlSourceProtocol sem IO.

    `gate` permite segurar o fetch para simular requisições concorrentes.
    """

    def __init__(
        self,
        pages: dict[int, str] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.pages = pages or {}
        self.error = error
        self.calls: list[int] = []
        self.gate: asyncio.Event | None = None

    async def fetch_year_html(self, year: int) -> str:
        self.calls.append(year)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.pages.get(year, "<html></html>")

"""Fetcher HTTP da pagina de calendario anual (yearSchdul.do).

Uma unica requisicao por chamada, sem retry: qualquer falha sobe para o
caso de uso como FetchError.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import httpx

from app.observability import record_latency
from app.protocols.school_calendar import ScheduleHtmlSourceProtocol
from utils.errors import ConfigurationError, FetchError

if TYPE_CHECKING:
    from config.settings import SchoolCalendarSettings

logger = logging.getLogger(__name__)

_COMPONENT = "year_schedule_fetcher"
_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"


class YearScheduleFetcher(ScheduleHtmlSourceProtocol):
    """Busca o HTML do calendario de um ano via GET (query) ou POST (form)."""

    def __init__(
        self,
        settings: SchoolCalendarSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._http_client = http_client

    async def fetch_year_html(self, year: int) -> str:
        """Executa a requisicao e retorna o corpo como texto.

        Args:
            year: Ano enviado como parametro `year`.

        Returns:
            HTML bruto da resposta.

        Raises:
            ConfigurationError: URL vazia ou com placeholder.
            FetchError: Timeout, erro de rede ou status nao-2xx.
        """
        if not self._settings.is_configured:
            logger.error(
                "school_schedule_url_not_configured",
                extra={"component": _COMPONENT, "action": "fetch", "result": "config_error"},
            )
            raise ConfigurationError(
                "SCHOOL_SCHEDULE_URL precisa apontar para a URL real de yearSchdul.do."
            )

        started_at = time.perf_counter()
        try:
            if self._http_client is not None:
                response = await self._send(self._http_client, year)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._send(client, year)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            self._log_failure(year, "timeout")
            raise FetchError(
                f"timeout of {self._settings.request_timeout_seconds:g}s exceeded"
            ) from exc
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            self._log_failure(year, "http_status", status_code=status_code)
            raise FetchError(
                f"Request failed with status code {status_code}",
                status_code=status_code,
            ) from exc
        except httpx.HTTPError as exc:
            self._log_failure(year, type(exc).__name__)
            raise FetchError(str(exc) or type(exc).__name__) from exc

        latency_ms = (time.perf_counter() - started_at) * 1000
        record_latency(_COMPONENT, "fetch", latency_ms, year=year)
        logger.info(
            "school_schedule_fetched",
            extra={
                "component": _COMPONENT,
                "action": "fetch",
                "result": "ok",
                "year": year,
                "method": self._settings.request_method,
                "status_code": response.status_code,
                "body_length": len(response.text),
            },
        )
        return response.text

    async def _send(self, client: httpx.AsyncClient, year: int) -> httpx.Response:
        url = self._settings.schedule_url
        timeout = self._settings.request_timeout_seconds
        if self._settings.request_method == "GET":
            return await client.get(url, params={"year": str(year)}, timeout=timeout)
        return await client.post(
            url,
            data={"year": str(year)},
            headers={"Content-Type": _FORM_CONTENT_TYPE},
            timeout=timeout,
        )

    def _log_failure(self, year: int, reason: str, status_code: int | None = None) -> None:
        logger.warning(
            "school_schedule_fetch_failed",
            extra={
                "component": _COMPONENT,
                "action": "fetch",
                "result": "error",
                "year": year,
                "reason": reason,
                "status_code": status_code,
            },
        )


__all__ = ["YearScheduleFetcher"]

"""Settings da ingestao do calendario academico da instituicao.

Endpoint, metodo e TTL sao fixados no start do processo; nenhum deles
muda por requisicao.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

DEFAULT_SCHOOL_SCHEDULE_URL = "https://www.yju.ac.kr/schdulmanage/kr/3/yearSchdul.do"

# Token deixado no template de deploy enquanto o dominio real nao e informado.
SCHOOL_URL_PLACEHOLDER = "<학교도메인>"

RequestMethod = Literal["GET", "POST"]

VALID_REQUEST_METHODS = frozenset({"GET", "POST"})


@dataclass(frozen=True)
class SchoolCalendarSettings:
    """Configuracoes do crawler de calendario escolar.

    Attributes:
        schedule_url: URL da pagina yearSchdul.do que recebe o parametro year
        request_method: GET (year na query) ou POST (year em form)
        request_timeout_seconds: Timeout total da requisicao ao upstream
        cache_ttl_seconds: Idade maxima de uma entrada antes de refetch
        coalesce_inflight: Compartilha um fetch entre requisicoes do mesmo ano
        host: Interface de bind do servidor
        port: Porta do servidor HTTP
    """

    # Upstream
    schedule_url: str = DEFAULT_SCHOOL_SCHEDULE_URL
    request_method: RequestMethod = "POST"
    request_timeout_seconds: float = 15.0

    # Cache
    cache_ttl_seconds: int = 6 * 60 * 60
    coalesce_inflight: bool = True

    # Servidor
    host: str = "0.0.0.0"
    port: int = 4100

    @property
    def is_configured(self) -> bool:
        """Retorna True se o endpoint upstream foi definido de verdade."""
        url = self.schedule_url.strip()
        return bool(url) and SCHOOL_URL_PLACEHOLDER not in url

    def validate(self) -> list[str]:
        """Valida configuracoes minimas.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.is_configured:
            errors.append("SCHOOL_SCHEDULE_URL nao configurado")
        if self.request_method not in VALID_REQUEST_METHODS:
            errors.append(f"SCHOOL_SCHEDULE_METHOD invalido: {self.request_method}")
        if self.request_timeout_seconds <= 0:
            errors.append("SCHOOL_SCHEDULE_TIMEOUT_SECONDS deve ser positivo")
        if self.cache_ttl_seconds < 0:
            errors.append("SCHOOL_EVENTS_CACHE_TTL_SECONDS nao pode ser negativo")
        return errors


def _parse_bool(value: str) -> bool:
    """Converte texto de env em bool com o mesmo padrao dos outros settings."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_method(value: str) -> RequestMethod:
    return "GET" if value.strip().upper() == "GET" else "POST"


def _load_school_calendar_from_env() -> SchoolCalendarSettings:
    """Carrega SchoolCalendarSettings a partir de variaveis de ambiente."""
    return SchoolCalendarSettings(
        schedule_url=os.getenv("SCHOOL_SCHEDULE_URL", DEFAULT_SCHOOL_SCHEDULE_URL),
        request_method=_parse_method(os.getenv("SCHOOL_SCHEDULE_METHOD", "POST")),
        request_timeout_seconds=float(os.getenv("SCHOOL_SCHEDULE_TIMEOUT_SECONDS", "15")),
        cache_ttl_seconds=int(os.getenv("SCHOOL_EVENTS_CACHE_TTL_SECONDS", "21600")),
        coalesce_inflight=_parse_bool(os.getenv("SCHOOL_EVENTS_COALESCE_INFLIGHT", "true")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "4100")),
    )


@lru_cache(maxsize=1)
def get_school_calendar_settings() -> SchoolCalendarSettings:
    """Retorna instancia cacheada de SchoolCalendarSettings."""
    return _load_school_calendar_from_env()


__all__ = [
    "DEFAULT_SCHOOL_SCHEDULE_URL",
    "SCHOOL_URL_PLACEHOLDER",
    "RequestMethod",
    "SchoolCalendarSettings",
    "get_school_calendar_settings",
]

"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging e conecta as
implementações concretas (fetcher httpx, parser BeautifulSoup, cache em
memória) ao use case de eventos escolares.

Uso:
    from app.bootstrap import initialize_app, get_school_events_use_case

    initialize_app()
    use_case = get_school_events_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.infra.school.year_schedule_fetcher import YearScheduleFetcher
from app.infra.school.year_schedule_parser import YearScheduleParser
from app.infra.stores.year_cache import MemoryYearCache
from app.observability import get_correlation_id
from app.use_cases.school_events import GetSchoolEventsUseCase
from config.logging import configure_logging
from config.settings import get_base_settings, get_school_calendar_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(
        f"school_calendar: {error}" for error in get_school_calendar_settings().validate()
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_year_cache() -> MemoryYearCache:
    """Cache por ano compartilhado pelo processo."""
    return MemoryYearCache()


@lru_cache(maxsize=1)
def get_school_events_use_case() -> GetSchoolEventsUseCase:
    """Monta o use case com as dependências concretas."""
    settings = get_school_calendar_settings()
    return GetSchoolEventsUseCase(
        source=YearScheduleFetcher(settings),
        parser=YearScheduleParser(),
        cache=get_year_cache(),
        cache_ttl_seconds=settings.cache_ttl_seconds,
        coalesce_inflight=settings.coalesce_inflight,
    )


def reset_dependencies() -> None:
    """Descarta singletons e settings cacheados (uso em testes)."""
    get_school_events_use_case.cache_clear()
    get_year_cache.cache_clear()
    get_school_calendar_settings.cache_clear()
    get_base_settings.cache_clear()


__all__ = [
    "get_school_events_use_case",
    "get_year_cache",
    "initialize_app",
    "reset_dependencies",
    "validate_runtime_settings",
]

"""Métricas da ingestão registradas como logs estruturados.

Os logs podem ser agregados depois (Cloud Logging, BigQuery etc.).

Métricas suportadas:
- Latência: tempo de fetch/parse por ano
- Cache: resultado da consulta ao cache por ano (hit, miss, stale, forced, joined)
- Volume: eventos parseados vs. eventos entregues após normalização

Uso:
    from app.observability.metrics import record_latency, record_cache_result

    start = time.perf_counter()
    # ... operação ...
    record_latency("year_schedule_fetcher", "fetch", (time.perf_counter() - start) * 1000)
    record_cache_result(2025, "hit")
"""

from __future__ import annotations

import logging
from typing import Literal

logger = logging.getLogger(__name__)

CacheResult = Literal["hit", "miss", "stale", "forced", "joined"]


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    year: int | None = None,
) -> None:
    """Registra latência de uma operação.

    Args:
        component: Nome do componente (ex: "year_schedule_fetcher")
        operation: Nome da operação (ex: "fetch", "parse")
        latency_ms: Latência em milissegundos
        year: Ano consultado, quando aplicável
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "year": year,
        },
    )


def record_cache_result(year: int, result: CacheResult) -> None:
    """Registra o desfecho da consulta ao cache de um ano."""
    logger.info(
        "metric_cache",
        extra={
            "metric_type": "cache",
            "component": "school_events_cache",
            "year": year,
            "result": result,
        },
    )


def record_event_counts(year: int, parsed: int, delivered: int) -> None:
    """Registra quantos eventos o parser gerou e quantos sobreviveram à normalização."""
    logger.info(
        "metric_event_counts",
        extra={
            "metric_type": "event_counts",
            "component": "school_events",
            "year": year,
            "parsed": parsed,
            "delivered": delivered,
            "dropped": parsed - delivered,
        },
    )

"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - year_cache: Cache em memória de eventos por ano
"""

from __future__ import annotations

from app.infra.stores.year_cache import MemoryYearCache

__all__ = [
    "MemoryYearCache",
]

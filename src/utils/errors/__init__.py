"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    FetchError,
    SchoolCalendarError,
)

__all__ = [
    "ConfigurationError",
    "FetchError",
    "SchoolCalendarError",
]

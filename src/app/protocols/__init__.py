"""Protocolos e contratos do core da aplicação."""

from .school_calendar import (
    ScheduleHtmlSourceProtocol,
    ScheduleParserProtocol,
    YearCacheProtocol,
)

__all__ = [
    "ScheduleHtmlSourceProtocol",
    "ScheduleParserProtocol",
    "YearCacheProtocol",
]

"""Use cases de eventos do calendário escolar."""

from .get_school_events import (
    MAX_RANGE_YEARS,
    GetSchoolEventsUseCase,
    SchoolEventsRangeResult,
    SchoolEventsResult,
)

__all__ = [
    "MAX_RANGE_YEARS",
    "GetSchoolEventsUseCase",
    "SchoolEventsRangeResult",
    "SchoolEventsResult",
]

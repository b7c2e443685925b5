"""Testes dos modelos de domínio do calendário escolar."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.domain.school_event import (
    CalendarEvent,
    YearCacheEntry,
    add_days,
    parse_iso_date,
    to_iso_timestamp,
)


class TestCalendarEvent:
    """Testes de CalendarEvent."""

    def test_payload_uses_camel_case_all_day(self) -> None:
        event = CalendarEvent(id="SCHOOL-2025-03-02-개강", title="개강", start="2025-03-02")
        assert event.to_payload() == {
            "id": "SCHOOL-2025-03-02-개강",
            "title": "개강",
            "start": "2025-03-02",
            "end": None,
            "allDay": True,
            "scope": "SCHOOL",
        }

    def test_accepts_alias_on_input(self) -> None:
        event = CalendarEvent.model_validate(
            {"id": "x", "title": "t", "start": "2025-03-02", "allDay": True}
        )
        assert event.all_day is True

    @pytest.mark.parametrize("start", ["2025-3-2", "03-02", "2025/03/02"])
    def test_rejects_malformed_start(self, start: str) -> None:
        with pytest.raises(ValidationError):
            CalendarEvent(id="x", title="t", start=start)


class TestYearCacheEntry:
    """Testes de frescor da entrada de cache."""

    def test_is_fresh_within_ttl(self) -> None:
        fetched_at = datetime(2025, 3, 2, 9, 0, tzinfo=UTC)
        entry = YearCacheEntry(events=(), fetched_at=fetched_at)

        assert entry.is_fresh(3600, now=fetched_at + timedelta(minutes=59)) is True
        assert entry.is_fresh(3600, now=fetched_at + timedelta(hours=1)) is False


class TestDateHelpers:
    """Testes dos helpers de data."""

    def test_add_days_rolls_over_month_and_year(self) -> None:
        assert add_days("2025-01-31", 1) == "2025-02-01"
        assert add_days("2025-12-31", 1) == "2026-01-01"
        assert add_days("2024-02-28", 1) == "2024-02-29"

    def test_invalid_dates(self) -> None:
        assert parse_iso_date("2025-02-30") is None
        assert parse_iso_date(None) is None
        assert add_days("2025-02-30", 1) is None

    def test_to_iso_timestamp_is_utc_with_millis(self) -> None:
        moment = datetime(2025, 3, 2, 18, 30, 5, 123456, tzinfo=timezone(timedelta(hours=9)))
        assert to_iso_timestamp(moment) == "2025-03-02T09:30:05.123Z"

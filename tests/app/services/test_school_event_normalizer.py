"""Testes da normalização de eventos escolares."""

from __future__ import annotations

import pytest

from app.domain.school_event import CalendarEvent
from app.services.school_event_normalizer import (
    fix_invalid_end,
    normalize_school_events,
    normalize_season_start_only,
)


def _event(title: str, start: str, end: str | None = None) -> CalendarEvent:
    return CalendarEvent(
        id=f"SCHOOL-{start}-{title}".replace(" ", "_"),
        title=title,
        start=start,
        end=end,
    )


class TestFixInvalidEnd:
    """Regra do fim invertido."""

    def test_reversed_end_is_dropped(self) -> None:
        event = fix_invalid_end(_event("중간고사", "2025-04-20", "2025-04-18"))
        assert event is not None
        assert event.end is None
        assert event.start == "2025-04-20"

    def test_end_equal_to_start_is_dropped(self) -> None:
        event = fix_invalid_end(_event("보강", "2025-04-20", "2025-04-20"))
        assert event is not None
        assert event.end is None

    def test_valid_end_is_kept(self) -> None:
        original = _event("기말고사", "2025-06-16", "2025-06-21")
        assert fix_invalid_end(original) is original

    def test_none_passes_through(self) -> None:
        assert fix_invalid_end(None) is None


class TestSeasonStartOnly:
    """Regra dos títulos de temporada que só publicam o início."""

    def test_winter_break_becomes_start_marker(self) -> None:
        event = normalize_season_start_only(_event("동계방학", "2025-12-20"))
        assert event is not None
        assert event.end == "2025-12-21"
        assert event.title == "동계방학 (시작)"
        assert event.all_day is True

    @pytest.mark.parametrize(
        "title",
        ["하계방학", "동계 계절수업 기간", "하계 계절수업 기간", "  하계방학  "],
    )
    def test_all_season_titles_are_recognized(self, title: str) -> None:
        event = normalize_season_start_only(_event(title, "2025-06-23", "2025-08-30"))
        assert event is not None
        assert event.end == "2025-06-24"
        assert event.title == f"{title.strip()} (시작)"

    def test_other_titles_are_untouched(self) -> None:
        original = _event("동계방학식", "2025-12-19")
        assert normalize_season_start_only(original) is original

    def test_id_is_preserved(self) -> None:
        original = _event("동계방학", "2025-12-20")
        event = normalize_season_start_only(original)
        assert event is not None
        assert event.id == original.id


class TestNormalizeSchoolEvents:
    """Pipeline completo da normalização."""

    def test_second_new_year_truncates_rest_of_list(self) -> None:
        events = [
            _event("신정", "2025-01-01", "2025-01-02"),
            _event("개강", "2025-03-02"),
            _event("신정", "2025-01-01", "2025-01-02"),
            _event("어린이날", "2025-05-05"),
            _event("신정", "2025-01-01", "2025-01-02"),
        ]

        result = normalize_school_events(events, 2025)

        assert [e.title for e in result if e] == ["신정", "개강"]

    def test_new_year_of_other_year_is_not_counted(self) -> None:
        events = [
            _event("신정", "2025-01-01"),
            _event("신정", "2026-01-01"),
            _event("종강", "2025-06-20"),
        ]
        result = normalize_school_events(events, 2025)
        assert len(result) == 3

    def test_rules_apply_in_place_and_keep_order(self) -> None:
        events = [
            _event("동계방학", "2025-12-20"),
            _event("보강", "2025-04-20", "2025-04-10"),
            _event("기말고사", "2025-06-16", "2025-06-21"),
        ]

        result = normalize_school_events(events, 2025)

        assert [e.title for e in result if e] == ["동계방학 (시작)", "보강", "기말고사"]
        assert result[1] is not None and result[1].end is None
        assert result[2] is not None and result[2].end == "2025-06-21"

    def test_normalization_is_idempotent(self) -> None:
        events = [
            _event("신정", "2025-01-01", "2025-01-02"),
            _event("하계방학", "2025-06-23"),
            _event("보강", "2025-04-20", "2025-04-10"),
            _event("신정", "2025-01-01", "2025-01-02"),
        ]

        once = normalize_school_events(events, 2025)
        twice = normalize_school_events(once, 2025)

        assert twice == once

    def test_end_strictly_follows_start_after_normalization(self) -> None:
        events = [
            _event("a", "2025-03-10", "2025-03-09"),
            _event("b", "2025-03-10", "2025-03-10"),
            _event("c", "2025-03-10", "2025-03-11"),
        ]
        for event in normalize_school_events(events, 2025):
            assert event is not None
            assert event.end is None or event.end > event.start

    def test_none_input_and_none_events(self) -> None:
        assert normalize_school_events(None, 2025) == []
        assert normalize_school_events([None], 2025) == [None]

    def test_input_list_is_not_mutated(self) -> None:
        events = [_event("동계방학", "2025-12-20")]
        normalize_school_events(events, 2025)
        assert events[0].title == "동계방학"

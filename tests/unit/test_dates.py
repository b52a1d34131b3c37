"""Unit tests for show date parsing, filtering and ordering."""

from datetime import date, datetime, timezone
from unittest.mock import patch

from showfeed.feed.dates import (
    _parse_month_day_year,
    attach_dates,
    filter_upcoming,
    parse_show_date,
    sort_by_date,
    today,
)
from showfeed.feed.models import ShowRecord

TODAY = date(2025, 6, 1)
FAR_TODAY = date(2030, 1, 1)  # a Tuesday


class FrozenDatetime(datetime):
    """Clock fixed at 2025-06-01 23:30 UTC."""

    @classmethod
    def now(cls, tz=None):
        return datetime(2025, 6, 1, 23, 30, tzinfo=timezone.utc).astimezone(tz)


def make_show(show_date: str, venue: str = "Venue") -> ShowRecord:
    return ShowRecord(date=show_date, time="8pm", venue=venue, city="City")


def dates_of(dated: list) -> list[str]:
    return [show.date for show, _ in dated]


class TestParseShowDate:
    def test_parses_long_form_date(self) -> None:
        assert parse_show_date("May 31, 2025") == datetime(2025, 5, 31)

    def test_parses_iso_date(self) -> None:
        assert parse_show_date("2025-12-05") == datetime(2025, 12, 5)

    def test_parses_us_slash_date_as_month_first(self) -> None:
        assert parse_show_date("11/15/2025") == datetime(2025, 11, 15)

    def test_drops_timezone(self) -> None:
        parsed = parse_show_date("2025-12-05T20:00:00+01:00")
        assert parsed == datetime(2025, 12, 5, 20, 0)
        assert parsed.tzinfo is None

    def test_returns_none_for_garbage(self) -> None:
        assert parse_show_date("not-a-date") is None

    def test_returns_none_for_empty_text(self) -> None:
        assert parse_show_date("   ") is None

    def test_fills_missing_year_from_supplied_today(self) -> None:
        assert parse_show_date("Dec 5", FAR_TODAY) == datetime(2030, 12, 5)

    def test_fills_missing_day_from_supplied_today(self) -> None:
        assert parse_show_date("August 2025", FAR_TODAY) == datetime(2025, 8, 1)

    def test_counts_weekday_forward_from_supplied_today(self) -> None:
        assert parse_show_date("Friday", FAR_TODAY) == datetime(2030, 1, 4)

    def test_attach_dates_uses_supplied_today(self) -> None:
        dated = attach_dates([make_show("Dec 5")], FAR_TODAY)
        assert dated[0][1] == datetime(2030, 12, 5)


class TestToday:
    def test_takes_date_in_named_zone(self) -> None:
        with patch("showfeed.feed.dates.datetime", FrozenDatetime):
            assert today("Asia/Tokyo") == date(2025, 6, 2)
            assert today("America/Los_Angeles") == date(2025, 6, 1)

    def test_uses_local_date_without_zone(self) -> None:
        assert today() == date.today()


class TestMonthDayYearFallback:
    def test_builds_date_from_three_parts(self) -> None:
        assert _parse_month_day_year("12/05/2025") == datetime(2025, 12, 5)

    def test_uses_leading_integer_of_each_part(self) -> None:
        assert _parse_month_day_year("12/5/2025 (Fri)") == datetime(2025, 12, 5)

    def test_requires_exactly_three_parts(self) -> None:
        assert _parse_month_day_year("12/2025") is None
        assert _parse_month_day_year("1/2/3/4") is None

    def test_rejects_non_numeric_part(self) -> None:
        assert _parse_month_day_year("Dec/05/2025") is None

    def test_rejects_impossible_date(self) -> None:
        assert _parse_month_day_year("13/45/2025") is None


class TestFilterUpcoming:
    def test_drops_past_and_keeps_future(self) -> None:
        dated = attach_dates([make_show("2025-05-31"), make_show("2025-12-05")])
        assert dates_of(filter_upcoming(dated, TODAY)) == ["2025-12-05"]

    def test_keeps_show_dated_today_regardless_of_time(self) -> None:
        dated = attach_dates([make_show("2025-06-01 10:00")])
        assert dates_of(filter_upcoming(dated, TODAY)) == ["2025-06-01 10:00"]

    def test_keeps_unparsable_date(self) -> None:
        dated = attach_dates([make_show("not-a-date")])
        assert dates_of(filter_upcoming(dated, TODAY)) == ["not-a-date"]

    def test_keeps_show_without_date(self) -> None:
        dated = attach_dates([make_show("")])
        assert len(filter_upcoming(dated, TODAY)) == 1


class TestSortByDate:
    def test_orders_earliest_first(self) -> None:
        dated = attach_dates([make_show("2025-12-05"), make_show("2025-11-15")])
        assert dates_of(sort_by_date(dated)) == ["2025-11-15", "2025-12-05"]

    def test_puts_unparsable_dates_last(self) -> None:
        dated = attach_dates(
            [make_show("not-a-date"), make_show("2025-12-05"), make_show("2025-11-15")]
        )
        assert dates_of(sort_by_date(dated)) == ["2025-11-15", "2025-12-05", "not-a-date"]

    def test_keeps_relative_order_of_unparsable_dates(self) -> None:
        dated = attach_dates(
            [
                make_show("TBA", venue="first"),
                make_show("2025-12-05"),
                make_show("TBA", venue="second"),
            ]
        )
        venues = [show.venue for show, _ in sort_by_date(dated)]
        assert venues == ["Venue", "first", "second"]

    def test_uses_time_of_day_within_a_date(self) -> None:
        dated = attach_dates([make_show("2025-12-05 21:00"), make_show("2025-12-05 19:00")])
        assert dates_of(sort_by_date(dated)) == ["2025-12-05 19:00", "2025-12-05 21:00"]

    def test_does_not_reintroduce_filtered_shows(self) -> None:
        dated = attach_dates([make_show("2025-05-31"), make_show("2025-12-05")])
        assert dates_of(sort_by_date(filter_upcoming(dated, TODAY))) == ["2025-12-05"]

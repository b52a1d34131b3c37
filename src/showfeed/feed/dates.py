"""Date handling for the show feed: parsing, upcoming filter, ordering."""

import logging
import re
from collections.abc import Iterable
from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

from showfeed.feed.models import ShowRecord

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# (record, parsed date) pairs; None marks a date that could not be parsed
DatedShow = tuple[ShowRecord, datetime | None]


def today(tz_name: str = "") -> date:
    """Current calendar date, in ``tz_name`` when given, else local time."""
    if tz_name:
        return datetime.now(ZoneInfo(tz_name)).date()
    return date.today()


def parse_show_date(text: str, today_date: date | None = None) -> datetime | None:
    """
    Parse free-form date text from the sheet.

    Tries a general-purpose parse first ("May 31, 2025", "2025-12-05",
    "Fri 5 Dec 2025 8pm"), then falls back to MM/DD/YYYY built from the
    leading integer of each slash-separated part.

    Missing parts ("Dec 5", "August 2025") are filled from ``today_date``
    rather than the clock, so the same text always parses the same way for
    a given run.

    Returns:
        Naive datetime, or None if the text could not be parsed
    """
    text = text.strip()
    if not text:
        return None

    try:
        parsed = date_parser.parse(text, default=_parse_default(today_date))
    except (ValueError, OverflowError):
        parsed = _parse_month_day_year(text)

    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.replace(tzinfo=None)
    return parsed


def _parse_default(today_date: date | None) -> datetime | None:
    if today_date is None:
        return None
    # dateutil takes missing fields from here, and counts weekdays forward from it
    return datetime.combine(today_date, time.min)


def _parse_month_day_year(text: str) -> datetime | None:
    parts = text.split("/")
    if len(parts) != 3:
        return None

    numbers = []
    for part in parts:
        match = _LEADING_INT.match(part)
        if not match:
            return None
        numbers.append(int(match.group(1)))

    month, day, year = numbers
    try:
        return datetime(year, month, day)
    except ValueError:
        return None


def attach_dates(
    shows: Iterable[ShowRecord], today_date: date | None = None
) -> list[DatedShow]:
    """Parse every show's date once, logging the ones that cannot be parsed."""
    dated: list[DatedShow] = []
    for show in shows:
        parsed = parse_show_date(show.date, today_date)
        if parsed is None:
            logger.warning(f"Could not parse date: {show.date!r}")
        dated.append((show, parsed))
    return dated


def filter_upcoming(dated: Iterable[DatedShow], on_or_after: date) -> list[DatedShow]:
    """
    Keep shows dated on or after ``on_or_after``.

    Shows whose date could not be parsed are kept: better to show a
    badly-typed date than to hide a gig.
    """
    return [
        (show, parsed)
        for show, parsed in dated
        if parsed is None or parsed.date() >= on_or_after
    ]


def sort_by_date(dated: Iterable[DatedShow]) -> list[DatedShow]:
    """
    Order shows earliest first.

    Unparsable dates go after every parsable one and keep their relative
    order (the sort is stable).
    """
    return sorted(
        dated,
        key=lambda item: (item[1] is None, item[1] or datetime.min),
    )

"""Print the upcoming show list from the live feed or a local CSV export."""

import argparse
import asyncio
import logging
import sys
from datetime import date
from pathlib import Path

from showfeed.config import settings
from showfeed.feed.client import ShowFeedClient
from showfeed.feed.models import COLUMN_LAYOUTS, ShowRecord
from showfeed.feed.parser import ShowFeedParser


def load_shows(
    url: str | None,
    file: Path | None,
    today_date: date | None,
    columns: int,
) -> list[ShowRecord]:
    """Parse ``file`` if given, otherwise fetch from ``url`` (or settings)."""
    parser = ShowFeedParser(expected_columns=columns, timezone=settings.timezone)
    if file is not None:
        return parser.parse(file.read_text(encoding="utf-8"), today_date)

    client = ShowFeedClient(url=url, parser=parser)
    return asyncio.run(client.get_upcoming_shows(today_date))


def print_shows(shows: list[ShowRecord]) -> None:
    """Print one line per show followed by a count."""
    if not shows:
        print("No shows currently scheduled.")
        return

    for show in shows:
        when = f"{show.date} {show.time}".strip()
        where = ", ".join(part for part in (show.venue, show.city) if part)
        line = f"  {when:<30} {where}"
        if show.tickets_url:
            line += f"  {show.tickets_url}"
        print(line)

    print()
    print(f"{len(shows)} show{'s' if len(shows) != 1 else ''}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Print upcoming shows from the spreadsheet feed."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", help="Feed URL (default: SHOWS_CSV_URL)")
    source.add_argument("--file", type=Path, metavar="PATH", help="Local CSV export to parse")
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        metavar="YYYY-MM-DD",
        help="Date to filter against (default: today)",
    )
    parser.add_argument(
        "--columns",
        type=int,
        choices=sorted(COLUMN_LAYOUTS),
        default=settings.expected_columns,
        help=f"Feed column count (default: {settings.expected_columns})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log feed diagnostics")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    shows = load_shows(args.url, args.file, args.today, args.columns)
    print_shows(shows)
    sys.exit(0 if shows else 1)


if __name__ == "__main__":
    main()

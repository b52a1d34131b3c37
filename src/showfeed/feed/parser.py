"""Show feed pipeline: raw CSV text in, ordered upcoming shows out."""

import logging
from datetime import date

from showfeed.feed.dates import attach_dates, filter_upcoming, sort_by_date, today
from showfeed.feed.mapper import row_to_record
from showfeed.feed.models import RowRejected, ShowRecord, get_layout
from showfeed.feed.tokenizer import split_line

logger = logging.getLogger(__name__)


class ShowFeedParser:
    """
    Turn a spreadsheet CSV export into the list of shows to display.

    The first line is a header; each following line is one show. Bad rows are
    skipped individually, past shows are dropped, and the rest are returned
    earliest first.
    """

    def __init__(
        self,
        expected_columns: int = 5,
        delimiter: str = ",",
        timezone: str = "",
    ) -> None:
        """
        Initialize the parser.

        Args:
            expected_columns: 5 for date/time/venue/city/tickets, 4 for the
                legacy sheet without a time column
            delimiter: Field separator
            timezone: IANA zone deciding what "today" is (empty = local time)
        """
        self.layout = get_layout(expected_columns)
        if len(delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        self.delimiter = delimiter
        self.timezone = timezone

    def parse(self, text: str, today_date: date | None = None) -> list[ShowRecord]:
        """
        Parse feed text into upcoming shows.

        Args:
            text: Full feed text, header line first
            today_date: Date to filter against (defaults to today)

        Returns:
            Shows dated today or later (plus undated/unparsable ones), sorted
            earliest first. Empty when the feed has no data rows.
        """
        # Only "\n" ends a row; a trailing "\r" is trimmed with the last field
        lines = text.strip().split("\n")
        if len(lines) < 2:
            logger.info("Feed has no data rows, nothing scheduled")
            return []

        self._check_header(lines[0])

        shows = self.parse_rows(lines[1:])
        on_or_after = today_date or today(self.timezone)

        dated = filter_upcoming(attach_dates(shows, on_or_after), on_or_after)
        upcoming = [show for show, _ in sort_by_date(dated)]

        logger.info(
            f"Feed: {len(upcoming)} upcoming of {len(shows)} valid rows "
            f"({len(lines) - 1} data lines)"
        )
        return upcoming

    def parse_rows(self, lines: list[str]) -> list[ShowRecord]:
        """Map data lines onto ShowRecords, skipping blank and malformed rows."""
        shows: list[ShowRecord] = []
        # Line numbers are 1-based and count the header
        for line_number, line in enumerate(lines, start=2):
            if not line.strip():
                logger.debug(f"Feed line {line_number}: blank, skipped")
                continue

            fields = split_line(line, self.delimiter)
            try:
                shows.append(row_to_record(fields, self.layout))
            except RowRejected as e:
                logger.warning(
                    f"Feed line {line_number}: skipped ({e.reason}, "
                    f"expected {len(self.layout)} fields, got {len(fields)}): {line!r}"
                )

        return shows

    def _check_header(self, header_line: str) -> None:
        headers = split_line(header_line, self.delimiter)
        logger.debug(f"Feed headers: {headers}")
        if len(headers) != len(self.layout):
            logger.warning(
                f"Feed header has {len(headers)} columns but {len(self.layout)} are "
                f"expected ({', '.join(self.layout)}); rows are mapped by position"
            )

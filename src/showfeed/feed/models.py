"""Data models for the show feed."""

from dataclasses import dataclass

# Column order of the spreadsheet, keyed by column count
STANDARD_COLUMNS: tuple[str, ...] = ("date", "time", "venue", "city", "tickets_url")
LEGACY_COLUMNS: tuple[str, ...] = ("date", "venue", "city", "tickets_url")

COLUMN_LAYOUTS: dict[int, tuple[str, ...]] = {
    len(STANDARD_COLUMNS): STANDARD_COLUMNS,
    len(LEGACY_COLUMNS): LEGACY_COLUMNS,
}


def get_layout(expected_columns: int) -> tuple[str, ...]:
    """Return the column layout for a feed with the given column count."""
    try:
        return COLUMN_LAYOUTS[expected_columns]
    except KeyError:
        supported = ", ".join(str(n) for n in sorted(COLUMN_LAYOUTS))
        raise ValueError(
            f"Unsupported column count {expected_columns} (supported: {supported})"
        ) from None


@dataclass(frozen=True)
class ShowRecord:
    """
    One upcoming show as listed in the feed.

    All fields are display text exactly as entered in the sheet (trimmed and
    unquoted). ``date`` is free-form; it is only parsed transiently to filter
    and order the list.
    """

    date: str = ""
    time: str = ""
    venue: str = ""
    city: str = ""
    tickets_url: str = ""

    def is_empty(self) -> bool:
        """True when none of date, time, venue or city carries any text."""
        return not (self.date or self.time or self.venue or self.city)


class RowRejected(ValueError):
    """Raised when a feed row cannot be turned into a ShowRecord."""

    def __init__(self, reason: str, fields: list[str] | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.fields = fields or []

"""Map tokenized feed rows onto ShowRecords."""

from collections.abc import Sequence

from showfeed.feed.models import STANDARD_COLUMNS, RowRejected, ShowRecord


def row_to_record(
    fields: Sequence[str], layout: Sequence[str] = STANDARD_COLUMNS
) -> ShowRecord:
    """
    Build a ShowRecord from one tokenized row.

    Fields are assigned positionally following ``layout``; extra trailing
    fields are ignored and columns absent from the layout stay empty.

    Raises:
        RowRejected: if the row is shorter than the layout, or if date, time,
            venue and city are all empty
    """
    if len(fields) < len(layout):
        raise RowRejected("insufficient fields", list(fields))

    values = {column: (fields[index] or "").strip() for index, column in enumerate(layout)}
    record = ShowRecord(**values)

    if record.is_empty():
        raise RowRejected("all fields empty", list(fields))

    return record

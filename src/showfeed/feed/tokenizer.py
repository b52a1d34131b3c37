"""Delimited-line tokenizer for spreadsheet CSV exports."""

QUOTE = '"'


def split_line(line: str, delimiter: str = ",") -> list[str]:
    """
    Split one line of delimited text into fields.

    Delimiters inside a double-quoted field are literal content, and a doubled
    quote inside a quoted field stands for one literal quote. Every field is
    trimmed, and one surrounding pair of quotes is removed if still present.

    Examples:
        '"May 31, 2025",7pm,Venue,City,http://x'
            → ["May 31, 2025", "7pm", "Venue", "City", "http://x"]
        '"Joe ""The Rock"" Smith"'  →  ['Joe "The Rock" Smith']
        "a,b,"  →  ["a", "b", ""]

    Args:
        line: A single line of text without line breaks
        delimiter: Single-character field separator

    Returns:
        Ordered list of field strings (never empty)
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        char = line[i]
        if char == QUOTE:
            if in_quotes and i + 1 < len(line) and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1  # skip the second quote of the pair
            else:
                in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append(_clean_field("".join(current)))
            current = []
        else:
            current.append(char)
        i += 1

    # The last field is always emitted, so "a,b," keeps its trailing ""
    fields.append(_clean_field("".join(current)))
    return fields


def _clean_field(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == QUOTE and value[-1] == QUOTE:
        value = value[1:-1]
    return value

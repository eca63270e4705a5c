"""Minimal CSV reading for the catalog tables.

Not a general RFC 4180 parser: quote characters only toggle whether commas
split fields and are dropped from the output. Escaped quotes ("") and
multi-line fields are not supported.
"""

from __future__ import annotations

from typing import BinaryIO, Callable, TypeVar

from gourmand.domain.errors import DataLoadError

T = TypeVar("T")

SEPARATOR = ","
QUOTE = '"'


def read_csv(
    stream: BinaryIO,
    mapper: Callable[[list[str]], T],
    skip_header: bool = True,
) -> list[T]:
    """
    Read a UTF-8 CSV stream and map each data row.

    Blank lines are skipped. Exceptions raised by the mapper propagate
    unchanged so the caller can attach row context.

    Args:
        stream: Binary stream positioned at the start of the table
        mapper: Converts the parsed columns of one row
        skip_header: Drop the first line before mapping

    Returns:
        Mapped rows in file order

    Raises:
        DataLoadError: If the stream cannot be read/decoded or has no lines
    """
    try:
        text = stream.read().decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError("Failed to read CSV data") from exc

    lines = text.splitlines()
    if not lines:
        raise DataLoadError("CSV data is empty")

    if skip_header:
        lines = lines[1:]

    rows = (parse_line(line) for line in lines)
    return [mapper(columns) for columns in rows if columns is not None]


def parse_line(line: str) -> list[str] | None:
    """
    Split one CSV line into trimmed fields.

    Returns:
        Field values, or None for a blank line
    """
    if not line.strip():
        return None

    values: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == SEPARATOR and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    values.append("".join(current).strip())

    return [_clean_value(value) for value in values]


def _clean_value(value: str) -> str:
    cleaned = value.strip()
    if len(cleaned) >= 2 and cleaned.startswith(QUOTE) and cleaned.endswith(QUOTE):
        cleaned = cleaned[1:-1].strip()
    return cleaned

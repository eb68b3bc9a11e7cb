"""Parsing layer turning delimited text into headers and rows."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Union

from .errors import MalformedRowError

RawInput = Union[str, bytes]

ENCODINGS = ("utf-8-sig", "utf-8", "cp1252", "latin-1")

LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass
class ParseConfig:
    """Configuration for splitting raw text into cells."""

    delimiter: str = ","

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ValueError("Delimiter must be a non-empty string")


@dataclass
class ParsedTable:
    """Headers and rows produced by :func:`parse_table`."""

    headers: List[str]
    rows: List[List[Any]] = field(default_factory=list)


def decode(raw: RawInput) -> str:
    """Return ``raw`` as text, trying the common CSV encodings for bytes."""

    if isinstance(raw, str):
        return raw
    for encoding in ENCODINGS:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    # latin-1 maps every byte, so the loop always returns before this point.
    raise ValueError("Unable to decode input with any supported encoding")


def load_text(path: Path) -> str:
    """Read a delimited text file from disk."""

    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return decode(path.read_bytes())


def split_lines(text: str) -> List[str]:
    """Split on CR, LF or CRLF only; a trailing break adds no line."""

    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def split_line(line: str, delimiter: str) -> List[str]:
    return [cell.strip() for cell in line.split(delimiter)]


def parse_table(raw: RawInput, config: ParseConfig, logger: logging.Logger) -> ParsedTable:
    """Split ``raw`` into a header line and data rows.

    The first line holds the column names. Every following line becomes one
    row of trimmed string cells. A trailing line break ends the last record
    without adding a row, but blank lines inside the body are kept as a row
    with a single empty cell and must therefore match the header count.

    Args:
        raw: Delimited text, or bytes in one of :data:`ENCODINGS`.
        config: Delimiter settings.
        logger: Logger supplied by the caller.

    Returns:
        ParsedTable with one row per data line.

    Raises:
        MalformedRowError: Input is empty or a row has the wrong cell count.
    """

    text = decode(raw)
    lines = split_lines(text)
    logger.info("Parsing %d lines with delimiter %r", len(lines), config.delimiter)
    if not lines:
        raise MalformedRowError(1, 0, 0, message="line 1: missing header line")

    headers = split_line(lines[0], config.delimiter)
    rows: List[List[Any]] = []
    for line_number, line in enumerate(lines[1:], start=2):
        row = split_line(line, config.delimiter)
        if len(row) != len(headers):
            raise MalformedRowError(line_number, len(headers), len(row))
        rows.append(row)

    logger.debug("Parsed headers: %s", headers)
    logger.info("Parsing complete: %d columns, %d rows", len(headers), len(rows))
    return ParsedTable(headers=headers, rows=rows)


def parse_number(value: Any) -> Union[int, float]:
    """Convert a cell to ``int`` when it is integral, else to ``float``.

    Numbers pass through unchanged. Raises ``ValueError`` for text that is not
    a number.
    """

    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"Not a number: {value!r}") from exc

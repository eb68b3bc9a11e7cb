"""Fluent service owning a parsed table."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from rich.console import Console
from rich.table import Table

from .errors import DuplicateHeaderError, HeaderNotFoundError, TypeMismatchError
from .formatting import FormatConfig, format_rows, to_rich_table
from .parsing import ParseConfig, RawInput, parse_table

Transformer = Callable[[Any], Any]

LOGGER = logging.getLogger("table-toolkit")


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def coerce(cls, value: Union["SortDirection", str]) -> "SortDirection":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError as exc:
            raise ValueError(f"Sort direction must be ASC or DESC, got {value!r}") from exc


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class TableService:
    """Parse delimited text once, then reshape it through chained calls.

    Every mutating method changes the table in place and returns the service,
    so a typical session reads as one expression::

        TableService(data).where("density", parse_number).sort("density", "DESC").format().print()

    ``formatted_rows`` is only refreshed by :meth:`format`; printing after a
    later mutation shows the earlier rendering.
    """

    def __init__(
        self,
        raw_input: RawInput,
        *,
        delimiter: str = ",",
        format_config: Optional[FormatConfig] = None,
        console: Optional[Console] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.raw_input = raw_input
        self.delimiter = delimiter
        self.headers: List[str] = []
        self.rows: List[List[Any]] = []
        self.formatted_rows: List[str] = []
        self.format_config = format_config or FormatConfig()
        self.console = console or Console()
        self.logger = logger or LOGGER
        self.parse()

    def parse(self, raw_text: Optional[RawInput] = None, *, delimiter: Optional[str] = None) -> "TableService":
        """(Re-)parse ``raw_text``, or the retained raw input when omitted.

        The delimiter defaults to the one used by the last successful parse.
        Nothing is replaced unless parsing succeeds.
        """

        raw = self.raw_input if raw_text is None else raw_text
        delimiter = self.delimiter if delimiter is None else delimiter
        parsed = parse_table(raw, ParseConfig(delimiter=delimiter), self.logger)
        self.raw_input = raw
        self.delimiter = delimiter
        self.headers = parsed.headers
        self.rows = parsed.rows
        return self

    def _index(self, header: str, operation: str) -> int:
        try:
            return self.headers.index(header)
        except ValueError:
            raise HeaderNotFoundError(header, operation, self.headers) from None

    def where(self, header: str, transformer: Transformer) -> "TableService":
        """Replace every cell of ``header`` with ``transformer(cell)``."""

        index = self._index(header, "where")
        values = [transformer(row[index]) for row in self.rows]
        for row, value in zip(self.rows, values):
            row[index] = value
        self.logger.debug("where: transformed %d cells of '%s'", len(values), header)
        return self

    def sort(self, header: str, direction: Union[SortDirection, str] = SortDirection.ASC) -> "TableService":
        """Stable-sort rows by ``header``.

        Keys must be all numbers or all strings; any other mix raises
        :class:`TypeMismatchError` and leaves the row order untouched.
        """

        index = self._index(header, "sort")
        direction = SortDirection.coerce(direction)
        keys = [row[index] for row in self.rows]
        if not (all(_is_number(key) for key in keys) or all(isinstance(key, str) for key in keys)):
            raise TypeMismatchError(header, "sort", [type(key).__name__ for key in keys])

        self.rows.sort(key=lambda row: row[index], reverse=direction is SortDirection.DESC)
        self.logger.debug("sort: %d rows by '%s' %s", len(self.rows), header, direction.value)
        return self

    def add_column(self, new_header: str, source_header: str, transformer: Transformer) -> "TableService":
        """Append ``new_header`` holding ``transformer`` applied to ``source_header``."""

        index = self._index(source_header, "add_column")
        if new_header in self.headers:
            raise DuplicateHeaderError(new_header, "add_column")

        values = [transformer(row[index]) for row in self.rows]
        self.headers.append(new_header)
        for row, value in zip(self.rows, values):
            row.append(value)
        self.logger.debug("add_column: '%s' derived from '%s'", new_header, source_header)
        return self

    def get_column(self, header: str) -> List[Any]:
        index = self._index(header, "get_column")
        return [row[index] for row in self.rows]

    def format(self) -> "TableService":
        """Render headers and rows into ``formatted_rows``."""

        self.formatted_rows = format_rows(self.headers, self.rows, self.format_config)
        self.logger.debug("format: rendered %d lines", len(self.formatted_rows))
        return self

    def print(self, with_headers: bool = True) -> None:
        lines = self.formatted_rows if with_headers else self.formatted_rows[1:]
        for line in lines:
            self.console.out(line, highlight=False)

    def to_rich_table(self, title: str | None = None) -> Table:
        return to_rich_table(self.headers, self.rows, title=title, render_cell=self.format_config.render_cell)

"""Fixed-width and rich rendering of table contents."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional, Sequence

from rich.table import Table
from rich.text import Text


@dataclass
class FormatConfig:
    """Layout used by :func:`format_rows`."""

    first_column_width: int = 18
    column_gap: int = 2
    render_cell: Callable[[Any], str] = str


def column_widths(
    headers: Sequence[str],
    rows: Sequence[Sequence[Any]],
    render_cell: Callable[[Any], str] = str,
) -> List[int]:
    """Widest rendering per column, header label included."""

    widths = [len(header) for header in headers]
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(render_cell(cell)))
    return widths


def format_row(cells: Sequence[Any], widths: Sequence[int], config: FormatConfig) -> str:
    parts = []
    for index, cell in enumerate(cells):
        text = config.render_cell(cell)
        if index == 0:
            parts.append(text.ljust(max(config.first_column_width, widths[0])))
        else:
            parts.append(text.rjust(widths[index] + config.column_gap))
    return "".join(parts)


def format_rows(
    headers: Sequence[str],
    rows: Sequence[Sequence[Any]],
    config: Optional[FormatConfig] = None,
) -> List[str]:
    """Render the header line followed by every row at aligned widths.

    The first column is left-justified to ``first_column_width`` (or wider when
    a value needs it); the others are right-justified with ``column_gap``
    spaces of padding. Header labels are rendered as-is, cells through
    ``config.render_cell``.
    """

    config = config or FormatConfig()
    widths = column_widths(headers, rows, config.render_cell)
    header_config = replace(config, render_cell=str)
    lines = [format_row(headers, widths, header_config)]
    lines.extend(format_row(row, widths, config) for row in rows)
    return lines


def to_rich_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[Any]],
    title: str | None = None,
    render_cell: Callable[[Any], str] = str,
) -> Table:
    """Build a rich table, numbers right-aligned.

    Labels and cells are wrapped in ``Text`` so brackets print literally
    instead of being read as console markup.
    """

    table = Table(title=Text(title) if title is not None else None)
    for index, header in enumerate(headers):
        numeric = bool(rows) and all(
            isinstance(row[index], (int, float)) and not isinstance(row[index], bool) for row in rows
        )
        table.add_column(Text(header), justify="right" if numeric else "left", style="cyan" if index == 0 else None)
    for row in rows:
        table.add_row(*(Text(render_cell(cell)) for cell in row))
    return table

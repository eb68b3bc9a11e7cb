"""Typer CLI entry point for table-toolkit."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .errors import TableError
from .parsing import load_text, parse_number
from .service import SortDirection, TableService

console = Console()
app = typer.Typer(help="table-toolkit: reshape and print small delimited tables")


def configure_logger(verbose: bool) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("table-toolkit")


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


@app.callback()
def main() -> None:
    """Reshape and print small delimited tables."""


@app.command()
def show(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, path_type=Path, help="Delimited text file."),
    delimiter: str = typer.Option(",", "--delimiter", "-d", help="Cell delimiter."),
    numeric: Optional[List[str]] = typer.Option(None, "--numeric", "-n", help="Column to convert to numbers (repeatable)."),
    sort: Optional[str] = typer.Option(None, "--sort", "-s", help="Column to sort by."),
    desc: bool = typer.Option(False, "--desc", help="Sort in descending order."),
    headers: bool = typer.Option(True, "--headers/--no-headers", help="Print the header line."),
    pretty: bool = typer.Option(False, "--pretty", help="Render a rich table instead of fixed-width text."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Parse a file, optionally convert and sort columns, and print it."""

    logger = configure_logger(verbose)
    try:
        service = TableService(load_text(source), delimiter=delimiter, console=console, logger=logger)
        for header in numeric or []:
            service.where(header, parse_number)
        if sort is not None:
            service.sort(sort, SortDirection.DESC if desc else SortDirection.ASC)
    except (TableError, ValueError) as exc:
        _fail(str(exc))

    if pretty:
        table = service.to_rich_table(title=source.name)
        table.show_header = headers
        console.print(table)
        return
    service.format().print(with_headers=headers)


if __name__ == "__main__":
    app()

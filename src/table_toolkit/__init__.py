"""In-memory toolkit for reshaping and printing small delimited tables."""

from .errors import (
    DuplicateHeaderError,
    HeaderNotFoundError,
    MalformedRowError,
    TableError,
    TypeMismatchError,
)
from .formatting import FormatConfig
from .parsing import ParseConfig, parse_number, parse_table
from .service import SortDirection, TableService

__all__ = [
    "DuplicateHeaderError",
    "FormatConfig",
    "HeaderNotFoundError",
    "MalformedRowError",
    "ParseConfig",
    "SortDirection",
    "TableError",
    "TableService",
    "TypeMismatchError",
    "parse_number",
    "parse_table",
]

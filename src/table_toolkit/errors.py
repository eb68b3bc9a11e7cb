"""Error taxonomy for table operations."""

from __future__ import annotations

from typing import Sequence


class TableError(Exception):
    """Base class for every error raised by the toolkit."""


class HeaderNotFoundError(TableError, LookupError):
    """An operation referenced a column that is not in the table."""

    def __init__(self, header: str, operation: str, headers: Sequence[str] = ()):
        self.header = header
        self.operation = operation
        self.headers = list(headers)
        message = f"{operation}: header '{header}' not found"
        if self.headers:
            message += f" (available: {', '.join(self.headers)})"
        super().__init__(message)


class DuplicateHeaderError(TableError, ValueError):
    """A derived column would reuse an existing header name."""

    def __init__(self, header: str, operation: str):
        self.header = header
        self.operation = operation
        super().__init__(f"{operation}: header '{header}' already exists")


class MalformedRowError(TableError, ValueError):
    """A data line does not split into one cell per header."""

    def __init__(self, line_number: int, expected: int, actual: int, message: str | None = None):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"line {line_number}: expected {expected} cells, found {actual}"
        super().__init__(message)


class TypeMismatchError(TableError, TypeError):
    """Column values cannot be compared with one another."""

    def __init__(self, header: str, operation: str, types: Sequence[str]):
        self.header = header
        self.operation = operation
        self.types = sorted(set(types))
        super().__init__(
            f"{operation}: column '{header}' mixes incomparable types ({', '.join(self.types)})"
        )

from __future__ import annotations

from typing import Sequence


class CatalogError(Exception):
    """Base class for failures while building a catalog from text."""


class MalformedCatalog(CatalogError):
    """The catalog has no usable header line."""

    def __init__(
        self,
        message: str,
        expected: Sequence[str] | None = None,
        actual: Sequence[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = tuple(expected) if expected is not None else None
        self.actual = tuple(actual) if actual is not None else None


class ValidationFailure(CatalogError):
    """One or more data rows carry values outside the closed vocabularies.

    ``row_errors`` holds one message per offending row, ``rows`` the
    matching 1-based line numbers.
    """

    def __init__(self, row_errors: list[str], rows: list[int]) -> None:
        super().__init__("catalog validation failed:\n" + "\n".join(row_errors))
        self.row_errors = row_errors
        self.rows = rows


class InvalidFilter(ValueError):
    """A filter value does not match any recognised shape."""

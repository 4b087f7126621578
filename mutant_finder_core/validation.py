"""
Grid Validator

Checks that a candidate DNA table is non-empty, square and written only in
the {A, T, C, G} alphabet (either case) before any scanning happens.
"""

from typing import Optional, Sequence

from .config import FinderConfig
from .models import Grid, GridError, GridValidation, GRID_ERROR_MESSAGES

VALID_BASES = frozenset(FinderConfig.DNA_ALPHABET)


class InvalidGrid(ValueError):
    """Raised when a DNA table cannot be analyzed."""

    def __init__(self, reason: GridError, message: Optional[str] = None):
        self.reason = reason
        super().__init__(message or GRID_ERROR_MESSAGES[reason])


def _is_valid_row(row, size: int) -> bool:
    return isinstance(row, str) and len(row) == size and all(ch in VALID_BASES for ch in row)


def check_grid(rows: Optional[Sequence[str]]) -> GridValidation:
    """
    Validate a candidate grid without raising.

    Returns a GridValidation holding either the immutable Grid or the
    reason it was rejected.
    """
    if rows is None:
        return GridValidation.failure(GridError.NULL)
    if len(rows) == 0:
        return GridValidation.failure(GridError.EMPTY)

    size = len(rows)
    if not all(_is_valid_row(row, size) for row in rows):
        return GridValidation.failure(GridError.INCONSISTENT)

    return GridValidation.success(Grid(rows=tuple(rows)))


def validate_grid(rows: Optional[Sequence[str]]) -> Grid:
    """Same as check_grid but raises InvalidGrid on rejection."""
    result = check_grid(rows)
    if not result.ok:
        raise InvalidGrid(result.error, result.detail)
    return result.grid

"""
Mutant Classifier

Validator -> Extractor -> Scanner. A DNA table is mutant when any row,
column or diagonal holds MIN_RUN equal bases in a row.
"""

from typing import Optional, Sequence

from .config import FinderConfig
from .extraction import iter_sequences
from .scanner import has_run
from .validation import InvalidGrid, check_grid


def is_mutant(rows: Optional[Sequence[str]], min_run: int = FinderConfig.MIN_RUN) -> bool:
    """
    Classify a DNA table.

    Raises InvalidGrid for malformed input. Grids smaller than ``min_run``
    are human without being scanned. Stops at the first qualifying line.
    """
    result = check_grid(rows)
    if not result.ok:
        raise InvalidGrid(result.error, result.detail)

    grid = result.grid
    if grid.size < min_run:
        return False

    return any(has_run(line, min_run) for line in iter_sequences(grid, min_run))

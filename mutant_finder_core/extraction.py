"""
Directional Extractor

Turns a Grid into the 1-D lines the scanner runs over: rows, columns,
diagonals (top-left to bottom-right) and anti-diagonals (top-right to
bottom-left).

Both diagonal families use the same walk: start on an edge cell, step by
a fixed (row, col) delta until the walk leaves the grid. Each diagonal has
exactly one start cell, so nothing is produced twice.
"""

from typing import Iterator, List, Tuple

from .config import FinderConfig
from .models import Grid

Cell = Tuple[int, int]

DOWN_RIGHT = (1, 1)
DOWN_LEFT = (1, -1)


# =============================================================================
# COORDINATE WALKS
# =============================================================================

def _walk(size: int, start: Cell, step: Cell) -> List[Cell]:
    """Cells from ``start`` following ``step`` while inside a size x size grid."""
    row, col = start
    d_row, d_col = step
    cells = []
    while 0 <= row < size and 0 <= col < size:
        cells.append((row, col))
        row += d_row
        col += d_col
    return cells


def diagonal_cells(size: int, min_run: int = FinderConfig.MIN_RUN) -> Iterator[List[Cell]]:
    """
    Top-left to bottom-right diagonals of length >= min_run.

    Starts are the left edge (r, 0) and the top edge (0, c) for c > 0.
    """
    starts = [(row, 0) for row in range(size)] + [(0, col) for col in range(1, size)]
    for start in starts:
        # Length is known up front, skip short lines without walking them
        if size - max(start) < min_run:
            continue
        yield _walk(size, start, DOWN_RIGHT)


def anti_diagonal_cells(size: int, min_run: int = FinderConfig.MIN_RUN) -> Iterator[List[Cell]]:
    """
    Top-right to bottom-left diagonals of length >= min_run.

    Starts are the top edge (0, c) and the right edge (r, size - 1) for r > 0.
    """
    starts = [(0, col) for col in range(size)] + [(row, size - 1) for row in range(1, size)]
    for row, col in starts:
        if min(col + 1, size - row) < min_run:
            continue
        yield _walk(size, (row, col), DOWN_LEFT)


# =============================================================================
# SEQUENCE FAMILIES
# =============================================================================

def _line(grid: Grid, cells: List[Cell]) -> str:
    return "".join(grid.at(row, col) for row, col in cells)


def rows(grid: Grid) -> Iterator[str]:
    yield from grid.rows


def columns(grid: Grid) -> Iterator[str]:
    for col in range(grid.size):
        yield "".join(row[col] for row in grid.rows)


def diagonals(grid: Grid, min_run: int = FinderConfig.MIN_RUN) -> Iterator[str]:
    for cells in diagonal_cells(grid.size, min_run):
        yield _line(grid, cells)


def anti_diagonals(grid: Grid, min_run: int = FinderConfig.MIN_RUN) -> Iterator[str]:
    for cells in anti_diagonal_cells(grid.size, min_run):
        yield _line(grid, cells)


def iter_sequences(grid: Grid, min_run: int = FinderConfig.MIN_RUN) -> Iterator[str]:
    """All candidate lines, lazily: rows, columns, diagonals, anti-diagonals."""
    yield from rows(grid)
    yield from columns(grid)
    yield from diagonals(grid, min_run)
    yield from anti_diagonals(grid, min_run)

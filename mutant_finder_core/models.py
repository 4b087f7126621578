"""
Mutant Finder: Domain Models

Grids under test, validation outcomes and the named counters behind /stats.
"""

from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Counter names
MUTANT_DNA = "mutant"
HUMAN_DNA = "human"


# =============================================================================
# GRID
# =============================================================================

class GridError(str, Enum):
    """Reason a candidate grid was rejected."""
    NULL = "null"                   # No grid at all
    EMPTY = "empty"                 # Zero rows
    INCONSISTENT = "inconsistent"   # Not square, missing row or foreign base


GRID_ERROR_MESSAGES = {
    GridError.NULL: "Dna cannot be null",
    GridError.EMPTY: "Dna cannot be empty",
    GridError.INCONSISTENT: "Dna has inconsistent sequences",
}


class Grid(BaseModel):
    """A validated square matrix of nucleotides. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    rows: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.rows)

    def at(self, row: int, col: int) -> str:
        return self.rows[row][col]


class GridValidation(BaseModel):
    """
    Tagged outcome of grid validation.

    Exactly one of ``grid`` and ``error`` is set.
    """
    grid: Optional[Grid] = None
    error: Optional[GridError] = None
    detail: Optional[str] = None

    @model_validator(mode='after')
    def check_tag(self) -> 'GridValidation':
        if (self.grid is None) == (self.error is None):
            raise ValueError("exactly one of grid or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.grid is not None

    @classmethod
    def success(cls, grid: Grid) -> 'GridValidation':
        return cls(grid=grid)

    @classmethod
    def failure(cls, error: GridError) -> 'GridValidation':
        return cls(error=error, detail=GRID_ERROR_MESSAGES[error])


# =============================================================================
# STATISTICS
# =============================================================================

class Statistic(BaseModel):
    """A named, persistently stored tally."""
    name: str
    amount: int = Field(default=0, ge=0)


class DnaStatistics(BaseModel):
    """Derived view over both counters. Never stored."""
    count_mutant_dna: int = Field(default=0, ge=0)
    count_human_dna: int = Field(default=0, ge=0)
    ratio: Optional[float] = None           # Only when both counts are positive

    @classmethod
    def from_counts(cls, mutant: int, human: int) -> 'DnaStatistics':
        ratio = mutant / human if mutant > 0 and human > 0 else None
        return cls(count_mutant_dna=mutant, count_human_dna=human, ratio=ratio)

"""
Mutant Finder Core

Classifies square DNA tables as mutant or human by looking for four equal
bases in a row (horizontally, vertically or diagonally) and keeps running
counts of both verdicts.
"""

# Configuration
from .config import FinderConfig

# Models
from .models import (
    Grid, GridError, GridValidation, Statistic, DnaStatistics,
    MUTANT_DNA, HUMAN_DNA
)

# Validation, scanning, extraction
from .validation import InvalidGrid, check_grid, validate_grid
from .scanner import has_run
from .extraction import (
    rows, columns, diagonals, anti_diagonals, iter_sequences,
    diagonal_cells, anti_diagonal_cells
)

# Classification
from .classifier import is_mutant

# Statistics and storage
from .statistics import CounterStore, InMemoryCounterStore, StatisticsAggregator
from .persistence import SqlCounterStore

# Service facade
from .service import MutantFinderService

__all__ = [
    # Config
    "FinderConfig",
    # Models
    "Grid", "GridError", "GridValidation", "Statistic", "DnaStatistics",
    "MUTANT_DNA", "HUMAN_DNA",
    # Core
    "InvalidGrid", "check_grid", "validate_grid", "has_run",
    "rows", "columns", "diagonals", "anti_diagonals", "iter_sequences",
    "diagonal_cells", "anti_diagonal_cells",
    "is_mutant",
    # Statistics
    "CounterStore", "InMemoryCounterStore", "StatisticsAggregator", "SqlCounterStore",
    # Service
    "MutantFinderService",
]

"""Shared test fixtures and configuration for Mutant Finder tests."""

import os

# Must be set before mutant_finder_core.config is imported
os.environ.setdefault("MUTANT_FINDER_DB_URL", "sqlite://")

import pytest

from mutant_finder_core import InMemoryCounterStore, StatisticsAggregator, MutantFinderService


@pytest.fixture
def memory_store():
    """Empty in-memory counter store."""
    return InMemoryCounterStore()


@pytest.fixture
def aggregator(memory_store):
    return StatisticsAggregator(memory_store)


@pytest.fixture
def service(aggregator):
    return MutantFinderService(aggregator)


@pytest.fixture
def human_dna():
    """6x6 table that varies along every row, column and diagonal."""
    return ["atcgat", "cgatcg", "atcgat", "cgatcg", "atcgat", "cgatcg"]


@pytest.fixture
def diagonal_mutant_dna():
    """6x6 table whose only run is 'aaaaa' on the main diagonal."""
    return ["atcgat", "caatcg", "atagat", "cgaacg", "atcgat", "cgatcg"]


@pytest.fixture
def anti_diagonal_mutant_dna(diagonal_mutant_dna):
    """Row-mirrored copy of diagonal_mutant_dna: the run moves to an anti-diagonal."""
    return [row[::-1] for row in diagonal_mutant_dna]

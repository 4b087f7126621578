"""Tests for the service facade: classification followed by tallying."""

import logging

import pytest

from mutant_finder_core import InvalidGrid, MutantFinderService, StatisticsAggregator


class TestMutantFinderService:

    def test_mutant_is_counted(self, service, diagonal_mutant_dna):
        assert service.is_mutant(diagonal_mutant_dna) is True
        stats = service.get_statistics()
        assert (stats.count_mutant_dna, stats.count_human_dna) == (1, 0)

    def test_human_is_counted(self, service, human_dna):
        assert service.is_mutant(human_dna) is False
        stats = service.get_statistics()
        assert (stats.count_mutant_dna, stats.count_human_dna) == (0, 1)

    def test_small_grid_counts_as_human(self, service):
        assert service.is_mutant(["aaa", "aaa", "aaa"]) is False
        assert service.get_statistics().count_human_dna == 1

    def test_invalid_input_is_not_counted(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="mutant_finder_core.service"):
            with pytest.raises(InvalidGrid):
                service.is_mutant(["atcg", "gcta", "agtc", "agja"])
        stats = service.get_statistics()
        assert (stats.count_mutant_dna, stats.count_human_dna) == (0, 0)
        assert "inconsistent" in caplog.text

    def test_ratio_after_mixed_traffic(self, service, human_dna, diagonal_mutant_dna):
        service.is_mutant(diagonal_mutant_dna)
        service.is_mutant(human_dna)
        service.is_mutant(human_dna)
        assert service.get_statistics().ratio == 0.5

    def test_storage_failure_propagates(self, human_dna):
        class BrokenStore:
            def increment(self, name):
                raise IOError("disk gone")

        service = MutantFinderService(StatisticsAggregator(BrokenStore()))
        with pytest.raises(IOError):
            service.is_mutant(human_dna)

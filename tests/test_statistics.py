"""Tests for the statistics aggregator and the in-memory counter store."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from mutant_finder_core import (
    DnaStatistics, InMemoryCounterStore, Statistic, StatisticsAggregator,
    MUTANT_DNA, HUMAN_DNA
)


class TestInMemoryCounterStore:

    def test_missing_counter(self, memory_store):
        assert memory_store.find_counter(MUTANT_DNA) is None

    def test_save_and_find(self, memory_store):
        memory_store.save_counter(Statistic(name=HUMAN_DNA, amount=3))
        assert memory_store.find_counter(HUMAN_DNA) == Statistic(name=HUMAN_DNA, amount=3)

    def test_increment_creates_at_one(self, memory_store):
        assert memory_store.increment(MUTANT_DNA).amount == 1
        assert memory_store.increment(MUTANT_DNA).amount == 2

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            Statistic(name=MUTANT_DNA, amount=-1)


class TestStatisticsAggregator:

    def test_empty_store(self, aggregator):
        stats = aggregator.current_statistics()
        assert stats == DnaStatistics(count_mutant_dna=0, count_human_dna=0, ratio=None)

    def test_record_routes_to_counter(self, aggregator, memory_store):
        aggregator.record_result(True)
        aggregator.record_result(False)
        aggregator.record_result(False)
        assert memory_store.find_counter(MUTANT_DNA).amount == 1
        assert memory_store.find_counter(HUMAN_DNA).amount == 2

    def test_ratio(self, aggregator, memory_store):
        memory_store.save_counter(Statistic(name=MUTANT_DNA, amount=40))
        memory_store.save_counter(Statistic(name=HUMAN_DNA, amount=100))
        stats = aggregator.current_statistics()
        assert stats.count_mutant_dna == 40
        assert stats.count_human_dna == 100
        assert stats.ratio == pytest.approx(0.4)

    @pytest.mark.parametrize(("mutant", "human"), [(5, 0), (0, 5)])
    def test_no_ratio_when_a_count_is_zero(self, aggregator, mutant, human):
        for _ in range(mutant):
            aggregator.record_result(True)
        for _ in range(human):
            aggregator.record_result(False)
        stats = aggregator.current_statistics()
        assert stats.ratio is None
        assert (stats.count_mutant_dna, stats.count_human_dna) == (mutant, human)

    def test_ratio_serializes_as_null(self, aggregator):
        assert aggregator.current_statistics().model_dump()["ratio"] is None

    def test_concurrent_updates_are_not_lost(self, aggregator):
        verdicts = [True] * 150 + [False] * 250
        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(aggregator.record_result, verdicts))
        stats = aggregator.current_statistics()
        assert stats.count_mutant_dna == 150
        assert stats.count_human_dna == 250


class TestDnaStatistics:

    def test_from_counts(self):
        assert DnaStatistics.from_counts(1, 4).ratio == 0.25
        assert DnaStatistics.from_counts(0, 0).ratio is None

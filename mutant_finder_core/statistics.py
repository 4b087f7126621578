"""
Statistics Aggregator

Keeps the mutant / human tallies. Storage is injected as a CounterStore so
the same aggregator runs against SQL in production and a dict in tests.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .models import Statistic, DnaStatistics, MUTANT_DNA, HUMAN_DNA

logger = logging.getLogger(__name__)


# =============================================================================
# COUNTER STORE INTERFACE
# =============================================================================

class CounterStore(ABC):
    """
    Key-value access to named counters.

    Implementations provide find/save; ``increment`` builds an atomic
    read-modify-write on top of them with one lock per counter name.
    Stores that can increment natively should override it.
    """

    def __init__(self):
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @abstractmethod
    def find_counter(self, name: str) -> Optional[Statistic]:
        """Return the counter called ``name`` or None if it was never saved."""
        pass

    @abstractmethod
    def save_counter(self, statistic: Statistic) -> None:
        """Create or overwrite the counter keyed by ``statistic.name``."""
        pass

    def _lock_for(self, name: str) -> threading.Lock:
        with self._locks_guard:
            if name not in self._locks:
                self._locks[name] = threading.Lock()
            return self._locks[name]

    def increment(self, name: str) -> Statistic:
        """Add one to ``name``, creating it at 1 if missing."""
        with self._lock_for(name):
            statistic = self.find_counter(name)
            if statistic is None:
                statistic = Statistic(name=name, amount=1)
            else:
                statistic = Statistic(name=name, amount=statistic.amount + 1)
            self.save_counter(statistic)
            return statistic


class InMemoryCounterStore(CounterStore):
    """Dict-backed store. Lives as long as the process."""

    def __init__(self):
        super().__init__()
        self._counters: Dict[str, int] = {}

    def find_counter(self, name: str) -> Optional[Statistic]:
        if name not in self._counters:
            return None
        return Statistic(name=name, amount=self._counters[name])

    def save_counter(self, statistic: Statistic) -> None:
        self._counters[statistic.name] = statistic.amount


# =============================================================================
# AGGREGATOR
# =============================================================================

class StatisticsAggregator:
    """Records verdicts and reports the running totals."""

    def __init__(self, store: CounterStore):
        self.store = store

    def record_result(self, is_mutant: bool) -> None:
        name = MUTANT_DNA if is_mutant else HUMAN_DNA
        statistic = self.store.increment(name)
        logger.debug(f"Counter '{name}' now at {statistic.amount}")

    def _amount(self, name: str) -> int:
        statistic = self.store.find_counter(name)
        return statistic.amount if statistic is not None else 0

    def current_statistics(self) -> DnaStatistics:
        """
        Read both counters (0 when absent).

        The ratio is mutant / human and is only set when both are positive.
        """
        return DnaStatistics.from_counts(
            mutant=self._amount(MUTANT_DNA),
            human=self._amount(HUMAN_DNA)
        )

"""
Mutant Finder Service

What the HTTP layer talks to: classify a DNA table, tally the verdict,
report the tallies.
"""

import logging
from typing import Optional, Sequence

from .classifier import is_mutant
from .config import FinderConfig
from .models import DnaStatistics
from .statistics import StatisticsAggregator
from .validation import InvalidGrid

logger = logging.getLogger(__name__)


class MutantFinderService:
    """Classifier plus tally. Rejected input is never counted."""

    def __init__(self, aggregator: StatisticsAggregator, min_run: int = FinderConfig.MIN_RUN):
        self.aggregator = aggregator
        self.min_run = min_run

    def is_mutant(self, dna: Optional[Sequence[str]]) -> bool:
        try:
            verdict = is_mutant(dna, self.min_run)
        except InvalidGrid as e:
            logger.info(f"Rejected DNA table ({e.reason.value}): {e}")
            raise

        self.aggregator.record_result(verdict)
        logger.debug(f"Classified {len(dna)}x{len(dna)} table as {'mutant' if verdict else 'human'}")
        return verdict

    def get_statistics(self) -> DnaStatistics:
        return self.aggregator.current_statistics()

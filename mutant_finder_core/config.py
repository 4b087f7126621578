"""
Mutant Finder Configuration

Service-wide settings. Every value can be overridden through an environment
variable so the same build runs locally (SQLite file) and in deployment.
"""

import os


_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class FinderConfig:
    """Classifier thresholds, storage location and HTTP limits."""
    MIN_RUN: int = 4                        # Equal consecutive bases for a mutant verdict
    DNA_ALPHABET: str = "atcgATCG"
    DATABASE_URL: str = os.environ.get(
        "MUTANT_FINDER_DB_URL",
        f"sqlite:///{os.path.join(_PROJECT_ROOT, 'mutant_finder.db')}"
    )
    MAX_GRID_SIDE: int = int(os.environ.get("MUTANT_FINDER_MAX_GRID_SIDE", "1000"))
    REQUESTS_PER_MINUTE: int = int(os.environ.get("MUTANT_FINDER_RPM", "600"))
    REQUESTS_PER_HOUR: int = int(os.environ.get("MUTANT_FINDER_RPH", "20000"))
    LOG_LEVEL: str = os.environ.get("MUTANT_FINDER_LOG_LEVEL", "INFO")

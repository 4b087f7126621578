"""
Sequence Scanner

Run-length detection over a single line of bases.
"""

from typing import Sequence

from .config import FinderConfig


def has_run(sequence: Sequence[str], min_run: int = FinderConfig.MIN_RUN) -> bool:
    """
    Return True if ``sequence`` holds ``min_run`` or more consecutive,
    case-insensitively equal characters.

    Single left-to-right pass. Stops as soon as the current run plus the
    characters still unread can no longer reach ``min_run``.
    """
    length = len(sequence)
    if length == 0:
        return False
    if min_run <= 1:
        return True

    prev = sequence[0].lower()
    run = 1
    for i in range(1, length):
        if run + (length - i) < min_run:
            return False
        curr = sequence[i].lower()
        if curr == prev:
            run += 1
            if run >= min_run:
                return True
        else:
            prev = curr
            run = 1
    return False

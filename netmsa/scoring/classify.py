"""Row classification.

A row is *aligned* if it holds at most one distinct symbol (an all-gap row is
aligned), and *full* if it is aligned and holds no gap.
"""
from collections import Counter
from typing import Iterable
from typing import Optional
from typing import Tuple

from netmsa.constants import Constants
from netmsa.models import Cell
from netmsa.models import is_gap


def symbol_counts(row: Iterable[Cell]) -> Counter:
    """Count the symbols of a row, ignoring gaps. Keys keep their first
    occurrence order."""
    return Counter(x for x in row if not is_gap(x))


def most_frequent(row: Iterable[Cell]) -> Tuple[int, Optional[str]]:
    """Return the most frequent symbol of the row with its frequency, as
    ``(count, value)``. Ties go to the symbol occurring first. An all-gap row
    returns ``(0, None)``.

    .. code-block:: python

        most_frequent(("b", "c", "b", "b"))
        # (3, 'b')
    """
    best_value = None
    best_count = 0
    for value, n in symbol_counts(row).items():
        if n > best_count:
            best_value, best_count = value, n
    return best_count, best_value


def aligned(row: Iterable[Cell]) -> bool:
    """Return whether the row only contains occurrences of one symbol."""
    return len(symbol_counts(row)) <= 1


def full(row: Iterable[Cell]) -> bool:
    """Return whether the row is aligned and contains no gap."""
    row = tuple(row)
    return aligned(row) and not any(is_gap(x) for x in row)


def classify_row(row: Iterable[Cell]) -> str:
    row = tuple(row)
    if full(row):
        return Constants.FULL
    elif aligned(row):
        return Constants.ALIGNED
    return Constants.UNALIGNED

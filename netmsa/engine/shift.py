"""Candidate gap insertions."""
from __future__ import annotations

from typing import Iterable
from typing import List
from typing import Tuple

from netmsa.constants import Constants
from netmsa.models import is_gap
from netmsa.models import locate
from netmsa.models import PeerMatrix
from netmsa.scoring import objective


class Shift:
    """Insertion of `count` gaps at `row` into each of `columns`, proposed to
    align the symbol `value`."""

    __slots__ = ["row", "columns", "count", "kind", "value"]

    def __init__(
        self, row: int, columns: Iterable[int], count: int, kind: str, value: str
    ):
        self.row = row
        self.columns = tuple(columns)
        self.count = count
        self.kind = kind
        self.value = value

    def apply(self, matrix: PeerMatrix):
        matrix.insert_gaps(self.row, self.columns, self.count)

    def key(self) -> Tuple:
        return self.row, self.columns, self.count

    def __eq__(self, other) -> bool:
        if not isinstance(other, Shift):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __repr__(self) -> str:
        return "<{} {} {} row={} columns={} count={}>".format(
            self.__class__.__name__,
            self.kind,
            repr(self.value),
            self.row,
            list(self.columns),
            self.count,
        )


def candidate_shifts(
    matrix: PeerMatrix, row_index: int, value: str, neighborhood: int = None
) -> List[Shift]:
    """Propose gap insertions that bring a deeper occurrence of `value` level
    with the occurrences of `value` at `row_index`.

    For every column whose cell at the row is not `value` but which holds
    `value` further down, within `neighborhood` rows:

    * an OPEN shift pushes the mismatched symbol of that column down by one
      gap (only when the cell is a symbol), and
    * a LIFT shift inserts gaps above the current occurrences of `value` so
      that they move down to the row of the deeper occurrence.

    :param matrix: the peer matrix
    :param row_index: the row being aligned
    :param value: the anchor symbol of the row
    :param neighborhood: max distance in rows to the deeper occurrence;
        None searches the whole column
    :return: list of distinct shifts in the order they were proposed
    """
    anchor = locate(value, row_index, matrix)
    if not anchor.columns:
        return []
    shifts = []
    for c, cell in enumerate(matrix.row(row_index)):
        if cell == value:
            continue
        depth = matrix.find(value, c, row_index + 1)
        if depth == -1:
            continue
        distance = depth - row_index
        if neighborhood is not None and distance > neighborhood:
            continue
        candidates = [Shift(row_index, anchor.columns, distance, Constants.LIFT, value)]
        if not is_gap(cell):
            candidates.insert(0, Shift(row_index, (c,), 1, Constants.OPEN, value))
        for shift in candidates:
            if shift not in shifts:
                shifts.append(shift)
    return shifts


def window_end(matrix: PeerMatrix, row_index: int, window: int = None) -> int:
    """Return the inclusive last row of the lookahead window, or None for the
    whole matrix."""
    if window is None:
        return None
    return min(row_index + window, matrix.n_rows - 1)


def evaluate_shift(
    matrix: PeerMatrix,
    shift: Shift,
    window: int = None,
    weights: Tuple[float, float, float] = None,
) -> float:
    """Return the objective score of the shifted row on a copy of the matrix
    with `shift` applied. The matrix itself is not modified.

    The lookahead window is extended by the number of inserted gaps so that it
    covers the same cells as before the shift.
    """
    trial = matrix.copy()
    shift.apply(trial)
    end = None
    if window is not None:
        end = window_end(trial, shift.row, window + shift.count)
    kwargs = {}
    if weights is not None:
        kwargs = dict(zip(("w1", "w2", "w3"), weights))
    return objective(trial, shift.row, end, **kwargs)


def _evaluate_shift(args: Tuple) -> float:
    return evaluate_shift(*args)

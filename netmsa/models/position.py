"""Positions and particles.

A :class:`Position` records where a symbol value occurs within one row of a
peer matrix. A :class:`Particle` tracks the best placement found for one
symbol value while the engine runs; the :class:`ParticleSwarm` holds one
particle per symbol value.
"""
from __future__ import annotations

from typing import Dict
from typing import Iterable
from typing import Tuple

from .peer_matrix import PeerMatrix


class Position:
    """Store the position of a symbol value: the row that contains it and
    the indices of the columns that hold it in that row."""

    __slots__ = ["row", "columns"]

    def __init__(self, row: int, columns: Iterable[int] = ()):
        self.row = row
        self.columns = tuple(columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.row == other.row and self.columns == other.columns

    def __hash__(self):
        return hash((self.row, self.columns))

    def __repr__(self) -> str:
        return "Position({}, {})".format(self.row, list(self.columns))


def locate(value: str, row_index: int, matrix: PeerMatrix) -> Position:
    """Return the :class:`Position` of `value` at `row_index` in the matrix.

    .. code-block:: python

        M = build_peer_matrix(["abcbcdem", "acbcfg", "abchimn", "abcbcjkm"])
        locate("b", 1, M)
        # Position(1, [0, 2, 3])

    :param value: the symbol value
    :param row_index: the row to scan
    :param matrix: the peer matrix
    :return: the position; its column list is empty if `value` is absent
    """
    row = matrix.row(row_index)
    return Position(row_index, (i for i, x in enumerate(row) if x == value))


class Particle:
    """A local search unit for one symbol value.

    Instance Attributes:
        value       the symbol value, e.g. 'b'
        updated     number of turns since the best position last improved
        pos         the position at the row the particle currently anchors
        best        the best position found
        best_value  the objective score of the best position
    """

    __slots__ = ["value", "updated", "pos", "best", "best_value", "_improved"]

    def __init__(self, value: str, position: Position, score: float = 0.0):
        self.value = value
        self.updated = 0
        self.pos = position
        self.best = position
        self.best_value = score
        self._improved = False

    def relocate(self, position: Position, score: float):
        """Move the particle to a new anchor row. The best position and score
        restart from `position` so that scores are only compared within one
        row; the turn counter is kept."""
        self.pos = position
        self.best = position
        self.best_value = score

    def update(self, position: Position, score: float) -> bool:
        """Record a placement. If it beats the best score, make it the best
        position and reset the turn counter. Return True if it did."""
        if score > self.best_value:
            self.best = position
            self.best_value = score
            self.updated = 0
            self._improved = True
            return True
        return False

    def stall(self):
        self.updated += 1

    def settled(self, threshold: int) -> bool:
        if threshold is None:
            return False
        return self.updated > threshold

    def __repr__(self) -> str:
        return "<{} {} updated={} best={} best_value={}>".format(
            self.__class__.__name__,
            repr(self.value),
            self.updated,
            self.best,
            self.best_value,
        )


class ParticleSwarm:
    """One :class:`Particle` per symbol value.

    Turns are counted in engine sweeps: :meth:`end_iteration` stalls every
    particle whose best position did not change during the sweep. A particle
    stalled for more than `threshold` consecutive sweeps is settled and its
    symbol is skipped.
    """

    def __init__(self, threshold: int = None):
        self.threshold = threshold
        self.particles: Dict[str, Particle] = {}

    def particle(self, value: str, position: Position, score: float = 0.0) -> Particle:
        """Return the particle of `value`, creating it at `position`."""
        if value not in self.particles:
            self.particles[value] = Particle(value, position, score)
        return self.particles[value]

    def settled(self, value: str) -> bool:
        particle = self.particles.get(value)
        if particle is None:
            return False
        return particle.settled(self.threshold)

    def end_iteration(self) -> Tuple[str, ...]:
        """Close a sweep. Return the values that are settled afterwards."""
        for particle in self.particles.values():
            if not particle._improved:
                particle.stall()
            particle._improved = False
        return tuple(v for v in self.particles if self.settled(v))

    def reset(self):
        """Clear the turn counters so that no symbol is settled."""
        for particle in self.particles.values():
            particle.updated = 0
            particle._improved = False

    def __len__(self) -> int:
        return len(self.particles)

    def __contains__(self, value: str) -> bool:
        return value in self.particles

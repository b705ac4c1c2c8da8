"""Iterative alignment of a peer matrix."""
from __future__ import annotations

from typing import Iterable
from typing import List
from typing import Optional
from typing import Tuple
from typing import Union
from warnings import warn

import pandas as pd

from .shift import _evaluate_shift
from .shift import candidate_shifts
from .shift import Shift
from .shift import window_end
from netmsa.config import Config
from netmsa.constants import Constants
from netmsa.exceptions import NetMSAWarning
from netmsa.exceptions import NonConvergenceError
from netmsa.log import logger
from netmsa.models import build_peer_matrix
from netmsa.models import locate
from netmsa.models import ParticleSwarm
from netmsa.models import PeerMatrix
from netmsa.scoring import classify_row
from netmsa.scoring import most_frequent
from netmsa.scoring import objective
from netmsa.scoring import weight
from netmsa.utils import log_metadata
from netmsa.utils import make_pool


class AlignmentResult:
    """The aligned peer matrix and how the engine terminated.

    Instance Attributes:
        matrix      the aligned peer matrix
        status      Constants.CONVERGED or Constants.BOUND_EXCEEDED
        iterations  number of row evaluations performed
        sweeps      number of top-to-bottom passes over the matrix
        shifts      committed shifts, in order
        window      rows after each row included in its objective score
    """

    def __init__(
        self,
        matrix: PeerMatrix,
        status: str,
        iterations: int,
        sweeps: int,
        shifts: List[Shift],
        weights: Tuple[float, float, float] = (Config.W1, Config.W2, Config.W3),
        window: Optional[int] = Config.WINDOW,
    ):
        self.matrix = matrix
        self.status = status
        self.iterations = iterations
        self.sweeps = sweeps
        self.shifts = shifts
        self.weights = weights
        self.window = window

    @property
    def converged(self) -> bool:
        return self.status == Constants.CONVERGED

    def raise_for_status(self):
        """Raise :class:`NonConvergenceError` if the engine stopped at the
        iteration bound. The error carries this result."""
        if not self.converged:
            raise NonConvergenceError(
                "Alignment did not converge within {} iterations ({} shifts "
                "committed).".format(self.iterations, len(self.shifts)),
                result=self,
            )

    def to_df(self) -> pd.DataFrame:
        """Return a per-row report of the aligned matrix."""
        w1, w2, w3 = self.weights
        data = []
        for i, row in enumerate(self.matrix.rows()):
            end = window_end(self.matrix, i, self.window)
            data.append(
                {
                    "row": i,
                    "cells": "".join(str(x) for x in row),
                    "class": classify_row(row),
                    "weight": weight(row, w1=w1, w2=w2, w3=w3),
                    "objective": objective(self.matrix, i, end, w1=w1, w2=w2, w3=w3),
                }
            )
        return pd.DataFrame(
            data, columns=["row", "cells", "class", "weight", "objective"]
        )

    def __str__(self) -> str:
        return str(self.matrix)

    def __repr__(self) -> str:
        return "<{} {} {}x{} shifts={}>".format(
            self.__class__.__name__, self.status, *self.matrix.shape, len(self.shifts)
        )


class AlignmentEngine:
    """Refines a peer matrix by gap insertions until no row accepts an
    improving shift.

    Rows are visited top to bottom in sweeps. For each row the engine picks
    the most frequent symbol as the anchor, proposes shifts that bring deeper
    occurrences of the anchor level with it, and commits the best shift that
    strictly improves the objective score of the row. A row with no improving
    shift becomes stable. A committed shift leaves its row in progress and
    makes every row below it pending again; the next row evaluated is always
    the first row that is not stable. A sweep that commits nothing ends the
    run.

    The matrix is modified in place.

    Instance Attributes/Properties:
        matrix      the peer matrix being aligned
                    PeerMatrix
        states      the state of each row in the current sweep
                    List[str]
        swarm       one particle per anchor symbol
                    ParticleSwarm
        logger      the instance's logger
                    Loggable
    """

    def __init__(
        self,
        matrix: Union[PeerMatrix, Iterable[str]],
        max_iterations: int = Config.MAX_ITERATIONS,
        window: Optional[int] = Config.WINDOW,
        neighborhood: Optional[int] = Config.NEIGHBORHOOD,
        stall_limit: Optional[int] = Config.PARTICLE_STALL_LIMIT,
        w1: float = Config.W1,
        w2: float = Config.W2,
        w3: float = Config.W3,
        n_jobs: int = Config.N_JOBS,
    ):
        """Makes an engine for a peer matrix. Validates the matrix.

        :param matrix: a peer matrix, or a list of sequences to build one from
        :param max_iterations: maximum number of row evaluations
        :param window: rows after the current row included in the objective
            score; None for all remaining rows
        :param neighborhood: max rows below the current row to look for the
            anchor symbol; None for the whole column
        :param stall_limit: sweeps without improvement after which an anchor
            symbol is skipped; None never skips
        :param w1: weight multiplier of unaligned rows
        :param w2: weight multiplier of aligned rows
        :param w3: weight of full rows
        :param n_jobs: processes used to evaluate candidate shifts
        :raises InvalidInputError: if the sequences or matrix are malformed
        """
        if not isinstance(matrix, PeerMatrix):
            matrix = build_peer_matrix(matrix)
        matrix.validate()
        if max_iterations < 1:
            raise ValueError(
                "max_iterations must be positive, not {}".format(max_iterations)
            )
        self.matrix = matrix
        self.sequences = matrix.sequences()
        self.max_iterations = max_iterations
        self.window = window
        self.neighborhood = neighborhood
        self.weights = (w1, w2, w3)
        self.n_jobs = n_jobs
        self.swarm = ParticleSwarm(stall_limit)
        self.states = [Constants.PENDING] * matrix.n_rows
        self.iterations = 0
        self.sweeps = 0
        self.shifts: List[Shift] = []
        self.logger = logger(self)
        self._method_trace = {}
        self._skipped = 0

    def score(self, row_index: int) -> float:
        """Return the objective score of a row in the current matrix."""
        w1, w2, w3 = self.weights
        end = window_end(self.matrix, row_index, self.window)
        return objective(self.matrix, row_index, end, w1=w1, w2=w2, w3=w3)

    def evaluate(self, shifts: List[Shift], pool) -> List[float]:
        """Score each shift against the current matrix without committing
        it."""
        args = [(self.matrix, s, self.window, self.weights) for s in shifts]
        return pool.map(_evaluate_shift, args)

    def commit(self, shift: Shift):
        """Apply a shift to the matrix. Rows below the shifted row are pending
        again."""
        shift.apply(self.matrix)
        self.matrix.validate(self.sequences)
        self.shifts.append(shift)
        pending = self.matrix.n_rows - shift.row - 1
        self.states = self.states[: shift.row + 1] + [Constants.PENDING] * pending
        self.logger.debug("Committed {}".format(shift))

    def step(self, row_index: int, pool) -> Optional[Shift]:
        """Evaluate one row. Commit and return the best improving shift, or
        return None if there is none."""
        self.states[row_index] = Constants.IN_PROGRESS
        _, value = most_frequent(self.matrix.row(row_index))
        if value is None:
            return None
        if self.swarm.settled(value):
            self.logger.debug(
                "Row {}: skipping settled symbol {}".format(row_index, repr(value))
            )
            self._skipped += 1
            return None

        before = self.score(row_index)
        particle = self.swarm.particle(
            value, locate(value, row_index, self.matrix), before
        )
        if particle.pos.row != row_index:
            particle.relocate(locate(value, row_index, self.matrix), before)
        shifts = candidate_shifts(self.matrix, row_index, value, self.neighborhood)
        if not shifts:
            return None

        best = None
        best_score = before
        for shift, score in zip(shifts, self.evaluate(shifts, pool)):
            if score > best_score:
                best, best_score = shift, score
        if best is None:
            return None

        self.logger.debug(
            "Row {}: {} improves score {} -> {}".format(
                row_index, best, before, best_score
            )
        )
        self.commit(best)
        if best.kind == Constants.LIFT:
            anchor_row = row_index + best.count
        else:
            anchor_row = row_index
        particle.update(locate(value, anchor_row, self.matrix), best_score)
        return best

    def next_row(self) -> Optional[int]:
        """Return the index of the first row that is not stable, or None if
        every row is."""
        for i, state in enumerate(self.states):
            if state != Constants.STABLE:
                return i
        return None

    def _sweep(self, pool) -> bool:
        """Run one top-to-bottom pass. Return False if the iteration bound
        was hit."""
        self.sweeps += 1
        self._skipped = 0
        self.states = [Constants.PENDING] * self.matrix.n_rows
        r = self.next_row()
        while r is not None:
            if self.iterations >= self.max_iterations:
                return False
            self.iterations += 1
            if self.step(r, pool) is None:
                self.states[r] = Constants.STABLE
            r = self.next_row()
        return True

    @log_metadata("run")
    def run(self) -> AlignmentResult:
        """Align the matrix.

        :return: the result. If the iteration bound was hit, the result holds
            the best-effort matrix and its status is
            ``Constants.BOUND_EXCEEDED``.
        """
        self.logger.info(
            "Aligning {} sequences ({} rows x {} columns)".format(
                self.matrix.n_columns, *self.matrix.shape
            )
        )
        status = None
        with make_pool(self.n_jobs) as pool:
            with self.logger.timeit("DEBUG", "aligning peer matrix"):
                while status is None:
                    n_shifts = len(self.shifts)
                    within_bound = self._sweep(pool)
                    settled = self.swarm.end_iteration()
                    if settled:
                        self.logger.debug("Settled symbols: {}".format(settled))
                    if not within_bound:
                        status = Constants.BOUND_EXCEEDED
                    elif len(self.shifts) == n_shifts:
                        if self._skipped:
                            # confirm the fixed point without skipping symbols
                            self.swarm.reset()
                        else:
                            status = Constants.CONVERGED

        result = AlignmentResult(
            self.matrix,
            status,
            self.iterations,
            self.sweeps,
            list(self.shifts),
            weights=self.weights,
            window=self.window,
        )
        if result.converged:
            self.logger.info(
                "Converged after {} sweeps ({} iterations, {} shifts)".format(
                    self.sweeps, self.iterations, len(self.shifts)
                )
            )
        else:
            msg = (
                "Iteration bound {} reached after {} shifts; returning the "
                "partial alignment".format(
                    self.max_iterations, len(self.shifts)
                )
            )
            self.logger.info(msg)
            warn(msg, NetMSAWarning)
        return result


def align(
    sequences: Union[PeerMatrix, Iterable[str]], strict: bool = False, **kwargs
) -> AlignmentResult:
    """Align sequences into a peer matrix.

    .. code-block:: python

        result = align(["abcbcdem", "acbcfg", "abchimn", "abcbcjkm"])
        print(result.matrix)
        # a a a a
        # b - b b
        # c c c c
        # b b h b
        # c c i c
        # d f m j
        # e g n k
        # m - - m

    :param sequences: list of sequences, or a peer matrix to refine in place
    :param strict: if True, raise :class:`NonConvergenceError` when the
        iteration bound is hit. The partial result is available on the error.
    :param kwargs: keyword arguments for :class:`AlignmentEngine`
    :return: the alignment result
    """
    result = AlignmentEngine(sequences, **kwargs).run()
    if strict:
        result.raise_for_status()
    return result

"""Peer matrix."""
from __future__ import annotations

from collections.abc import Sized
from typing import Generator
from typing import Iterable
from typing import List
from typing import Sequence
from typing import Tuple
from typing import Union

import numpy as np
import pandas as pd

from .cell import Cell
from .cell import GAP
from .cell import is_gap
from netmsa.config import Config
from netmsa.exceptions import InvalidInputError
from netmsa.exceptions import ShiftException

SequenceLike = Union[str, Sequence[str]]
Row = Tuple[Cell, ...]


def _validate_symbols(sequence: SequenceLike, index: int) -> List[str]:
    symbols = list(sequence)
    if not symbols:
        raise InvalidInputError("Sequence {} is empty.".format(index))
    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidInputError(
                "Sequence {} contains an invalid symbol {}. Symbols must be "
                "single characters.".format(index, repr(symbol))
            )
    return symbols


class PeerMatrix(Sized):
    """A rows x columns grid of cells. Column `c` holds input sequence `c`.

    Each column is stored as a list of its cells without the trailing gap
    padding; any row below the end of a stored column reads as a gap. Gaps
    stored inside a column were inserted by alignment, which lets
    :meth:`inserted_gaps` tell them apart from the padding.

    .. code-block:: python

        M = PeerMatrix.from_sequences(["abcbcdem", "acbcfg", "abchimn", "abcbcjkm"])
        assert M.shape == (8, 4)
        assert M.row(0) == ("a", "a", "a", "a")
        assert M.row(7) == ("m", GAP, GAP, "m")

    Reading a column top to bottom and dropping the gaps always gives back the
    original sequence; gap insertion only shifts cells down.
    """

    __slots__ = ["_columns"]

    def __init__(self, columns: List[List[Cell]]):
        """Makes a peer matrix from stored columns. Use
        :meth:`from_sequences` or :meth:`from_rows` to build one from input.

        :param columns: list of columns, each a list of cells
        """
        self._columns = [list(c) for c in columns]

    @classmethod
    def from_sequences(cls, sequences: Iterable[SequenceLike]) -> PeerMatrix:
        """Stack sequences into the columns of a new peer matrix, padding the
        shorter sequences with trailing gaps.

        :param sequences: non-empty list of non-empty sequences. A sequence is
            a string or a list of single character strings.
        :return: the peer matrix
        :raises InvalidInputError: if there are no sequences, a sequence is
            empty or a symbol is not a single character.
        """
        if isinstance(sequences, str):
            raise InvalidInputError(
                "Expected a list of sequences, not a single string."
            )
        sequences = list(sequences)
        if not sequences:
            raise InvalidInputError("Cannot build a peer matrix from no sequences.")
        columns = [_validate_symbols(s, i) for i, s in enumerate(sequences)]
        return cls(columns)

    @classmethod
    def from_rows(
        cls, rows: Iterable[Sequence[str]], gap: str = Config.GAP_CHAR
    ) -> PeerMatrix:
        """Rebuild a peer matrix from a rectangular grid of rows, such as a
        rendered alignment.

        :param rows: the rows of the grid
        :param gap: the character used for gaps in the grid
        :return: the peer matrix
        :raises InvalidInputError: if the grid is empty, the rows have
            different lengths or a column holds no symbol.
        """
        rows = [list(r) for r in rows]
        if not rows or not rows[0]:
            raise InvalidInputError("Cannot build a peer matrix from an empty grid.")
        n_columns = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != n_columns:
                raise InvalidInputError(
                    "Inconsistent column lengths: row {} has {} cells, expected {}.".format(
                        i, len(r), n_columns
                    )
                )
        columns = []
        for c in range(n_columns):
            column = [GAP if r[c] == gap or is_gap(r[c]) else r[c] for r in rows]
            while column and is_gap(column[-1]):
                column.pop()
            columns.append(column)
        matrix = cls(columns)
        matrix.validate()
        return matrix

    @property
    def n_rows(self) -> int:
        return max(len(c) for c in self._columns)

    @property
    def n_columns(self) -> int:
        return len(self._columns)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.n_rows, self.n_columns

    def row(self, row: int) -> Row:
        """Return the cells at a row index across all columns."""
        n_rows = self.n_rows
        if row < 0:
            row += n_rows
        if not 0 <= row < n_rows:
            raise IndexError("Row {} out of range for {} rows".format(row, n_rows))
        return tuple(c[row] if row < len(c) else GAP for c in self._columns)

    def rows(self, start: int = 0, end: int = None) -> Generator[Row, None, None]:
        """Yield rows from `start` to the inclusive `end` (default last)."""
        if end is None:
            end = self.n_rows - 1
        for i in range(start, end + 1):
            yield self.row(i)

    def column(self, column: int) -> Row:
        """Return a column including its trailing padding."""
        stored = self._columns[column]
        return tuple(stored) + (GAP,) * (self.n_rows - len(stored))

    def find(self, value: str, column: int, start: int = 0) -> int:
        """Return the first row at or below `start` where `value` occurs in
        `column`, or -1 if it does not."""
        stored = self._columns[column]
        for i in range(start, len(stored)):
            if stored[i] == value:
                return i
        return -1

    def sequences(self) -> List[str]:
        """Return each column read top to bottom with the gaps removed."""
        return ["".join(x for x in c if not is_gap(x)) for c in self._columns]

    def inserted_gaps(self, start: int = 0, end: int = None) -> int:
        """Count the gaps inserted by alignment between rows `start` and the
        inclusive `end`. Trailing padding is not counted."""
        if end is None:
            end = self.n_rows - 1
        total = 0
        for c in self._columns:
            total += sum(1 for x in c[start : end + 1] if is_gap(x))
        return total

    def insert_gaps(self, row: int, columns: Iterable[int], count: int = 1):
        """Insert `count` gaps at `row` in each of `columns`, shifting the
        cells of those columns down.

        :param row: row index of the first inserted gap
        :param columns: indices of the columns to shift
        :param count: number of gaps inserted into each column
        :raises ShiftException: if a gap would land in the trailing padding of
            a column, or `count` is not positive.
        """
        columns = list(columns)
        if count < 1:
            raise ShiftException("Gap count must be positive, not {}".format(count))
        for c in columns:
            if not 0 <= c < self.n_columns:
                raise ShiftException(
                    "Column {} out of range for {} columns".format(c, self.n_columns)
                )
            if not 0 <= row < len(self._columns[c]):
                raise ShiftException(
                    "Cannot insert a gap at row {} of column {}: the column ends at "
                    "row {}.".format(row, c, len(self._columns[c]) - 1)
                )
        for c in columns:
            self._columns[c][row:row] = [GAP] * count

    def copy(self) -> PeerMatrix:
        return self.__class__(self._columns)

    def validate(self, sequences: Iterable[SequenceLike] = None):
        """Check the internal consistency of the matrix.

        :param sequences: if provided, the gap-stripped columns must reproduce
            these sequences exactly.
        :raises InvalidInputError: if the matrix is inconsistent.
        """
        if not self._columns:
            raise InvalidInputError("Peer matrix has no columns.")
        for i, c in enumerate(self._columns):
            if not c:
                raise InvalidInputError("Column {} holds no symbol.".format(i))
            if is_gap(c[-1]):
                raise InvalidInputError(
                    "Column {} ends with a stored gap; columns must end with a "
                    "symbol.".format(i)
                )
            for x in c:
                if not is_gap(x) and not (isinstance(x, str) and len(x) == 1):
                    raise InvalidInputError(
                        "Column {} holds an invalid cell {}.".format(i, repr(x))
                    )
        if sequences is not None:
            expected = ["".join(s) for s in sequences]
            found = self.sequences()
            if expected != found:
                raise InvalidInputError(
                    "Peer matrix columns no longer reproduce the input sequences: "
                    "{} vs {}".format(found, expected)
                )

    def to_numpy(self) -> np.ndarray:
        """Return the matrix as a (rows, columns) array of characters."""
        return np.array(
            [[str(x) for x in r] for r in self.rows()], dtype=object
        ).reshape(self.shape)

    def to_df(self, names: List[str] = None) -> pd.DataFrame:
        """Return the matrix as a DataFrame with one column per sequence."""
        return pd.DataFrame(self.to_numpy(), columns=names)

    def __len__(self) -> int:
        return self.n_rows

    def __eq__(self, other) -> bool:
        if not isinstance(other, PeerMatrix):
            return NotImplemented
        return self._columns == other._columns

    def __getstate__(self):
        return self._columns

    def __setstate__(self, state):
        self._columns = state

    def __str__(self) -> str:
        return "\n".join(" ".join(str(x) for x in r) for r in self.rows())

    def __repr__(self) -> str:
        return "<{} {}x{}>".format(self.__class__.__name__, *self.shape)


def build_peer_matrix(sequences: Iterable[SequenceLike]) -> PeerMatrix:
    """Build a peer matrix with one column per sequence.

    .. code-block:: python

        M = build_peer_matrix(["abcbcdem", "acbcfg", "abchimn", "abcbcjkm"])
        print(M)
        # a a a a
        # b c b b
        # c b c c
        # b c h b
        # c f i c
        # d g m j
        # e - n k
        # m - - m

    :param sequences: non-empty list of non-empty sequences
    :return: the peer matrix
    """
    return PeerMatrix.from_sequences(sequences)

"""Cells of a peer matrix.

A cell is either a symbol (a one character string) or the :data:`GAP`
marker. ``GAP`` is the only instance of :class:`Gap`, so gaps are compared
by identity and can never be mistaken for a symbol.
"""
from typing import Union

from netmsa.config import Config


class Gap:
    """The gap marker.

    There is exactly one instance, :data:`GAP`.
    """

    __slots__ = []

    _instance = None
    char = Config.GAP_CHAR

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return (Gap, ())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __str__(self) -> str:
        return self.char

    def __repr__(self) -> str:
        return "GAP"


GAP = Gap()

Cell = Union[str, Gap]


def is_gap(cell: Cell) -> bool:
    return cell is GAP


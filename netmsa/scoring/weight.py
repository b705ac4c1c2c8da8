from typing import Iterable

from .classify import aligned
from .classify import full
from .classify import symbol_counts
from netmsa.config import Config
from netmsa.models import Cell


def weight(
    row: Iterable[Cell],
    w1: float = Config.W1,
    w2: float = Config.W2,
    w3: float = Config.W3,
) -> float:
    r"""Return the weight of the row:

    .. math::

        w(r) = \begin{cases}
            w_1 \times \frac{x}{c} & \text{if r is not aligned} \\
            w_2 \times \frac{n_s}{c} & \text{if r is aligned} \\
            w_3 & \text{if r is full}
        \end{cases}

    where :math:`n_s` is the number of occurrences of the symbol of an aligned
    row and :math:`c` is the number of columns. :math:`x` is zero if every
    symbol of the row occurs at most once, else the largest number of
    occurrences of a symbol.

    .. code-block:: python

        weight(("a", "a", "a", "a"))
        # 1.0
        weight(("b", "c", "b", "b"))
        # 0.1875

    :param row: the row cells
    :param w1: multiplier for unaligned rows
    :param w2: multiplier for aligned rows with gaps
    :param w3: weight of full rows
    :return: the row weight
    """
    row = tuple(row)
    c = len(row)
    if full(row):
        return w3
    counts = symbol_counts(row)
    if aligned(row):
        n_s = max(counts.values(), default=0)
        return w2 * n_s / c
    x = max(counts.values())
    if x <= 1:
        x = 0
    return w1 * x / c

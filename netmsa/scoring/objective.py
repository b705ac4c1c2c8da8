from typing import Dict

from .classify import aligned
from .classify import most_frequent
from .weight import weight
from netmsa.config import Config
from netmsa.models import PeerMatrix


def _check_window(matrix: PeerMatrix, row_index: int, end_index: int) -> int:
    last = matrix.n_rows - 1
    if end_index is None:
        end_index = last
    if not 0 <= row_index <= last:
        raise IndexError(
            "Row {} out of range for {} rows".format(row_index, matrix.n_rows)
        )
    if not row_index <= end_index <= last:
        raise IndexError(
            "End index {} out of range [{}, {}]".format(end_index, row_index, last)
        )
    return end_index


def objective_components(
    matrix: PeerMatrix,
    row_index: int,
    end_index: int = None,
    w1: float = Config.W1,
    w2: float = Config.W2,
    w3: float = Config.W3,
) -> Dict[str, float]:
    """Return the parts of the objective score of a row.

    :return: dictionary with the number of aligned rows (``aligned``), the
        best match count of the row (``matches``), the number of inserted
        gaps (``gaps``), the summed row weights (``weight``) and the
        resulting ``score``.
    """
    end_index = _check_window(matrix, row_index, end_index)
    n_aligned = 0
    total_weight = 0.0
    for row in matrix.rows(row_index, end_index):
        if aligned(row):
            n_aligned += 1
        total_weight += weight(row, w1=w1, w2=w2, w3=w3)
    matches, _ = most_frequent(matrix.row(row_index))
    gaps = matrix.inserted_gaps(row_index, end_index)
    score = (n_aligned * matches) / (1 + gaps) * total_weight
    return {
        "aligned": n_aligned,
        "matches": matches,
        "gaps": gaps,
        "weight": total_weight,
        "score": score,
    }


def objective(
    matrix: PeerMatrix,
    row_index: int,
    end_index: int = None,
    w1: float = Config.W1,
    w2: float = Config.W2,
    w3: float = Config.W3,
) -> float:
    r"""Return the objective score of the row, calculated as follows:

    .. math::

        f(x_s(r)) = \frac{A(r) \times C(r)}{1 + Gaps(r)} \times \sum_{j=r}^{k} w(j)

    where :math:`A(r)` is the number of aligned rows from `row_index` to
    `end_index`, :math:`C(r)` is the largest number of matched symbols in the
    row, :math:`Gaps(r)` is the number of gaps inserted into the matrix
    between the same rows and :math:`w(j)` is the :func:`weight` of row `j`.

    `end_index` limits the lookahead to a neighborhood of the row; it
    defaults to the last row.

    .. code-block:: python

        M = build_peer_matrix(["abcbcdem", "acbcfg", "abchimn", "abcbcjkm"])
        objective(M, 1)
        # 2.625

    :param matrix: the peer matrix
    :param row_index: the row to score
    :param end_index: inclusive last row of the lookahead window
    :return: the score; higher is better
    """
    return objective_components(
        matrix, row_index, end_index, w1=w1, w2=w2, w3=w3
    )["score"]

import pytest

from netmsa.constants import Constants
from netmsa.engine import candidate_shifts
from netmsa.engine import evaluate_shift
from netmsa.engine import Shift
from netmsa.models import build_peer_matrix


def test_golden_candidates(golden_matrix):
    shifts = candidate_shifts(golden_matrix, 1, "b")
    assert shifts == [
        Shift(1, [1], 1, Constants.OPEN, "b"),
        Shift(1, [0, 2, 3], 1, Constants.LIFT, "b"),
    ]
    assert [s.kind for s in shifts] == [Constants.OPEN, Constants.LIFT]


def test_no_candidates_for_full_row(golden_matrix):
    assert candidate_shifts(golden_matrix, 0, "a") == []


def test_no_candidates_without_deeper_occurrence(golden_matrix):
    assert candidate_shifts(golden_matrix, 3, "b") == []


def test_neighborhood_limits_candidates():
    matrix = build_peer_matrix(["ab", "xyzab"])
    assert candidate_shifts(matrix, 0, "a", neighborhood=2) == []
    shifts = candidate_shifts(matrix, 0, "a", neighborhood=3)
    assert [s.count for s in shifts] == [1, 3]
    assert candidate_shifts(matrix, 0, "a", neighborhood=None) == shifts


def test_no_open_on_gap_cell(golden_matrix):
    golden_matrix.insert_gaps(1, [1])
    shifts = candidate_shifts(golden_matrix, 1, "b")
    assert shifts == [Shift(1, [0, 2, 3], 2, Constants.LIFT, "b")]


def test_evaluate_does_not_modify_matrix(golden_matrix):
    copied = golden_matrix.copy()
    open_shift, lift_shift = candidate_shifts(golden_matrix, 1, "b")
    assert evaluate_shift(golden_matrix, open_shift) == pytest.approx(9.0)
    assert evaluate_shift(golden_matrix, lift_shift) == pytest.approx(2.625)
    assert golden_matrix == copied


def test_evaluate_with_window(golden_matrix):
    open_shift = Shift(1, [1], 1, Constants.OPEN, "b")
    # rows 1..4 after the shift: two aligned rows, weights 1.75, one gap
    assert evaluate_shift(golden_matrix, open_shift, window=2) == pytest.approx(5.25)


def test_evaluate_with_weights(golden_matrix):
    open_shift = Shift(1, [1], 1, Constants.OPEN, "b")
    score = evaluate_shift(golden_matrix, open_shift, weights=(0.25, 0.5, 2.0))
    assert score == pytest.approx(9.0 / 2.0 * 3.0)

import pytest

from netmsa.constants import Constants
from netmsa.models import GAP
from netmsa.scoring import aligned
from netmsa.scoring import classify_row
from netmsa.scoring import full
from netmsa.scoring import most_frequent
from netmsa.scoring import symbol_counts


@pytest.mark.parametrize(
    "row,is_aligned,is_full,cls",
    [
        (("a", "a", "a", "a"), True, True, Constants.FULL),
        (("b", "c", "b", "b"), False, False, Constants.UNALIGNED),
        (("m", GAP, GAP, "m"), True, False, Constants.ALIGNED),
        ((GAP, GAP), True, False, Constants.ALIGNED),
        (("e", GAP, "n", "k"), False, False, Constants.UNALIGNED),
        (("x",), True, True, Constants.FULL),
    ],
    ids=["full", "unaligned", "aligned_with_gaps", "all_gaps", "distinct", "single"],
)
def test_classify(row, is_aligned, is_full, cls):
    assert aligned(row) is is_aligned
    assert full(row) is is_full
    assert classify_row(row) == cls


def test_golden_rows(golden_matrix):
    assert aligned(golden_matrix.row(0))
    assert full(golden_matrix.row(0))
    assert not aligned(golden_matrix.row(1))


def test_full_implies_aligned(golden_matrix):
    for row in golden_matrix.rows():
        if full(row):
            assert aligned(row)
            assert GAP not in row


def test_symbol_counts_ignore_gaps():
    counts = symbol_counts(("c", GAP, "b", "c"))
    assert dict(counts) == {"c": 2, "b": 1}
    assert list(counts) == ["c", "b"]


def test_most_frequent(golden_matrix):
    assert most_frequent(golden_matrix.row(1)) == (3, "b")


def test_most_frequent_tie_first_occurrence():
    assert most_frequent(("x", "a")) == (1, "x")
    assert most_frequent(("c", "b", "b", "c")) == (2, "c")


def test_most_frequent_all_gaps():
    assert most_frequent((GAP, GAP)) == (0, None)

r"""
Engine (:mod:`netmsa.engine`)
=============================

.. currentmodule:: netmsa.engine

Iterative refinement of a peer matrix by gap insertion.
"""
from .engine import align
from .engine import AlignmentEngine
from .engine import AlignmentResult
from .shift import candidate_shifts
from .shift import evaluate_shift
from .shift import Shift

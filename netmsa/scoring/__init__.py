r"""
Scoring (:mod:`netmsa.scoring`)
===============================

.. currentmodule:: netmsa.scoring

Row classification, row weights and the objective score.

.. autosummary::
    :toctree: generated/

    classify
    weight
    objective
"""
from .classify import aligned
from .classify import classify_row
from .classify import full
from .classify import most_frequent
from .classify import symbol_counts
from .objective import objective
from .objective import objective_components
from .weight import weight

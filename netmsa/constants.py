r"""
Constants (:mod:`netmsa.constants`)
===================================

.. currentmodule:: netmsa.constants

This module provides NetMSA constants.
"""


class Constants:
    """NetMSA constants."""

    ################
    # ROW CLASSES
    ################
    FULL = "FULL"  #: aligned row without gaps
    ALIGNED = "ALIGNED"  #: row holding at most one distinct symbol
    UNALIGNED = "UNALIGNED"  #: row holding two or more distinct symbols

    ################
    # ROW STATES
    ################
    PENDING = "PENDING"  #: row not yet evaluated in the current sweep
    IN_PROGRESS = "IN_PROGRESS"  #: row currently being evaluated
    STABLE = "STABLE"  #: row with no improving shift left

    ################
    # TERMINATION
    ################
    CONVERGED = "CONVERGED"  #: a full sweep committed no shift
    BOUND_EXCEEDED = "BOUND_EXCEEDED"  #: iteration bound hit before a fixed point

    ################
    # SHIFT KINDS
    ################
    OPEN = "OPEN"  #: push a mismatched symbol down by one gap
    LIFT = "LIFT"  #: move the anchor group down to a deeper occurrence

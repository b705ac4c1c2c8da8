r"""
Exceptions (:mod:`netmsa.exceptions`)
=====================================

.. currentmodule:: netmsa.exceptions

This module provides NetMSA exceptions and warnings
"""


class NetMSAWarning(Warning):
    """A generic netmsa warning."""


class NetMSAException(Exception):
    """A generic netmsa exception."""


class InvalidInputError(NetMSAException):
    """Input sequences or a peer matrix were malformed."""


class ShiftException(NetMSAException):
    """A gap insertion could not be applied to the peer matrix."""


class NonConvergenceError(NetMSAException):
    """The iteration bound was reached before a fixed point.

    The best-effort alignment is available as ``result``.
    """

    def __init__(self, msg: str, result=None):
        super().__init__(msg)
        self.result = result

"""Package logger.

Bind a child logger to an instance with ``logger(self)``; change the verbosity
of the whole package with ``logger.set_level("INFO")``.
"""
from loggable import Loggable

logger = Loggable("netmsa")

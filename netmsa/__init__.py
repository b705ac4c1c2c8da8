"""

.. module:: netmsa

Submodules
==========

.. autosummary::
    :toctree: _autosummary

    models
    scoring
    engine
    utils
    config
    constants
    exceptions
    log
"""
from .__version__ import __authors__
from .__version__ import __homepage__
from .__version__ import __repo__
from .__version__ import __title__
from .__version__ import __version__
from .config import Config
from .constants import Constants
from .engine import align
from .engine import AlignmentEngine
from .engine import AlignmentResult
from .exceptions import InvalidInputError
from .exceptions import NonConvergenceError
from .log import logger
from .models import build_peer_matrix
from .models import GAP
from .models import locate
from .models import PeerMatrix
from .models import Position
from .scoring import aligned
from .scoring import full
from .scoring import most_frequent
from .scoring import objective
from .scoring import weight

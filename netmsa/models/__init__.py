"""Peer matrix, cells and positions."""
from .cell import Cell
from .cell import GAP
from .cell import Gap
from .cell import is_gap
from .peer_matrix import build_peer_matrix
from .peer_matrix import PeerMatrix
from .position import locate
from .position import Particle
from .position import ParticleSwarm
from .position import Position

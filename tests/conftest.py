import pytest

from netmsa import build_peer_matrix
from netmsa.log import logger

##############################
# Global setup
##############################
logger.set_level("INFO")

##############################
# Fixtures
##############################
GOLDEN = ["abcbcdem", "acbcfg", "abchimn", "abcbcjkm"]


@pytest.fixture
def golden_sequences():
    return list(GOLDEN)


@pytest.fixture
def golden_matrix(golden_sequences):
    return build_peer_matrix(golden_sequences)

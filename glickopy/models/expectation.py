"""
the g function and expected score E of Glicko-2, all inputs on the Glicko-2 scale
"""
import math
from functools import lru_cache
import numpy as np
from glickopy.utils.constants import THREE_OVER_PI_SQUARED
from glickopy.utils.math_utils import sigmoid, sigmoid_scalar


def g_scalar(phi):
    """this is DIFFERENT from g in regular Glicko"""
    return 1.0 / math.sqrt(1.0 + (THREE_OVER_PI_SQUARED * (phi**2.0)))


def g_vector(phi):
    """vector version"""
    return 1.0 / np.sqrt(1.0 + (THREE_OVER_PI_SQUARED * np.square(phi)))


@lru_cache(maxsize=4096)
def g_cached(phi):
    """memoized g_scalar, keyed by the deviation, for rosters where the same opponents show up repeatedly"""
    return g_scalar(phi)


def expected_score_scalar(mu, opp_mu, opp_phi, g=g_scalar):
    """probability of the competitor at mu scoring against the opponent at (opp_mu, opp_phi)"""
    return sigmoid_scalar(g(opp_phi) * (mu - opp_mu))


def expected_score_vector(mu, opp_mus, opp_phis):
    """vector version, one expected score per opponent"""
    return sigmoid(g_vector(opp_phis) * (mu - np.asarray(opp_mus, dtype=np.float64)))

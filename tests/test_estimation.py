"""
example from: http://www.glicko.net/glicko/glicko2.pdf
"""
import math
import numpy as np
import pytest
from glickopy.models.estimation import estimate_variance, estimate_improvement, estimate_improvement_partial
from glickopy.models.expectation import (
    g_cached,
    g_scalar,
    g_vector,
    expected_score_scalar,
    expected_score_vector,
)

OPP_MUS = np.array([-0.5756, 0.2878, 1.1513])
OPP_PHIS = np.array([0.1727, 0.5756, 1.7269])
OUTCOMES = np.array([1.0, 0.0, 0.0])


def test_g():
    expected = [0.9955, 0.9531, 0.7242]
    assert g_vector(OPP_PHIS) == pytest.approx(expected, abs=1e-4)
    for phi, g in zip(OPP_PHIS, expected):
        assert g_scalar(phi) == pytest.approx(g, abs=1e-4)
        assert g_cached(float(phi)) == g_scalar(float(phi))


def test_g_of_zero_deviation_is_one():
    assert g_scalar(0.0) == 1.0


def test_expected_score():
    expected = [0.639, 0.432, 0.303]
    assert expected_score_vector(0.0, OPP_MUS, OPP_PHIS) == pytest.approx(expected, abs=1e-3)
    for mu, phi, e in zip(OPP_MUS, OPP_PHIS, expected):
        assert expected_score_scalar(0.0, mu, phi) == pytest.approx(e, abs=1e-3)


def test_expected_score_even_matchup():
    assert expected_score_scalar(0.3, 0.3, 1.0) == 0.5


def test_variance_and_improvement():
    gs = g_vector(OPP_PHIS)
    probs = expected_score_vector(0.0, OPP_MUS, OPP_PHIS)
    v = estimate_variance(gs, probs)
    assert v == pytest.approx(1.7785, abs=1e-3)
    assert estimate_improvement(gs, probs, OUTCOMES) == pytest.approx(-0.4834, abs=1e-3)
    assert estimate_improvement(gs, probs, OUTCOMES, v=v) == pytest.approx(
        v * estimate_improvement_partial(gs, probs, OUTCOMES)
    )


def test_improvement_accepts_lists():
    assert estimate_improvement_partial([1.0, 1.0], [0.5, 0.5], [1.0, 0.5]) == 0.5


def test_empty_rejected():
    with pytest.raises(ValueError):
        estimate_variance([], [])
    with pytest.raises(ValueError):
        estimate_improvement_partial([], [], [])


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        estimate_variance([0.9, 0.8], [0.5])
    with pytest.raises(ValueError):
        estimate_improvement_partial([0.9, 0.8], [0.5, 0.5], [1.0])


def test_zero_information_rejected():
    # expected scores of exactly 0 or 1 carry no information
    with pytest.raises(ValueError):
        estimate_variance([1.0, 1.0], [1.0, 0.0])
    assert not math.isinf(estimate_variance([1.0, 1.0], [1.0, 0.5]))

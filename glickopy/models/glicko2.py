"""
Glicko 2
paper: http://www.glicko.net/research/dpcmsv.pdf
example: http://www.glicko.net/glicko/glicko2.pdf

The calculation for one competitor over one rating period:
    1. convert the competitor and opponents to the Glicko-2 scale
    2. compute g and E against each opponent
    3. estimate the variance v and the improvement delta from the outcomes
    4. find the new volatility sigma'
    5. compute the new deviation phi' and the new rating mu'
    6. convert back to the public scale and clamp the deviation to the system's base deviation
"""
import logging
import math
from typing import Sequence
import numpy as np
from glickopy.core.rating import Rating, to_public
from glickopy.models import batch
from glickopy.models.estimation import estimate_variance, estimate_improvement_partial
from glickopy.models.expectation import g_cached, g_scalar, g_vector, expected_score_scalar
from glickopy.models.volatility import solve_volatility
from glickopy.utils.constants import EPSILON, MAX_ITERATIONS
from glickopy.utils.math_utils import sigmoid

logger = logging.getLogger(__name__)


def new_deviation(phi, sigma_prime, v):
    """phi' = 1 / sqrt(1 / phi*^2 + 1 / v) where phi* is the L2 norm of the deviation and new volatility"""
    phi_star_squared = (phi**2.0) + (sigma_prime**2.0)
    return 1.0 / math.sqrt((1.0 / phi_star_squared) + (1.0 / v))


def new_rating_value(mu, phi_prime, improvement_partial):
    """mu' = mu + phi'^2 * sum(g * (s - E))"""
    return mu + (phi_prime**2.0) * improvement_partial


def _as_outcomes(results, num_opponents):
    outcomes = np.asarray(results, dtype=np.float64)
    if outcomes.ndim != 1:
        raise ValueError(f'Results must be a flat sequence, got an array of shape {outcomes.shape}')
    if outcomes.shape[0] != num_opponents:
        raise ValueError(
            f'Number of opponents must == number of results. {num_opponents} != {outcomes.shape[0]}'
        )
    if num_opponents == 0:
        raise ValueError('Cannot update a rating without any opponents')
    if not np.all(np.isfinite(outcomes)) or np.any((outcomes < 0.0) | (outcomes > 1.0)):
        raise ValueError(f'Results must lie between 0 (loss) and 1 (win), got {outcomes.tolist()}')
    return outcomes


def _check_ratings(player, opponents):
    if not (math.isfinite(player.volatility) and player.volatility > 0.0):
        raise ValueError(f'Volatility must be positive to update a rating, got {player.volatility}')
    for rating in [player, *opponents]:
        if not (math.isfinite(rating.rating) and math.isfinite(rating.deviation) and rating.deviation >= 0.0):
            raise ValueError(f'Ratings must be finite with a non-negative deviation, got {rating}')


class Glicko2:
    """
    Implements the Glicko 2 rating system, designed by Mark Glickman.

    The engine holds no ratings and no mutable state, every parameter of the system comes from
    the RatingSystem attached to the rating being updated. One engine can be shared by any number
    of callers.
    """

    def __init__(
        self,
        epsilon: float = EPSILON,
        max_iter: int = MAX_ITERATIONS,
        use_cache: bool = False,
    ):
        """
        Initializes the update engine.

        Parameters:
            epsilon (float, optional): Convergence tolerance of the volatility solver. Defaults to 1e-6.
            max_iter (int, optional): Iteration cap of the volatility solver. Defaults to 100.
            use_cache (bool, optional): Memoize g by opponent deviation instead of recomputing it. Defaults to False.
        """
        self.epsilon = epsilon
        self.max_iter = max_iter
        self.use_cache = use_cache

    def gs_and_probs(self, mu, opp_mus, opp_phis):
        """g and E for every opponent, on the Glicko-2 scale"""
        if self.use_cache:
            gs = np.array([g_cached(phi) for phi in opp_phis.tolist()], dtype=np.float64)
        else:
            gs = g_vector(opp_phis)
        probs = sigmoid(gs * (mu - opp_mus))
        return gs, probs

    def predict(self, player: Rating, opponent: Rating) -> float:
        """expected score of player against opponent"""
        p2 = player.to_internal()
        o2 = opponent.to_internal()
        g = g_cached if self.use_cache else g_scalar
        return expected_score_scalar(p2.rating, o2.rating, o2.deviation, g=g)

    def rate(self, player: Rating, opponents: Sequence[Rating], results) -> Rating:
        """
        Computes the rating of player after a rating period without modifying anything.

        Parameters:
            player (Rating): the competitor being rated, on the public scale
            opponents (Sequence[Rating]): everyone the player faced during the period
            results (Sequence[float]): one Result (or score in [0, 1]) per opponent, same order as opponents

        Returns:
            Rating: a new rating on the public scale, sharing the player's system

        Raises:
            ValueError: if the numbers of opponents and results differ, if there are no opponents,
                        if a result is outside [0, 1], if the player's volatility is not positive,
                        or if a deviation is negative
            VolatilityConvergenceError: if the volatility solver does not converge
        """
        outcomes = _as_outcomes(results, len(opponents))
        _check_ratings(player, opponents)
        system = player.system

        p2 = player.to_internal()
        opps = [opponent.to_internal() for opponent in opponents]
        opp_mus = np.array([o.rating for o in opps], dtype=np.float64)
        opp_phis = np.array([o.deviation for o in opps], dtype=np.float64)

        gs, probs = self.gs_and_probs(p2.rating, opp_mus, opp_phis)
        v = estimate_variance(gs, probs)
        grad = estimate_improvement_partial(gs, probs, outcomes)
        delta = v * grad

        sigma_prime = solve_volatility(
            phi=p2.deviation,
            delta=delta,
            v=v,
            sigma=p2.volatility,
            tau=system.tau,
            epsilon=self.epsilon,
            max_iter=self.max_iter,
        )
        phi_prime = new_deviation(p2.deviation, sigma_prime, v)
        mu_prime = new_rating_value(p2.rating, phi_prime, grad)

        rated = to_public(Rating(mu_prime, phi_prime, sigma_prime, system))
        if rated.deviation > system.base_deviation:
            logger.debug('clamping deviation %s to the base deviation %s', rated.deviation, system.base_deviation)
            rated.deviation = system.base_deviation
        return rated

    def update(self, player: Rating, opponents: Sequence[Rating], results) -> Rating:
        """same as rate() but overwrites the player's values in place, nothing is changed if rate() raises"""
        rated = self.rate(player, opponents, results)
        player.rating, player.deviation, player.volatility = rated.get_values()
        return player

    def batch_rate(self, players: Sequence[Rating], results):
        """new ratings for a whole roster, see glickopy.models.batch.batch_rate"""
        return batch.batch_rate(self, players, results)

    def batch_update(self, players: Sequence[Rating], results):
        """updates a whole roster in place, see glickopy.models.batch.batch_update"""
        return batch.batch_update(self, players, results)


DEFAULT_ENGINE = Glicko2()


def rate(player, opponents, results):
    return DEFAULT_ENGINE.rate(player, opponents, results)


def update(player, opponents, results):
    return DEFAULT_ENGINE.update(player, opponents, results)


def batch_update(players, results):
    return DEFAULT_ENGINE.batch_update(players, results)

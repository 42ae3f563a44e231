"""
updating a whole roster after a round where everyone played everyone

Every competitor must be rated against the pre-round values of their opponents. Updating
competitors in place one at a time would let later competitors see the new ratings of earlier
ones, so all new ratings are computed from a frozen snapshot first and committed only at the end.
"""
import logging
from typing import List, Sequence
import numpy as np

logger = logging.getLogger(__name__)


def players_except(index: int, players: Sequence) -> list:
    """all players except the one at index, order preserved"""
    return [player for idx, player in enumerate(players) if idx != index]


def results_except(index: int, results: Sequence) -> list:
    """all results except the one at index, order preserved"""
    return [result for idx, result in enumerate(results) if idx != index]


def _as_results_matrix(results, num_players):
    results = np.asarray(results, dtype=np.float64)
    if results.shape != (num_players, num_players):
        raise ValueError(f'Expected a ({num_players}, {num_players}) results matrix, got shape {results.shape}')
    return results


def batch_rate(engine, players: Sequence, results) -> List:
    """
    Computes the post-round rating of every player without modifying any of them.

    Parameters:
        engine: anything with a rate(player, opponents, results) method, usually a Glicko2
        players (Sequence[Rating]): the roster
        results: (N, N) array-like, row i holds player i's result against every player,
                 the diagonal entry is ignored

    Returns:
        list of Rating: new ratings in roster order

    Raises:
        ValueError: if the results matrix is not (N, N) or the roster has exactly one player
    """
    if len(players) == 0:
        return []
    results = _as_results_matrix(results, len(players))
    snapshot = [player.copy() for player in players]
    rated = []
    for idx, player in enumerate(snapshot):
        logger.debug('rating player %d of %d', idx + 1, len(snapshot))
        rated.append(
            engine.rate(
                player,
                players_except(idx, snapshot),
                results_except(idx, results[idx].tolist()),
            )
        )
    return rated


def batch_update(engine, players: Sequence, results) -> Sequence:
    """same as batch_rate() but commits the new values to the players, all or nothing"""
    rated = batch_rate(engine, players, results)
    for player, new in zip(players, rated):
        player.rating, player.deviation, player.volatility = new.get_values()
    return players

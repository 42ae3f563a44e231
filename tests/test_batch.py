import numpy as np
import pytest
from glickopy.core.rating import Rating, Result
from glickopy.models import glicko2
from glickopy.models.batch import batch_rate, players_except, results_except
from glickopy.models.glicko2 import Glicko2

W, L, D = Result.WIN, Result.LOSS, Result.DRAW


def roster():
    return [
        Rating(1500.0, 200.0, 0.06),
        Rating(1400.0, 30.0, 0.06),
        Rating(1550.0, 100.0, 0.06),
        Rating(1700.0, 300.0, 0.06),
    ]


# row i is player i's result against every player, the diagonal is ignored
RESULTS = np.array(
    [
        [D, W, L, L],
        [L, D, D, L],
        [W, D, D, W],
        [W, W, L, D],
    ],
    dtype=np.float64,
)


def test_players_except():
    assert players_except(1, ['a', 'b', 'c']) == ['a', 'c']
    assert players_except(0, ['a']) == []


def test_results_except():
    assert results_except(2, [W, L, D, W]) == [W, L, W]


def test_batch_uses_pre_round_ratings():
    players = roster()
    expected = [
        Glicko2().rate(player, players_except(idx, players), results_except(idx, RESULTS[idx].tolist()))
        for idx, player in enumerate(players)
    ]
    rated = Glicko2().batch_update(players, RESULTS)
    assert rated is players
    for player, exp in zip(players, expected):
        assert player.get_values() == exp.get_values()


def test_player_zero_matches_glickman_example():
    players = roster()
    Glicko2().batch_update(players, RESULTS)
    assert players[0].rating == pytest.approx(1464.06, abs=0.01)
    assert players[0].deviation == pytest.approx(151.52, abs=0.01)


def test_batch_rate_does_not_modify():
    players = roster()
    before = [player.get_values() for player in players]
    rated = batch_rate(Glicko2(), players, RESULTS)
    assert [player.get_values() for player in players] == before
    assert all(new is not old for new, old in zip(rated, players))


def test_roster_order_does_not_matter():
    order = [3, 1, 0, 2]
    forward = Glicko2().batch_rate(roster(), RESULTS)
    shuffled_players = [roster()[idx] for idx in order]
    shuffled_results = RESULTS[np.ix_(order, order)]
    shuffled = Glicko2().batch_rate(shuffled_players, shuffled_results)
    for new_idx, old_idx in enumerate(order):
        assert shuffled[new_idx].rating == pytest.approx(forward[old_idx].rating, rel=1e-7)
        assert shuffled[new_idx].deviation == pytest.approx(forward[old_idx].deviation, rel=1e-7)
        assert shuffled[new_idx].volatility == pytest.approx(forward[old_idx].volatility, rel=1e-6)


def test_naive_loop_differs_from_batch():
    # updating in place one player at a time lets later players see new ratings
    naive = roster()
    for idx, player in enumerate(naive):
        Glicko2().update(player, players_except(idx, naive), results_except(idx, RESULTS[idx].tolist()))
    batched = glicko2.batch_update(roster(), RESULTS)
    assert naive[0].get_values() == batched[0].get_values()
    assert naive[-1].rating != pytest.approx(batched[-1].rating, abs=1e-6)


def test_bad_shape_rejected():
    players = roster()
    with pytest.raises(ValueError):
        Glicko2().batch_update(players, RESULTS[:3])
    assert players[0].get_values() == (1500.0, 200.0, 0.06)


def test_failure_commits_nothing():
    players = roster()
    results = RESULTS.astype(np.float64)
    results[3, 0] = 2.0
    with pytest.raises(ValueError):
        Glicko2().batch_update(players, results)
    assert [player.get_values() for player in players] == [player.get_values() for player in roster()]


def test_single_player_roster_rejected():
    with pytest.raises(ValueError):
        Glicko2().batch_update([Rating()], [[D]])


def test_empty_roster():
    assert Glicko2().batch_rate([], []) == []
    assert Glicko2().batch_update([], []) == []

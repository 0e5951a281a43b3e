from itertools import combinations

import pytest

from americanopairing.models import Player
from americanopairing.pairing.candidates import CandidateGenerator, search_depth_for


def _players(count):
    return [Player(f"Player {i}", id=f"p{i}") for i in range(count)]


def _keys(quads):
    return [frozenset(p.id for p in quad) for quad in quads]


@pytest.mark.parametrize(
    "available, depth",
    [(4, 70), (8, 70), (9, 150), (12, 150), (13, 250), (20, 250), (21, 400), (40, 400)],
)
def test_search_depth_grows_in_steps(available, depth):
    assert search_depth_for(available) == depth


def test_too_few_players_yield_no_candidates():
    assert CandidateGenerator().generate(_players(3)) == []


def test_four_players_yield_a_single_quad():
    players = _players(4)

    candidates = CandidateGenerator().generate(players)

    assert _keys(candidates) == [frozenset(p.id for p in players)]


def test_eight_players_are_searched_exhaustively():
    candidates = CandidateGenerator().generate(_players(8))

    assert len(candidates) == 70
    assert len(set(_keys(candidates))) == 70


def test_top_slice_comes_first_and_search_depth_is_respected():
    players = _players(12)

    candidates = CandidateGenerator().generate(players)

    top = {frozenset(p.id for p in q) for q in combinations(players[:8], 4)}
    assert len(candidates) == 150
    assert set(_keys(candidates[:70])) == top
    assert len(set(_keys(candidates))) == len(candidates)


def test_ninth_player_is_mixed_into_candidates():
    players = _players(9)

    candidates = CandidateGenerator().generate(players)

    with_ninth = [key for key in _keys(candidates) if "p8" in key]
    # one of p0-p3, one of p4-p7 and any third from p0-p7:
    # C(8, 3) triples minus the 4 + 4 drawn from a single band
    assert len(with_ninth) == 48
    assert len(candidates) == 70 + 48
    assert len(set(_keys(candidates))) == len(candidates)


def test_large_pool_reaches_past_the_top_slice():
    players = _players(20)

    candidates = CandidateGenerator().generate(players)

    assert len(candidates) == 250
    assert len(set(_keys(candidates))) == 250
    beyond_top = {p.id for p in players[12:]}
    assert any(beyond_top & key for key in _keys(candidates[70:]))
    for quad in candidates:
        assert len({p.id for p in quad}) == 4


def test_explicit_search_depth_caps_the_list():
    candidates = CandidateGenerator().generate(_players(16), search_depth=10)

    assert len(candidates) == 10

import pytest

from americanopairing.models import Match, Player
from americanopairing.pairing.ledger import PairingLedger
from americanopairing.pairing.scorer import (
    MatchScorer,
    ScoringWeights,
    seed_for,
    team_splits,
)

NO_JITTER = ScoringWeights(jitter_weight=0.0)


def _players(count, skills=None):
    skills = skills or [None] * count
    return [
        Player(f"Player {i}", id=f"p{i}", skill_level=skill)
        for i, skill in enumerate(skills)
    ]


def test_seed_depends_on_variant_and_roster_size():
    assert seed_for(0, 8) == 8
    assert seed_for(1, 8) == 1008
    assert seed_for(2, 12) == 2012


def test_team_splits_cover_the_three_pairings():
    a, b, c, d = _players(4)

    splits = team_splits((a, b, c, d))

    assert splits == [((a, b), (c, d)), ((a, c), (b, d)), ((a, d), (b, c))]


def test_fresh_match_scores_new_partner_and_opponent_bonuses():
    a, b, c, d = players = _players(4)
    scorer = MatchScorer(PairingLedger(players), weights=NO_JITTER)

    # 2 new partnerships and 4 new oppositions
    assert scorer.score((a, b), (c, d), court=1, round_index=0) == pytest.approx(1000)


def test_repeat_right_after_a_match_is_heavily_penalised():
    a, b, c, d = players = _players(4)
    ledger = PairingLedger(players)
    ledger.record_match(Match(court=1, team1=(a, b), team2=(c, d)), 0)
    scorer = MatchScorer(ledger, weights=NO_JITTER)

    assert scorer.partner_score(0, 1, round_index=1) == pytest.approx(15 - 80 - 300)
    assert scorer.opponent_score(0, 2, round_index=1) == pytest.approx(12 - 40 - 60)
    assert scorer.partner_score(0, 2, round_index=1) == 200
    assert scorer.court_penalty((0, 1, 2, 3), court=1) == 40
    assert scorer.court_penalty((0, 1, 2, 3), court=2) == 0


def test_best_split_prefers_new_partners_and_first_split_wins_ties():
    a, b, c, d = players = _players(4)
    ledger = PairingLedger(players)
    ledger.record_match(Match(court=1, team1=(a, b), team2=(c, d)), 0)
    scorer = MatchScorer(ledger, weights=NO_JITTER)

    best = scorer.best_split((a, b, c, d), court=1, round_index=1)

    assert best.team1 == (a, c)
    assert best.team2 == (b, d)


def test_balance_penalty_uses_games_variance():
    a, b, c, d, e, f = players = _players(6)
    ledger = PairingLedger(players)
    ledger.record_match(Match(court=1, team1=(a, b), team2=(c, d)), 0)
    scorer = MatchScorer(ledger, weights=NO_JITTER)

    # games played 1, 1, 0, 0 -> population variance 0.25
    assert scorer.balance_penalty((0, 1, 4, 5)) == pytest.approx(0.25 * 25)
    assert scorer.balance_penalty((0, 1, 2, 3)) == 0


def test_rest_bonus_only_after_a_long_stretch():
    players = _players(4)
    ledger = PairingLedger(players)
    ledger.record_rest(players[0], 4)
    scorer = MatchScorer(ledger, weights=NO_JITTER)

    assert scorer.rest_bonus((0,), round_index=9) == 0
    assert scorer.rest_bonus((0,), round_index=10) == 18


def test_rest_bonus_counts_from_the_first_round():
    players = _players(4)
    scorer = MatchScorer(PairingLedger(players), weights=NO_JITTER)

    assert scorer.rest_bonus((0, 1, 2, 3), round_index=0) == 0
    assert scorer.rest_bonus((0,), round_index=4) == 0
    assert scorer.rest_bonus((0,), round_index=5) == 18


def test_skill_penalty_counts_unrated_players_as_middle_rank():
    a, b, c, d = players = _players(4, ["A", "A", "C", "C"])
    scorer = MatchScorer(PairingLedger(players), weights=NO_JITTER)

    assert scorer.skill_penalty((a, b), (c, d)) == 10 * 15
    assert scorer.skill_penalty((a, c), (b, d)) == 0

    unrated = Player("Unrated", id="u")
    # 6 + 6 against 1 + 3
    assert scorer.skill_penalty((a, b), (c, unrated)) == 8 * 15


def test_skill_penalty_is_zero_without_any_skill_levels():
    a, b, c, d = players = _players(4)
    scorer = MatchScorer(PairingLedger(players), weights=NO_JITTER)

    assert scorer.skill_penalty((a, b), (c, d)) == 0


def test_jitter_is_reproducible_and_bounded():
    a, b, c, d = players = _players(4)
    first = MatchScorer(PairingLedger(players), seed=seed_for(1, 4))
    second = MatchScorer(PairingLedger(players), seed=seed_for(1, 4))

    scores = [first.score((a, b), (c, d), 1, 0) for _ in range(5)]

    assert scores == [second.score((a, b), (c, d), 1, 0) for _ in range(5)]
    for value in scores:
        assert 1000 <= value < 1002

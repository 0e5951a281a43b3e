import pytest

from americanopairing.analysis.statistics import (
    StatisticsSummarizer,
    calculate_fairness,
    create_statistics_summarizer,
)
from americanopairing.models import Match, Player
from americanopairing.pairing.ledger import PairingLedger


def _players(count):
    return [Player(f"Player {i}", id=f"p{i}") for i in range(count)]


@pytest.mark.parametrize(
    "counts, expected",
    [
        ([], 100),
        ([0, 0, 0], 100),
        ([1, 1, 1], 100),
        ([2, 1, 0], 75),
        ([3, 1, 1, 1], 50),
        ([2, 1, 1], 67),
    ],
)
def test_fairness_compares_average_and_maximum_partner_count(counts, expected):
    assert calculate_fairness(counts) == expected


def test_summary_after_one_match_and_one_rest():
    players = _players(5)
    a, b, c, d, e = players
    ledger = PairingLedger(players)
    ledger.record_match(Match(court=1, team1=(a, b), team2=(c, d)), 0)
    ledger.record_rest(e, 0)

    stats = StatisticsSummarizer().summarize(ledger, players)

    first = stats.for_player("p0")
    assert first.games == 1
    assert first.unique_partners == 1
    assert first.unique_opponents == 2
    assert first.max_partner_repeats == 1
    assert first.max_opponent_repeats == 1
    assert first.fairness == 100

    rested = stats.for_player("p4")
    assert rested.games == 0
    assert rested.times_rested == 1
    assert rested.max_partner_repeats == 0
    assert rested.fairness == 100

    summary = stats.summary
    assert summary.total_players == 5
    assert summary.min_games == 0
    assert summary.max_games == 1
    assert summary.avg_games_per_player == 0.8
    assert summary.avg_unique_partners == 0.8
    assert summary.avg_unique_opponents == 1.6
    assert summary.max_partner_repeats == 1
    assert summary.avg_fairness == 100


def test_repeated_partnership_lowers_fairness():
    players = _players(6)
    a, b, c, d, e, f = players
    ledger = PairingLedger(players)
    ledger.record_match(Match(court=1, team1=(a, b), team2=(c, d)), 0)
    ledger.record_match(Match(court=1, team1=(a, b), team2=(e, f)), 1)
    ledger.record_match(Match(court=1, team1=(a, c), team2=(e, f)), 2)

    stats = create_statistics_summarizer().summarize(ledger, players)

    # a partnered b twice and c once
    assert stats.for_player("p0").fairness == 75
    assert stats.for_player("p0").max_partner_repeats == 2
    assert stats.summary.max_partner_repeats == 2


def test_averages_are_rounded_to_one_decimal():
    players = _players(6)
    a, b, c, d, e, f = players
    ledger = PairingLedger(players)
    ledger.record_match(Match(court=1, team1=(a, b), team2=(c, d)), 0)

    summary = StatisticsSummarizer().summarize(ledger, players).summary

    # 4 games over 6 players
    assert summary.avg_games_per_player == 0.7


def test_matrices_follow_roster_order():
    players = _players(4)
    a, b, c, d = players
    ledger = PairingLedger(players)
    ledger.record_match(Match(court=1, team1=(a, c), team2=(b, d)), 0)

    stats = StatisticsSummarizer().summarize(ledger, players)

    assert stats.partner_matrix[0] == (0, 0, 1, 0)
    assert stats.opponent_matrix[0] == (0, 1, 0, 1)
    assert stats.games_played == (1, 1, 1, 1)
    assert set(stats.to_dict()) == {
        "player_stats",
        "summary",
        "games_played",
        "partner_matrix",
        "opponent_matrix",
    }


def test_unknown_player_lookup_raises():
    players = _players(4)
    stats = StatisticsSummarizer().summarize(PairingLedger(players), players)

    with pytest.raises(KeyError):
        stats.for_player("nobody")

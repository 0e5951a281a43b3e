import pytest

from americanopairing.constants import NEVER_PAIRED_ROUND, NEVER_RESTED_ROUND
from americanopairing.models import Match, Player
from americanopairing.pairing.ledger import PairingLedger


def _players(count):
    return [Player(f"Player {i}", id=f"p{i}") for i in range(count)]


def _match(players, court=1):
    a, b, c, d = players
    return Match(court=court, team1=(a, b), team2=(c, d))


def test_new_ledger_starts_from_sentinels():
    ledger = PairingLedger(_players(5))

    assert len(ledger) == 5
    assert ledger.games_played_list() == [0] * 5
    assert ledger.last_partner_round(0, 1) == NEVER_PAIRED_ROUND
    assert ledger.last_opponent_round(0, 1) == NEVER_PAIRED_ROUND
    assert ledger.last_rest_round(3) == NEVER_RESTED_ROUND
    assert ledger.last_court(0) is None


def test_record_match_updates_both_cells_of_every_pair():
    players = _players(4)
    ledger = PairingLedger(players)

    ledger.record_match(_match(players, court=2), round_index=3)

    assert ledger.partner_count(0, 1) == ledger.partner_count(1, 0) == 1
    assert ledger.partner_count(2, 3) == ledger.partner_count(3, 2) == 1
    assert ledger.partner_count(0, 2) == 0
    for i in (0, 1):
        for j in (2, 3):
            assert ledger.opponent_count(i, j) == ledger.opponent_count(j, i) == 1
            assert ledger.last_opponent_round(i, j) == ledger.last_opponent_round(j, i) == 3
    assert ledger.opponent_count(0, 1) == 0
    assert ledger.last_partner_round(1, 0) == 3
    assert ledger.games_played_list() == [1, 1, 1, 1]
    assert [ledger.last_court(i) for i in range(4)] == [2, 2, 2, 2]


def test_matrices_stay_symmetric_over_several_matches():
    players = _players(8)
    ledger = PairingLedger(players)
    ledger.record_match(_match(players[:4]), 0)
    ledger.record_match(_match(players[4:], court=2), 0)
    ledger.record_match(_match([players[0], players[4], players[1], players[5]]), 1)

    partners = ledger.partner_matrix()
    opponents = ledger.opponent_matrix()
    for i in range(8):
        for j in range(8):
            assert partners[i][j] == partners[j][i]
            assert opponents[i][j] == opponents[j][i]


def test_record_rest_tracks_count_and_round():
    players = _players(5)
    ledger = PairingLedger(players)

    ledger.record_rest(players[4], 0)
    ledger.record_rest(players[4], 2)

    assert ledger.times_rested(4) == 2
    assert ledger.last_rest_round(4) == 2
    assert ledger.times_rested(0) == 0


def test_rounds_since_rest_counts_from_the_first_round():
    players = _players(5)
    ledger = PairingLedger(players)
    ledger.record_rest(players[4], 2)

    assert ledger.rounds_since_rest(0, 0) == 1
    assert ledger.rounds_since_rest(0, 3) == 4
    assert ledger.rounds_since_rest(4, 3) == 1


def test_partner_counts_exclude_the_player_itself():
    players = _players(6)
    ledger = PairingLedger(players)
    ledger.record_match(_match(players[:4]), 0)

    assert len(ledger.partner_counts(0)) == 5
    assert ledger.unique_partners(0) == 1
    assert ledger.unique_opponents(0) == 2
    assert ledger.unique_partners(5) == 0


def test_snapshots_are_copies():
    players = _players(4)
    ledger = PairingLedger(players)
    ledger.record_match(_match(players), 0)

    ledger.partner_matrix()[0][1] = 99
    ledger.court_history(0).append(7)
    ledger.games_played_list()[0] = 99

    assert ledger.partner_count(0, 1) == 1
    assert ledger.court_history(0) == [1]
    assert ledger.games_played(0) == 1


def test_unknown_player_id_raises_key_error():
    ledger = PairingLedger(_players(4))

    with pytest.raises(KeyError):
        ledger.index_of("nobody")

import pytest

from americanopairing.analysis.forecast import estimate_fairness, suggest_player_count


def test_small_full_field_is_excellent():
    forecast = estimate_fairness(8, 2, 7)

    assert forecast.score == 84
    assert forecast.status == "excellent"
    assert forecast.resting_players_per_round == 0
    assert forecast.factors == {
        "partner_variety": 80,
        "game_balance": 80,
        "opponent_variety": 80,
        "court_ratio": 70,
        "games_per_player": 85,
    }
    assert forecast.recommendations == []


def test_crowded_short_event_hits_the_floor():
    forecast = estimate_fairness(24, 2, 4)

    assert forecast.score == 10
    assert forecast.status == "terrible"
    assert forecast.resting_players_per_round == 16
    assert len(forecast.recommendations) == 4


@pytest.mark.parametrize(
    "players, courts, rounds", [(3, 1, 5), (0, 1, 5), (8, 0, 5), (8, 2, 0)]
)
def test_invalid_input_scores_zero(players, courts, rounds):
    forecast = estimate_fairness(players, courts, rounds)

    assert forecast.score == 0
    assert forecast.status == "invalid"
    assert not forecast.is_valid


@pytest.mark.parametrize("players", range(4, 33))
def test_scores_stay_in_the_estimate_range(players):
    forecast = estimate_fairness(players, 3, 8)

    assert 10 <= forecast.score <= 85
    assert forecast.to_dict()["estimate"] is True


def test_player_count_suggestion_leaves_room_to_rotate():
    suggestion = suggest_player_count(2, 7)

    assert suggestion.optimal % 2 == 0
    assert suggestion.optimal >= 10
    assert suggestion.max_reasonable >= 10
    assert suggestion.absolute_max >= 12

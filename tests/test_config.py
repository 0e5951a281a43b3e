import pytest

from americanopairing.exceptions import InvalidConfigurationException
from americanopairing.models import BreakPeriod, TournamentConfig
from americanopairing.utils.validation import validate_tournament_config


def test_from_dict_accepts_camel_case_keys():
    config = TournamentConfig.from_dict(
        {
            "courts": 3,
            "roundDuration": 20,
            "startTime": "10:00",
            "endTime": "13:00",
            "variantIndex": 2,
            "breaks": [{"startTime": "11:30", "duration": 20}],
        }
    )

    assert config.courts == 3
    assert config.rounds is None
    assert config.round_duration == 20
    assert config.start_time == "10:00"
    assert config.end_time == "13:00"
    assert config.variant_index == 2
    assert config.breaks == [BreakPeriod("11:30", 20)]


def test_snake_case_keys_win_over_camel_case():
    config = TournamentConfig.from_dict(
        {"courts": 1, "round_duration": 12, "roundDuration": 20, "rounds": "4"}
    )

    assert config.round_duration == 12
    assert config.rounds == 4


def test_round_trip_through_dict():
    config = TournamentConfig(
        courts=2, rounds=6, breaks=[BreakPeriod("12:00", 30)], variant_index=1
    )

    assert TournamentConfig.from_dict(config.to_dict()) == config


def test_resolved_rounds_from_clock_and_breaks():
    config = TournamentConfig.from_dict(
        {
            "courts": 3,
            "roundDuration": 20,
            "startTime": "10:00",
            "endTime": "13:00",
            "breaks": [{"startTime": "11:30", "duration": 20}],
        }
    )

    # 180 minutes minus a 20 minute break
    assert config.available_minutes() == 160
    assert config.resolved_rounds() == 8


def test_explicit_rounds_are_capped():
    assert TournamentConfig(courts=1, rounds=40).resolved_rounds() == 25
    assert TournamentConfig(courts=1, rounds=6).resolved_rounds() == 6


def test_from_dict_converts_numeric_strings():
    config = TournamentConfig.from_dict(
        {"courts": "2", "rounds": 5.0, "roundDuration": "20", "variantIndex": "1"}
    )

    assert config.courts == 2
    assert config.rounds == 5
    assert config.round_duration == 20
    assert config.variant_index == 1
    validate_tournament_config(config)


@pytest.mark.parametrize(
    "data",
    [
        {"courts": "two"},
        {"courts": 2, "variantIndex": "first"},
        {"courts": 2, "roundDuration": 12.5},
        {"courts": 2, "rounds": None, "variant_index": [1]},
        {"courts": True},
        {"rounds": 3},
    ],
)
def test_from_dict_rejects_values_that_are_not_whole_numbers(data):
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig.from_dict(data)


def test_validation_rejects_a_text_variant_index():
    config = TournamentConfig(courts=1, rounds=2, variant_index="1")

    with pytest.raises(InvalidConfigurationException):
        validate_tournament_config(config)

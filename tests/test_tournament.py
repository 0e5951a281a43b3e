import pytest

from americanopairing import generate_americano_schedule, generate_tournament
from americanopairing.exceptions import (
    ConfigurationException,
    InvalidConfigurationException,
    UnknownFormatException,
    UnsupportedFormatException,
)
from americanopairing.models import Player, TournamentConfig
from americanopairing.tournament.generator import AmericanoStrategy, get_format_strategy


def _players(count):
    return [Player(f"Player {i}", id=f"p{i}") for i in range(count)]


@pytest.mark.parametrize("name", ["americano", "Americano", " AMERICANO "])
def test_format_names_are_case_insensitive(name):
    assert isinstance(get_format_strategy(name), AmericanoStrategy)


def test_generate_tournament_runs_americano():
    result = generate_tournament(
        "americano", TournamentConfig(courts=2, rounds=3), _players(9)
    )

    assert result.format == "americano"
    assert len(result.rounds) == 3
    assert all(len(r.waiting_players) == 1 for r in result.rounds)


@pytest.mark.parametrize("name", ["roundrobin", "swiss", "Elimination"])
def test_known_formats_without_generator_are_unsupported(name):
    with pytest.raises(UnsupportedFormatException):
        generate_tournament(name, TournamentConfig(courts=1, rounds=2), _players(4))


def test_unknown_format_is_rejected():
    with pytest.raises(UnknownFormatException) as excinfo:
        generate_tournament("mexicano", TournamentConfig(courts=1, rounds=2), _players(4))

    assert isinstance(excinfo.value, ConfigurationException)


def test_configuration_is_checked_before_the_format():
    with pytest.raises(InvalidConfigurationException):
        generate_tournament("swiss", TournamentConfig(courts=0, rounds=2), _players(4))


def test_convenience_wrapper_uses_default_clock():
    result = generate_americano_schedule(_players(8), courts=2, rounds=3, variant_index=1)

    assert result.variant_index == 1
    assert result.seed == 1008
    assert [r.start_time for r in result.rounds] == ["09:00", "09:15", "09:30"]
    assert result.summary()["total_matches"] == 6

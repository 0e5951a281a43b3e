"""Tournament generation entry points.

Formats are served by strategy objects kept in a registry keyed by format
name. Only Americano has a generator; the other names are recognised so that
callers get a clear "not supported" error rather than "unknown format".
"""

# Americano Pairing
# Copyright (C) 2025  Americano Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Dict, Optional, Sequence

from americanopairing.constants import (
    DEFAULT_FORMAT,
    FORMAT_AMERICANO,
    FORMAT_ELIMINATION,
    FORMAT_ROUND_ROBIN,
    FORMAT_SWISS,
)
from americanopairing.exceptions import UnknownFormatException, UnsupportedFormatException
from americanopairing.models.player import Player
from americanopairing.models.tournament.result import TournamentResult
from americanopairing.models.tournament.tournament_config import TournamentConfig
from americanopairing.pairing.engine import ScheduleEngine
from americanopairing.utils import setup_logger
from americanopairing.utils.validation import validate_tournament_config

logger = setup_logger(__name__)


class FormatStrategy:
    """Generates the schedule of one tournament format."""

    name: str = ""

    def generate(self, config: TournamentConfig, players: Sequence[Player]) -> TournamentResult:
        raise NotImplementedError


class AmericanoStrategy(FormatStrategy):
    """Americano doubles: rotating partners, greedy per-court scheduling."""

    name = FORMAT_AMERICANO

    def __init__(self, engine: Optional[ScheduleEngine] = None):
        self.engine = engine or ScheduleEngine()

    def generate(self, config: TournamentConfig, players: Sequence[Player]) -> TournamentResult:
        return self.engine.generate(players, config)


# Formats that are recognised but have no generator yet
KNOWN_UNSUPPORTED_FORMATS = (FORMAT_ROUND_ROBIN, FORMAT_SWISS, FORMAT_ELIMINATION)

_REGISTRY: Dict[str, FormatStrategy] = {}


def register_format(strategy: FormatStrategy) -> None:
    """Make a format strategy available to ``generate_tournament``."""
    _REGISTRY[strategy.name.lower()] = strategy


def get_format_strategy(format_name: str) -> FormatStrategy:
    """Look up the strategy for a format name (case-insensitive).

    Raises:
        UnsupportedFormatException: Known format without a generator
        UnknownFormatException: Unrecognised format name
    """
    key = (format_name or "").strip().lower()
    if key in _REGISTRY:
        return _REGISTRY[key]
    if key in KNOWN_UNSUPPORTED_FORMATS:
        raise UnsupportedFormatException(
            f"Tournament format '{format_name}' is not supported yet"
        )
    raise UnknownFormatException(f"Unknown tournament format: '{format_name}'")


def generate_tournament(
    format_name: str, config: TournamentConfig, players: Sequence[Player]
) -> TournamentResult:
    """Generate a complete tournament schedule.

    Args:
        format_name: Tournament format, e.g. ``"americano"``
        config: Tournament configuration
        players: Roster in its original order

    Returns:
        TournamentResult with the schedule and its statistics

    Raises:
        ConfigurationException: Invalid configuration, roster or format
        PlayerException: Duplicate players in the roster
    """
    validate_tournament_config(config)
    strategy = get_format_strategy(format_name)
    logger.info(f"Generating {strategy.name} tournament for {len(players)} players")
    return strategy.generate(config, players)


def generate_americano_schedule(
    players: Sequence[Player], courts: int, rounds: int, variant_index: int = 0
) -> TournamentResult:
    """Americano schedule with default clock settings.

    Args:
        players: Roster in its original order
        courts: Number of courts
        rounds: Number of rounds
        variant_index: Which of the alternative schedules to produce

    Returns:
        TournamentResult with the schedule and its statistics
    """
    config = TournamentConfig(courts=courts, rounds=rounds, variant_index=variant_index)
    return generate_tournament(DEFAULT_FORMAT, config, players)


register_format(AmericanoStrategy())

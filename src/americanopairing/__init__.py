"""Americano Pairing: fair schedules for Americano doubles tournaments.

Typical use::

    from americanopairing import Player, TournamentConfig, generate_tournament

    players = [Player(name) for name in ("Ann", "Ben", "Cid", "Dee", "Eve")]
    result = generate_tournament("americano", TournamentConfig(courts=1, rounds=5), players)
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

from americanopairing.analysis import (
    FairnessForecast,
    FinalStatistics,
    ScheduleQualityReport,
    analyze_schedule_quality,
    estimate_fairness,
    suggest_player_count,
)
from americanopairing.exceptions import AmericanoPairingException
from americanopairing.models import (
    BreakPeriod,
    Match,
    Player,
    RoundData,
    TournamentConfig,
    TournamentResult,
)
from americanopairing.pairing import ScheduleEngine, create_schedule_engine
from americanopairing.tournament import generate_americano_schedule, generate_tournament

__version__ = "0.1.0"

__all__ = [
    "Player",
    "BreakPeriod",
    "Match",
    "RoundData",
    "TournamentConfig",
    "TournamentResult",
    "FinalStatistics",
    "ScheduleEngine",
    "create_schedule_engine",
    "generate_tournament",
    "generate_americano_schedule",
    "analyze_schedule_quality",
    "ScheduleQualityReport",
    "estimate_fairness",
    "suggest_player_count",
    "FairnessForecast",
    "AmericanoPairingException",
]

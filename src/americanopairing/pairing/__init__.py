"""Americano pairing engine: ledger, candidate search, scoring and round building."""

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

from americanopairing.pairing.candidates import CandidateGenerator, search_depth_for
from americanopairing.pairing.engine import ScheduleEngine, create_schedule_engine
from americanopairing.pairing.ledger import PairingLedger
from americanopairing.pairing.round_builder import BuiltRound, RoundBuilder, RoundState
from americanopairing.pairing.scorer import (
    DEFAULT_WEIGHTS,
    MatchScorer,
    ScoredSplit,
    ScoringWeights,
    seed_for,
    team_splits,
)

__all__ = [
    "PairingLedger",
    "CandidateGenerator",
    "search_depth_for",
    "MatchScorer",
    "ScoringWeights",
    "ScoredSplit",
    "DEFAULT_WEIGHTS",
    "seed_for",
    "team_splits",
    "RoundBuilder",
    "RoundState",
    "BuiltRound",
    "ScheduleEngine",
    "create_schedule_engine",
]

"""The finished schedule handed back to the caller."""

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

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Tuple

from americanopairing.models.tournament.round_data import RoundData

if TYPE_CHECKING:
    from americanopairing.analysis.statistics import FinalStatistics


@dataclass(frozen=True)
class TournamentResult:
    """A complete schedule plus its fairness statistics.

    Attributes:
        format: Tournament format that produced the schedule
        rounds: Rounds in play order
        statistics: Per-player and aggregate fairness figures
        variant_index: Variant requested by the caller
        seed: Seed the tie-break jitter was drawn from
    """

    format: str
    rounds: Tuple[RoundData, ...]
    statistics: "FinalStatistics"
    variant_index: int = 0
    seed: int = 0

    @property
    def total_matches(self) -> int:
        return sum(len(r.matches) for r in self.rounds)

    @property
    def players_per_round(self) -> int:
        """Players on court in a full round (the first round is always full)."""
        if not self.rounds:
            return 0
        return max(len(r.matches) for r in self.rounds) * 4

    def summary(self) -> Dict[str, Any]:
        """Headline numbers for a variant picker."""
        return {
            "total_rounds": len(self.rounds),
            "total_matches": self.total_matches,
            "players_per_round": self.players_per_round,
            "average_games_per_player": self.statistics.summary.avg_games_per_player,
            "fairness_score": self.statistics.summary.avg_fairness,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "format": self.format,
            "variant_index": self.variant_index,
            "seed": self.seed,
            "schedule": [r.to_dict() for r in self.rounds],
            "statistics": self.statistics.to_dict(),
            "summary": self.summary(),
        }

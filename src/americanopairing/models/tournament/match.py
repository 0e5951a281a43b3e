"""Data model for a single doubles match."""

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

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from americanopairing.models.player import Player
from americanopairing.type_hints import Team


@dataclass(frozen=True)
class Match:
    """One match on one court.

    Attributes
    ----------
    court : int
        Court number, starting at 1.
    team1 : tuple of Player
        The two players on the first side.
    team2 : tuple of Player
        The two players on the second side.
    """

    court: int
    team1: Team
    team2: Team

    @property
    def players(self) -> Tuple[Player, Player, Player, Player]:
        """All four players, team1 first."""
        return (self.team1[0], self.team1[1], self.team2[0], self.team2[1])

    @property
    def player_ids(self) -> Tuple[str, ...]:
        return tuple(p.id for p in self.players)

    def involves(self, player_id: str) -> bool:
        """Check if a player takes part in this match."""
        return player_id in self.player_ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "court": self.court,
            "team1": [p.to_dict() for p in self.team1],
            "team2": [p.to_dict() for p in self.team2],
            "players": list(self.player_ids),
        }

"""Data model for tournament round."""

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
from americanopairing.models.tournament.match import Match


@dataclass(frozen=True)
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    index : int
        Round index (0-indexed).
    start_time : str
        Clock time ("HH:MM") the round starts.
    end_time : str
        Clock time ("HH:MM") the round ends.
    matches : tuple of Match
        One match per court in use, courts numbered 1..k without gaps.
    waiting_players : tuple of Player
        Players resting this round.
    """

    index: int
    start_time: str
    end_time: str
    matches: Tuple[Match, ...] = ()
    waiting_players: Tuple[Player, ...] = ()

    @property
    def round_number(self) -> int:
        """Round number as shown to people (1-indexed)."""
        return self.index + 1

    @property
    def playing_players(self) -> Tuple[Player, ...]:
        return tuple(p for match in self.matches for p in match.players)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round": self.round_number,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "matches": [m.to_dict() for m in self.matches],
            "waiting_players": [p.to_dict() for p in self.waiting_players],
        }

"""Pairing ledger: who has played with and against whom, and when.

The ledger is the only mutable state of a scheduling run. It is addressed by
roster index, stores pair counters in dense ``n x n`` matrices and always
updates both cells of a pair together, so ``partner_count(a, b)`` equals
``partner_count(b, a)`` at every point in time.
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

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from americanopairing.constants import NEVER_PAIRED_ROUND, NEVER_RESTED_ROUND
from americanopairing.models.player import Player
from americanopairing.type_hints import Players

if TYPE_CHECKING:
    from americanopairing.models.tournament.match import Match

Matrix = List[List[int]]


def _square(size: int, fill: int) -> Matrix:
    return [[fill] * size for _ in range(size)]


class PairingLedger:
    """Per-player counters for one scheduling run.

    Attributes:
        players: Roster in its original order; a player's position is its index
    """

    def __init__(self, players: Sequence[Player]):
        self.players: Players = list(players)
        size = len(self.players)
        self._index: Dict[str, int] = {p.id: i for i, p in enumerate(self.players)}

        self._games_played: List[int] = [0] * size
        self._partner_count: Matrix = _square(size, 0)
        self._opponent_count: Matrix = _square(size, 0)
        self._last_partner_round: Matrix = _square(size, NEVER_PAIRED_ROUND)
        self._last_opponent_round: Matrix = _square(size, NEVER_PAIRED_ROUND)
        self._times_rested: List[int] = [0] * size
        self._last_rest_round: List[int] = [NEVER_RESTED_ROUND] * size
        self._court_history: List[List[int]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return len(self.players)

    def index_of(self, player_id: str) -> int:
        """Roster index of a player id; unknown ids raise KeyError."""
        return self._index[player_id]

    # ---------- mutation ----------

    def record_match(self, match: "Match", round_index: int) -> None:
        """Record a committed match for all four players.

        Args:
            match: The match, carrying its court number
            round_index: 0-based round the match is played in
        """
        a, b = (self.index_of(p.id) for p in match.team1)
        c, d = (self.index_of(p.id) for p in match.team2)

        for i in (a, b, c, d):
            self._games_played[i] += 1
            self._court_history[i].append(match.court)

        self._bump_pair(self._partner_count, self._last_partner_round, a, b, round_index)
        self._bump_pair(self._partner_count, self._last_partner_round, c, d, round_index)
        for i in (a, b):
            for j in (c, d):
                self._bump_pair(
                    self._opponent_count, self._last_opponent_round, i, j, round_index
                )

    def record_rest(self, player: Player, round_index: int) -> None:
        """Record that a player sat out a round."""
        i = self.index_of(player.id)
        self._times_rested[i] += 1
        self._last_rest_round[i] = round_index

    @staticmethod
    def _bump_pair(counts: Matrix, last_round: Matrix, i: int, j: int, round_index: int) -> None:
        counts[i][j] += 1
        counts[j][i] += 1
        last_round[i][j] = round_index
        last_round[j][i] = round_index

    # ---------- per-player reads ----------

    def games_played(self, i: int) -> int:
        return self._games_played[i]

    def times_rested(self, i: int) -> int:
        return self._times_rested[i]

    def last_rest_round(self, i: int) -> int:
        return self._last_rest_round[i]

    def rounds_since_rest(self, i: int, round_index: int) -> int:
        """Rounds played in a row before ``round_index``, plus one.

        A player who never rested counts from the first round, so in round 0
        everyone is at 1, the same as a player who rested in the previous
        round.
        """
        last_rest = max(self._last_rest_round[i], -1)
        return round_index - last_rest

    def court_history(self, i: int) -> List[int]:
        return list(self._court_history[i])

    def last_court(self, i: int) -> Optional[int]:
        """Court of the player's most recent match, or None before the first."""
        history = self._court_history[i]
        return history[-1] if history else None

    # ---------- pair reads ----------

    def partner_count(self, i: int, j: int) -> int:
        return self._partner_count[i][j]

    def opponent_count(self, i: int, j: int) -> int:
        return self._opponent_count[i][j]

    def last_partner_round(self, i: int, j: int) -> int:
        return self._last_partner_round[i][j]

    def last_opponent_round(self, i: int, j: int) -> int:
        return self._last_opponent_round[i][j]

    def partner_counts(self, i: int) -> List[int]:
        """Partner counts of player ``i`` against every other player."""
        return [c for j, c in enumerate(self._partner_count[i]) if j != i]

    def opponent_counts(self, i: int) -> List[int]:
        """Opponent counts of player ``i`` against every other player."""
        return [c for j, c in enumerate(self._opponent_count[i]) if j != i]

    def unique_partners(self, i: int) -> int:
        return sum(1 for c in self.partner_counts(i) if c > 0)

    def unique_opponents(self, i: int) -> int:
        return sum(1 for c in self.opponent_counts(i) if c > 0)

    # ---------- snapshots ----------

    def games_played_list(self) -> List[int]:
        return list(self._games_played)

    def partner_matrix(self) -> Matrix:
        """Copy of the partner count matrix in roster order."""
        return [list(row) for row in self._partner_count]

    def opponent_matrix(self) -> Matrix:
        """Copy of the opponent count matrix in roster order."""
        return [list(row) for row in self._opponent_count]

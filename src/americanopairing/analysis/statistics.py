"""Fairness statistics for a finished schedule.

This module turns the final pairing ledger into per-player figures and an
aggregate summary. The per-player fairness score compares how evenly a
player's partnerships are spread: a player who partnered everyone the same
number of times scores 100, a player who keeps returning to one partner
scores lower.
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

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Sequence, Tuple

from americanopairing.models.player import Player

if TYPE_CHECKING:
    from americanopairing.pairing.ledger import PairingLedger


@dataclass(frozen=True)
class PlayerStatistics:
    """Fairness figures for one player."""

    player_id: str
    name: str
    games: int = 0
    unique_partners: int = 0
    unique_opponents: int = 0
    max_partner_repeats: int = 0
    max_opponent_repeats: int = 0
    times_rested: int = 0
    fairness: int = 100  # 0-100, higher is better

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "player_id": self.player_id,
            "name": self.name,
            "games": self.games,
            "unique_partners": self.unique_partners,
            "unique_opponents": self.unique_opponents,
            "max_partner_repeats": self.max_partner_repeats,
            "max_opponent_repeats": self.max_opponent_repeats,
            "times_rested": self.times_rested,
            "fairness": self.fairness,
        }


@dataclass(frozen=True)
class StatisticsSummary:
    """Aggregate fairness over the whole roster."""

    total_players: int = 0
    min_games: int = 0
    max_games: int = 0
    avg_games_per_player: float = 0.0
    avg_unique_partners: float = 0.0
    avg_unique_opponents: float = 0.0
    max_partner_repeats: int = 0
    avg_fairness: int = 0

    @property
    def games_spread(self) -> int:
        """Difference between the busiest and the least busy player."""
        return self.max_games - self.min_games

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_players": self.total_players,
            "min_games": self.min_games,
            "max_games": self.max_games,
            "avg_games_per_player": self.avg_games_per_player,
            "avg_unique_partners": self.avg_unique_partners,
            "avg_unique_opponents": self.avg_unique_opponents,
            "max_partner_repeats": self.max_partner_repeats,
            "avg_fairness": self.avg_fairness,
        }


@dataclass(frozen=True)
class FinalStatistics:
    """Complete statistics for a schedule.

    The matrices and the games-played vector are in roster order, matching
    the layout older front ends expect.
    """

    players: Tuple[PlayerStatistics, ...] = ()
    summary: StatisticsSummary = field(default_factory=StatisticsSummary)
    games_played: Tuple[int, ...] = ()
    partner_matrix: Tuple[Tuple[int, ...], ...] = ()
    opponent_matrix: Tuple[Tuple[int, ...], ...] = ()

    def for_player(self, player_id: str) -> PlayerStatistics:
        """Statistics of one player; unknown ids raise KeyError."""
        for stats in self.players:
            if stats.player_id == player_id:
                return stats
        raise KeyError(player_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "player_stats": [p.to_dict() for p in self.players],
            "summary": self.summary.to_dict(),
            "games_played": list(self.games_played),
            "partner_matrix": [list(row) for row in self.partner_matrix],
            "opponent_matrix": [list(row) for row in self.opponent_matrix],
        }


def calculate_fairness(partner_counts: Sequence[int]) -> int:
    """Partner spread fairness, 0-100.

    Args:
        partner_counts: How often the player partnered each other player

    Returns:
        ``100 * mean(positive counts) / max(counts)`` rounded, or 100 when the
        player never had a partner
    """
    positive = [c for c in partner_counts if c > 0]
    if not positive:
        return 100
    average = sum(positive) / len(positive)
    return round(average / max(positive) * 100)


def _average(values: List[float], digits: int = 1) -> float:
    if not values:
        return 0.0
    return round(sum(values) / len(values), digits)


class StatisticsSummarizer:
    """Walks a finished ledger to produce ``FinalStatistics``."""

    def summarize(self, ledger: "PairingLedger", players: Sequence[Player]) -> FinalStatistics:
        """Compute per-player and aggregate statistics.

        Args:
            ledger: The ledger after the last round was recorded
            players: Roster, in the order the statistics should be listed

        Returns:
            FinalStatistics for the schedule
        """
        player_stats = tuple(self._player_statistics(ledger, p) for p in players)
        return FinalStatistics(
            players=player_stats,
            summary=self._summary(player_stats),
            games_played=tuple(ledger.games_played_list()),
            partner_matrix=tuple(tuple(row) for row in ledger.partner_matrix()),
            opponent_matrix=tuple(tuple(row) for row in ledger.opponent_matrix()),
        )

    def _player_statistics(self, ledger: "PairingLedger", player: Player) -> PlayerStatistics:
        i = ledger.index_of(player.id)
        partner_counts = ledger.partner_counts(i)
        opponent_counts = ledger.opponent_counts(i)
        return PlayerStatistics(
            player_id=player.id,
            name=player.name,
            games=ledger.games_played(i),
            unique_partners=ledger.unique_partners(i),
            unique_opponents=ledger.unique_opponents(i),
            max_partner_repeats=max(partner_counts, default=0),
            max_opponent_repeats=max(opponent_counts, default=0),
            times_rested=ledger.times_rested(i),
            fairness=calculate_fairness(partner_counts),
        )

    def _summary(self, player_stats: Tuple[PlayerStatistics, ...]) -> StatisticsSummary:
        if not player_stats:
            return StatisticsSummary()
        games = [p.games for p in player_stats]
        return StatisticsSummary(
            total_players=len(player_stats),
            min_games=min(games),
            max_games=max(games),
            avg_games_per_player=_average(games),
            avg_unique_partners=_average([p.unique_partners for p in player_stats]),
            avg_unique_opponents=_average([p.unique_opponents for p in player_stats]),
            max_partner_repeats=max(p.max_partner_repeats for p in player_stats),
            avg_fairness=round(sum(p.fairness for p in player_stats) / len(player_stats)),
        )


def create_statistics_summarizer() -> StatisticsSummarizer:
    """Factory function to create a statistics summarizer.

    Returns:
        New StatisticsSummarizer instance
    """
    return StatisticsSummarizer()

"""Match scoring for Americano rounds.

A candidate match is scored as a sum of independent terms. Partner variety
dominates opponent variety, which in turn dominates game balance, skill
balance, court rotation and rest fairness. Changing that ordering visibly
changes how often players see the same faces, so the weights live together in
``ScoringWeights``.
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

import random
import statistics
from dataclasses import dataclass
from typing import List, Optional, Sequence

from americanopairing import constants as C
from americanopairing.models.player import Player
from americanopairing.pairing.ledger import PairingLedger
from americanopairing.type_hints import Quad, Team, TeamSplit


def seed_for(variant_index: int, player_count: int) -> int:
    """Tie-break seed for a variant of a roster of ``player_count`` players."""
    return variant_index * C.VARIANT_SEED_STRIDE + player_count


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the match scoring terms."""

    new_partner_bonus: float = C.NEW_PARTNER_BONUS
    partner_distance_cap: int = C.PARTNER_DISTANCE_CAP
    partner_distance_weight: float = C.PARTNER_DISTANCE_WEIGHT
    partner_repeat_penalty: float = C.PARTNER_REPEAT_PENALTY
    partner_recent_window: int = C.PARTNER_RECENT_WINDOW
    partner_recent_penalty: float = C.PARTNER_RECENT_PENALTY

    new_opponent_bonus: float = C.NEW_OPPONENT_BONUS
    opponent_distance_cap: int = C.OPPONENT_DISTANCE_CAP
    opponent_distance_weight: float = C.OPPONENT_DISTANCE_WEIGHT
    opponent_repeat_penalty: float = C.OPPONENT_REPEAT_PENALTY
    opponent_recent_window: int = C.OPPONENT_RECENT_WINDOW
    opponent_recent_penalty: float = C.OPPONENT_RECENT_PENALTY

    games_variance_weight: float = C.GAMES_VARIANCE_WEIGHT
    rest_bonus_threshold: int = C.REST_BONUS_THRESHOLD
    rest_bonus_weight: float = C.REST_BONUS_WEIGHT
    skill_difference_weight: float = C.SKILL_DIFFERENCE_WEIGHT
    same_court_penalty: float = C.SAME_COURT_PENALTY
    jitter_weight: float = C.JITTER_WEIGHT


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass(frozen=True)
class ScoredSplit:
    """A quad split into two teams, with its score."""

    score: float
    team1: Team
    team2: Team


def team_splits(quad: Quad) -> List[TeamSplit]:
    """The three ways to split four players into two teams of two."""
    a, b, c, d = quad
    return [
        ((a, b), (c, d)),
        ((a, c), (b, d)),
        ((a, d), (b, c)),
    ]


def _team_skill(team: Team) -> int:
    return sum(
        p.skill_rank if p.has_skill else C.DEFAULT_SKILL_RANK for p in team
    )


class MatchScorer:
    """Scores candidate matches against the current ledger.

    Scoring never touches the ledger; the only state that moves is the
    seeded jitter stream, so a run is reproducible for a given seed.
    """

    def __init__(
        self,
        ledger: PairingLedger,
        seed: int = 0,
        weights: Optional[ScoringWeights] = None,
    ):
        self.ledger = ledger
        self.seed = seed
        self.weights = weights or DEFAULT_WEIGHTS
        self.random = random.Random(seed)

    def score(self, team1: Team, team2: Team, court: int, round_index: int) -> float:
        """Score one match; higher is better."""
        a, b = (self.ledger.index_of(p.id) for p in team1)
        c, d = (self.ledger.index_of(p.id) for p in team2)
        indices = (a, b, c, d)

        total = self.partner_score(a, b, round_index)
        total += self.partner_score(c, d, round_index)
        for i in (a, b):
            for j in (c, d):
                total += self.opponent_score(i, j, round_index)

        total -= self.balance_penalty(indices)
        total += self.rest_bonus(indices, round_index)
        total -= self.skill_penalty(team1, team2)
        total -= self.court_penalty(indices, court)
        total += self.random.random() * self.weights.jitter_weight
        return total

    def best_split(self, quad: Quad, court: int, round_index: int) -> ScoredSplit:
        """Best of the three team splits of a quad; the first wins exact ties."""
        best: Optional[ScoredSplit] = None
        for team1, team2 in team_splits(quad):
            value = self.score(team1, team2, court, round_index)
            if best is None or value > best.score:
                best = ScoredSplit(value, team1, team2)
        return best

    # ---------- individual terms ----------

    def partner_score(self, i: int, j: int, round_index: int) -> float:
        w = self.weights
        count = self.ledger.partner_count(i, j)
        if count == 0:
            return w.new_partner_bonus
        distance = round_index - self.ledger.last_partner_round(i, j)
        value = min(distance, w.partner_distance_cap) * w.partner_distance_weight
        value -= count * w.partner_repeat_penalty
        if distance <= w.partner_recent_window:
            value -= (w.partner_recent_window + 1 - distance) * w.partner_recent_penalty
        return value

    def opponent_score(self, i: int, j: int, round_index: int) -> float:
        w = self.weights
        count = self.ledger.opponent_count(i, j)
        if count == 0:
            return w.new_opponent_bonus
        distance = round_index - self.ledger.last_opponent_round(i, j)
        value = min(distance, w.opponent_distance_cap) * w.opponent_distance_weight
        value -= count * w.opponent_repeat_penalty
        if distance <= w.opponent_recent_window:
            value -= w.opponent_recent_penalty
        return value

    def balance_penalty(self, indices: Sequence[int]) -> float:
        """Penalty growing with the spread of games played among the four."""
        games = [self.ledger.games_played(i) for i in indices]
        return statistics.pvariance(games) * self.weights.games_variance_weight

    def rest_bonus(self, indices: Sequence[int], round_index: int) -> float:
        """Bonus for players who have gone unusually long without a rest."""
        w = self.weights
        bonus = 0.0
        for i in indices:
            since_rest = self.ledger.rounds_since_rest(i, round_index)
            if since_rest > w.rest_bonus_threshold:
                bonus += since_rest * w.rest_bonus_weight
        return bonus

    def skill_penalty(self, team1: Team, team2: Team) -> float:
        """Penalty for uneven teams.

        Zero when nobody in the match has a skill level. Otherwise players
        without a level count as ``DEFAULT_SKILL_RANK``.
        """
        players: List[Player] = [*team1, *team2]
        if not any(p.has_skill for p in players):
            return 0.0
        difference = abs(_team_skill(team1) - _team_skill(team2))
        return difference * self.weights.skill_difference_weight

    def court_penalty(self, indices: Sequence[int], court: int) -> float:
        """Penalty per player who played their previous match on this court."""
        repeats = sum(1 for i in indices if self.ledger.last_court(i) == court)
        return repeats * self.weights.same_court_penalty

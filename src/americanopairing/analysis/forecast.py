"""Fairness forecast for a planned Americano event.

The forecast is a quick estimate made from the head count, courts and rounds
alone, before any schedule exists. It is meant for planning screens; the
fairness computed from a generated schedule (see
``americanopairing.analysis.statistics``) is the authoritative figure.
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

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

from americanopairing.constants import (
    FORECAST_FALLBACK_STATUS,
    FORECAST_MAX_SCORE,
    FORECAST_MIN_SCORE,
    FORECAST_STATUS_THRESHOLDS,
    FORECAST_WEIGHTS,
    MIN_PLAYERS,
    PLAYERS_PER_MATCH,
)
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)

INVALID_STATUS = "invalid"


@dataclass
class FairnessForecast:
    """Estimated fairness of an event configuration.

    Attributes
    ----------
    score : int
        Estimated fairness, 10-85 for valid input, 0 otherwise.
    status : str
        One of excellent, good, acceptable, poor, terrible or invalid.
    message : str
        Short explanation of the status.
    factors : dict
        Individual factor scores (0-100) the estimate is built from.
    resting_players_per_round : int
        Players sitting out in every round.
    recommendations : list of str
        Hints for improving the configuration.
    """

    score: int
    status: str
    message: str
    factors: Dict[str, int] = field(default_factory=dict)
    resting_players_per_round: int = 0
    recommendations: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.status != INVALID_STATUS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "status": self.status,
            "message": self.message,
            "factors": dict(self.factors),
            "resting_players_per_round": self.resting_players_per_round,
            "recommendations": list(self.recommendations),
            "estimate": True,
        }


@dataclass(frozen=True)
class PlayerCountSuggestion:
    """Head counts that suit a given number of courts and rounds."""

    optimal: int
    max_reasonable: int
    absolute_max: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "optimal": self.optimal,
            "max_reasonable": self.max_reasonable,
            "absolute_max": self.absolute_max,
        }


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _partner_variety(player_count: int, coverage: float) -> float:
    # Larger fields can never reach the same partner coverage
    if player_count <= 8:
        return min(85, 40 + coverage * 50)
    if player_count <= 16:
        return min(75, 30 + coverage * 60)
    if player_count <= 24:
        return min(65, 20 + coverage * 55)
    return min(55, 15 + coverage * 45)


def _game_balance(player_count: int, rounds: int, players_per_round: int, resting: int) -> float:
    balance = 80.0
    if resting > 0:
        balance -= resting / player_count * 100
        if rounds >= math.ceil(player_count / players_per_round):
            balance += 20
    return max(20.0, min(100.0, balance))


def _court_ratio(player_count: int, courts: int) -> float:
    ratio = courts / player_count
    if ratio > 0.25:
        return 90.0
    if ratio < 0.1:
        return 40.0
    return 70.0


def _games_per_player(avg_games: float) -> float:
    if avg_games < 3:
        return 40.0
    if avg_games > 6:
        return 85.0
    return 70.0


def _status_for(score: int):
    for threshold, status, message in FORECAST_STATUS_THRESHOLDS:
        if score >= threshold:
            return status, message
    return FORECAST_FALLBACK_STATUS


def _recommendations(score: int, player_count: int, courts: int, rounds: int) -> List[str]:
    recommendations = []
    if score < 50:
        recommendations.append("Fewer players would give a better mix")
    if score < 60 and rounds < 8:
        recommendations.append("More rounds would improve fairness")
    if player_count > courts * 6:
        recommendations.append("Add courts or reduce the number of players")
    if score < 55 and courts < 3:
        recommendations.append("More courts would improve rotation")
    return recommendations


def estimate_fairness(player_count: int, courts: int, rounds: int) -> FairnessForecast:
    """Estimate the fairness of an Americano configuration.

    Args:
        player_count: Number of registered players
        courts: Number of courts
        rounds: Number of rounds

    Returns:
        FairnessForecast; invalid input yields score 0 with status ``invalid``
    """
    valid = (
        bool(player_count)
        and player_count >= MIN_PLAYERS
        and bool(courts)
        and courts >= 1
        and bool(rounds)
        and rounds >= 1
    )
    if not valid:
        return FairnessForecast(
            score=0,
            status=INVALID_STATUS,
            message=f"At least {MIN_PLAYERS} players, one court and one round are required",
        )

    matches_per_round = min(courts, player_count // PLAYERS_PER_MATCH)
    players_per_round = matches_per_round * PLAYERS_PER_MATCH
    resting = max(0, player_count - players_per_round)

    avg_games = rounds * players_per_round / player_count
    max_partners = player_count - 1
    partner_coverage = min(max_partners, avg_games * 0.8) / max_partners
    opponent_coverage = min(max_partners, avg_games * 1.5) / max_partners

    factors = {
        "partner_variety": _partner_variety(player_count, partner_coverage),
        "game_balance": _game_balance(player_count, rounds, players_per_round, resting),
        "opponent_variety": min(80.0, 30 + opponent_coverage * 60),
        "court_ratio": _court_ratio(player_count, courts),
        "games_per_player": _games_per_player(avg_games),
    }
    score = _round_half_up(sum(factors[name] * w for name, w in FORECAST_WEIGHTS.items()))

    if player_count > courts * 6:
        score -= 15
    if rounds < 6:
        score -= 10
    if 8 <= player_count <= 20 and courts >= 2:
        score += 5
    score = max(FORECAST_MIN_SCORE, min(FORECAST_MAX_SCORE, score))

    status, message = _status_for(score)
    logger.debug(
        "Fairness forecast for %s players, %s courts, %s rounds: %s (%s)",
        player_count,
        courts,
        rounds,
        score,
        status,
    )
    return FairnessForecast(
        score=score,
        status=status,
        message=message,
        factors={name: _round_half_up(value) for name, value in factors.items()},
        resting_players_per_round=resting,
        recommendations=_recommendations(score, player_count, courts, rounds),
    )


def suggest_player_count(courts: int, rounds: int) -> PlayerCountSuggestion:
    """Suggest head counts for a number of courts and rounds.

    Even head counts from 4 to 32 are forecast. The optimum is the best count
    scoring at least 60; the reasonable maximum is the largest count scoring at
    least 50. Both are raised to leave at least a few players resting per
    round, so there is something to rotate.
    """
    players_per_round = courts * PLAYERS_PER_MATCH
    optimal = players_per_round
    max_reasonable = players_per_round
    best_score = 0

    for player_count in range(4, 33, 2):
        forecast = estimate_fairness(player_count, courts, rounds)
        if forecast.score > best_score and forecast.score >= 60:
            optimal = player_count
            best_score = forecast.score
        if forecast.score >= 50:
            max_reasonable = player_count

    min_recommended = players_per_round + min(courts, 4)
    return PlayerCountSuggestion(
        optimal=max(optimal, min_recommended),
        max_reasonable=max(max_reasonable, min_recommended),
        absolute_max=max_reasonable + 4,
    )

"""Americano schedule engine.

Drives the round builder over every round of a tournament, stamps each round
with its clock times and hands the final ledger to the statistics summarizer.
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

from typing import List, Optional, Sequence

from americanopairing.analysis.statistics import StatisticsSummarizer
from americanopairing.constants import FORMAT_AMERICANO
from americanopairing.models.player import Player
from americanopairing.models.tournament.result import TournamentResult
from americanopairing.models.tournament.round_data import RoundData
from americanopairing.models.tournament.tournament_config import TournamentConfig
from americanopairing.pairing.candidates import CandidateGenerator
from americanopairing.pairing.ledger import PairingLedger
from americanopairing.pairing.round_builder import RoundBuilder
from americanopairing.pairing.scorer import MatchScorer, ScoringWeights, seed_for
from americanopairing.utils import setup_logger
from americanopairing.utils.time_utils import round_end_time, round_start_time
from americanopairing.utils.validation import validate_roster, validate_tournament_config

logger = setup_logger(__name__)


class ScheduleEngine:
    """Generates a complete Americano schedule.

    Each call to ``generate`` starts from a fresh ledger, so an engine can be
    reused for any number of rosters and variants.

    Attributes
    ----------
    weights : ScoringWeights or None
        Scoring weights; None selects the defaults.
    candidate_generator : CandidateGenerator
        Source of candidate quads for each court.
    summarizer : StatisticsSummarizer
        Computes the statistics of the finished schedule.
    """

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        candidate_generator: Optional[CandidateGenerator] = None,
        summarizer: Optional[StatisticsSummarizer] = None,
    ):
        self.weights = weights
        self.candidate_generator = candidate_generator or CandidateGenerator()
        self.summarizer = summarizer or StatisticsSummarizer()

    def generate(self, players: Sequence[Player], config: TournamentConfig) -> TournamentResult:
        """Generate the schedule for a roster.

        Args:
            players: Roster in its original order
            config: Courts, rounds, clock settings and variant

        Returns:
            TournamentResult with every round and the final statistics

        Raises:
            InsufficientPlayersException: Fewer than four players
            DuplicatePlayerException: Two players share an id
            InvalidConfigurationException: Unusable courts, rounds or clock settings
        """
        validate_roster(players)
        validate_tournament_config(config)

        roster = list(players)
        total_rounds = config.resolved_rounds()
        seed = seed_for(config.variant_index, len(roster))

        ledger = PairingLedger(roster)
        scorer = MatchScorer(ledger, seed=seed, weights=self.weights)
        builder = RoundBuilder(ledger, scorer, config.courts, self.candidate_generator)

        rounds: List[RoundData] = []
        for round_index in range(total_rounds):
            built = builder.build(round_index)
            start = round_start_time(
                config.start_time, round_index, config.round_duration, config.breaks
            )
            rounds.append(
                RoundData(
                    index=round_index,
                    start_time=start,
                    end_time=round_end_time(start, config.round_duration),
                    matches=built.matches,
                    waiting_players=built.waiting_players,
                )
            )

        statistics = self.summarizer.summarize(ledger, roster)
        logger.info(
            "Generated Americano schedule: %s players, %s courts, %s rounds, "
            "variant %s (seed %s), average fairness %s",
            len(roster),
            config.courts,
            total_rounds,
            config.variant_index,
            seed,
            statistics.summary.avg_fairness,
        )
        return TournamentResult(
            format=FORMAT_AMERICANO,
            rounds=tuple(rounds),
            statistics=statistics,
            variant_index=config.variant_index,
            seed=seed,
        )


def create_schedule_engine(weights: Optional[ScoringWeights] = None) -> ScheduleEngine:
    """Factory function to create a schedule engine.

    Args:
        weights: Optional scoring weights

    Returns:
        New ScheduleEngine instance
    """
    return ScheduleEngine(weights=weights)

"""Builds the matches of a single round."""

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
from enum import Enum
from typing import List, Optional, Set, Tuple

from americanopairing.constants import PLAYERS_PER_MATCH
from americanopairing.models.player import Player
from americanopairing.models.tournament.match import Match
from americanopairing.pairing.candidates import CandidateGenerator, search_depth_for
from americanopairing.pairing.ledger import PairingLedger
from americanopairing.pairing.scorer import MatchScorer, ScoredSplit
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundState(Enum):
    """Stages a round passes through while it is built."""

    SELECTING_PLAYERS = "selecting_players"
    BUILDING_MATCH = "building_match"
    RESTING = "resting"
    DONE = "done"


@dataclass(frozen=True)
class BuiltRound:
    """Matches and resting players of one round, before clock times are added."""

    matches: Tuple[Match, ...]
    waiting_players: Tuple[Player, ...]


class RoundBuilder:
    """Greedy per-court match selection for one round.

    Players are ordered by need and narrowed to this round's playing pool,
    then each court in turn receives the best scoring candidate among the
    pool players still unassigned. Every committed match is recorded in the
    ledger straight away, so later courts in the same round already see it.
    """

    def __init__(
        self,
        ledger: PairingLedger,
        scorer: MatchScorer,
        courts: int,
        candidate_generator: Optional[CandidateGenerator] = None,
    ):
        self.ledger = ledger
        self.scorer = scorer
        self.courts = courts
        self.candidate_generator = candidate_generator or CandidateGenerator()
        self.state = RoundState.DONE

    def prioritize(self, players: List[Player], round_index: int) -> List[Player]:
        """Order players by need of a game.

        Fewest games first; then longest run without a rest; then fewest
        distinct partners so far. The sort is stable, so remaining ties keep
        roster order.
        """

        def priority(player: Player) -> Tuple[int, int, int]:
            i = self.ledger.index_of(player.id)
            return (
                self.ledger.games_played(i),
                -self.ledger.rounds_since_rest(i, round_index),
                self.ledger.unique_partners(i),
            )

        return sorted(players, key=priority)

    def playing_pool(
        self, ordered: List[Player], seats: int
    ) -> Tuple[List[Player], Set[str]]:
        """Players who may take a seat this round, and those who must.

        Seats go to the players with the fewest games. The cutoff is the game
        count of the last seated player in priority order: everyone below it
        must play, everyone at it may play, everyone above it rests. Filling
        seats this way keeps game counts within one of each other.

        Args:
            ordered: Roster in priority order
            seats: Number of playing places this round

        Returns:
            (pool in priority order, ids of players who must play)
        """
        if seats <= 0:
            return [], set()
        cutoff = self._games(ordered[seats - 1])
        pool = [p for p in ordered if self._games(p) <= cutoff]
        owed = {p.id for p in pool if self._games(p) < cutoff}
        return pool, owed

    def _games(self, player: Player) -> int:
        return self.ledger.games_played(self.ledger.index_of(player.id))

    def build(self, round_index: int) -> BuiltRound:
        """Build and record one round.

        Args:
            round_index: 0-based round number

        Returns:
            The round's matches (courts 1..k) and its resting players
        """
        self.state = RoundState.SELECTING_PLAYERS
        roster = self.ledger.players
        match_slots = min(self.courts, len(roster) // PLAYERS_PER_MATCH)
        pool, owed = self.playing_pool(
            self.prioritize(roster, round_index), match_slots * PLAYERS_PER_MATCH
        )
        assigned: Set[str] = set()
        matches: List[Match] = []

        for court in range(1, match_slots + 1):
            available = [p for p in pool if p.id not in assigned]
            if len(available) < PLAYERS_PER_MATCH:
                break
            self.state = RoundState.BUILDING_MATCH
            best = self._best_match(
                available,
                court,
                round_index,
                owed - assigned,
                (match_slots - court) * PLAYERS_PER_MATCH,
            )
            if best is None:
                break
            match = Match(court=court, team1=best.team1, team2=best.team2)
            self.ledger.record_match(match, round_index)
            assigned.update(match.player_ids)
            matches.append(match)

        self.state = RoundState.RESTING
        # resting players are listed in roster order
        waiting = tuple(p for p in roster if p.id not in assigned)
        for player in waiting:
            self.ledger.record_rest(player, round_index)

        self.state = RoundState.DONE
        logger.debug(
            "Round %s: %s matches, %s resting",
            round_index + 1,
            len(matches),
            len(waiting),
        )
        return BuiltRound(matches=tuple(matches), waiting_players=waiting)

    def _best_match(
        self,
        available: List[Player],
        court: int,
        round_index: int,
        owed: Set[str],
        seats_left: int,
    ) -> Optional[ScoredSplit]:
        """Best scoring split over all candidates for one court.

        A candidate is skipped when it would leave more owed players than the
        later courts can seat. The top four players always qualify, since
        owed players sort first.
        """
        depth = search_depth_for(len(available))
        best: Optional[ScoredSplit] = None
        for quad in self.candidate_generator.generate(available, depth):
            if len(owed.difference(p.id for p in quad)) > seats_left:
                continue
            split = self.scorer.best_split(quad, court, round_index)
            if best is None or split.score > best.score:
                best = split
        return best

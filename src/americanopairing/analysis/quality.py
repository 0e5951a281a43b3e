"""Schedule quality analysis.

Looks at a finished schedule from the outside, pairing by pairing, and
reports how often the same two players met and how closely those meetings
followed each other.
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

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from americanopairing.constants import MIN_COMFORTABLE_REPEAT_GAP
from americanopairing.models.tournament.result import TournamentResult
from americanopairing.models.tournament.round_data import RoundData
from americanopairing.utils import setup_logger

logger = setup_logger(__name__)

PairKey = Tuple[str, str]


def _pair_key(first_id: str, second_id: str) -> PairKey:
    return (first_id, second_id) if first_id <= second_id else (second_id, first_id)


@dataclass
class ScheduleQualityReport:
    """Outcome of a schedule quality analysis.

    Attributes
    ----------
    partner_distribution : dict
        Maps a partnership count to the number of pairs that partnered
        exactly that often.
    opponent_distribution : dict
        Same as ``partner_distribution`` for opponents.
    consecutive_partner_repeats : int
        Partnerships repeated in the very next round.
    consecutive_opponent_repeats : int
        Oppositions repeated in the very next round.
    min_partner_gap : int or None
        Smallest number of rounds between two partnerships of the same pair,
        None if no pair partnered twice.
    min_opponent_gap : int or None
        Same as ``min_partner_gap`` for opponents.
    recommendations : list of str
        Human-readable hints about weak spots.
    """

    partner_distribution: Dict[int, int] = field(default_factory=dict)
    opponent_distribution: Dict[int, int] = field(default_factory=dict)
    consecutive_partner_repeats: int = 0
    consecutive_opponent_repeats: int = 0
    min_partner_gap: Optional[int] = None
    min_opponent_gap: Optional[int] = None
    recommendations: List[str] = field(default_factory=list)

    @property
    def consecutive_repeats(self) -> int:
        """Back-to-back repeats of partners and opponents together."""
        return self.consecutive_partner_repeats + self.consecutive_opponent_repeats

    @property
    def min_repeat_gap(self) -> Optional[int]:
        """Smallest gap between repeats of any pairing, None if none repeat."""
        gaps = [g for g in (self.min_partner_gap, self.min_opponent_gap) if g is not None]
        return min(gaps) if gaps else None

    @property
    def is_clean(self) -> bool:
        return not self.recommendations

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "partner_distribution": {str(k): v for k, v in self.partner_distribution.items()},
            "opponent_distribution": {str(k): v for k, v in self.opponent_distribution.items()},
            "consecutive_partner_repeats": self.consecutive_partner_repeats,
            "consecutive_opponent_repeats": self.consecutive_opponent_repeats,
            "min_partner_gap": self.min_partner_gap,
            "min_opponent_gap": self.min_opponent_gap,
            "recommendations": list(self.recommendations),
        }


def _collect_history(
    rounds: Iterable[RoundData],
) -> Tuple[Dict[PairKey, List[int]], Dict[PairKey, List[int]]]:
    """Rounds in which each pair partnered, and in which each pair opposed."""
    partners: Dict[PairKey, List[int]] = defaultdict(list)
    opponents: Dict[PairKey, List[int]] = defaultdict(list)
    for round_data in rounds:
        for match in round_data.matches:
            for team in (match.team1, match.team2):
                partners[_pair_key(team[0].id, team[1].id)].append(round_data.index)
            for p1 in match.team1:
                for p2 in match.team2:
                    opponents[_pair_key(p1.id, p2.id)].append(round_data.index)
    return partners, opponents


def _distribution(history: Dict[PairKey, List[int]]) -> Dict[int, int]:
    counts = Counter(len(rounds) for rounds in history.values())
    return dict(sorted(counts.items()))


def _gaps(history: Dict[PairKey, List[int]]) -> List[int]:
    gaps = []
    for rounds in history.values():
        ordered = sorted(rounds)
        gaps.extend(later - earlier for earlier, later in zip(ordered, ordered[1:]))
    return gaps


def analyze_schedule_quality(
    schedule: Union[TournamentResult, Sequence[RoundData]],
) -> ScheduleQualityReport:
    """Analyze how well a schedule spreads partners and opponents.

    Args:
        schedule: A tournament result or its rounds

    Returns:
        ScheduleQualityReport for the schedule
    """
    rounds = schedule.rounds if isinstance(schedule, TournamentResult) else schedule
    partners, opponents = _collect_history(rounds)
    partner_gaps = _gaps(partners)
    opponent_gaps = _gaps(opponents)

    report = ScheduleQualityReport(
        partner_distribution=_distribution(partners),
        opponent_distribution=_distribution(opponents),
        consecutive_partner_repeats=partner_gaps.count(1),
        consecutive_opponent_repeats=opponent_gaps.count(1),
        min_partner_gap=min(partner_gaps) if partner_gaps else None,
        min_opponent_gap=min(opponent_gaps) if opponent_gaps else None,
    )

    if report.consecutive_repeats > 0:
        report.recommendations.append(
            f"{report.consecutive_repeats} pairings repeat in consecutive rounds "
            f"({report.consecutive_partner_repeats} partner, "
            f"{report.consecutive_opponent_repeats} opponent)."
        )
    gap = report.min_repeat_gap
    if gap is not None and gap < MIN_COMFORTABLE_REPEAT_GAP:
        report.recommendations.append(
            f"Smallest gap between repeated pairings is {gap} round(s); "
            f"at least {MIN_COMFORTABLE_REPEAT_GAP} is preferable."
        )

    logger.debug(
        "Quality analysis: %s partner pairs, %s opponent pairs, %s recommendations",
        len(partners),
        len(opponents),
        len(report.recommendations),
    )
    return report

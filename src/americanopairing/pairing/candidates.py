"""Candidate 4-player groupings for one court.

Enumerating every 4-subset of the unassigned players grows as O(n^4), so
only a bounded, priority-driven slice of the space is offered to the scorer.
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

from itertools import combinations, product
from typing import List, Optional, Sequence, Set

from americanopairing.constants import (
    ANCHOR_SLICE,
    MAX_SEARCH_DEPTH,
    PLAYERS_PER_MATCH,
    SEARCH_DEPTH_STEPS,
    TOP_PRIORITY_SLICE,
)
from americanopairing.models.player import Player
from americanopairing.type_hints import Quad


def search_depth_for(available: int) -> int:
    """Number of candidates to evaluate per court for a pool size.

    Larger pools get proportionally less exhaustive search; the priority
    ordering keeps the players left out of the search those least in need
    of a game this round.
    """
    for max_players, depth in SEARCH_DEPTH_STEPS:
        if available <= max_players:
            return depth
    return MAX_SEARCH_DEPTH


class CandidateGenerator:
    """Produces a bounded, ordered list of quads to evaluate."""

    def __init__(self, top_slice: int = TOP_PRIORITY_SLICE, anchor_slice: int = ANCHOR_SLICE):
        self.top_slice = top_slice
        self.anchor_slice = anchor_slice

    def generate(
        self, players: Sequence[Player], search_depth: Optional[int] = None
    ) -> List[Quad]:
        """Candidate quads from players sorted by priority.

        Args:
            players: Unassigned players, most in need of a game first
            search_depth: Maximum number of quads; defaults to
                ``search_depth_for(len(players))``

        Returns:
            Distinct quads, every quad of the top slice first
        """
        if len(players) < PLAYERS_PER_MATCH:
            return []
        if search_depth is None:
            search_depth = search_depth_for(len(players))

        top = list(players[: self.top_slice])
        candidates: List[Quad] = [tuple(q) for q in combinations(top, PLAYERS_PER_MATCH)]
        if len(candidates) >= search_depth or len(players) <= self.top_slice:
            return candidates[:search_depth]

        seen: Set[frozenset] = {frozenset(p.id for p in q) for q in candidates}
        for quad in self._mixed_band_quads(players):
            key = frozenset(p.id for p in quad)
            if key in seen:
                continue
            seen.add(key)
            candidates.append(quad)
            if len(candidates) >= search_depth:
                break
        return candidates

    def _mixed_band_quads(self, players: Sequence[Player]):
        """Quads that reach past the top slice.

        One anchor from the very top, one player from the next band, one from
        the band after that and a fourth from everyone ranked below. Short
        rosters have nobody below the bands, so the fourth then comes from
        any rank not already in the quad.
        """
        band_start = self.anchor_slice
        low_start = self.top_slice
        anchors = players[:band_start]
        mid_band = players[band_start:low_start]
        low_band = players[low_start : low_start + self.anchor_slice]
        rest_start = low_start + self.anchor_slice
        rest = players[rest_start:] if len(players) > rest_start else players

        for anchor, mid, low in product(anchors, mid_band, low_band):
            chosen = {anchor.id, mid.id, low.id}
            for fourth in rest:
                if fourth.id not in chosen:
                    yield (anchor, mid, low, fourth)

"""TournamentConfig data class."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from americanopairing.constants import (
    DEFAULT_END_TIME,
    DEFAULT_ROUND_DURATION,
    DEFAULT_START_TIME,
    MAX_ROUNDS,
)
from americanopairing.exceptions import InvalidConfigurationException
from americanopairing.utils.time_utils import available_minutes


def _as_int(value: Any, key: str) -> int:
    """Whole number from a JSON value such as 3, 3.0 or "3".

    Raises:
        InvalidConfigurationException: If the value is not a whole number
    """
    message = f"{key} must be a whole number, got {value!r}"
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidConfigurationException(message)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationException(message) from e


@dataclass(frozen=True)
class BreakPeriod:
    """A pause in play, such as a lunch break.

    Attributes
    ----------
    start_time : str
        Clock time ("HH:MM") at which the break begins.
    duration : int
        Length of the break in minutes.
    """

    start_time: str
    duration: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize break to dictionary."""
        return {"start_time": self.start_time, "duration": self.duration}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BreakPeriod":
        """Deserialize break from dictionary."""
        return cls(
            start_time=data.get("start_time", data.get("startTime", DEFAULT_START_TIME)),
            duration=_as_int(data.get("duration", 0), "duration"),
        )


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    courts : int
        Number of courts available each round.
    rounds : int or None
        Number of rounds. When None the count is derived from the playing
        time between ``start_time`` and ``end_time`` minus breaks.
    round_duration : int
        Length of one round in minutes.
    start_time : str
        Clock time ("HH:MM") of the first round.
    end_time : str
        Clock time ("HH:MM") at which play must end.
    breaks : list of BreakPeriod
        Pauses that reduce the available playing time.
    variant_index : int
        Selects one of several equally good schedules; 0, 1, 2, ... each give
        a stable, different schedule for the same roster.
    name : str
        Tournament name.
    """

    courts: int
    rounds: Optional[int] = None
    round_duration: int = DEFAULT_ROUND_DURATION
    start_time: str = DEFAULT_START_TIME
    end_time: str = DEFAULT_END_TIME
    breaks: List[BreakPeriod] = field(default_factory=list)
    variant_index: int = 0
    name: str = "Americano"

    def available_minutes(self) -> int:
        """Playing minutes between start and end once breaks are removed."""
        return available_minutes(self.start_time, self.end_time, self.breaks)

    def resolved_rounds(self) -> int:
        """Number of rounds to schedule, capped at ``MAX_ROUNDS``."""
        if self.rounds is not None:
            rounds = self.rounds
        else:
            rounds = self.available_minutes() // self.round_duration
        return min(rounds, MAX_ROUNDS)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "courts": self.courts,
            "rounds": self.rounds,
            "round_duration": self.round_duration,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "breaks": [b.to_dict() for b in self.breaks],
            "variant_index": self.variant_index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary.

        Both snake_case keys and the camelCase keys used by web front ends
        (``roundDuration``, ``startTime``, ``endTime``, ``variantIndex``) are
        accepted.
        """

        def pick(snake: str, camel: str, default: Any) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        if "courts" not in data:
            raise InvalidConfigurationException("Configuration has no courts")
        rounds = data.get("rounds")
        return cls(
            name=data.get("name", "Americano"),
            courts=_as_int(data["courts"], "courts"),
            rounds=_as_int(rounds, "rounds") if rounds is not None else None,
            round_duration=_as_int(
                pick("round_duration", "roundDuration", DEFAULT_ROUND_DURATION),
                "round_duration",
            ),
            start_time=pick("start_time", "startTime", DEFAULT_START_TIME),
            end_time=pick("end_time", "endTime", DEFAULT_END_TIME),
            breaks=[BreakPeriod.from_dict(b) for b in data.get("breaks", [])],
            variant_index=_as_int(
                pick("variant_index", "variantIndex", 0), "variant_index"
            ),
        )

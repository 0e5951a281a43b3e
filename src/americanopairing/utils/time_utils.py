"""Clock arithmetic for round start/end times and available playing time."""

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

from datetime import datetime
from typing import TYPE_CHECKING, Iterable, Optional

from dateutil.relativedelta import relativedelta

from americanopairing.constants import MINUTES_PER_DAY, TIME_FORMAT
from americanopairing.exceptions import InvalidConfigurationException

if TYPE_CHECKING:
    from americanopairing.models.tournament.tournament_config import BreakPeriod


def parse_clock(value: str) -> datetime:
    """Parse an "HH:MM" clock string.

    The date part of the returned datetime is arbitrary; only the time of day
    is meaningful.

    Raises:
        InvalidConfigurationException: If the string is not a valid HH:MM time
    """
    try:
        return datetime.strptime(value.strip(), TIME_FORMAT)
    except (AttributeError, ValueError) as e:
        raise InvalidConfigurationException(
            f"Invalid clock time {value!r}, expected HH:MM"
        ) from e


def format_clock(moment: datetime) -> str:
    """Format a datetime as "HH:MM"."""
    return moment.strftime(TIME_FORMAT)


def add_minutes(clock: str, minutes: int) -> str:
    """Return ``clock`` shifted by ``minutes``, wrapping past midnight.

    Example:
        >>> add_minutes("23:50", 15)
        '00:05'
    """
    return format_clock(parse_clock(clock) + relativedelta(minutes=minutes))


def minutes_between(start_time: str, end_time: str) -> int:
    """Minutes from ``start_time`` to ``end_time``.

    An end time earlier than the start time is taken to be on the next day.
    """
    delta = parse_clock(end_time) - parse_clock(start_time)
    minutes = int(delta.total_seconds() // 60)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes


def available_minutes(
    start_time: str, end_time: str, breaks: Optional[Iterable["BreakPeriod"]] = None
) -> int:
    """Playing time between start and end once all breaks are removed."""
    total = minutes_between(start_time, end_time)
    break_minutes = sum(b.duration for b in (breaks or ()))
    return total - break_minutes


def round_start_time(
    start_time: str,
    round_index: int,
    round_duration: int,
    breaks: Optional[Iterable["BreakPeriod"]] = None,
) -> str:
    """Clock time at which round ``round_index`` (0-based) starts.

    Breaks shorten the available playing time (see ``available_minutes``) but
    do not shift round clock times. This is the single place where that
    policy lives.
    """
    return add_minutes(start_time, round_index * round_duration)


def round_end_time(round_start: str, round_duration: int) -> str:
    """Clock time at which a round that began at ``round_start`` ends."""
    return add_minutes(round_start, round_duration)

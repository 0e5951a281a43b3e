"""Validation helpers for rosters, skill levels and tournament configuration.

Each ``validate_*`` function returns a ``ValidationResult`` that is truthy when
the value is valid. The ``*_strict`` variants raise the matching exception
instead.
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

from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

from americanopairing.constants import (
    MAX_NUMERIC_SKILL,
    MIN_NUMERIC_SKILL,
    MIN_PLAYERS,
    NUMERIC_SKILL_BANDS,
    SKILL_LETTER_ALIASES,
    SKILL_RANKS,
    TOP_SKILL_RANK,
)
from americanopairing.exceptions import (
    DuplicatePlayerException,
    InsufficientPlayersException,
    InvalidConfigurationException,
    InvalidPlayerDataException,
)
from americanopairing.utils.time_utils import available_minutes, parse_clock

if TYPE_CHECKING:
    from americanopairing.models.player import Player
    from americanopairing.models.tournament.tournament_config import TournamentConfig


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Skill Validation ==========


def _numeric_skill_rank(value: float) -> int:
    for upper_bound, rank in NUMERIC_SKILL_BANDS:
        if value < upper_bound:
            return rank
    return TOP_SKILL_RANK


def validate_skill_level(skill_level: Union[str, float, int, None]) -> ValidationResult:
    """Validate a skill level and convert it to its ordinal rank.

    Accepts a letter from the C..A scale (``C``, ``B-``, ``B``, ``B+``, ``A-``,
    ``A``, with ``C+`` and ``A+`` as aliases) or a number from 1.0 to 6.0.
    Numeric strings such as ``"3.5"`` are accepted too.

    Args:
        skill_level: Raw skill level, or None for "unknown"

    Returns:
        ValidationResult whose sanitized value is the ordinal rank (1..6),
        or None when no skill level was given

    Example:
        >>> validate_skill_level("B+").sanitized_value
        4
        >>> validate_skill_level(3.2).sanitized_value
        2
    """
    if skill_level is None or (isinstance(skill_level, str) and not skill_level.strip()):
        return ValidationResult(is_valid=True, sanitized_value=None)

    if isinstance(skill_level, bool):
        return ValidationResult(
            is_valid=False, error_message=f"Invalid skill level: {skill_level!r}"
        )

    if isinstance(skill_level, str):
        letter = skill_level.strip().upper()
        letter = SKILL_LETTER_ALIASES.get(letter, letter)
        if letter in SKILL_RANKS:
            return ValidationResult(is_valid=True, sanitized_value=SKILL_RANKS[letter])
        try:
            numeric = float(letter)
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Unknown skill level {skill_level!r}",
            )
    else:
        numeric = float(skill_level)

    if not MIN_NUMERIC_SKILL <= numeric <= MAX_NUMERIC_SKILL:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Skill level {numeric} outside "
                f"{MIN_NUMERIC_SKILL}-{MAX_NUMERIC_SKILL}"
            ),
        )
    return ValidationResult(is_valid=True, sanitized_value=_numeric_skill_rank(numeric))


def validate_skill_level_strict(skill_level: Union[str, float, int, None]) -> Optional[int]:
    """Validate a skill level and return its rank.

    Raises:
        InvalidPlayerDataException: If the skill level is invalid
    """
    result = validate_skill_level(skill_level)
    if not result.is_valid:
        raise InvalidPlayerDataException(result.error_message)
    return result.sanitized_value


# ========== Roster Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate a display name (non-empty after stripping)."""
    if not name or not str(name).strip():
        return ValidationResult(is_valid=False, error_message="Player name is required")
    return ValidationResult(is_valid=True, sanitized_value=str(name).strip())


def validate_roster(players: Sequence["Player"]) -> None:
    """Check the roster can be scheduled.

    Raises:
        InsufficientPlayersException: If there are fewer than four players
        DuplicatePlayerException: If two players share an id
    """
    if players is None or len(players) < MIN_PLAYERS:
        count = 0 if players is None else len(players)
        raise InsufficientPlayersException(
            f"At least {MIN_PLAYERS} players are required, got {count}"
        )
    seen = set()
    for player in players:
        if player.id in seen:
            raise DuplicatePlayerException(f"Duplicate player id: {player.id}")
        seen.add(player.id)


# ========== Configuration Validation ==========


def validate_tournament_config(config: "TournamentConfig") -> None:
    """Check courts, rounds, clock strings and duration.

    Raises:
        InvalidConfigurationException: If any setting is unusable
    """
    if not isinstance(config.courts, int) or config.courts < 1:
        raise InvalidConfigurationException(
            f"At least 1 court is required, got {config.courts!r}"
        )
    if config.rounds is not None and (
        not isinstance(config.rounds, int) or config.rounds < 1
    ):
        raise InvalidConfigurationException(
            f"At least 1 round is required, got {config.rounds!r}"
        )
    if not isinstance(config.round_duration, int) or config.round_duration < 1:
        raise InvalidConfigurationException(
            f"Round duration must be a positive number of minutes, "
            f"got {config.round_duration!r}"
        )
    if not isinstance(config.variant_index, int) or config.variant_index < 0:
        raise InvalidConfigurationException(
            f"Variant index must be a whole number of at least 0, "
            f"got {config.variant_index!r}"
        )
    parse_clock(config.start_time)
    parse_clock(config.end_time)
    for break_period in config.breaks:
        parse_clock(break_period.start_time)
        if break_period.duration < 0:
            raise InvalidConfigurationException(
                f"Break duration must not be negative, got {break_period.duration}"
            )
    if config.rounds is None:
        minutes = available_minutes(config.start_time, config.end_time, config.breaks)
        if minutes < config.round_duration:
            raise InvalidConfigurationException(
                f"Only {minutes} minutes available, not enough for a "
                f"{config.round_duration}-minute round"
            )

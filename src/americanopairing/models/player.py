"""A player on a doubles tournament roster."""

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
from typing import Any, Dict, Optional, Union

from americanopairing.exceptions import InvalidPlayerDataException
from americanopairing.utils import generate_id
from americanopairing.utils.validation import (
    validate_player_name,
    validate_skill_level_strict,
)

SkillLevel = Union[str, float, int]


@dataclass(frozen=True)
class Player:
    """Represents a player on the roster.

    A player is immutable for the duration of a scheduling run.

    Attributes:
        name: Display name
        id: Opaque unique identifier; generated when not supplied
        skill_level: Raw skill level as entered (letter C..A or number 1.0-6.0)
        gender: Optional gender marker, carried through untouched
        skill_rank: Ordinal 1..6 derived from ``skill_level``, or None
    """

    name: str
    id: str = field(default_factory=lambda: generate_id("Player"))
    skill_level: Optional[SkillLevel] = None
    gender: Optional[str] = None
    skill_rank: Optional[int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        name_result = validate_player_name(self.name)
        if not name_result:
            raise InvalidPlayerDataException(name_result.error_message)
        if not self.id or not str(self.id).strip():
            raise InvalidPlayerDataException(f"Player {self.name!r} has an empty id")
        object.__setattr__(self, "name", name_result.sanitized_value)
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(
            self, "skill_rank", validate_skill_level_strict(self.skill_level)
        )

    @property
    def has_skill(self) -> bool:
        """Whether a skill level was supplied."""
        return self.skill_rank is not None

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "skill_level": self.skill_level,
            "gender": self.gender,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize a player from a roster entry.

        Accepts ``skill_level`` as well as the camelCase ``skillLevel``.
        """
        if "name" not in data:
            raise InvalidPlayerDataException(f"Roster entry without a name: {data!r}")
        kwargs: Dict[str, Any] = {
            "name": data["name"],
            "skill_level": data.get("skill_level", data.get("skillLevel")),
            "gender": data.get("gender"),
        }
        if data.get("id") is not None:
            kwargs["id"] = str(data["id"])
        return cls(**kwargs)

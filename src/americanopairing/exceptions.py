"""Exceptions for use in Americano Pairing"""

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


# ========== Base Application Exception ==========


class AmericanoPairingException(Exception):
    """Base exception for all Americano Pairing errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every library error with a single except clause.
    """

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(AmericanoPairingException):
    """Base exception for configuration errors.

    Configuration errors are fatal: they are raised before any round is built
    and no partial schedule is returned.
    """

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid (courts, rounds, clock times)."""

    pass


class InsufficientPlayersException(ConfigurationException):
    """Raised when the roster is too small to fill a single match."""

    pass


class UnknownFormatException(ConfigurationException):
    """Raised when a tournament format name is not recognised."""

    pass


class UnsupportedFormatException(ConfigurationException):
    """Raised for a known tournament format that has no generator."""

    pass


# ========== Player Exceptions ==========


class PlayerException(AmericanoPairingException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


class DuplicatePlayerException(PlayerException):
    """Raised when two roster entries share the same player id."""

    pass

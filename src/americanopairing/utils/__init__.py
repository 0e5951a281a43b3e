"""Shared utilities: logging setup and id generation."""

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

import logging
import os
import sys
import uuid
from logging.handlers import RotatingFileHandler

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"

# directory for the optional rotating log file
LOG_DIR_ENV = "AMERICANO_PAIRING_LOG_DIR"
LOG_FILE_NAME = "americano-pairing.log"


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up logger for a python module.

    Sets up a console handler and, when ``AMERICANO_PAIRING_LOG_DIR`` is set,
    a rotating file handler.

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    lgr.setLevel(logging.INFO)
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    file_handler = None
    log_folder = os.environ.get(LOG_DIR_ENV)
    if log_folder:
        try:
            os.makedirs(log_folder, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(log_folder, LOG_FILE_NAME),
                maxBytes=5 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setFormatter(log_formatter)
        except OSError as e:
            # continue with console logging only
            print(f"Warning: could not open log file in {log_folder}: {e}", file=sys.stderr)
            file_handler = None

    # stdout is reserved for schedule output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(logging.INFO)
    lgr.addHandler(console_handler)
    if file_handler:
        lgr.addHandler(file_handler)
    lgr.debug("logger %s initialized", logger_name)
    return lgr


def set_package_log_level(level: int) -> None:
    """Set the level of every americanopairing logger and its handlers."""
    for name, lgr in logging.Logger.manager.loggerDict.items():
        if not name.startswith("americanopairing") or not isinstance(
            lgr, logging.Logger
        ):
            continue
        lgr.setLevel(level)
        for handler in lgr.handlers:
            handler.setLevel(level)


def generate_id(prefix: str) -> str:
    """Generate a unique identifier such as ``Player_3f9a1c2e``."""
    return f"{prefix}_{uuid.uuid4().hex[:8]}"

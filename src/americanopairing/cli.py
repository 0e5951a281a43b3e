"""Command-line interface for the Americano scheduler."""

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

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from americanopairing.analysis.forecast import estimate_fairness, suggest_player_count
from americanopairing.analysis.quality import analyze_schedule_quality
from americanopairing.constants import (
    DEFAULT_END_TIME,
    DEFAULT_FORMAT,
    DEFAULT_ROUND_DURATION,
    DEFAULT_START_TIME,
)
from americanopairing.exceptions import (
    AmericanoPairingException,
    InvalidConfigurationException,
)
from americanopairing.models.player import Player
from americanopairing.models.tournament.result import TournamentResult
from americanopairing.models.tournament.tournament_config import (
    BreakPeriod,
    TournamentConfig,
)
from americanopairing.testing.roster import RandomRosterGenerator, RosterConfig
from americanopairing.tournament.generator import generate_tournament
from americanopairing.utils import set_package_log_level, setup_logger
from americanopairing.utils.time_utils import parse_clock
from americanopairing.utils.validation import validate_tournament_config

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def parse_break(value: str) -> BreakPeriod:
    """Parse a ``HH:MM+MIN`` break argument.

    Raises:
        argparse.ArgumentTypeError: If the value is malformed
    """
    clock, sep, minutes = value.partition("+")
    if not sep:
        raise argparse.ArgumentTypeError(
            f"Break must look like HH:MM+MINUTES, e.g. 12:00+30 (got {value!r})"
        )
    try:
        parse_clock(clock)
        duration = int(minutes)
    except (InvalidConfigurationException, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid break: {value!r}") from e
    if duration < 0:
        raise argparse.ArgumentTypeError(f"Break duration must not be negative: {value!r}")
    return BreakPeriod(start_time=clock, duration=duration)


def load_roster(path: str) -> List[Player]:
    """Load a roster from a JSON file holding a list of player objects.

    Raises:
        InvalidConfigurationException: If the file cannot be read or parsed
    """
    roster_path = Path(path)
    try:
        with open(roster_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidConfigurationException(f"Cannot read roster {path}: {e}") from e

    if not isinstance(data, list):
        raise InvalidConfigurationException(
            f"Roster {path} must contain a JSON list of players"
        )
    players = [Player.from_dict(entry) for entry in data]
    logger.info("Loaded %s players from: %s", len(players), path)
    return players


def build_config(
    args: argparse.Namespace, variant_index: Optional[int] = None
) -> TournamentConfig:
    """Tournament configuration from command-line arguments."""
    return TournamentConfig(
        courts=args.courts,
        rounds=args.rounds,
        round_duration=args.round_duration,
        start_time=args.start_time,
        end_time=args.end_time,
        breaks=list(args.breaks or []),
        variant_index=args.variant if variant_index is None else variant_index,
    )


def build_roster(args: argparse.Namespace) -> List[Player]:
    if args.roster:
        return load_roster(args.roster)
    generator = RandomRosterGenerator(
        RosterConfig(num_players=args.players, seed=args.roster_seed)
    )
    return generator.create_players()


# ---------- text rendering ----------


def format_schedule(result: TournamentResult) -> str:
    """Plain-text rendering of a schedule and its statistics."""
    lines = []
    stats = result.statistics
    lines.append(
        f"Americano schedule: {stats.summary.total_players} players, "
        f"{len(result.rounds)} rounds (variant {result.variant_index})"
    )
    for round_data in result.rounds:
        lines.append("")
        lines.append(
            f"Round {round_data.round_number}  "
            f"{round_data.start_time}-{round_data.end_time}"
        )
        for match in round_data.matches:
            team1 = " & ".join(p.name for p in match.team1)
            team2 = " & ".join(p.name for p in match.team2)
            lines.append(f"  Court {match.court}: {team1}  vs  {team2}")
        if round_data.waiting_players:
            resting = ", ".join(p.name for p in round_data.waiting_players)
            lines.append(f"  Resting: {resting}")

    lines.append("")
    lines.append(
        f"{'Player':<20} {'Games':>5} {'Partners':>8} {'Opponents':>9} "
        f"{'Rested':>6} {'Fairness':>8}"
    )
    for p in stats.players:
        lines.append(
            f"{p.name:<20} {p.games:>5} {p.unique_partners:>8} "
            f"{p.unique_opponents:>9} {p.times_rested:>6} {p.fairness:>8}"
        )
    summary = stats.summary
    lines.append("")
    lines.append(
        f"Games per player: {summary.min_games}-{summary.max_games} "
        f"(average {summary.avg_games_per_player})"
    )
    lines.append(f"Average fairness: {summary.avg_fairness}")
    return "\n".join(lines)


def format_quality(report) -> str:
    lines = ["", "Quality analysis"]
    lines.append(f"  Partner counts:  {report.partner_distribution}")
    lines.append(f"  Opponent counts: {report.opponent_distribution}")
    lines.append(f"  Back-to-back repeats: {report.consecutive_repeats}")
    gap = report.min_repeat_gap
    lines.append(f"  Smallest repeat gap: {gap if gap is not None else '-'}")
    for recommendation in report.recommendations:
        lines.append(f"  * {recommendation}")
    return "\n".join(lines)


def format_variants(results: Sequence[TournamentResult]) -> str:
    lines = [
        f"{'Variant':>7} {'Rounds':>6} {'Matches':>7} {'Avg games':>9} {'Fairness':>8}"
    ]
    for result in results:
        summary = result.summary()
        lines.append(
            f"{result.variant_index:>7} {summary['total_rounds']:>6} "
            f"{summary['total_matches']:>7} "
            f"{summary['average_games_per_player']:>9} {summary['fairness_score']:>8}"
        )
    return "\n".join(lines)


# ---------- commands ----------


def run_forecast(
    args: argparse.Namespace, player_count: int, config: TournamentConfig
) -> int:
    rounds = config.resolved_rounds()
    forecast = estimate_fairness(player_count, config.courts, rounds)
    suggestion = suggest_player_count(config.courts, rounds)
    if args.output == "json":
        payload = {"forecast": forecast.to_dict(), "suggestion": suggestion.to_dict()}
        print(json.dumps(payload, indent=2))
        return EXIT_OK

    print(
        f"Fairness estimate for {player_count} players, {config.courts} courts, "
        f"{rounds} rounds: {forecast.score} ({forecast.status})"
    )
    print(f"  {forecast.message}")
    for recommendation in forecast.recommendations:
        print(f"  * {recommendation}")
    print(
        f"Suggested players: {suggestion.optimal} "
        f"(reasonable up to {suggestion.max_reasonable})"
    )
    return EXIT_OK


def run_schedule(args: argparse.Namespace) -> int:
    """Run the command described by the parsed arguments.

    Returns:
        Exit code (0 for success)
    """
    players = build_roster(args)
    config = build_config(args)

    if args.forecast:
        validate_tournament_config(config)
        return run_forecast(args, len(players), config)

    if args.variants:
        results = [
            generate_tournament(args.format, build_config(args, variant), players)
            for variant in range(args.variants)
        ]
        if args.output == "json":
            print(json.dumps([r.to_dict() for r in results], indent=2))
        else:
            print(format_variants(results))
        return EXIT_OK

    result = generate_tournament(args.format, config, players)
    report = analyze_schedule_quality(result) if args.quality else None
    if args.output == "json":
        payload = result.to_dict()
        if report is not None:
            payload["quality"] = report.to_dict()
        print(json.dumps(payload, indent=2))
    else:
        print(format_schedule(result))
        if report is not None:
            print(format_quality(report))
    return EXIT_OK


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive number, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="americano-pairing",
        description="Generate fair Americano doubles schedules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 12 random players on 3 courts for 6 rounds
  americano-pairing --players 12 --courts 3 --rounds 6

  # Roster from a file, rounds derived from the clock, lunch break
  americano-pairing --roster players.json --courts 2 --start-time 10:00 \\
      --end-time 13:00 --break 11:30+30

  # Compare three alternative schedules
  americano-pairing --players 10 --courts 2 --rounds 8 --variants 3
        """,
    )

    roster = parser.add_mutually_exclusive_group(required=True)
    roster.add_argument("--roster", help="JSON file with a list of players")
    roster.add_argument(
        "--players", type=int, help="Generate a random roster of this many players"
    )
    parser.add_argument(
        "--roster-seed", type=int, help="Random seed for a generated roster"
    )

    parser.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        help=f"Tournament format (default: {DEFAULT_FORMAT})",
    )
    parser.add_argument("--courts", type=int, required=True, help="Number of courts")
    parser.add_argument(
        "--rounds",
        type=int,
        help="Number of rounds (default: derived from start/end time)",
    )
    parser.add_argument(
        "--round-duration",
        type=int,
        default=DEFAULT_ROUND_DURATION,
        help=f"Minutes per round (default: {DEFAULT_ROUND_DURATION})",
    )
    parser.add_argument(
        "--start-time",
        default=DEFAULT_START_TIME,
        help=f"Start time HH:MM (default: {DEFAULT_START_TIME})",
    )
    parser.add_argument(
        "--end-time",
        default=DEFAULT_END_TIME,
        help=f"End time HH:MM (default: {DEFAULT_END_TIME})",
    )
    parser.add_argument(
        "--break",
        dest="breaks",
        type=parse_break,
        action="append",
        help="Break as HH:MM+MINUTES; may be repeated",
    )

    parser.add_argument(
        "--variant", type=int, default=0, help="Schedule variant (default: 0)"
    )
    parser.add_argument(
        "--variants",
        type=positive_int,
        help="Generate this many variants and print a comparison",
    )

    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--quality", action="store_true", help="Append a schedule quality analysis"
    )
    parser.add_argument(
        "--forecast",
        action="store_true",
        help="Print a fairness estimate instead of a schedule",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.debug:
        set_package_log_level(logging.DEBUG)

    try:
        return run_schedule(args)
    except AmericanoPairingException as e:
        logger.debug("Configuration error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())

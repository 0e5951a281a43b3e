import argparse
import json

import pytest

from americanopairing.cli import main, parse_break
from americanopairing.models import BreakPeriod


def test_json_schedule_for_a_random_roster(capsys):
    code = main(
        ["--players", "8", "--courts", "2", "--rounds", "3", "--output", "json"]
    )

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert len(payload["schedule"]) == 3
    assert payload["summary"]["total_matches"] == 6
    assert "quality" not in payload


def test_text_schedule_with_quality_analysis(capsys):
    code = main(
        ["--players", "9", "--courts", "2", "--rounds", "2", "--roster-seed", "4", "--quality"]
    )

    out = capsys.readouterr().out
    assert code == 0
    assert "Round 1  09:00-09:15" in out
    assert "Court 2:" in out
    assert "Resting:" in out
    assert "Quality analysis" in out


def test_roster_file_and_breaks(tmp_path, capsys):
    roster = tmp_path / "roster.json"
    roster.write_text(
        json.dumps(
            [
                {"id": "a", "name": "Ann", "skillLevel": "A"},
                {"id": "b", "name": "Ben", "skillLevel": "B"},
                {"id": "c", "name": "Cid"},
                {"id": "d", "name": "Dee", "skill_level": 3.5},
                {"id": "e", "name": "Eve"},
            ]
        ),
        encoding="utf-8",
    )

    code = main(
        [
            "--roster",
            str(roster),
            "--courts",
            "1",
            "--start-time",
            "10:00",
            "--end-time",
            "11:00",
            "--break",
            "10:30+30",
            "--output",
            "json",
            "--quality",
        ]
    )

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert len(payload["schedule"]) == 2
    assert "quality" in payload


def test_variant_comparison(capsys):
    code = main(["--players", "10", "--courts", "2", "--rounds", "4", "--variants", "3"])

    lines = capsys.readouterr().out.strip().splitlines()
    assert code == 0
    assert len(lines) == 4
    assert lines[0].split()[0] == "Variant"


def test_forecast_only(capsys):
    code = main(
        ["--players", "8", "--courts", "2", "--rounds", "7", "--forecast", "--output", "json"]
    )

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["forecast"]["score"] == 84
    assert payload["forecast"]["estimate"] is True
    assert "optimal" in payload["suggestion"]


@pytest.mark.parametrize(
    "argv",
    [
        ["--players", "3", "--courts", "1", "--rounds", "2"],
        ["--players", "8", "--courts", "0", "--rounds", "2"],
        ["--players", "8", "--courts", "2", "--rounds", "0"],
        ["--players", "8", "--courts", "2", "--rounds", "2", "--format", "swiss"],
        ["--players", "8", "--courts", "2", "--start-time", "25:99"],
    ],
)
def test_configuration_errors_exit_with_code_2(argv, capsys):
    code = main(argv)

    captured = capsys.readouterr()
    assert code == 2
    assert captured.err.startswith("Error:")
    assert captured.out == ""


def test_missing_roster_file_is_a_configuration_error(tmp_path, capsys):
    code = main(["--roster", str(tmp_path / "missing.json"), "--courts", "1"])

    assert code == 2
    assert "Cannot read roster" in capsys.readouterr().err


def test_parse_break():
    assert parse_break("12:00+30") == BreakPeriod("12:00", 30)
    for value in ("12:00", "noon+30", "12:00+x", "12:00+-5"):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_break(value)

"""CLI tests for the session runner."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from domain.teams.config import ROOT_DIR
from run_session import app

EXAMPLE_ROSTER = ROOT_DIR / "configs" / "players" / "example.toml"

runner = CliRunner()


def test_preview_prints_requested_rounds() -> None:
    result = runner.invoke(
        app,
        ["preview", str(EXAMPLE_ROSTER), "--courts", "1", "--rounds", "2", "--seed", "3"],
    )

    assert result.exit_code == 0, result.output
    assert "loaded_players=9 courts=1 config=casual_default seed=3" in result.output
    assert "Round 1" in result.output
    assert "Round 2" in result.output
    assert "Court 1: A " in result.output


def test_preview_is_reproducible_with_seed() -> None:
    args = ["preview", str(EXAMPLE_ROSTER), "--courts", "2", "--rounds", "3", "--seed", "11"]

    first = runner.invoke(app, args)
    second = runner.invoke(app, args)

    assert first.exit_code == 0, first.output
    assert first.output == second.output


def test_play_records_winner_until_stopped() -> None:
    result = runner.invoke(
        app,
        ["play", str(EXAMPLE_ROSTER), "--seed", "5"],
        input="A\nq\n",
    )

    assert result.exit_code == 0, result.output
    assert "wins!" in result.output
    assert "Round 2" in result.output
    assert result.output.count("player=") == 9


def test_play_skips_unknown_winner_label() -> None:
    result = runner.invoke(
        app,
        ["play", str(EXAMPLE_ROSTER), "--seed", "5", "--max-rounds", "1"],
        input="Z\n",
    )

    assert result.exit_code == 0, result.output
    assert "Unknown team label 'Z'" in result.output
    assert "Skipping update." in result.output
    assert "wins!" not in result.output
    assert "mmr=0 " in result.output


def test_play_can_settle_session() -> None:
    result = runner.invoke(
        app,
        ["play", str(EXAMPLE_ROSTER), "--seed", "5", "--max-rounds", "1", "--settle"],
        input="b\n",
    )

    assert result.exit_code == 0, result.output
    assert result.output.count("settled player=") == 9


def test_non_positive_courts_is_rejected() -> None:
    result = runner.invoke(app, ["preview", str(EXAMPLE_ROSTER), "--courts", "0"])

    assert result.exit_code == 2


def test_missing_names_file_is_rejected(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["preview", str(EXAMPLE_ROSTER), "--names", str(tmp_path / "missing.json")],
    )

    assert result.exit_code == 2

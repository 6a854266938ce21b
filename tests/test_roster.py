"""Tests for roster loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.common import Player
from domain.errors import ConfigurationError
from domain.teams.config import ROOT_DIR
from domain.teams.roster import load_roster


def test_load_roster_reads_players(tmp_path: Path) -> None:
    path = tmp_path / "players.toml"
    path.write_text(
        """
[[players]]
name = "Emil"
ranking_points = 250

[[players]]
name = "Sara"
ranking_points = 500
mmr = -20
""".strip()
    )

    assert load_roster(path) == [
        Player(name="Emil", ranking_points=250, mmr=0),
        Player(name="Sara", ranking_points=500, mmr=-20),
    ]


def test_example_roster_loads() -> None:
    players = load_roster(ROOT_DIR / "configs" / "players" / "example.toml")

    assert len(players) == 9
    assert players[0] == Player(name="Emil", ranking_points=250, mmr=0)


def test_duplicate_names_raise(tmp_path: Path) -> None:
    path = tmp_path / "players.toml"
    path.write_text(
        '[[players]]\nname = "Emil"\nranking_points = 1\n\n[[players]]\nname = "Emil"\nranking_points = 2\n'
    )

    with pytest.raises(ConfigurationError, match="duplicate player names"):
        load_roster(path)


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("", "at least one"),
        ('[[players]]\nname = ""\nranking_points = 1\n', r"players\[0\].name is required"),
        ('[[players]]\nname = "Emil"\nranking_points = -5\n', "must be >= 0"),
        ('[[players]]\nname = "Emil"\nranking_points = "lots"\n', "non-integer"),
    ],
)
def test_invalid_rosters_raise(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "players.toml"
    path.write_text(content)

    with pytest.raises(ConfigurationError, match=message):
        load_roster(path)

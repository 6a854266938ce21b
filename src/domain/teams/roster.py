"""Load the attending players for a session from a TOML roster."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from domain.common import Player
from domain.config_base import read_toml
from domain.errors import ConfigurationError


def load_roster(file_path: Path) -> list[Player]:
    """Read ``[[players]]`` entries with ``name``, ``ranking_points`` and optional ``mmr``."""
    raw = read_toml(file_path)
    entries = raw.get("players")
    if not isinstance(entries, list) or not entries:
        raise ConfigurationError(f"{file_path}: at least one [[players]] entry is required")

    players = [_parse_player(entry, file_path=file_path, index=index) for index, entry in enumerate(entries)]

    names = [player.name for player in players]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ConfigurationError(f"{file_path}: duplicate player names: {duplicates}")

    return players


def _parse_player(entry: Any, *, file_path: Path, index: int) -> Player:
    if not isinstance(entry, dict):
        raise ConfigurationError(f"{file_path}: players[{index}] must be a table")

    name = str(entry.get("name", "")).strip()
    if not name:
        raise ConfigurationError(f"{file_path}: players[{index}].name is required")

    try:
        ranking_points = int(entry.get("ranking_points", 0))
        mmr = int(entry.get("mmr", 0))
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{file_path}: players[{index}] has a non-integer rating: {exc}") from exc

    if ranking_points < 0:
        raise ConfigurationError(f"{file_path}: players[{index}].ranking_points must be >= 0")

    return Player(name=name, ranking_points=ranking_points, mmr=mmr)


__all__ = ["load_roster"]

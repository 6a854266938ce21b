"""Teammate pair history: frequency ranking and per-round recording."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import combinations

from domain.common import CompositePlayer, Team

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairFrequency:
    """How often two players have shared a team; ``player_a`` sorts before ``player_b``."""

    player_a: str
    player_b: str
    count: int


def canonical_pair(name: str, other_name: str) -> tuple[str, str]:
    return (name, other_name) if name < other_name else (other_name, name)


def pair_count(player: CompositePlayer, other: CompositePlayer) -> int:
    return player.team_history.get(other.name, 0)


def most_frequent_pairs(players: Iterable[CompositePlayer]) -> list[PairFrequency]:
    """Rank every previously seen teammate pair, most frequent first.

    Both sides of a pair contribute to its total, so the count of a symmetric
    history is twice the number of shared rounds. Ties are ordered by name.
    """
    totals: dict[tuple[str, str], int] = {}
    for player in players:
        for teammate, count in player.team_history.items():
            if count <= 0:
                continue
            pair = canonical_pair(player.name, teammate)
            totals[pair] = totals.get(pair, 0) + count

    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [
        PairFrequency(player_a=player_a, player_b=player_b, count=count)
        for (player_a, player_b), count in ordered
    ]


def record_round(teams: Iterable[Team]) -> None:
    """Increment the mutual history of every pair of teammates by one."""
    for team in teams:
        for player, teammate in combinations(team.players, 2):
            if player is teammate:
                continue
            player.team_history[teammate.name] = player.team_history.get(teammate.name, 0) + 1
            teammate.team_history[player.name] = teammate.team_history.get(player.name, 0) + 1
        logger.debug("recorded history for team=%s players=%s", team.name, team.player_names())


__all__ = [
    "PairFrequency",
    "canonical_pair",
    "most_frequent_pairs",
    "pair_count",
    "record_round",
]

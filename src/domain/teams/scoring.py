"""Composite strength score derived from ranking points and MMR."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from domain.common import CompositePlayer, Player


@dataclass(frozen=True)
class ScoreParameters:
    rp_weight: float = 70.0
    mmr_weight: float = 30.0
    rp_ceiling: float = 2000.0
    mmr_ceiling: float = 1000.0


def calculate_composite_score(ranking_points: int, mmr: int, params: ScoreParameters) -> float:
    """Blend normalized ranking points and MMR using percentage weights.

    Values above the ceilings are not clamped, so a score can exceed 1.0.
    """
    rp_norm = ranking_points / params.rp_ceiling
    mmr_norm = mmr / params.mmr_ceiling
    return (params.rp_weight / 100.0) * rp_norm + (params.mmr_weight / 100.0) * mmr_norm


def composite_score(player: Player | CompositePlayer, params: ScoreParameters) -> float:
    return calculate_composite_score(player.ranking_points, player.mmr, params)


def refresh_composite_score(player: CompositePlayer, params: ScoreParameters) -> float:
    """Recompute and store the player's composite score after a rating change."""
    player.composite_score = composite_score(player, params)
    return player.composite_score


def build_composite_players(
    players: Iterable[Player],
    params: ScoreParameters,
) -> list[CompositePlayer]:
    """Wrap players for balancing, strongest first."""
    composite_players = [
        CompositePlayer(player=player, composite_score=composite_score(player, params))
        for player in players
    ]
    composite_players.sort(key=lambda player: player.composite_score, reverse=True)
    return composite_players


__all__ = [
    "ScoreParameters",
    "build_composite_players",
    "calculate_composite_score",
    "composite_score",
    "refresh_composite_score",
]

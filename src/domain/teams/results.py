"""MMR updates after a decided match."""

from __future__ import annotations

from dataclasses import dataclass

from domain.common import Team
from domain.teams.scoring import ScoreParameters, refresh_composite_score


@dataclass(frozen=True)
class MatchResultParameters:
    base_delta: int = 10
    k_factor: float = 0.04


def calculate_mmr_deltas(
    winner_total: int,
    loser_total: int,
    params: MatchResultParameters,
) -> tuple[int, int]:
    """Return ``(winner_delta, loser_delta)`` for one match.

    The winner gains the base amount plus a bonus for beating a stronger team
    on paper; the loser drops the base amount plus a bonus for losing as the
    favourite. Bonuses are truncated to whole MMR points.
    """
    winner_difference = loser_total - winner_total
    loser_difference = winner_total - loser_total

    winner_bonus = int(winner_difference * params.k_factor) if winner_difference > 0 else 0
    loser_bonus = int(loser_difference * params.k_factor) if loser_difference > 0 else 0
    return params.base_delta + winner_bonus, -params.base_delta - loser_bonus


class MatchResultUpdater:
    """Apply match outcomes to player MMR and keep composite scores current."""

    def __init__(
        self,
        score_params: ScoreParameters | None = None,
        params: MatchResultParameters | None = None,
    ) -> None:
        self.score_params = score_params or ScoreParameters()
        self.params = params or MatchResultParameters()

    def apply_result(self, winner: Team, loser: Team) -> None:
        winner_delta, loser_delta = calculate_mmr_deltas(
            winner.total_ranking_points(),
            loser.total_ranking_points(),
            self.params,
        )
        for player in winner.players:
            player.player.mmr += winner_delta
            refresh_composite_score(player, self.score_params)
        for player in loser.players:
            player.player.mmr += loser_delta
            refresh_composite_score(player, self.score_params)


__all__ = ["MatchResultParameters", "MatchResultUpdater", "calculate_mmr_deltas"]

"""Balanced team assignment with repeat-teammate separation."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from domain.common import CompositePlayer, Team
from domain.protocol import TeamNameSource
from domain.teams.history import most_frequent_pairs, pair_count, record_round

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssignmentParameters:
    penalty_weight: float = 0.1
    jitter: float = 0.05


def adjusted_team_score(player: CompositePlayer, team: Team, penalty_weight: float) -> float:
    """Score a candidate team for ``player``; lower is better.

    The player's own score is left out so candidates compare on current load.
    The repeat-pairing penalty is quadratic in the player's total history
    with the team's current members.
    """
    base_score = team.total_composite_score()
    penalty = sum(pair_count(player, member) for member in team.players)
    return base_score + (penalty * penalty) * (penalty_weight * 2.0)


class TeamAssigner:
    """Partition players into teams of given sizes.

    Frequent historical pairs are split first, then the remaining players are
    placed greedily, strongest first, into the team with the lowest adjusted
    score.
    """

    def __init__(
        self,
        name_source: TeamNameSource,
        params: AssignmentParameters | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.name_source = name_source
        self.params = params or AssignmentParameters()
        self.rng = rng or random.Random()

    def assign(self, players: Iterable[CompositePlayer], team_sizes: Sequence[int]) -> list[Team]:
        """Place players and record the resulting teammate history."""
        teams = self.place(players, team_sizes)
        if teams:
            record_round(teams)
        return teams

    def place(self, players: Iterable[CompositePlayer], team_sizes: Sequence[int]) -> list[Team]:
        """Place players into teams without touching teammate history."""
        players = list(players)
        if not players or not team_sizes:
            return []

        names = [player.name for player in players]
        if len(set(names)) != len(names):
            duplicates = sorted({name for name in names if names.count(name) > 1})
            raise ValueError(f"player names must be unique, duplicated: {duplicates}")

        capacity = sum(team_sizes)
        if capacity < len(players):
            raise ValueError(
                f"team sizes {list(team_sizes)} hold {capacity} players but {len(players)} were given"
            )

        teams = self._create_empty_teams(team_sizes)
        remaining = self._separate_common_pairs(players, teams)
        self._assign_remaining_players(remaining, teams)
        return teams

    def _create_empty_teams(self, team_sizes: Sequence[int]) -> list[Team]:
        return [
            Team(name=self.name_source.generate_team_name(), capacity=size)
            for size in team_sizes
        ]

    def _separate_common_pairs(
        self,
        players: list[CompositePlayer],
        teams: list[Team],
    ) -> list[CompositePlayer]:
        remaining = {player.name: player for player in players}

        for pair in most_frequent_pairs(players):
            first = remaining.get(pair.player_a)
            second = remaining.get(pair.player_b)
            if first is None or second is None:
                continue

            open_teams = sorted(
                (index for index, team in enumerate(teams) if not team.is_full),
                key=lambda index: (-teams[index].open_slots, index),
            )
            if len(open_teams) < 2:
                break

            teams[open_teams[0]].add_player(first)
            teams[open_teams[1]].add_player(second)
            del remaining[first.name]
            del remaining[second.name]
            logger.debug(
                "separated pair %s/%s (count=%d) into %s and %s",
                first.name,
                second.name,
                pair.count,
                teams[open_teams[0]].name,
                teams[open_teams[1]].name,
            )

        return list(remaining.values())

    def _assign_remaining_players(self, remaining: list[CompositePlayer], teams: list[Team]) -> None:
        jitter = self.params.jitter
        ordered = sorted(
            remaining,
            key=lambda player: player.composite_score + self.rng.uniform(0.0, jitter),
            reverse=True,
        )

        for player in ordered:
            team = self._find_optimal_team(player, teams)
            team.add_player(player)
            logger.debug("placed %s in %s", player.name, team.name)

    def _find_optimal_team(self, player: CompositePlayer, teams: list[Team]) -> Team:
        candidates = [(index, team) for index, team in enumerate(teams) if not team.is_full]
        _, team = min(
            candidates,
            key=lambda item: (
                adjusted_team_score(player, item[1], self.params.penalty_weight),
                item[0],
            ),
        )
        return team


__all__ = ["AssignmentParameters", "TeamAssigner", "adjusted_team_score"]

"""Round-by-round session pipeline: assign, report, record results, settle."""

from __future__ import annotations

import random
import string
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from domain.common import CompositePlayer, Player, Team
from domain.errors import ConfigurationError, UnknownTeamLabelError
from domain.protocol import TeamNameSource
from domain.teams.assigner import TeamAssigner
from domain.teams.config import TeamSystemConfig, default_team_system_config
from domain.teams.results import MatchResultUpdater
from domain.teams.scoring import build_composite_players, refresh_composite_score
from domain.teams.sizing import calculate_team_sizes

SEPARATOR = "-" * 96


@dataclass(frozen=True)
class Match:
    """Two teams sharing a court, each with a letter label."""

    court_number: int
    home_label: str
    home: Team
    away_label: str
    away: Team

    @property
    def labels(self) -> tuple[str, str]:
        return self.home_label, self.away_label

    def resolve(self, label: str) -> tuple[Team, Team]:
        """Return ``(winner, loser)`` for a case-insensitive winner label."""
        normalized = label.strip().upper()
        if normalized == self.home_label:
            return self.home, self.away
        if normalized == self.away_label:
            return self.away, self.home
        raise UnknownTeamLabelError(label, self.labels)


@dataclass(frozen=True)
class RoundSummary:
    round_number: int
    teams: list[Team]
    matches: list[Match]


@dataclass(frozen=True)
class SettlementEntry:
    name: str
    pre_ranking_points: int
    mmr: int
    post_ranking_points: int


def team_label(index: int) -> str:
    """Spreadsheet-style label: A..Z, then AA, AB, ..."""
    letters = string.ascii_uppercase
    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, len(letters))
        label = letters[remainder] + label
    return label


def build_matches(teams: list[Team]) -> list[Match]:
    """Pair consecutive teams onto courts; an unpaired trailing team sits out."""
    matches: list[Match] = []
    for court_index, home_index in enumerate(range(0, len(teams) - 1, 2)):
        away_index = home_index + 1
        matches.append(
            Match(
                court_number=court_index + 1,
                home_label=team_label(home_index),
                home=teams[home_index],
                away_label=team_label(away_index),
                away=teams[away_index],
            )
        )
    return matches


def format_round(summary: RoundSummary) -> list[str]:
    lines = [SEPARATOR, f"Round {summary.round_number}"]
    for index, team in enumerate(summary.teams):
        lines.append(
            f"Team {team_label(index)}: {team.name} "
            f"({team.total_ranking_points()} Total Ranking Score)"
        )
        for player in team.players:
            lines.append(f"  {player.ranking_points} : {player.name} {player.composite_score:.3f}")
    for match in summary.matches:
        lines.append(
            f"Court {match.court_number}: {match.home_label} {match.home.name} "
            f"vs {match.away_label} {match.away.name}"
        )
    return lines


class TeamSession:
    """One in-memory session over a fixed set of attending players."""

    def __init__(
        self,
        players: Iterable[Player],
        court_count: int,
        *,
        name_source: TeamNameSource,
        config: TeamSystemConfig | None = None,
        rng: random.Random | None = None,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        if court_count <= 0:
            raise ConfigurationError(f"court_count must be greater than 0, got {court_count}")

        players = list(players)
        names = [player.name for player in players]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ConfigurationError(f"player names must be unique, duplicated: {duplicates}")

        self.court_count = court_count
        self.config = config or default_team_system_config()
        self.echo = echo
        self.players: list[CompositePlayer] = build_composite_players(players, self.config.scoring)
        self.assigner = TeamAssigner(name_source, self.config.assignment, rng=rng)
        self.updater = MatchResultUpdater(self.config.scoring, self.config.result)
        self.rounds_played = 0

    def next_round(self) -> RoundSummary:
        team_sizes = calculate_team_sizes(len(self.players), self.court_count)
        teams = self.assigner.assign(self.players, team_sizes)
        self.rounds_played += 1
        summary = RoundSummary(
            round_number=self.rounds_played,
            teams=teams,
            matches=build_matches(teams),
        )
        if self.echo is not None:
            for line in format_round(summary):
                self.echo(line)
        return summary

    def record_winner(self, match: Match, label: str) -> Team:
        """Apply the result of ``match`` and return the winning team."""
        winner, loser = match.resolve(label)
        self.updater.apply_result(winner, loser)
        if self.echo is not None:
            self.echo(f"{winner.name} wins!")
        return winner

    def settle(self) -> list[SettlementEntry]:
        """Fold session MMR into ranking points and reset MMR to zero."""
        entries: list[SettlementEntry] = []
        for player in self.players:
            pre_ranking_points = player.ranking_points
            mmr = player.mmr
            player.player.ranking_points = max(0, pre_ranking_points + mmr)
            player.player.mmr = 0
            refresh_composite_score(player, self.config.scoring)
            entries.append(
                SettlementEntry(
                    name=player.name,
                    pre_ranking_points=pre_ranking_points,
                    mmr=mmr,
                    post_ranking_points=player.ranking_points,
                )
            )
        if self.echo is not None:
            for entry in entries:
                self.echo(
                    f"settled player={entry.name} "
                    f"ranking_points={entry.pre_ranking_points}->{entry.post_ranking_points} "
                    f"mmr={entry.mmr}"
                )
        return entries


__all__ = [
    "Match",
    "RoundSummary",
    "SettlementEntry",
    "TeamSession",
    "build_matches",
    "format_round",
    "team_label",
]

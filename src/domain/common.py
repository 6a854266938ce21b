"""Shared types for team balancing."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Player:
    """One attending player and their two skill signals."""

    name: str
    ranking_points: int
    mmr: int = 0


@dataclass
class CompositePlayer:
    """A player plus the derived score and teammate history used for balancing."""

    player: Player
    composite_score: float
    team_history: dict[str, int] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.player.name

    @property
    def ranking_points(self) -> int:
        return self.player.ranking_points

    @property
    def mmr(self) -> int:
        return self.player.mmr


@dataclass
class Team:
    """A generated team with a target capacity."""

    name: str
    capacity: int
    players: list[CompositePlayer] = field(default_factory=list)

    @property
    def open_slots(self) -> int:
        return self.capacity - len(self.players)

    @property
    def is_full(self) -> bool:
        return self.open_slots <= 0

    def add_player(self, player: CompositePlayer) -> None:
        if self.is_full:
            raise ValueError(f"team '{self.name}' is already at capacity ({self.capacity})")
        self.players.append(player)

    def total_ranking_points(self) -> int:
        return sum(player.ranking_points for player in self.players)

    def total_composite_score(self) -> float:
        return sum(player.composite_score for player in self.players)

    def player_names(self) -> list[str]:
        return [player.name for player in self.players]

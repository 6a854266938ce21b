"""Team size calculation."""

from __future__ import annotations

TEAMS_PER_COURT = 2


def calculate_team_count(player_count: int, court_count: int) -> int:
    if player_count <= 0 or court_count <= 0:
        return 0
    return min(TEAMS_PER_COURT * court_count, player_count)


def calculate_team_sizes(player_count: int, court_count: int) -> list[int]:
    """Return the target size of each team, larger teams first.

    Two teams play on each court. When there are fewer players than teams the
    team count is capped at the player count. Invalid inputs give an empty list.
    """
    team_count = calculate_team_count(player_count, court_count)
    if team_count == 0:
        return []

    base_size = player_count // team_count
    remainder = player_count % team_count
    return [base_size + (1 if index < remainder else 0) for index in range(team_count)]


__all__ = ["TEAMS_PER_COURT", "calculate_team_count", "calculate_team_sizes"]

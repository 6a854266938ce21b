"""Shared protocols for team balancing collaborators."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TeamNameSource(Protocol):
    """Anything that can produce a display name for a freshly created team."""

    def generate_team_name(self) -> str: ...


__all__ = ["TeamNameSource"]

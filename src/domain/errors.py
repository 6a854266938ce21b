"""Exceptions raised by the team-balancing domain."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a configuration source or session setting is invalid."""


class UnknownTeamLabelError(ValueError):
    """Raised when a winner label does not belong to the match being reported."""

    def __init__(self, label: str, valid_labels: tuple[str, ...]) -> None:
        self.label = label
        self.valid_labels = valid_labels
        super().__init__(
            f"Unknown team label '{label}'. Expected one of: {', '.join(valid_labels)}"
        )


__all__ = ["ConfigurationError", "UnknownTeamLabelError"]

"""Team-balancing domain modules."""

from domain.common import CompositePlayer, Player, Team
from domain.errors import ConfigurationError, UnknownTeamLabelError
from domain.protocol import TeamNameSource

__all__ = [
    "CompositePlayer",
    "ConfigurationError",
    "Player",
    "Team",
    "TeamNameSource",
    "UnknownTeamLabelError",
]

"""Team assignment, pair history, scoring and result modules."""

from domain.teams.assigner import AssignmentParameters, TeamAssigner, adjusted_team_score
from domain.teams.history import PairFrequency, most_frequent_pairs, record_round
from domain.teams.names import NameGenerator
from domain.teams.results import MatchResultParameters, MatchResultUpdater, calculate_mmr_deltas
from domain.teams.scoring import ScoreParameters, build_composite_players, calculate_composite_score
from domain.teams.sizing import calculate_team_sizes

__all__ = [
    "AssignmentParameters",
    "MatchResultParameters",
    "MatchResultUpdater",
    "NameGenerator",
    "PairFrequency",
    "ScoreParameters",
    "TeamAssigner",
    "adjusted_team_score",
    "build_composite_players",
    "calculate_composite_score",
    "calculate_mmr_deltas",
    "calculate_team_sizes",
    "most_frequent_pairs",
    "record_round",
]

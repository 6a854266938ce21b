"""Load team-balancing parameters from TOML files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from domain.config_base import BaseSystemConfig, load_system_config
from domain.errors import ConfigurationError
from domain.teams.assigner import AssignmentParameters
from domain.teams.results import MatchResultParameters
from domain.teams.scoring import ScoreParameters

ROOT_DIR = Path(__file__).resolve().parents[3]
DEFAULT_CONFIG_PATH = ROOT_DIR / "configs" / "teams" / "default.toml"
DEFAULT_NAMES_PATH = ROOT_DIR / "configs" / "team_names.json"


@dataclass(frozen=True)
class TeamSystemConfig(BaseSystemConfig):
    """Every tunable constant used by one balancing session."""

    scoring: ScoreParameters = field(default_factory=ScoreParameters)
    assignment: AssignmentParameters = field(default_factory=AssignmentParameters)
    result: MatchResultParameters = field(default_factory=MatchResultParameters)

    def as_config_json(self) -> dict[str, Any]:
        return {
            "rp_weight": self.scoring.rp_weight,
            "mmr_weight": self.scoring.mmr_weight,
            "rp_ceiling": self.scoring.rp_ceiling,
            "mmr_ceiling": self.scoring.mmr_ceiling,
            "penalty_weight": self.assignment.penalty_weight,
            "jitter": self.assignment.jitter,
            "base_delta": self.result.base_delta,
            "k_factor": self.result.k_factor,
        }


def default_team_system_config() -> TeamSystemConfig:
    return TeamSystemConfig(name="builtin_default", description=None, file_path=Path("<builtin>"))


def load_team_system_config(file_path: Path) -> TeamSystemConfig:
    """Load and validate a single team-balancing TOML config."""
    return load_system_config(file_path, _parse_team_system_config)


def _parse_team_system_config(raw: dict[str, Any], file_path: Path) -> TeamSystemConfig:
    system_raw = raw.get("system", {})
    scoring_raw = raw.get("scoring", {})
    assignment_raw = raw.get("assignment", {})
    result_raw = raw.get("result", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ConfigurationError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    try:
        scoring = ScoreParameters(
            rp_weight=float(scoring_raw.get("rp_weight", 70.0)),
            mmr_weight=float(scoring_raw.get("mmr_weight", 30.0)),
            rp_ceiling=float(scoring_raw.get("rp_ceiling", 2000.0)),
            mmr_ceiling=float(scoring_raw.get("mmr_ceiling", 1000.0)),
        )
        assignment = AssignmentParameters(
            penalty_weight=float(assignment_raw.get("penalty_weight", 0.1)),
            jitter=float(assignment_raw.get("jitter", 0.05)),
        )
        result = MatchResultParameters(
            base_delta=int(result_raw.get("base_delta", 10)),
            k_factor=float(result_raw.get("k_factor", 0.04)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{file_path}: invalid parameter value: {exc}") from exc

    _validate_parameters(file_path=file_path, scoring=scoring, assignment=assignment, result=result)

    return TeamSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        scoring=scoring,
        assignment=assignment,
        result=result,
    )


def _validate_parameters(
    *,
    file_path: Path,
    scoring: ScoreParameters,
    assignment: AssignmentParameters,
    result: MatchResultParameters,
) -> None:
    if scoring.rp_weight < 0.0:
        raise ConfigurationError(f"{file_path}: [scoring].rp_weight must be >= 0")
    if scoring.mmr_weight < 0.0:
        raise ConfigurationError(f"{file_path}: [scoring].mmr_weight must be >= 0")
    if abs(scoring.rp_weight + scoring.mmr_weight - 100.0) > 1e-9:
        raise ConfigurationError(f"{file_path}: [scoring].rp_weight and mmr_weight must sum to 100")
    if scoring.rp_ceiling <= 0.0:
        raise ConfigurationError(f"{file_path}: [scoring].rp_ceiling must be > 0")
    if scoring.mmr_ceiling <= 0.0:
        raise ConfigurationError(f"{file_path}: [scoring].mmr_ceiling must be > 0")
    if assignment.penalty_weight < 0.0:
        raise ConfigurationError(f"{file_path}: [assignment].penalty_weight must be >= 0")
    if assignment.jitter < 0.0:
        raise ConfigurationError(f"{file_path}: [assignment].jitter must be >= 0")
    if result.base_delta < 0:
        raise ConfigurationError(f"{file_path}: [result].base_delta must be >= 0")
    if result.k_factor < 0.0:
        raise ConfigurationError(f"{file_path}: [result].k_factor must be >= 0")


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_NAMES_PATH",
    "TeamSystemConfig",
    "default_team_system_config",
    "load_team_system_config",
]

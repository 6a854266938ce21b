"""Tests for TOML-based team-balancing config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.errors import ConfigurationError
from domain.teams.config import (
    DEFAULT_CONFIG_PATH,
    default_team_system_config,
    load_team_system_config,
)

TEMPLATE = """
[system]
name = "{name}"
description = "A test system"

[scoring]
rp_weight = {rp_weight}
mmr_weight = {mmr_weight}
rp_ceiling = 2500.0
mmr_ceiling = 800.0

[assignment]
penalty_weight = 0.25
jitter = 0.02

[result]
base_delta = 12
k_factor = 0.05
"""


def _write(path: Path, *, name: str = "system_a", rp_weight: float = 60.0, mmr_weight: float = 40.0) -> Path:
    path.write_text(TEMPLATE.format(name=name, rp_weight=rp_weight, mmr_weight=mmr_weight).strip())
    return path


def test_load_team_system_config_from_file(tmp_path: Path) -> None:
    system = load_team_system_config(_write(tmp_path / "custom.toml"))

    assert system.name == "system_a"
    assert system.description == "A test system"
    assert system.scoring.rp_weight == pytest.approx(60.0)
    assert system.scoring.mmr_weight == pytest.approx(40.0)
    assert system.scoring.rp_ceiling == pytest.approx(2500.0)
    assert system.scoring.mmr_ceiling == pytest.approx(800.0)
    assert system.assignment.penalty_weight == pytest.approx(0.25)
    assert system.assignment.jitter == pytest.approx(0.02)
    assert system.result.base_delta == 12
    assert system.result.k_factor == pytest.approx(0.05)


def test_missing_sections_fall_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "minimal.toml"
    path.write_text('[system]\nname = "minimal"\n')

    system = load_team_system_config(path)

    assert system.description is None
    assert system.as_config_json() == default_team_system_config().as_config_json()


def test_repository_default_config_loads() -> None:
    system = load_team_system_config(DEFAULT_CONFIG_PATH)

    assert system.name == "casual_default"
    assert system.as_config_json() == {
        "rp_weight": 70.0,
        "mmr_weight": 30.0,
        "rp_ceiling": 2000.0,
        "mmr_ceiling": 1000.0,
        "penalty_weight": 0.1,
        "jitter": 0.05,
        "base_delta": 10,
        "k_factor": 0.04,
    }


def test_weights_must_sum_to_one_hundred(tmp_path: Path) -> None:
    path = _write(tmp_path / "bad.toml", rp_weight=60.0, mmr_weight=30.0)

    with pytest.raises(ConfigurationError, match="must sum to 100"):
        load_team_system_config(path)


def test_name_is_required(tmp_path: Path) -> None:
    path = tmp_path / "nameless.toml"
    path.write_text("[scoring]\nrp_weight = 70.0\n")

    with pytest.raises(ConfigurationError, match=r"\[system\].name is required"):
        load_team_system_config(path)


@pytest.mark.parametrize(
    ("section", "key", "value", "message"),
    [
        ("scoring", "rp_ceiling", "0.0", r"\[scoring\].rp_ceiling must be > 0"),
        ("scoring", "mmr_ceiling", "-1.0", r"\[scoring\].mmr_ceiling must be > 0"),
        ("assignment", "penalty_weight", "-0.1", r"\[assignment\].penalty_weight must be >= 0"),
        ("assignment", "jitter", "-0.5", r"\[assignment\].jitter must be >= 0"),
        ("result", "base_delta", "-1", r"\[result\].base_delta must be >= 0"),
        ("result", "k_factor", "-0.04", r"\[result\].k_factor must be >= 0"),
    ],
)
def test_invalid_parameters_raise(
    tmp_path: Path,
    section: str,
    key: str,
    value: str,
    message: str,
) -> None:
    path = tmp_path / "invalid.toml"
    path.write_text(f'[system]\nname = "invalid"\n\n[{section}]\n{key} = {value}\n')

    with pytest.raises(ConfigurationError, match=message):
        load_team_system_config(path)


def test_non_numeric_parameter_raises(tmp_path: Path) -> None:
    path = tmp_path / "invalid.toml"
    path.write_text('[system]\nname = "invalid"\n\n[assignment]\njitter = "lots"\n')

    with pytest.raises(ConfigurationError, match="invalid parameter value"):
        load_team_system_config(path)


def test_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[system\nname = ")

    with pytest.raises(ConfigurationError, match="invalid TOML"):
        load_team_system_config(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_team_system_config(tmp_path / "missing.toml")

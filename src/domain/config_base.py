"""Shared TOML config-loading utilities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar
import tomllib

from domain.errors import ConfigurationError


@dataclass(frozen=True)
class BaseSystemConfig:
    """Minimal metadata shared across configs."""

    name: str
    description: str | None
    file_path: Path

    def as_config_json(self) -> dict[str, Any]:
        raise NotImplementedError


T = TypeVar("T", bound=BaseSystemConfig)


def read_toml(file_path: Path) -> dict[str, Any]:
    """Read one TOML file, reporting missing or malformed files as configuration errors."""
    try:
        with file_path.open("rb") as file:
            return tomllib.load(file)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Config file not found: {file_path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"{file_path}: invalid TOML: {exc}") from exc


def load_system_config(file_path: Path, parser: Callable[[dict[str, Any], Path], T]) -> T:
    return parser(read_toml(file_path), file_path)


__all__ = ["BaseSystemConfig", "load_system_config", "read_toml"]

"""Random team names built from a prefix and a suffix list."""

from __future__ import annotations

import json
import random
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from domain.errors import ConfigurationError


class NameGenerator:
    """Produce ``"{prefix} {suffix}"`` team names from fixed word lists."""

    def __init__(
        self,
        prefixes: Sequence[str],
        suffixes: Sequence[str],
        *,
        rng: random.Random | None = None,
    ) -> None:
        if not prefixes or not suffixes:
            raise ConfigurationError("team names require non-empty 'prefixes' and 'suffixes' lists")
        self._prefixes = list(prefixes)
        self._suffixes = list(suffixes)
        self._rng = rng or random.Random()

    @classmethod
    def from_json(cls, file_path: Path, *, rng: random.Random | None = None) -> NameGenerator:
        """Load word lists from a JSON object with ``prefixes`` and ``suffixes`` arrays."""
        try:
            raw = json.loads(Path(file_path).read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ConfigurationError(f"Team name file not found: {file_path}") from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"{file_path}: failed to read team names: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigurationError(f"{file_path}: team names must be a JSON object")

        fields = {str(key).lower(): value for key, value in raw.items()}
        prefixes = _parse_word_list(fields.get("prefixes"), file_path=file_path, field_name="prefixes")
        suffixes = _parse_word_list(fields.get("suffixes"), file_path=file_path, field_name="suffixes")
        return cls(prefixes, suffixes, rng=rng)

    @property
    def prefixes(self) -> tuple[str, ...]:
        return tuple(self._prefixes)

    @property
    def suffixes(self) -> tuple[str, ...]:
        return tuple(self._suffixes)

    def generate_team_name(self) -> str:
        prefix = self._rng.choice(self._prefixes)
        suffix = self._rng.choice(self._suffixes)
        return f"{prefix} {suffix}"


def _parse_word_list(value: Any, *, file_path: Path, field_name: str) -> list[str]:
    if not isinstance(value, list) or not value:
        raise ConfigurationError(f"{file_path}: '{field_name}' must be a non-empty array")
    if not all(isinstance(item, str) for item in value):
        raise ConfigurationError(f"{file_path}: '{field_name}' must contain only strings")
    return list(value)


__all__ = ["NameGenerator"]

"""Configuration loading for fingerprint workflows."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from templatehash.fingerprint.hashing import DEFAULT_ALGORITHM, SUPPORTED_ALGORITHMS
from templatehash.fingerprint.scheduler import default_worker_count

LOGGER = logging.getLogger("templatehash.fingerprint.config")

_ENV_TO_FIELD = {
    "TEMPLATEHASH_MAX_WORKERS": "max_workers",
    "TEMPLATEHASH_ALGORITHM": "algorithm",
    "TEMPLATEHASH_DEBUG": "debug",
}

_ALLOWED_KEYS = {"max_workers", "algorithm", "debug"}

_TRUE_VALUES = {"1", "t", "true"}
_FALSE_VALUES = {"0", "f", "false"}


def _as_path(value: str | Path) -> Path:
    return Path(value).expanduser()


def _parse_workers(value: object) -> int:
    if isinstance(value, str):
        stripped = value.strip().lower()
        if stripped == "auto":
            return default_worker_count()
        return int(stripped)
    if isinstance(value, bool):
        raise ValueError(f"Invalid worker count: {value!r}")
    return int(value)  # type: ignore[arg-type]


def _parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean: {value!r}")


_PARSERS = {
    "max_workers": _parse_workers,
    "algorithm": lambda value: str(value).strip().lower(),
    "debug": _parse_bool,
}


@dataclass
class FingerprintConfig:
    """Resolved configuration for fingerprint computation."""

    max_workers: int
    algorithm: str
    debug: bool = False

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"Unsupported hash algorithm: {self.algorithm}")

    @classmethod
    def load(cls, config_path: Path | None = None) -> FingerprintConfig:
        """Load config with precedence: defaults < YAML < environment."""
        values: dict[str, object] = {
            "max_workers": default_worker_count(),
            "algorithm": DEFAULT_ALGORITHM,
            "debug": False,
        }

        for key, raw in cls._load_yaml_values(config_path).items():
            values[key] = _PARSERS[key](raw)

        for env_key, field_name in _ENV_TO_FIELD.items():
            env_value = os.environ.get(env_key)
            if env_value is None or env_value == "":
                continue
            try:
                values[field_name] = _PARSERS[field_name](env_value)
            except ValueError as error:
                LOGGER.warning(f"Ignoring invalid {env_key}={env_value!r}: {error}")

        return cls(
            max_workers=values["max_workers"],  # type: ignore[arg-type]
            algorithm=values["algorithm"],  # type: ignore[arg-type]
            debug=values["debug"],  # type: ignore[arg-type]
        )

    @classmethod
    def _load_yaml_values(cls, config_path: Path | None) -> dict[str, object]:
        candidates = (
            [_as_path(config_path)]
            if config_path is not None
            else [Path("templatehash.yaml"), _as_path("~/.config/templatehash/config.yaml")]
        )

        for candidate in candidates:
            if not candidate.exists():
                continue

            with candidate.open("r", encoding="utf-8") as config_file:
                loaded = yaml.safe_load(config_file) or {}
            if not isinstance(loaded, dict):
                return {}

            LOGGER.debug(f"Loaded configuration from {candidate}")
            return {key: value for key, value in loaded.items() if key in _ALLOWED_KEYS}

        return {}

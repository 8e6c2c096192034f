from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from string_calculator.config.models import AppConfig


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


_ALLOWED_TOP_LEVEL = {"version", "store", "logging"}


def load_config(path: Path | None) -> AppConfig:
    # Missing path means defaults: no store, no logging.
    if path is None:
        return AppConfig()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {path}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config is not valid YAML: {path}") from exc

    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    _validate_top_level(raw)
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    unknown = set(raw.keys()) - _ALLOWED_TOP_LEVEL
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")

# infrastructure/config/export_config_loader.py
"""
ExportConfig from (lowest to highest priority):
  1. built-in defaults
  2. YAML file
  3. EXPORT_* environment variables (.env is loaded first)
  4. explicit overrides (command line)
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from application.services.export_config import ExportConfig
from domain.exceptions import ValidationError


class ConfigError(Exception):
    pass


ENV_PREFIX = "EXPORT_"

DEFAULTS: Dict[str, Any] = {
    "output_folder": "user-files/simulations",
    "request_bodies_folder": "user-files/bodies",
    "package": "",
    "class_name": "RecordedSimulation",
    "encoding": "utf-8",
    "automatic_referer": True,
    "scenario_name": "Scenario Name",
    "events_grouping": 100,
}

_BOOL_KEYS = {"automatic_referer"}
_INT_KEYS = {"events_grouping"}
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ExportConfigLoader:
    def __init__(self, env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None):
        if env is None:
            load_dotenv(dotenv_path)
            env = os.environ
        self._env = env

    def load(self, path: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None) -> ExportConfig:
        values = dict(DEFAULTS)
        if path:
            values.update(self._load_file(Path(path)))
        values.update(self._load_env())
        if overrides:
            values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return ExportConfig(**{k: self._coerce(k, v) for k, v in values.items()})
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc

    def _load_file(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file is invalid: {path}")

        unknown = set(data) - set(DEFAULTS)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return data

    def _load_env(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for key in DEFAULTS:
            raw = self._env.get(ENV_PREFIX + key.upper())
            if raw is not None and raw != "":
                out[key] = raw
        return out

    def _coerce(self, key: str, value: Any) -> Any:
        if key in _BOOL_KEYS and isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise ConfigError(f"{key} must be a boolean: {value!r}")
        if key in _INT_KEYS and isinstance(value, bool):
            raise ConfigError(f"{key} must be an integer: {value!r}")
        if key in _INT_KEYS and not isinstance(value, int):
            try:
                return int(value)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"{key} must be an integer: {value!r}") from exc
        if value is None:
            return ""
        return value if key in _BOOL_KEYS or key in _INT_KEYS else str(value)

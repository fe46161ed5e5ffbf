"""
Run configuration loading.

Sources, lowest precedence first:
    1. RunConfig defaults
    2. YAML file (keys match RunConfig fields)
    3. GitHub Action inputs in the environment (INPUT_RESEARCHER-TOOLS, ...)
    4. Explicit overrides (CLI flags)

Only malformed input raises (ConfigError). An unknown vision level is
not a config error: the vision operations warn about it.
"""
from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Dict, Mapping, Optional

import yaml

from cienv.model import RunConfig


class ConfigError(ValueError):
    """Raised for unreadable or ill-typed configuration."""


_FIELD_NAMES = {f.name for f in fields(RunConfig)}

# Action input name -> RunConfig field
_ACTION_INPUTS = {
    "RESEARCHER-TOOLS": "researcher_tools",
    "VISION-CONTROL-LEVEL": "vision_control_level",
    "PYTHON": "python",
    "TIMEOUT": "timeout",
    "VERIFY": "verify",
}


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "yes", "1"):
        return True
    if text in ("false", "no", "0", ""):
        return False
    raise ConfigError(f"{key}: expected a boolean, got {value!r}")


def _parse_timeout(key: str, value: Any) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ConfigError(f"{key}: expected a number of seconds, got {value!r}")
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key}: expected a number of seconds, got {value!r}") from None
    if seconds <= 0:
        raise ConfigError(f"{key}: must be positive, got {value!r}")
    return seconds


def _coerce(key: str, value: Any) -> Any:
    if key in ("researcher_tools", "verify"):
        return _parse_bool(key, value)
    if key == "timeout":
        return _parse_timeout(key, value)
    if key == "vision_control_level":
        return "" if value is None else str(value).strip()
    if key == "python":
        text = "" if value is None else str(value).strip()
        if not text:
            raise ConfigError("python: interpreter must not be empty")
        return text
    raise ConfigError(f"Unknown configuration key: {key}")


def parse_config_mapping(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate and coerce a mapping of RunConfig field values."""
    unknown = sorted(set(data) - _FIELD_NAMES)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")
    return {key: _coerce(key, value) for key, value in data.items()}


def load_config_file(path: str) -> Dict[str, Any]:
    """
    Read a YAML configuration file.

    Args:
        path: File path

    Returns:
        Coerced field values (an empty file yields {})

    Raises:
        ConfigError: File unreadable, not YAML, not a mapping, or ill-typed
    """
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return parse_config_mapping(data)


def config_from_env(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Field values from GitHub Action inputs (INPUT_<NAME>), when set."""
    values: Dict[str, Any] = {}
    for name, key in _ACTION_INPUTS.items():
        raw = environ.get(f"INPUT_{name}")
        if raw is None:
            continue
        raw = raw.strip()
        # Actions passes unset optional inputs as empty strings
        if not raw and key != "vision_control_level":
            continue
        values[key] = _coerce(key, raw)
    return values


def build_config(
    path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> RunConfig:
    config = RunConfig()
    if path:
        config = replace(config, **load_config_file(path))
    if environ is not None:
        config = replace(config, **config_from_env(environ))
    if overrides:
        present = {k: v for k, v in overrides.items() if v is not None}
        config = replace(config, **parse_config_mapping(present))
    return config

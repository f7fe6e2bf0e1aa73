"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
Every key is optional; an empty or missing file yields the defaults.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from oca_validator.config.settings import ValidatorSettings
from oca_validator.utils.logging import get_logger

log = get_logger(__name__)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"Failed to parse config file {path}: {e}"
            raise ValueError(msg) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_settings(
    config_path: Path | None = None,
    base_path: Path | None = None,
) -> ValidatorSettings:
    """
    Load validator settings from YAML file(s).

    Example config:
        validation:
          error_order: name
          strict_nested: ${OCA_STRICT:false}
        logging:
          level: INFO

    Args:
        config_path: Path to the main configuration file. Defaults apply
            when omitted.
        base_path: Optional path to base configuration for inheritance.
            Falls back to a ``base.yaml`` next to ``config_path``.

    Returns:
        Fully validated ValidatorSettings instance.

    Raises:
        pydantic.ValidationError: If a value does not validate.
    """
    if config_path is None:
        return ValidatorSettings()

    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        base_data = (
            load_yaml(potential_base)
            if potential_base.exists() and potential_base != config_path
            else {}
        )

    main_data = load_yaml(config_path)
    merged = _deep_merge(base_data, main_data)

    log.debug("Loaded settings", path=str(config_path), keys=sorted(merged))
    return ValidatorSettings.model_validate(merged)

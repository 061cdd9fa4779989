"""
Configuration Loader

Loads enforcer configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from classenforcer.core.errors import EnforcerError
from .base import EnforcerConfig
from .validator import validate_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".classenforcer" / "config.yml"

# set_prop() names accepted in YAML too
_KEY_ALIASES = {
    "default_constant_value": "constant_sentinel",
    "default_property_value": "field_sentinel",
    "default_field_value": "field_sentinel",
}


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if the default file does not exist"""
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise EnforcerError.config_invalid(
                f"Config file not found: {path}",
                details={"path": str(path)},
            )
    else:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise EnforcerError.config_invalid(
            f"Invalid YAML in {path}: {e}",
            details={"path": str(path)},
            cause=e,
        ) from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise EnforcerError.config_invalid(
            f"Config root in {path} must be a mapping, got {type(data).__name__}",
            details={"path": str(path)},
        )

    # Allow an optional top-level "enforcer:" section
    section = data.get("enforcer", data)
    if not isinstance(section, dict):
        raise EnforcerError.config_invalid(
            f"'enforcer' section in {path} must be a mapping",
            details={"path": str(path)},
        )
    return section


def _merge_config(default_instance: EnforcerConfig, yaml_data: Dict[str, Any]) -> EnforcerConfig:
    """Merge YAML data into default config instance"""
    known = {f.name for f in fields(EnforcerConfig)}
    changes = {}
    for key, value in yaml_data.items():
        key = _KEY_ALIASES.get(key, key)
        if key in known:
            changes[key] = value
        else:
            logger.warning(f"Ignoring unknown enforcer config key: {key}")
    return default_instance.with_values(**changes)


def load_config(config_path: Optional[Path] = None) -> EnforcerConfig:
    """
    Load enforcer configuration.

    Args:
        config_path: Optional path to YAML file. If None,
            ~/.classenforcer/config.yml is used when present.

    Returns:
        EnforcerConfig instance (always has code defaults as fallback)

    Raises:
        EnforcerError: explicit path missing, unparsable YAML, or a
            configuration with error-level issues
    """
    config = EnforcerConfig.default()

    yaml_data = _load_yaml(config_path)
    if not yaml_data:
        return config

    config = _merge_config(config, yaml_data)

    issues = validate_config(config)
    for issue in issues:
        if issue.level == "warn":
            logger.warning(f"Enforcer config: {issue}")
    errors = [issue for issue in issues if issue.level == "error"]
    if errors:
        raise EnforcerError.config_invalid(
            "; ".join(issue.message for issue in errors),
            details={"issues": [issue.path for issue in errors]},
        )

    return config


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "load_config",
]

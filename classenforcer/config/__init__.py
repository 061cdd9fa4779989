"""
classenforcer Configuration

Design principles:
1. Code has defaults, YAML is optional input
2. Configuration objects are frozen; changing settings means replacing the object
"""

from .base import (
    DEFAULT_SENTINEL,
    DEFAULT_SINGLETON_ACCESSORS,
    EnforcerConfig,
)
from .loader import DEFAULT_CONFIG_PATH, load_config
from .validator import validate_config, ConfigIssue

__all__ = [
    "DEFAULT_SENTINEL",
    "DEFAULT_SINGLETON_ACCESSORS",
    "EnforcerConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "validate_config",
    "ConfigIssue",
]

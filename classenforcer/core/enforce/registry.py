"""
Process-wide default configuration.

Enforcers created without an explicit config read the default from here at
the start of every call. The default is a frozen EnforcerConfig that is
replaced, never mutated, so a call in progress keeps the sentinels it
started with.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

from classenforcer.config import EnforcerConfig, validate_config
from classenforcer.core.errors import EnforcerError

logger = logging.getLogger(__name__)


# configure() names -> EnforcerConfig attribute
CONFIGURE_KINDS: Dict[str, str] = {
    "default_constant": "constant_sentinel",
    "default-constant": "constant_sentinel",
    "constant": "constant_sentinel",
    "default_constant_value": "constant_sentinel",
    "default_property": "field_sentinel",
    "default-property": "field_sentinel",
    "property": "field_sentinel",
    "default_property_value": "field_sentinel",
    "default_field": "field_sentinel",
    "field": "field_sentinel",
    "default_field_value": "field_sentinel",
}


_global_config: Optional[EnforcerConfig] = None
_global_config_lock = threading.Lock()


def get_config() -> EnforcerConfig:
    """
    Get the process-wide default configuration.

    Lazily initialized to EnforcerConfig.default() on first access.
    """
    global _global_config

    if _global_config is None:
        with _global_config_lock:
            if _global_config is None:
                _global_config = EnforcerConfig.default()

    return _global_config


def set_config(config: EnforcerConfig) -> None:
    """
    Replace the process-wide default configuration.

    Raises:
        EnforcerError: config has error-level issues
    """
    global _global_config

    issues = validate_config(config)
    errors = [issue for issue in issues if issue.level == "error"]
    if errors:
        raise EnforcerError.config_invalid(
            "; ".join(issue.message for issue in errors),
            details={"issues": [issue.path for issue in errors]},
        )
    for issue in issues:
        logger.warning(f"Enforcer config: {issue}")

    with _global_config_lock:
        _global_config = config


def reset_config() -> None:
    """
    Restore the default configuration.

    Useful for testing.
    """
    global _global_config
    with _global_config_lock:
        _global_config = None


def configure(kind: Any, value: Any) -> bool:
    """
    Set the default sentinel for one member kind.

    Args:
        kind: one of CONFIGURE_KINDS (e.g. "constant", "property", "field")
        value: new sentinel

    Returns:
        True if kind was recognized and the default was replaced,
        False otherwise (nothing changes, nothing is raised)
    """
    global _global_config

    attr = CONFIGURE_KINDS.get(kind) if isinstance(kind, str) else None
    if attr is None:
        logger.debug(f"configure(): unrecognized kind {kind!r}, ignored")
        return False

    with _global_config_lock:
        current = _global_config if _global_config is not None else EnforcerConfig.default()
        updated = current.with_values(**{attr: value})
        _global_config = updated

    logger.debug(f"configure(): {attr} set to {value!r}")
    for issue in validate_config(updated):
        logger.warning(f"Enforcer config: {issue}")
    return True


__all__ = [
    "CONFIGURE_KINDS",
    "get_config",
    "set_config",
    "reset_config",
    "configure",
]

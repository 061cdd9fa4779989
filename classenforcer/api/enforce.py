# classenforcer/api/enforce.py
"""
Module-level entry points using the process-wide default configuration.
"""

from __future__ import annotations

from typing import Any, List

from ..core.enforce.engine import Enforcer
from ..core.enforce.registry import configure
from ..core.errors import ContractViolation


# Reads the process-wide config on every call
_DEFAULT_ENFORCER = Enforcer()


def default_enforcer() -> Enforcer:
    return _DEFAULT_ENFORCER


def enforce(base_type: type, target_type: type, target_instance: Any = None) -> None:
    """
    Verify target_type overrides every constant and field base_type declares.

    Call it from the base class constructor:
        >>> class Plugin:
        ...     SLUG = "abstract"
        ...     _label = "abstract"
        ...     def __init__(self):
        ...         enforce(Plugin, type(self), self)

    Without an instance (and without a ``get_instance`` accessor on the
    target) only constants and public fields are enumerated, and field values
    cannot be read, so fields are not checked.

    Raises:
        ContractViolation: first member still carrying its sentinel
    """
    _DEFAULT_ENFORCER.enforce(base_type, target_type, target_instance)


def check(base_type: type, target_type: type, target_instance: Any = None) -> List[ContractViolation]:
    """Collect every violation enforce() would find, without raising."""
    return _DEFAULT_ENFORCER.check(base_type, target_type, target_instance)


# Short names: add(Base, type(self), self), set_prop("property", value)
add = enforce
set_prop = configure


__all__ = [
    "default_enforcer",
    "enforce",
    "check",
    "configure",
    "add",
    "set_prop",
]

# classenforcer/api/__init__.py
"""
User-facing API.
"""

from .enforce import default_enforcer, enforce, check, configure, add, set_prop
from .decorators import enforced
from ..core.enforce.context import current_request

__all__ = [
    "default_enforcer",
    "enforce",
    "check",
    "configure",
    "add",
    "set_prop",
    "enforced",
    "current_request",
]

# classenforcer/core/errors/__init__.py
"""
Core error types for classenforcer.

This package defines the components responsible for:
- Representing errors
- Categorizing errors (codes)

No side effects on import.
"""

from . import codes
from .exceptions import EnforcerError, ContractViolation

__all__ = [
    "codes",
    "EnforcerError",
    "ContractViolation",
]

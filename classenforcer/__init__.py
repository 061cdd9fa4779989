"""
classenforcer - construction-time checks for "must override" class members

A base class marks required constants and fields with a sentinel value
('abstract' by default). Every concrete subclass is checked when it is
constructed; a member still carrying the sentinel raises ContractViolation
and the object is never created.

User-facing API (recommended):
- enforced: class decorator, checks every subclass instance after __init__
- enforce(): explicit check, call it from a base class constructor
- configure(): change the process-wide sentinels
- UNSET: identity-matched marker, an alternative to the 'abstract' literal

Basic usage:

Decorator:
    >>> from classenforcer import enforced
    >>> @enforced
    ... class Exporter:
    ...     FORMAT = "abstract"
    ...     extension = "abstract"
    >>> class CsvExporter(Exporter):
    ...     FORMAT = "csv"
    ...     extension = ".csv"
    >>> CsvExporter()

Explicit call (protected fields need the instance):
    >>> from classenforcer import enforce
    >>> class Exporter:
    ...     FORMAT = "abstract"
    ...     _encoding = "abstract"
    ...     def __init__(self):
    ...         enforce(Exporter, type(self), self)

Sentinels:
    >>> from classenforcer import configure
    >>> configure("constant", "TODO")
    True
    >>> configure("nonsense", 1)
    False

Advanced/Internal API:
- Enforcer: enforcement with an explicit EnforcerConfig (no global state)
- config.*: EnforcerConfig, YAML loading, config validation
- core.enforce.*: introspection and validation building blocks
"""

__version__ = "0.2.0"

# Errors
from .core.errors import EnforcerError, ContractViolation

# Configuration
from .config import EnforcerConfig, load_config, validate_config, ConfigIssue

# Core types
from .core.enforce import (
    Enforcer,
    EnforcementRequest,
    MemberDescriptor,
    MemberKind,
    Visibility,
    UNSET,
    Unset,
    get_config,
    set_config,
    reset_config,
)

# User-facing API (main entry point)
from .api import (
    enforce,
    check,
    configure,
    add,
    set_prop,
    enforced,
    current_request,
)

__all__ = [
    # Version
    "__version__",

    # User-facing API (recommended)
    "enforce",
    "check",
    "configure",
    "add",
    "set_prop",
    "enforced",
    "current_request",
    "UNSET",
    "Unset",

    # Errors
    "EnforcerError",
    "ContractViolation",

    # Configuration
    "EnforcerConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",
    "get_config",
    "set_config",
    "reset_config",

    # Advanced components
    "Enforcer",
    "EnforcementRequest",
    "MemberDescriptor",
    "MemberKind",
    "Visibility",
]

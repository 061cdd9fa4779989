"""
Contract enforcement.

Checks, at construction time, that a derived class replaced every sentinel
value its base class declared:
- contracts: EnforcementRequest / MemberDescriptor
- introspect: member enumeration and value resolution
- validator: per-kind sentinel comparison
- engine: the Enforcer orchestrating both
- registry: process-wide default sentinels (configure)
"""

from .contracts import (
    MemberKind,
    Visibility,
    MemberDescriptor,
    EnforcementRequest,
)
from .markers import Unset, UNSET, is_unset
from .context import CURRENT_REQUEST, current_request, activate
from .registry import (
    CONFIGURE_KINDS,
    get_config,
    set_config,
    reset_config,
    configure,
)
from .introspect import Resolution, Introspector, declared_members, find_singleton_accessor
from .validator import check_member, strictly_equal, loosely_equal
from .engine import Enforcer

__all__ = [
    # Contracts
    "MemberKind",
    "Visibility",
    "MemberDescriptor",
    "EnforcementRequest",

    # Markers
    "Unset",
    "UNSET",
    "is_unset",

    # Context
    "CURRENT_REQUEST",
    "current_request",
    "activate",

    # Configuration
    "CONFIGURE_KINDS",
    "get_config",
    "set_config",
    "reset_config",
    "configure",

    # Introspection & validation
    "Resolution",
    "Introspector",
    "declared_members",
    "find_singleton_accessor",
    "check_member",
    "strictly_equal",
    "loosely_equal",

    # Engine
    "Enforcer",
]

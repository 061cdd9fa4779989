"""
Sentinel comparison.

One check per member kind:
- constant: strict match (same type and equal) against constant_sentinel
- field: absent (missing / None) or loose match (==) against field_sentinel

UNSET always counts as not overridden. Fields with no read path are left
unchecked unless the config asks for unresolved_fields="raise".
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from classenforcer.config import EnforcerConfig
from classenforcer.core.errors import ContractViolation
from .contracts import EnforcementRequest, MemberDescriptor, MemberKind
from .introspect import Resolution
from .markers import is_unset

logger = logging.getLogger(__name__)


def strictly_equal(value: Any, sentinel: Any) -> bool:
    return type(value) is type(sentinel) and bool(value == sentinel)


def loosely_equal(value: Any, sentinel: Any) -> bool:
    return bool(value == sentinel)


def check_constant(
    member: MemberDescriptor,
    resolution: Resolution,
    request: EnforcementRequest,
    config: EnforcerConfig,
) -> Optional[ContractViolation]:
    if resolution.missing or is_unset(resolution.value) or strictly_equal(resolution.value, config.constant_sentinel):
        return ContractViolation(member.name, MemberKind.CONSTANT, request.target_name)
    return None


def check_field(
    member: MemberDescriptor,
    resolution: Resolution,
    request: EnforcementRequest,
    config: EnforcerConfig,
) -> Optional[ContractViolation]:
    if not resolution.resolved:
        if config.unresolved_fields == "raise":
            return ContractViolation(member.name, MemberKind.FIELD, request.target_name)
        # No instance and no accessor: the value cannot be read, so it is not checked
        logger.debug(
            f"Field {member.name} of {request.target_name} left unchecked "
            f"(declared {member.declared_value!r} on {member.owner.__name__}): "
            f"no instance or singleton accessor"
        )
        return None

    if resolution.is_absent or is_unset(resolution.value) or loosely_equal(resolution.value, config.field_sentinel):
        return ContractViolation(member.name, MemberKind.FIELD, request.target_name)
    return None


_CHECKS: Dict[MemberKind, Callable[..., Optional[ContractViolation]]] = {
    MemberKind.CONSTANT: check_constant,
    MemberKind.FIELD: check_field,
}

if set(_CHECKS) != set(MemberKind):
    raise RuntimeError("every MemberKind needs a check")


def check_member(
    member: MemberDescriptor,
    resolution: Resolution,
    request: EnforcementRequest,
    config: EnforcerConfig,
) -> Optional[ContractViolation]:
    """
    Compare one resolved member against its sentinel.

    Returns:
        ContractViolation (not raised) if the member was not overridden,
        None otherwise
    """
    return _CHECKS[member.kind](member, resolution, request, config)


__all__ = [
    "strictly_equal",
    "loosely_equal",
    "check_constant",
    "check_field",
    "check_member",
]

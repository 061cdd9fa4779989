# classenforcer/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded so reports keep a fixed taxonomy.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN

    if c in codes.CONTRACT_CODES:
        return c

    if c in codes.DEFAULT_FALLBACK_CODES:
        return c

    return codes.UNKNOWN


@dataclass
class EnforcerError(Exception):
    """
    Base exception for everything raised by classenforcer itself.
    """
    message: str
    error_code: str = codes.UNKNOWN
    error_type: str = "ENFORCER_ERROR"  # e.g. CONTRACT_VIOLATION / INVALID_ARGUMENT
    phase: str = "unknown"              # introspect / validate / configure
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_contract_violation(self) -> bool:
        return self.error_code in codes.CONTRACT_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "phase": self.phase,
            "details": self.details,
        }

    # -------- factories --------

    @classmethod
    def invalid_argument(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> "EnforcerError":
        return cls(
            message=message,
            error_code=codes.INVALID_ARGUMENT,
            error_type="INVALID_ARGUMENT",
            phase="introspect",
            details=details or {},
        )

    @classmethod
    def config_invalid(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> "EnforcerError":
        return cls(
            message=message,
            error_code=_normalize_error_code(codes.CONFIG_INVALID),
            error_type="CONFIG_ERROR",
            phase="configure",
            details=details or {},
            cause=cause,
        )


class ContractViolation(EnforcerError):
    """
    A derived class still carries the sentinel value for a required member.

    Raised from inside ``enforce``; in normal use that is a constructor, so
    the object under construction is never handed back to the caller.
    """

    def __init__(self, member: str, kind: Any, target: str) -> None:
        # kind is a MemberKind; compared by value to keep this module import-free
        kind_value = getattr(kind, "value", kind)
        if kind_value == "constant":
            message = f"Undefined {member} in {target} noted"
            error_code = codes.UNDEFINED_CONSTANT
        else:
            message = f"Undefined ${member} in {target} noted"
            error_code = codes.UNDEFINED_FIELD

        super().__init__(
            message=message,
            error_code=error_code,
            error_type="CONTRACT_VIOLATION",
            phase="validate",
            details={"member": member, "kind": kind_value, "target": target},
        )
        self.member = member
        self.kind = kind
        self.target = target

    def __reduce__(self):
        return (type(self), (self.member, self.kind, self.target))

# classenforcer/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INTERNAL_ERROR: Final[str] = "INTERNAL_ERROR"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"

# contract
UNDEFINED_CONSTANT: Final[str] = "UNDEFINED_CONSTANT"
UNDEFINED_FIELD: Final[str] = "UNDEFINED_FIELD"

# config
CONFIG_INVALID: Final[str] = "CONFIG_INVALID"


# ---- semantic groups (internal helpers) ----

# Raised when a derived class did not override a required member.
CONTRACT_CODES: Final[set[str]] = {
    UNDEFINED_CONSTANT,
    UNDEFINED_FIELD,
}

# Fallback categories for failures that are not contract violations.
DEFAULT_FALLBACK_CODES: Final[set[str]] = {
    UNKNOWN,
    INTERNAL_ERROR,
    INVALID_ARGUMENT,
    CONFIG_INVALID,
}

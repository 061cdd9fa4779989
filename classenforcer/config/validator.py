"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal
from dataclasses import dataclass

from .base import EnforcerConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "field_sentinel"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(config: EnforcerConfig) -> List[ConfigIssue]:
    """
    Validate configuration for illegal/misleading combinations.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if config.unresolved_fields not in ("skip", "raise"):
        issues.append(ConfigIssue(
            level="error",
            path="unresolved_fields",
            message=f"Invalid unresolved_fields: '{config.unresolved_fields}' (must be 'skip' or 'raise')",
            hint="Set unresolved_fields to 'skip' or 'raise'",
        ))

    for name in config.singleton_accessors:
        if not isinstance(name, str) or not name.isidentifier():
            issues.append(ConfigIssue(
                level="error",
                path="singleton_accessors",
                message=f"Accessor name {name!r} is not a valid identifier",
                hint="Use attribute names such as 'get_instance'",
            ))

    # Fields compare with ==, so a falsy sentinel also matches 0 / False / ""
    sentinel = config.field_sentinel
    if isinstance(sentinel, (str, int, float)) and not sentinel:
        issues.append(ConfigIssue(
            level="warn",
            path="field_sentinel",
            message=f"field_sentinel={config.field_sentinel!r} is falsy; legitimate falsy field values will be reported as undefined",
            hint="Use a distinctive marker such as 'abstract' or classenforcer.UNSET",
        ))

    if config.constant_sentinel is None:
        issues.append(ConfigIssue(
            level="warn",
            path="constant_sentinel",
            message="constant_sentinel=None flags every constant left as None",
            hint="Use a distinctive marker such as 'abstract' or classenforcer.UNSET",
        ))

    return issues


__all__ = [
    "ConfigIssue",
    "validate_config",
]

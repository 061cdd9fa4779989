"""
Enforcer Configuration

Sentinel values and member-resolution settings shared by enforcement calls.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Literal, Tuple


DEFAULT_SENTINEL = "abstract"
DEFAULT_SINGLETON_ACCESSORS: Tuple[str, ...] = ("get_instance",)

UnresolvedPolicy = Literal["skip", "raise"]


@dataclass(frozen=True)
class EnforcerConfig:
    """
    Configuration for one enforcer.

    constant_sentinel: value marking a constant that was not overridden
    field_sentinel: value marking a field that was not overridden
    singleton_accessors: class-level callables tried, in order, to obtain a
        shared instance when no instance is passed to enforce()
    unresolved_fields: what to do with a field that has no read path
        ("skip" leaves it unchecked, "raise" treats it as absent)

    Frozen: the process-wide default is swapped for a modified copy, never
    mutated in place.
    """

    constant_sentinel: Any = DEFAULT_SENTINEL
    field_sentinel: Any = DEFAULT_SENTINEL
    singleton_accessors: Tuple[str, ...] = DEFAULT_SINGLETON_ACCESSORS
    unresolved_fields: UnresolvedPolicy = "skip"

    def __post_init__(self):
        """Accept any iterable of accessor names (YAML gives lists)"""
        if not isinstance(self.singleton_accessors, tuple):
            # frozen dataclass requires object.__setattr__
            object.__setattr__(self, "singleton_accessors", tuple(self.singleton_accessors))

    @classmethod
    def default(cls) -> "EnforcerConfig":
        """Default configuration: the literal 'abstract' marker for both kinds"""
        return cls()

    def with_values(self, **changes: Any) -> "EnforcerConfig":
        """Return a copy with the given fields replaced"""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, tuple):
                result[f.name] = list(value)
            elif isinstance(value, (dict, list, str, int, float, bool, type(None))):
                result[f.name] = value
            else:
                result[f.name] = repr(value)
        return result

"""
Dedicated "not overridden" marker.

A base class can declare ``FOO = UNSET`` instead of the literal ``'abstract'``
string. UNSET is matched by identity, so no legitimate value can be mistaken
for it regardless of the configured sentinels.
"""

from __future__ import annotations

from typing import Any, Optional


class Unset:
    """Singleton type of UNSET."""

    _instance: Optional["Unset"] = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "Unset":
        return self

    def __deepcopy__(self, memo: Any) -> "Unset":
        return self

    def __reduce__(self):
        return (Unset, ())


UNSET = Unset()


def is_unset(value: Any) -> bool:
    return value is UNSET


__all__ = ["Unset", "UNSET", "is_unset"]

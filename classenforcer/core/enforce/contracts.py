"""
Enforcement contracts: the data passed between introspection and validation.

- EnforcementRequest: which base/target/instance triple is being checked
- MemberDescriptor: one constant or field declared by the base class

Both are frozen. A request is built per enforce() call and handed down the
call chain explicitly; nothing reads it from shared module state.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class MemberKind(str, Enum):
    """
    Kind of a required member.

    - CONSTANT: UPPER_CASE class attribute, resolved through the target class
    - FIELD: any other data attribute, resolved through an instance
    """
    CONSTANT = "constant"
    FIELD = "field"


class Visibility(str, Enum):
    """
    Naming-convention visibility of a member.

    Name-mangled private members (``__name``) are never enumerated, so
    there is no PRIVATE level.
    """
    PUBLIC = "public"
    PROTECTED = "protected"


class MemberDescriptor(BaseModel):
    """
    One constant or field declared on the base class.

    Fields:
    - name: attribute name
    - kind: constant | field
    - visibility: public | protected
    - declared_value: value as declared on the base (None if only annotated);
      reported in logs, never compared (checks use the resolved value)
    - owner: class in the base's MRO whose namespace declared the member
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(description="Attribute name")
    kind: MemberKind = Field(description="constant or field")
    visibility: Visibility = Field(default=Visibility.PUBLIC)
    declared_value: Any = Field(default=None, description="Value declared on the base class")
    owner: type = Field(description="Declaring class")

    @property
    def is_protected(self) -> bool:
        return self.visibility is Visibility.PROTECTED


class EnforcementRequest(BaseModel):
    """
    The contract check currently being performed.

    Fields:
    - base_type: class declaring the required members
    - target_type: concrete class being checked (normally a descendant)
    - target_instance: live instance of target_type, if the caller has one
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_type: type = Field(description="Class declaring the required members")
    target_type: type = Field(description="Class being checked")
    target_instance: Optional[Any] = Field(
        default=None,
        description="Instance of target_type (e.g. self inside __init__)",
    )

    @property
    def has_instance(self) -> bool:
        return self.target_instance is not None

    @property
    def target_name(self) -> str:
        return self.target_type.__name__

    @property
    def base_name(self) -> str:
        return self.base_type.__name__

    def __repr__(self) -> str:
        # The instance repr may itself be half-constructed; keep it out.
        return (
            f"EnforcementRequest(base_type={self.base_name}, "
            f"target_type={self.target_name}, "
            f"has_instance={self.has_instance})"
        )


__all__ = [
    "MemberKind",
    "Visibility",
    "MemberDescriptor",
    "EnforcementRequest",
]

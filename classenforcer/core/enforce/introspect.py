"""
Member introspection.

Enumerates the constants and fields a base class declares and resolves the
value each one currently has on the class (or instance) being checked.

Naming conventions decide member kind and visibility:
- UPPER_CASE data attribute -> constant
- any other data attribute -> field
- ``_name`` -> protected, ``__name`` (mangled) -> private, never enumerated
- dunder names, methods, nested classes and descriptors are not members
"""

from __future__ import annotations

import inspect
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from classenforcer.config import EnforcerConfig
from .contracts import EnforcementRequest, MemberDescriptor, MemberKind, Visibility

logger = logging.getLogger(__name__)


_CONSTANT_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")

# Bookkeeping attributes added by abc / typing; never part of a contract
_IGNORED_NAMES = frozenset({
    "_abc_impl",
    "_is_protocol",
    "_is_runtime_protocol",
})

_NOT_FOUND = object()


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of reading one member.

    resolved: False when no read path exists (field without an instance or
        a singleton accessor); value is meaningless then
    source: where the value came from ("class", "instance", "accessor", "none")
    missing: the attribute did not exist where it was looked up
    """
    value: Any = None
    resolved: bool = True
    source: str = "class"
    missing: bool = False

    @property
    def is_absent(self) -> bool:
        return self.resolved and (self.missing or self.value is None)

    @classmethod
    def of(cls, value: Any, source: str) -> "Resolution":
        if value is _NOT_FOUND:
            return cls(value=None, source=source, missing=True)
        return cls(value=value, source=source)

    @classmethod
    def unresolved(cls) -> "Resolution":
        return cls(resolved=False, source="none")


def _is_data_attribute(value: Any) -> bool:
    """Plain values only: routines, classes and descriptors are behaviour."""
    if inspect.isclass(value) or inspect.isroutine(value):
        return False
    if isinstance(value, (staticmethod, classmethod, property)):
        return False
    if inspect.isdatadescriptor(value) or inspect.ismethoddescriptor(value):
        return False
    return True


def _is_private(name: str, owner: type) -> bool:
    mangled_prefix = f"_{owner.__name__.lstrip('_')}__"
    return name.startswith(mangled_prefix) or (name.startswith("__") and not name.endswith("__"))


def _classify(name: str, owner: type) -> Optional[Tuple[MemberKind, Visibility]]:
    if name.startswith("__") and name.endswith("__"):
        return None
    if name in _IGNORED_NAMES or _is_private(name, owner):
        return None
    if _CONSTANT_NAME.match(name):
        return MemberKind.CONSTANT, Visibility.PUBLIC
    if name.startswith("_"):
        return MemberKind.FIELD, Visibility.PROTECTED
    return MemberKind.FIELD, Visibility.PUBLIC


def declared_members(base_type: type) -> Iterator[MemberDescriptor]:
    """
    Yield every constant and field declared on base_type or its ancestors.

    Nearer classes shadow farther ones: once a name is seen in the MRO it is
    not reconsidered, even if the nearer definition is a method. Names that
    are only annotated (``name: str``) are members with declared_value None.
    """
    seen = set()
    for owner in inspect.getmro(base_type):
        if owner is object:
            continue
        namespace = vars(owner)
        annotations = inspect.get_annotations(owner)

        for name, value in namespace.items():
            if name in seen:
                continue
            seen.add(name)
            if not _is_data_attribute(value):
                continue
            classified = _classify(name, owner)
            if classified is None:
                continue
            kind, visibility = classified
            yield MemberDescriptor(
                name=name,
                kind=kind,
                visibility=visibility,
                declared_value=value,
                owner=owner,
            )

        for name in annotations:
            if name in seen:
                continue
            seen.add(name)
            classified = _classify(name, owner)
            if classified is None:
                continue
            kind, visibility = classified
            yield MemberDescriptor(
                name=name,
                kind=kind,
                visibility=visibility,
                declared_value=None,
                owner=owner,
            )


def find_singleton_accessor(target_type: type, config: EnforcerConfig) -> Optional[Callable[[], Any]]:
    """Return the first configured accessor target_type exposes, if any."""
    for name in config.singleton_accessors:
        accessor = getattr(target_type, name, None)
        if accessor is not None and callable(accessor):
            return accessor
    return None


class Introspector:
    """
    Enumerates and resolves members for a single enforcement request.

    One introspector serves one enforce() call. The singleton accessor, if
    used, is invoked at most once per call and its instance is reused for
    every field.
    """

    def __init__(self, request: EnforcementRequest, config: EnforcerConfig):
        self.request = request
        self.config = config
        self._accessor = find_singleton_accessor(request.target_type, config)
        self._shared_instance: Any = _NOT_FOUND
        self._members: Optional[Tuple[MemberDescriptor, ...]] = None

    @property
    def has_read_path(self) -> bool:
        """Whether non-public field values can be obtained."""
        return self.request.has_instance or self._accessor is not None

    def _all_members(self) -> Tuple[MemberDescriptor, ...]:
        if self._members is None:
            self._members = tuple(declared_members(self.request.base_type))
        return self._members

    def constants(self) -> Iterator[MemberDescriptor]:
        for member in self._all_members():
            if member.kind is MemberKind.CONSTANT:
                yield member

    def fields(self) -> Iterator[MemberDescriptor]:
        """
        Fields to check.

        Public and protected when an instance or accessor is available,
        public only otherwise.
        """
        include_protected = self.has_read_path
        for member in self._all_members():
            if member.kind is not MemberKind.FIELD:
                continue
            if member.is_protected and not include_protected:
                logger.debug(
                    f"Skipping protected field {member.name} of {self.request.base_name}: "
                    f"no instance or singleton accessor for {self.request.target_name}"
                )
                continue
            yield member

    def resolve(self, member: MemberDescriptor) -> Resolution:
        return _RESOLVERS[member.kind](self, member)

    def resolve_constant(self, member: MemberDescriptor) -> Resolution:
        """Look the constant up through target_type (MRO, no descriptors)."""
        value = inspect.getattr_static(self.request.target_type, member.name, _NOT_FOUND)
        return Resolution.of(value, "class")

    def resolve_field(self, member: MemberDescriptor) -> Resolution:
        """
        Read the field's current value.

        Priority: the supplied instance, then the singleton accessor's
        instance, otherwise unresolved.
        """
        if self.request.has_instance:
            value = getattr(self.request.target_instance, member.name, _NOT_FOUND)
            return Resolution.of(value, "instance")

        if self._accessor is not None:
            value = getattr(self._singleton(), member.name, _NOT_FOUND)
            return Resolution.of(value, "accessor")

        return Resolution.unresolved()

    def _singleton(self) -> Any:
        if self._shared_instance is _NOT_FOUND:
            self._shared_instance = self._accessor()
        return self._shared_instance


_RESOLVERS: Dict[MemberKind, Callable[[Introspector, MemberDescriptor], Resolution]] = {
    MemberKind.CONSTANT: Introspector.resolve_constant,
    MemberKind.FIELD: Introspector.resolve_field,
}


__all__ = [
    "Resolution",
    "Introspector",
    "declared_members",
    "find_singleton_accessor",
]

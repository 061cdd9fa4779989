# classenforcer/api/decorators.py
"""
@enforced class decorator
"""

from __future__ import annotations

import threading
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar, Union

from ..core.enforce.engine import Enforcer
from .enforce import default_enforcer

C = TypeVar("C", bound=type)


class _Construction:
    """__init__ frames still running for one instance, and contracts to check."""

    __slots__ = ("depth", "contracts")

    def __init__(self) -> None:
        self.depth = 0
        self.contracts: List[Tuple[type, Optional[Enforcer]]] = []

    def register(self, klass: type, enforcer: Optional[Enforcer]) -> None:
        if all(registered is not klass for registered, _ in self.contracts):
            self.contracts.append((klass, enforcer))


# id(instance) -> _Construction, per thread
_local = threading.local()


def _constructions() -> Dict[int, _Construction]:
    constructions = getattr(_local, "constructions", None)
    if constructions is None:
        constructions = _local.constructions = {}
    return constructions


def _track(init: Callable[..., None], klass: type, enforcer: Optional[Enforcer]) -> Callable[..., None]:
    """
    Wrap an __init__ so klass's contract is checked once the outermost
    __init__ of the instance returns.
    """

    @wraps(init)
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        constructions = _constructions()
        key = id(self)
        construction = constructions.get(key)
        if construction is None:
            construction = constructions[key] = _Construction()
        construction.register(klass, enforcer)

        construction.depth += 1
        try:
            init(self, *args, **kwargs)
        finally:
            construction.depth -= 1
            outermost = construction.depth == 0
            if outermost:
                del constructions[key]

        if outermost:
            for contract, contract_enforcer in construction.contracts:
                (contract_enforcer or default_enforcer()).enforce(contract, type(self), self)

    return __init__


def enforced(
    cls: Optional[C] = None,
    *,
    enforcer: Optional[Enforcer] = None,
) -> Union[C, Callable[[C], C]]:
    """
    Make construction of any subclass check the decorated class's contract.

    The check ``enforce(cls, type(self), self)`` runs after the outermost
    ``__init__`` returns, so fields a subclass assigns after calling
    ``super().__init__()`` are already set. Subclass ``__init__`` methods
    are wrapped as the subclasses are created.

    Args:
        cls: Class to decorate (optional, supports @enforced and @enforced())
        enforcer: Enforcer to use; defaults to the process-wide one

    Usage:
        >>> @enforced
        ... class Widget:
        ...     KIND = "abstract"
        ...     _theme = "abstract"
        >>> class Button(Widget):
        ...     KIND = "button"
        ...     def __init__(self):
        ...         super().__init__()
        ...         self._theme = "light"
        >>> Button()          # passes
        >>> Widget()          # raises ContractViolation (KIND)

    Note:
        - If __init__ raises, no check runs; the original exception propagates.
        - Instantiating the decorated class itself fails while it still
          carries sentinels.
    """

    def decorator(klass: C) -> C:
        klass.__init__ = _track(klass.__init__, klass, enforcer)

        inherited_hook = klass.__dict__.get("__init_subclass__")

        def __init_subclass__(sub: type, **kwargs: Any) -> None:
            if inherited_hook is not None:
                inherited_hook.__func__(sub, **kwargs)
            else:
                super(klass, sub).__init_subclass__(**kwargs)
            if "__init__" in sub.__dict__:
                sub.__init__ = _track(sub.__dict__["__init__"], klass, enforcer)

        klass.__init_subclass__ = classmethod(__init_subclass__)
        return klass

    # Support both @enforced and @enforced() syntax
    if cls is None:
        return decorator
    else:
        return decorator(cls)


__all__ = ["enforced"]

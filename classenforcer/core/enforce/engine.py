"""
Enforcer: checks that a derived class overrode every required member.

Flow for one call:
1. build an EnforcementRequest from the arguments
2. enumerate and check constants
3. enumerate and check fields (visibility depends on available read path)

enforce() stops at the first violation and raises it. check() runs the same
pass to completion and returns every violation instead.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Iterator, List, Optional, Tuple

from classenforcer.config import EnforcerConfig
from classenforcer.core.errors import ContractViolation, EnforcerError
from .context import activate
from .contracts import EnforcementRequest
from .introspect import Introspector
from .registry import get_config
from .validator import check_member

logger = logging.getLogger(__name__)


class Enforcer:
    """
    Runs contract checks with a fixed or process-wide configuration.

    Usage:
    ```python
    class Shape:
        SIDES = "abstract"
        name = "abstract"

        def __init__(self):
            Enforcer().enforce(Shape, type(self), self)

    class Square(Shape):
        SIDES = 4
        name = "square"

    Square()                # passes
    Shape()                 # ContractViolation: Undefined SIDES in Shape noted
    ```

    An Enforcer built without a config reads the process-wide default
    (see registry.configure) at the start of every call.
    """

    def __init__(self, config: Optional[EnforcerConfig] = None):
        self._config = config

    @property
    def config(self) -> EnforcerConfig:
        return self._config if self._config is not None else get_config()

    def enforce(
        self,
        base_type: type,
        target_type: type,
        target_instance: Any = None,
    ) -> None:
        """
        Verify target_type overrides every member base_type declares.

        Args:
            base_type: class declaring the required members
            target_type: class being checked
            target_instance: instance of target_type, typically ``self``

        Raises:
            ContractViolation: first member still carrying its sentinel
            EnforcerError: arguments are not classes / instance mismatch
        """
        request, config = self._prepare(base_type, target_type, target_instance)

        violations = self._violations(request, config)
        with activate(request):
            try:
                violation = next(violations, None)
            finally:
                violations.close()

        if violation is not None:
            logger.debug(f"Contract violation for {request!r}: {violation.message}")
            raise violation

        logger.debug(f"Contract satisfied: {request!r}")

    # short name
    add = enforce

    def check(
        self,
        base_type: type,
        target_type: type,
        target_instance: Any = None,
    ) -> List[ContractViolation]:
        """
        Same check as enforce(), but collect every violation instead of raising.

        Returns:
            Violations in check order (constants first), empty if satisfied
        """
        request, config = self._prepare(base_type, target_type, target_instance)

        with activate(request):
            return list(self._violations(request, config))

    def _prepare(
        self,
        base_type: Any,
        target_type: Any,
        target_instance: Any,
    ) -> Tuple[EnforcementRequest, EnforcerConfig]:
        if not inspect.isclass(base_type):
            raise EnforcerError.invalid_argument(
                f"base_type must be a class, got {type(base_type).__name__}",
                details={"argument": "base_type"},
            )
        if not inspect.isclass(target_type):
            raise EnforcerError.invalid_argument(
                f"target_type must be a class, got {type(target_type).__name__}",
                details={"argument": "target_type"},
            )
        if target_instance is not None and not isinstance(target_instance, target_type):
            raise EnforcerError.invalid_argument(
                f"target_instance is a {type(target_instance).__name__}, "
                f"not an instance of {target_type.__name__}",
                details={"argument": "target_instance"},
            )
        if not issubclass(target_type, base_type):
            logger.debug(
                f"{target_type.__name__} does not derive from {base_type.__name__}; "
                f"checking anyway"
            )

        request = EnforcementRequest(
            base_type=base_type,
            target_type=target_type,
            target_instance=target_instance,
        )
        # One snapshot per call: configure() during the call does not apply to it
        return request, self.config

    def _violations(
        self,
        request: EnforcementRequest,
        config: EnforcerConfig,
    ) -> Iterator[ContractViolation]:
        introspector = Introspector(request, config)

        for member in introspector.constants():
            violation = check_member(member, introspector.resolve(member), request, config)
            if violation is not None:
                yield violation

        for member in introspector.fields():
            violation = check_member(member, introspector.resolve(member), request, config)
            if violation is not None:
                yield violation


__all__ = ["Enforcer"]

"""
Autowiring resolver: builds instances by resolving constructor parameters.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .catalog import ClassCatalog
from .discovery import ImplementationDiscovery
from .errors import BindingNotFoundError, CircularDependencyError, ParameterResolutionError, ResolutionError
from .introspection import ConstructorInfo, ConstructorParameter
from .keys import identifier_of
from .logger_injection import AutoLoggerManager

logger = logging.getLogger(__name__)


class AutowiringResolver:
    """
    Creates fresh instances of concrete types.

    Each constructor parameter is resolved, in order of precedence, from an
    explicit override, from the container by its declared type, as an injected
    logger for unbound ``logging.Logger`` parameters, from its default value,
    or as ``None`` when the annotation allows it. Instances are never cached
    here; sharing is the container's job.
    """

    def __init__(
        self,
        catalog: ClassCatalog,
        resolve: Callable[[str], Any],
        is_bound: Callable[[str], bool],
        discovery: ImplementationDiscovery | None = None,
    ):
        """
        Create a new AutowiringResolver.

        Args:
            catalog: Where types are loaded and described from
            resolve: Resolves an identifier to its shared instance (the container's ``get``)
            is_bound: Checks whether an identifier has a binding (the container's ``has``)
            discovery: Looks up implementations of abstract types; None disables discovery
        """
        self._catalog = catalog
        self._resolve = resolve
        self._is_bound = is_bound
        self._discovery = discovery

    def create(self, implementation: str, extra_arguments: Mapping[str, Any] | None = None) -> Any:
        """
        Build a new instance of ``implementation``.

        Every failure is raised as a ResolutionError annotated with
        ``implementation``, chained to the original error.
        """
        try:
            return self._instantiate(implementation, extra_arguments)
        except ResolutionError as e:
            raise e.for_implementation(implementation) from e
        except Exception as e:
            raise ResolutionError(f"Unknown error: {e}", implementation) from e

    def _instantiate(self, implementation: str, extra_arguments: Mapping[str, Any] | None) -> Any:
        descriptor = self._describe(implementation)

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter in descriptor.parameters:
            value = self._resolve_parameter(descriptor.target, parameter, extra_arguments)
            if parameter.keyword_only:
                kwargs[parameter.name] = value
            else:
                args.append(value)

        logger.debug("Creating %s for %s", descriptor.target.__qualname__, implementation)
        return descriptor.instantiate(args, kwargs)

    def _describe(self, implementation: str) -> ConstructorInfo:
        cls = self._catalog.load(implementation)
        if cls is None:
            raise BindingNotFoundError(f"No class found for identifier: {implementation}")

        descriptor = self._catalog.describe(cls)
        if not descriptor.abstract:
            return descriptor

        concrete = self._discovery.find(cls) if self._discovery is not None else None
        if concrete is None:
            raise BindingNotFoundError(f"Could not find implementation for abstraction: {implementation}")
        return self._catalog.describe(concrete)

    def _resolve_parameter(
        self,
        owner: type,
        parameter: ConstructorParameter,
        extra_arguments: Mapping[str, Any] | None,
    ) -> Any:
        if extra_arguments is not None and parameter.name in extra_arguments:
            argument = extra_arguments[parameter.name]
            if parameter.declared_type is not None and isinstance(argument, str | type):
                reference = identifier_of(argument)
                if self._is_bound(reference):
                    return self._resolve(reference)
            return argument

        cause: ResolutionError | None = None
        if parameter.declared_type is not None:
            try:
                return self._resolve(self._catalog.register(parameter.declared_type))
            except CircularDependencyError:
                raise
            except ResolutionError as e:
                cause = e

            if AutoLoggerManager.should_auto_inject_logger(parameter.declared_type):
                logger.debug("Injecting a logger for %s.%s instead: %s", owner.__qualname__, parameter.name, cause)
                return AutoLoggerManager.create_logger(owner)

        if parameter.is_optional:
            return parameter.default_value

        if parameter.allows_null:
            return None

        raise ParameterResolutionError(parameter.name) from cause

"""
Container - shares instances across bindings and autowires constructors.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from .bindings import Binding, BindingTable, first_binding_with_instance, share_instance
from .catalog import ClassCatalog
from .contract import ContainerInterface, ReadableContainer
from .discovery import ImplementationDiscovery
from .errors import CircularDependencyError
from .keys import Identifier, identifier_of
from .resolver import AutowiringResolver

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Container(ContainerInterface):
    """
    Dependency injection container with autowiring.

    Every identifier resolves to one shared instance per container. Bindings
    chained through aliases (``bind("a", "b")``, ``bind("b", Impl)``) share the
    instance of the binding they lead to, provided their constructor
    overrides agree. Unbound identifiers naming a concrete class are
    autowired and cached under their own identifier.

    Abstract classes need an explicit binding; see FailsafeContainer for a
    container that searches for an implementation instead.
    """

    def __init__(self, bindings: Mapping[Identifier, Binding] | None = None, catalog: ClassCatalog | None = None):
        """
        Create a new Container.

        Args:
            bindings: Initial bindings. The same Binding object may be used
                      under several identifiers to make them share an instance.
            catalog: Where classes are looked up by identifier. A fresh
                     ClassCatalog is used if omitted.
        """
        self._catalog = catalog if catalog is not None else ClassCatalog()
        self._bindings: BindingTable = {}
        for identifier, binding in (bindings or {}).items():
            self._bindings[self._key(identifier)] = binding

        self._resolving: list[str] = []
        self._resolver = AutowiringResolver(self._catalog, self.get, self.has, self._create_discovery())

        own_binding = Binding(self._key(type(self)), instance=self)
        for cls in type(self).__mro__:
            if issubclass(cls, ReadableContainer):
                self._bindings[self._key(cls)] = own_binding

    @property
    def catalog(self) -> ClassCatalog:
        """The class catalog this container loads types from."""
        return self._catalog

    def _create_discovery(self) -> ImplementationDiscovery | None:
        """Get the discovery used for unbound abstract types (none by default)."""
        return None

    def _key(self, identifier: Identifier) -> str:
        if isinstance(identifier, type):
            return self._catalog.register(identifier)
        return identifier

    def get(self, identifier: type[T] | str) -> T:
        key = self._key(identifier)
        binding = self._bindings.get(key)
        if binding is not None and binding.instance is not None:
            return binding.instance  # type: ignore[return-value]

        if key in self._resolving:
            cycle = self._resolving[self._resolving.index(key) :] + [key]
            raise CircularDependencyError(cycle)

        self._resolving.append(key)
        try:
            return self._get_instance(key)  # type: ignore[no-any-return]
        finally:
            self._resolving.pop()

    def _get_instance(self, key: str) -> Any:
        binding = self._bindings.get(key)
        if binding is None:
            instance = self.create(key)
            self._bindings[key] = Binding(key, instance=instance)
            return instance

        inner_binding = first_binding_with_instance(self._bindings, binding)
        instance = inner_binding.instance
        if instance is None:
            instance = self.create(inner_binding.implementation, inner_binding.extra_arguments)

        shared = share_instance(self._bindings, binding, instance)
        logger.debug("Sharing %s instance across %d binding(s)", key, len(shared))
        return instance

    def has(self, identifier: Identifier) -> bool:
        return identifier_of(identifier) in self._bindings

    def bind(
        self,
        identifier: Identifier,
        implementation: Identifier,
        extra_arguments: Mapping[str, Any] | None = None,
    ) -> None:
        key = self._key(identifier)
        self._bindings[key] = Binding(self._key(implementation), extra_arguments)
        logger.debug("Bound %s -> %s", key, self._bindings[key].implementation)

    def create(self, implementation: Identifier, extra_arguments: Mapping[str, Any] | None = None) -> Any:
        return self._resolver.create(self._key(implementation), extra_arguments)

    def get_bindings(self) -> Mapping[str, Binding]:
        return MappingProxyType(self._bindings)


class FailsafeContainer(Container):
    """
    Container that discovers implementations for unbound abstract types.

    When an abstract class has no binding, the concrete subtype whose name is
    closest to the abstraction's name is used (see ImplementationDiscovery).
    If none is loaded yet, the catalog's packages are imported once and the
    search is retried.
    """

    def _create_discovery(self) -> ImplementationDiscovery | None:
        return ImplementationDiscovery(self._catalog)

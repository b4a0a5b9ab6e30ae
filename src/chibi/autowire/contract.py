"""
Abstract container interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, TypeVar

from .bindings import Binding
from .keys import Identifier

T = TypeVar("T")


class ReadableContainer(ABC):
    """
    Generic read-only container protocol.

    Anything that can hand out instances by identifier and tell whether it
    knows an identifier.
    """

    @abstractmethod
    def get(self, identifier: type[T] | str) -> T:
        """
        Get the shared instance configured for ``identifier``.

        Raises:
            BindingNotFoundError: If nothing instantiable is known for the identifier
            ResolutionError: If building the instance fails for any other reason
        """

    @abstractmethod
    def has(self, identifier: Identifier) -> bool:
        """Check whether ``identifier`` is configured, without building anything."""


class ContainerInterface(ReadableContainer):
    """A container that can also be configured and build unshared instances."""

    @abstractmethod
    def create(self, implementation: Identifier, extra_arguments: Mapping[str, Any] | None = None) -> Any:
        """
        Build a fresh instance of ``implementation``, bypassing the bindings' cache.

        Args:
            implementation: The class (or its identifier) to build
            extra_arguments: Constructor argument names mapped to their values
        """

    @abstractmethod
    def bind(
        self,
        identifier: Identifier,
        implementation: Identifier,
        extra_arguments: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Bind ``identifier`` to ``implementation``.

        Args:
            identifier: The identifier to use for the binding
            implementation: Another identifier to alias, or the class to build
            extra_arguments: Constructor argument names mapped to their values
        """

    @abstractmethod
    def get_bindings(self) -> Mapping[str, Binding]:
        """Get a read-only view of the currently configured bindings."""

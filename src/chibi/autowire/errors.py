"""
Exceptions raised while resolving bindings.
"""

from __future__ import annotations

from collections.abc import Sequence

IMPLEMENTATION_SUFFIX = "; Implementation: "


class ResolutionError(Exception):
    """Raised when an instance cannot be produced."""

    def __init__(self, message: str, implementation: str | None = None):
        self.message = message
        self.implementation = implementation
        if implementation is not None:
            message = f"{message}{IMPLEMENTATION_SUFFIX}{implementation}"
        super().__init__(message)

    def for_implementation(self, implementation: str) -> ResolutionError:
        """
        Build a copy of this error annotated with the implementation being built.

        The copy keeps the concrete error class and carries this error as
        ``__cause__`` once raised with ``from``.
        """
        return self._rebuild(str(self), implementation)

    def _rebuild(self, message: str, implementation: str) -> ResolutionError:
        return ResolutionError(message, implementation)


class BindingNotFoundError(ResolutionError):
    """Raised when an identifier names nothing instantiable and no implementation is known."""

    def _rebuild(self, message: str, implementation: str) -> ResolutionError:
        return BindingNotFoundError(message, implementation)


class ParameterResolutionError(ResolutionError):
    """Raised when a constructor parameter cannot be satisfied."""

    def __init__(self, parameter: str, implementation: str | None = None, message: str | None = None):
        self.parameter = parameter
        super().__init__(message or f"Could not resolve parameter: {parameter}", implementation)

    def _rebuild(self, message: str, implementation: str) -> ResolutionError:
        return ParameterResolutionError(self.parameter, implementation, message)


class CircularDependencyError(ResolutionError):
    """Raised when resolving an identifier requires the same identifier again."""

    def __init__(self, cycle: Sequence[str], implementation: str | None = None, message: str | None = None):
        self.cycle = list(cycle)
        cycle_str = " -> ".join(self.cycle)
        super().__init__(message or f"Circular dependency detected: {cycle_str}", implementation)

    def _rebuild(self, message: str, implementation: str) -> ResolutionError:
        return CircularDependencyError(self.cycle, implementation, message)

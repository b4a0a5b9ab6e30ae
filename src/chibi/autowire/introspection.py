"""
Constructor introspection for autowiring.

Turns a class into a ConstructorInfo: the ordered list of constructor
parameters with their declared types, defaults and nullability.
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union, get_args, get_origin, get_type_hints

from .errors import ResolutionError

_EMPTY = inspect.Parameter.empty
_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class ConstructorParameter:
    """A single constructor parameter as seen by the resolver."""

    name: str
    type_hint: Any = _EMPTY
    declared_type: type | None = None
    default_value: Any = _EMPTY
    allows_null: bool = False
    keyword_only: bool = False

    @property
    def is_optional(self) -> bool:
        """True if the parameter declares a default value."""
        return self.default_value is not _EMPTY


@dataclass(frozen=True)
class ConstructorInfo:
    """Everything needed to build an instance of ``target``."""

    target: type
    parameters: tuple[ConstructorParameter, ...] = ()
    abstract: bool = False
    factory: Callable[..., Any] | None = None

    def instantiate(self, args: list[Any], kwargs: dict[str, Any]) -> Any:
        """Call the factory (the class itself unless overridden)."""
        factory = self.factory if self.factory is not None else self.target
        return factory(*args, **kwargs)


def is_abstract(cls: type) -> bool:
    """Check whether ``cls`` cannot be instantiated directly."""
    return inspect.isabstract(cls) or bool(getattr(cls, "_is_protocol", False))


def is_autowirable(hint: Any) -> bool:
    """
    Check whether a type hint names a class the container should resolve.

    Builtin types (str, int, list, ...) and typing constructs are not
    autowired; they can only come from overrides, defaults or ``None``.
    """
    if hint is _EMPTY or hint is Any or get_origin(hint) is not None:
        return False
    return isinstance(hint, type) and hint.__module__ != "builtins"


def split_optional(hint: Any) -> tuple[Any, bool]:
    """
    Unwrap ``X | None`` into ``(X, True)``.

    Unions of several non-None members keep the whole union as the hint.
    """
    if hint is None or hint is type(None):
        return _EMPTY, True
    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        members = get_args(hint)
        non_null = [member for member in members if member is not type(None)]
        allows_null = len(non_null) != len(members)
        if len(non_null) == 1:
            return non_null[0], allows_null
        return hint, allows_null
    return hint, False


class SignatureIntrospector:
    """Extracts constructor metadata from classes."""

    @staticmethod
    def describe(cls: type) -> ConstructorInfo:
        """Build the ConstructorInfo for ``cls``."""
        abstract = is_abstract(cls)
        initializer = cls.__init__
        if initializer is object.__init__:
            return ConstructorInfo(cls, (), abstract)

        try:
            signature = inspect.signature(initializer)
            hints = get_type_hints(initializer)
        except (NameError, TypeError, ValueError) as e:
            raise ResolutionError(f"Reflection error: {e}") from e

        # Drop the bound instance parameter
        declared = list(signature.parameters.values())[1:]
        parameters = tuple(
            SignatureIntrospector._describe_parameter(parameter, hints)
            for parameter in declared
            if parameter.kind not in _SKIPPED_KINDS
        )
        return ConstructorInfo(cls, parameters, abstract)

    @staticmethod
    def _describe_parameter(parameter: inspect.Parameter, hints: dict[str, Any]) -> ConstructorParameter:
        hint = hints.get(parameter.name, _EMPTY)
        unwrapped, allows_null = split_optional(hint) if hint is not _EMPTY else (_EMPTY, False)
        return ConstructorParameter(
            name=parameter.name,
            type_hint=hint,
            declared_type=unwrapped if is_autowirable(unwrapped) else None,
            default_value=parameter.default,
            allows_null=allows_null,
            keyword_only=parameter.kind is inspect.Parameter.KEYWORD_ONLY,
        )

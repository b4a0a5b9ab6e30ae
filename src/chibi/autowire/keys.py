"""
Identifier helpers for the container.

Identifiers are plain strings. A type is turned into an identifier by
joining its module and qualified name, so ``identifier_of(Service)`` and the
string ``"app.services.Service"`` refer to the same binding.
"""

from __future__ import annotations

from typing import Any

type Identifier = str | type[Any]


def identifier_of(target: Identifier) -> str:
    """Return the string identifier for a type or an already-normalised key."""
    if isinstance(target, str):
        return target
    if isinstance(target, type):
        return f"{target.__module__}.{target.__qualname__}"
    raise TypeError(f"Identifier must be a string or a type, got {type(target).__name__}")


def short_name(identifier: Identifier) -> str:
    """Return the last dotted component of an identifier (the bare class name)."""
    if isinstance(identifier, type):
        return identifier.__name__
    return identifier.rsplit(".", 1)[-1]

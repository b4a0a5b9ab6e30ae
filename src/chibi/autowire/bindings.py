"""
Binding definitions and the alias chain walker.

A binding table maps identifiers to Bindings. A Binding whose
``implementation`` is itself a key of the table is an alias; following those
keys yields an alias chain. Every binding on a chain shares one instance.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

type BindingTable = dict[str, Binding]


@dataclass(eq=False)
class Binding:
    """
    A single entry of the binding table.

    ``implementation`` and ``extra_arguments`` describe how to build the
    object; ``instance`` caches it once built. Bindings compare by identity.
    """

    implementation: str
    extra_arguments: Mapping[str, Any] | None = None
    instance: object | None = None

    def has_instance(self) -> bool:
        """Check whether the instance has been built."""
        return self.instance is not None

    def __str__(self) -> str:
        args_str = f" {dict(self.extra_arguments)}" if self.extra_arguments is not None else ""
        state = "shared" if self.has_instance() else "pending"
        return f"-> {self.implementation}{args_str} ({state})"


def arguments_match(current: Binding, following: Binding) -> bool:
    """
    Check whether ``following`` continues the alias chain of ``current``.

    A binding without an override map is a pure rename and accepts any
    target. Otherwise both maps must be equal.
    """
    if current.extra_arguments is None:
        return True
    return (
        current.extra_arguments is following.extra_arguments
        or current.extra_arguments == following.extra_arguments
    )


def iter_alias_chain(bindings: BindingTable, binding: Binding) -> Iterator[Binding]:
    """
    Yield every binding reachable from ``binding`` by following aliases.

    The starting binding itself is not yielded. The walk stops at an
    unmapped implementation, at a mismatched override map, or before
    revisiting a binding.
    """
    visited = {id(binding)}
    implementation = binding.implementation
    while implementation in bindings:
        following = bindings[implementation]
        if id(following) in visited or not arguments_match(binding, following):
            break
        visited.add(id(following))
        binding = following
        yield binding
        implementation = binding.implementation


def first_binding_with_instance(bindings: BindingTable, binding: Binding) -> Binding:
    """
    Get the first binding on the chain that holds an instance.

    If no binding holds one, the last binding of the chain is returned.
    """
    last = binding
    for last in iter_alias_chain(bindings, binding):
        if last.has_instance():
            break
    return last


def share_instance(bindings: BindingTable, binding: Binding, instance: object) -> list[Binding]:
    """
    Store ``instance`` in ``binding`` and the bindings its alias chain leads to.

    Propagation stops at the first binding that already holds an instance;
    a cached instance is never replaced.
    """
    binding.instance = instance
    shared = [binding]
    for alias in iter_alias_chain(bindings, binding):
        if alias.has_instance():
            break
        alias.instance = instance
        shared.append(alias)
    return shared

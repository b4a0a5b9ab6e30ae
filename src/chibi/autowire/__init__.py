"""
Chibi Autowire - a small dependency injection container with autowiring.

This library provides:
- Bindings from identifiers to classes, aliases and constructor overrides
- One shared instance per alias chain
- Constructor autowiring from type hints, defaults and nullability
- Optional discovery of implementations for unbound abstract classes
"""

from .bindings import Binding
from .catalog import ClassCatalog
from .container import Container, FailsafeContainer
from .contract import ContainerInterface, ReadableContainer
from .discovery import ImplementationDiscovery, name_similarity
from .errors import BindingNotFoundError, CircularDependencyError, ParameterResolutionError, ResolutionError
from .introspection import ConstructorInfo, ConstructorParameter, SignatureIntrospector
from .keys import identifier_of

__all__ = [
    "Binding",
    "BindingNotFoundError",
    "CircularDependencyError",
    "ClassCatalog",
    "ConstructorInfo",
    "ConstructorParameter",
    "Container",
    "ContainerInterface",
    "FailsafeContainer",
    "ImplementationDiscovery",
    "ParameterResolutionError",
    "ReadableContainer",
    "ResolutionError",
    "SignatureIntrospector",
    "identifier_of",
    "name_similarity",
]

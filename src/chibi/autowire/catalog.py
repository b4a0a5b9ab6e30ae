"""
Class catalog: the universe of types the container can load by identifier.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Iterable, Iterator

from .introspection import ConstructorInfo, SignatureIntrospector
from .keys import identifier_of

logger = logging.getLogger(__name__)


class ClassCatalog:
    """
    Maps identifiers to types.

    Types are registered explicitly (every type handed to the container is
    registered automatically) or loaded on demand by importing their dotted
    path. ``expand()`` eagerly imports every module of the configured
    packages, so that implementations living in modules nobody imported yet
    become visible to implementation discovery.
    """

    def __init__(self, packages: Iterable[str] = ()):
        self._packages = list(packages)
        self._types: dict[str, type] = {}
        self._descriptors: dict[type, ConstructorInfo] = {}
        self._expanded = False

    @property
    def packages(self) -> list[str]:
        """Packages imported by ``expand()``."""
        return list(self._packages)

    @property
    def expanded(self) -> bool:
        """Whether ``expand()`` has already run."""
        return self._expanded

    def register(self, cls: type, identifier: str | None = None) -> str:
        """Register ``cls`` under its own identifier (and ``identifier``, if given)."""
        key = identifier_of(cls)
        self._types[key] = cls
        if identifier is not None:
            self._types[identifier] = cls
            return identifier
        return key

    def register_descriptor(self, descriptor: ConstructorInfo, identifier: str | None = None) -> str:
        """Register a hand-written ConstructorInfo, bypassing introspection for its target."""
        self._descriptors[descriptor.target] = descriptor
        return self.register(descriptor.target, identifier)

    def registered_types(self) -> list[type]:
        """Get every explicitly registered type, in registration order."""
        return list(dict.fromkeys(self._types.values()))

    def load(self, identifier: str) -> type | None:
        """
        Get the type for ``identifier``.

        Falls back to importing the longest importable module prefix and
        walking the remaining attributes. Returns None if nothing matches.
        """
        cls = self._types.get(identifier)
        if cls is not None:
            return cls

        cls = self._import_type(identifier)
        if cls is not None:
            self._types[identifier] = cls
        return cls

    def describe(self, cls: type) -> ConstructorInfo:
        """Get the (cached) ConstructorInfo for ``cls``."""
        descriptor = self._descriptors.get(cls)
        if descriptor is None:
            descriptor = SignatureIntrospector.describe(cls)
            self._descriptors[cls] = descriptor
        return descriptor

    def subtypes_of(self, abstraction: type) -> Iterator[type]:
        """
        Yield every known subtype of ``abstraction``, each once.

        Registered types come first, in registration order, followed by the
        transitive ``__subclasses__()`` of the abstraction.
        """
        seen: set[type] = set()
        for cls in self.registered_types():
            # Nominal check: protocols reject issubclass() unless runtime checkable
            if cls is not abstraction and abstraction in cls.__mro__ and cls not in seen:
                seen.add(cls)
                yield cls

        pending = list(abstraction.__subclasses__())
        while pending:
            cls = pending.pop(0)
            if cls in seen:
                continue
            seen.add(cls)
            yield cls
            pending.extend(cls.__subclasses__())

    def expand(self) -> None:
        """
        Import every module of the configured packages.

        Runs once; later calls are no-ops. Modules that fail to import are
        logged and skipped.
        """
        if self._expanded:
            return
        self._expanded = True

        for package_name in self._packages:
            for module_name in self._iter_modules(package_name):
                try:
                    importlib.import_module(module_name)
                except Exception as e:  # noqa: BLE001
                    logger.warning("Could not import %s while expanding the class catalog: %s", module_name, e)

    @staticmethod
    def _iter_modules(package_name: str) -> Iterator[str]:
        try:
            package = importlib.import_module(package_name)
        except Exception as e:  # noqa: BLE001
            logger.warning("Could not import package %s while expanding the class catalog: %s", package_name, e)
            return

        search_path = getattr(package, "__path__", None)
        if search_path is None:
            return

        def on_error(name: str) -> None:
            logger.warning("Could not walk package %s while expanding the class catalog", name)

        for module_info in pkgutil.walk_packages(search_path, prefix=f"{package.__name__}.", onerror=on_error):
            yield module_info.name

    @staticmethod
    def _import_type(identifier: str) -> type | None:
        parts = identifier.split(".")
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                target: object = importlib.import_module(module_name)
            except ImportError:
                continue

            for attribute in parts[split:]:
                target = getattr(target, attribute, None)
                if target is None:
                    break
            return target if isinstance(target, type) else None
        return None

"""
Classes shared by the container tests.
"""

import logging
from abc import ABC, abstractmethod


class DependencyAInterface(ABC):
    @abstractmethod
    def get_a(self) -> str: ...


class DependencyBInterface(DependencyAInterface):
    @abstractmethod
    def get_b(self) -> str: ...


class DependencyCInterface(DependencyBInterface):
    @abstractmethod
    def get_c(self) -> str: ...


class DependencyDInterface(DependencyCInterface):
    @abstractmethod
    def get_d(self) -> str: ...


class DependencyA(DependencyAInterface):
    def get_a(self) -> str:
        return "A"


class DependencyB(DependencyBInterface):
    def __init__(self, a: DependencyA, b: str):
        self._a = a.get_a()
        self._b = b

    def get_a(self) -> str:
        return self._a

    def get_b(self) -> str:
        return self._b


class DependencyC(DependencyCInterface):
    def __init__(self, a: DependencyA, b: DependencyB, c: str = "C"):
        self._a = a.get_a()
        self._b = b.get_b()
        self._c = c

    def get_a(self) -> str:
        return self._a

    def get_b(self) -> str:
        return self._b

    def get_c(self) -> str:
        return self._c


class DependencyD(DependencyDInterface):
    def __init__(self, a: DependencyA, b: DependencyB, c: DependencyC, d: str = "D"):
        self._a = a.get_a()
        self._b = b.get_b()
        self._c = c.get_c()
        self._d = d

    def get_a(self) -> str:
        return self._a

    def get_b(self) -> str:
        return self._b

    def get_c(self) -> str:
        return self._c

    def get_d(self) -> str:
        return self._d


class StorageInterface(ABC):
    """Only implemented inside the lazy_plugins package."""

    @abstractmethod
    def save(self, key: str, value: str) -> None: ...


class CycleA:
    def __init__(self, b: "CycleB"):
        self.b = b


class CycleB:
    def __init__(self, a: CycleA):
        self.a = a


class NullableCycleA:
    def __init__(self, b: "NullableCycleB"):
        self.b = b


class NullableCycleB:
    def __init__(self, a: NullableCycleA | None):
        self.a = a


class BrokenAnnotation:
    def __init__(self, dependency: "UndefinedDependency"):  # noqa: F821
        self.dependency = dependency


class ServiceWithLogger:
    def __init__(self, logger: logging.Logger):
        self.logger = logger

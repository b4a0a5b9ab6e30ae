#!/usr/bin/env python3
"""
Unit tests for constructor introspection.
"""

import inspect
import unittest
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol

from mock_dependencies import BrokenAnnotation, DependencyA, DependencyB

from chibi.autowire import ResolutionError, SignatureIntrospector
from chibi.autowire.introspection import is_abstract, is_autowirable, split_optional


class TestSplitOptional(unittest.TestCase):
    def test_optional_forms(self):
        self.assertEqual(split_optional(DependencyA | None), (DependencyA, True))
        self.assertEqual(split_optional(Optional[DependencyA]), (DependencyA, True))  # noqa: UP045
        self.assertEqual(split_optional(DependencyA), (DependencyA, False))

    def test_none_only(self):
        self.assertEqual(split_optional(type(None)), (inspect.Parameter.empty, True))

    def test_wide_union_keeps_hint(self):
        hint = DependencyA | DependencyB | None
        self.assertEqual(split_optional(hint), (hint, True))


class TestIsAutowirable(unittest.TestCase):
    def test_classes_are_autowirable(self):
        self.assertTrue(is_autowirable(DependencyA))

    def test_builtins_and_typing_constructs_are_not(self):
        for hint in (str, int, list, dict, Any, list[DependencyA], inspect.Parameter.empty):
            with self.subTest(hint=hint):
                self.assertFalse(is_autowirable(hint))


class TestIsAbstract(unittest.TestCase):
    def test_abstract_classes(self):
        class Repository(ABC):
            @abstractmethod
            def load(self) -> str: ...

        class Readable(Protocol):
            def read(self) -> bytes: ...

        self.assertTrue(is_abstract(Repository))
        self.assertTrue(is_abstract(Readable))
        self.assertFalse(is_abstract(DependencyA))

    def test_protocol_implementation_is_concrete(self):
        class Readable(Protocol):
            def read(self) -> bytes: ...

        class FileReader(Readable):
            def read(self) -> bytes:
                return b""

        self.assertFalse(is_abstract(FileReader))


class TestSignatureIntrospector(unittest.TestCase):
    def test_class_without_constructor(self):
        info = SignatureIntrospector.describe(DependencyA)

        self.assertIs(info.target, DependencyA)
        self.assertEqual(info.parameters, ())
        self.assertFalse(info.abstract)

    def test_parameters(self):
        class Service:
            def __init__(
                self,
                a: DependencyA,
                name: str,
                retries: int = 3,
                b: DependencyB | None = None,
                *args: Any,
                label: str | None,
                untyped=None,
                **kwargs: Any,
            ):
                pass

        info = SignatureIntrospector.describe(Service)
        parameters = {parameter.name: parameter for parameter in info.parameters}

        self.assertEqual(list(parameters), ["a", "name", "retries", "b", "label", "untyped"])

        self.assertIs(parameters["a"].declared_type, DependencyA)
        self.assertFalse(parameters["a"].is_optional)
        self.assertFalse(parameters["a"].allows_null)

        self.assertIsNone(parameters["name"].declared_type)
        self.assertIs(parameters["name"].type_hint, str)

        self.assertTrue(parameters["retries"].is_optional)
        self.assertEqual(parameters["retries"].default_value, 3)

        self.assertIs(parameters["b"].declared_type, DependencyB)
        self.assertTrue(parameters["b"].allows_null)
        self.assertTrue(parameters["b"].is_optional)

        self.assertTrue(parameters["label"].keyword_only)
        self.assertTrue(parameters["label"].allows_null)
        self.assertFalse(parameters["label"].is_optional)

        self.assertIsNone(parameters["untyped"].declared_type)
        self.assertIs(parameters["untyped"].type_hint, inspect.Parameter.empty)
        self.assertTrue(parameters["untyped"].is_optional)

    def test_unreadable_annotation(self):
        with self.assertRaises(ResolutionError) as context:
            SignatureIntrospector.describe(BrokenAnnotation)

        self.assertIn("Reflection error", str(context.exception))
        self.assertIsInstance(context.exception.__cause__, NameError)


if __name__ == "__main__":
    unittest.main()

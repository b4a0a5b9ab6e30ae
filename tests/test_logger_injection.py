#!/usr/bin/env python3
"""
Unit tests for automatic logger injection.
"""

import logging
import unittest

from mock_dependencies import ServiceWithLogger

from chibi.autowire import Binding, Container, identifier_of
from chibi.autowire.logger_injection import AutoLoggerManager


class TestAutoLoggerManager(unittest.TestCase):
    """Test automatic logger management."""

    def test_should_auto_inject_logger(self):
        self.assertTrue(AutoLoggerManager.should_auto_inject_logger(logging.Logger))
        self.assertFalse(AutoLoggerManager.should_auto_inject_logger(str))
        self.assertFalse(AutoLoggerManager.should_auto_inject_logger(logging.Handler))

    def test_logger_name_for(self):
        class Local:
            pass

        self.assertEqual(AutoLoggerManager.logger_name_for(ServiceWithLogger), "mock_dependencies.ServiceWithLogger")
        self.assertNotIn("<locals>", AutoLoggerManager.logger_name_for(Local))
        self.assertTrue(AutoLoggerManager.logger_name_for(Local).endswith("test_logger_name_for.Local"))

    def test_create_logger(self):
        logger = AutoLoggerManager.create_logger(ServiceWithLogger)

        self.assertIsInstance(logger, logging.Logger)
        self.assertEqual(logger.name, "mock_dependencies.ServiceWithLogger")


class TestAutomaticLoggerInjection(unittest.TestCase):
    """Test automatic logger injection in the container."""

    def test_automatic_logger_injection(self):
        """Test that an unbound logger parameter receives a logger named after its class."""
        service = Container().get(ServiceWithLogger)

        self.assertIsInstance(service.logger, logging.Logger)
        self.assertEqual(service.logger.name, "mock_dependencies.ServiceWithLogger")

    def test_injection_logs_the_unresolved_logger(self):
        """Test that falling back to an injected logger records why the container lookup failed."""
        with self.assertLogs("chibi.autowire.resolver", level="DEBUG") as logs:
            Container().get(ServiceWithLogger)

        self.assertTrue(
            any("Injecting a logger for ServiceWithLogger.logger" in message for message in logs.output)
        )

    def test_explicit_binding_takes_precedence(self):
        """Test that an explicit logger binding wins over automatic injection."""
        explicit_logger = logging.getLogger("explicit-logger")
        container = Container({logging.Logger: Binding(identifier_of(logging.Logger), instance=explicit_logger)})

        service = container.get(ServiceWithLogger)

        self.assertIs(service.logger, explicit_logger)

    def test_override_takes_precedence(self):
        """Test that an override wins over automatic injection."""
        override_logger = logging.getLogger("override-logger")

        service = Container().create(ServiceWithLogger, {"logger": override_logger})

        self.assertIs(service.logger, override_logger)

    def test_each_class_gets_its_own_logger(self):
        class Worker:
            def __init__(self, logger: logging.Logger):
                self.logger = logger

        container = Container()

        self.assertNotEqual(container.get(Worker).logger.name, container.get(ServiceWithLogger).logger.name)


if __name__ == "__main__":
    unittest.main()

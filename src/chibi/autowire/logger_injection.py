"""
Automatic logger injection.

A constructor parameter typed ``logging.Logger`` that nothing else can
satisfy receives a logger named after the class being constructed.
"""

from __future__ import annotations

import logging
from typing import Any


class AutoLoggerManager:
    """Decides when to inject a logger and creates it."""

    @staticmethod
    def should_auto_inject_logger(declared_type: Any) -> bool:
        """Check whether a parameter of ``declared_type`` gets an automatic logger."""
        return declared_type is logging.Logger

    @staticmethod
    def logger_name_for(owner: type) -> str:
        """Get the logger name used for instances of ``owner``."""
        return f"{owner.__module__}.{owner.__qualname__}".replace(".<locals>", "")

    @staticmethod
    def create_logger(owner: type) -> logging.Logger:
        """Create the logger injected into instances of ``owner``."""
        return logging.getLogger(AutoLoggerManager.logger_name_for(owner))

#!/usr/bin/env python3
"""
Demo of automatic logger injection in the chibi-autowire container.

Constructor parameters typed ``logging.Logger`` receive a logger named after
the class being built, unless a binding or an override supplies one.
"""

import logging

from chibi.autowire import Binding, Container, identifier_of

# Configure logging to see the output
logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")


class DatabaseService:
    """A database service that automatically gets a logger."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def query(self, sql: str) -> str:
        self.logger.info(f"Executing query: {sql}")
        return f"Result for: {sql}"


class UserService:
    """A user service with dependencies and automatic logger injection."""

    def __init__(self, database: DatabaseService, logger: logging.Logger):
        self.database = database
        self.logger = logger

    def create_user(self, username: str) -> str:
        self.logger.info(f"Creating user: {username}")
        result = self.database.query(f"INSERT INTO users (name) VALUES ('{username}')")
        self.logger.info(f"User created successfully: {username}")
        return result


def main() -> None:
    print("=== Automatic loggers ===")
    container = Container()
    user_service = container.get(UserService)
    user_service.create_user("alice")
    print(f"UserService logger: {user_service.logger.name}")
    print(f"DatabaseService logger: {user_service.database.logger.name}")

    print("\n=== Explicit logger binding ===")
    shared_logger = logging.getLogger("app")
    container = Container({logging.Logger: Binding(identifier_of(logging.Logger), instance=shared_logger)})
    user_service = container.get(UserService)
    user_service.create_user("bob")
    print(f"Both services share {shared_logger.name!r}: {user_service.logger is user_service.database.logger}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Demo of the chibi-autowire container: aliases, overrides and discovery.
"""

from abc import ABC, abstractmethod

from chibi.autowire import Container, FailsafeContainer, ResolutionError


class Database(ABC):
    @abstractmethod
    def query(self, sql: str) -> str: ...


class PostgresDatabase(Database):
    def __init__(self, dsn: str = "postgresql://localhost/app"):
        self.dsn = dsn

    def query(self, sql: str) -> str:
        return f"Executing '{sql}' on {self.dsn}"


class UserRepository:
    def __init__(self, database: Database, table: str = "users"):
        self.database = database
        self.table = table

    def find(self, user_id: int) -> str:
        return self.database.query(f"SELECT * FROM {self.table} WHERE id = {user_id}")


class UserService:
    def __init__(self, repository: UserRepository, cache: dict[str, str] | None):
        self.repository = repository
        self.cache = cache

    def describe(self, user_id: int) -> str:
        return self.repository.find(user_id)


def aliases_and_overrides() -> None:
    print("=== Aliases and overrides ===")
    container = Container()
    container.bind(Database, PostgresDatabase)
    container.bind(PostgresDatabase, PostgresDatabase, {"dsn": "postgresql://db.internal/prod"})
    container.bind("users", UserService)

    service = container.get("users")
    print(service.describe(42))
    print(f"Cache (nullable, unbound): {service.cache}")
    print(f"Database shared: {container.get(Database) is container.get(PostgresDatabase)}")

    container.bind("archive", UserRepository, {"table": "archived_users"})
    print(container.get("archive").find(7))


def unshared_instances() -> None:
    print("\n=== create() builds fresh instances ===")
    container = Container()
    container.bind(Database, PostgresDatabase)

    first = container.create(UserRepository, {"table": "first"})
    second = container.create(UserRepository, {"table": "second"})
    print(f"Different repositories: {first is not second}")
    print(f"Same database: {first.database is second.database}")


def discovery() -> None:
    print("\n=== Implementation discovery ===")
    try:
        Container().get(UserService)
    except ResolutionError as e:
        print(f"Plain container: {type(e).__name__}: {e}")

    container = FailsafeContainer()
    service = container.get(UserService)
    print(f"Failsafe container picked {type(service.repository.database).__name__}")
    print(service.describe(1))


def main() -> None:
    aliases_and_overrides()
    unshared_instances()
    discovery()


if __name__ == "__main__":
    main()

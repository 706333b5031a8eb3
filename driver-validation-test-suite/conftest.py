"""
Common test fixtures for the DBInterface driver validation test suite.

Every test in this suite runs once per bundled driver, checking that each one honours the contract the same way.
"""
from dataclasses import dataclass
from typing import Generator

import pytest

import dbinterface
from dbinterface.ext.drivers.sqlite import SQLiteConnection
from dbinterface.protocols import Connection


@dataclass
class DriverTestConfig:
    """Per driver details the suite needs to write portable SQL."""
    connection: Connection
    placeholder: str
    named_placeholder: str

    def positional(self, count: int) -> str:
        return ", ".join([self.placeholder] * count)

    def named(self, *names: str) -> str:
        return ", ".join(self.named_placeholder.format(name) for name in names)


@pytest.fixture(
    params=[(SQLiteConnection, "?", ":{}")],
    scope="function",
    ids=["sqlite"],
)
def driver(request) -> Generator[DriverTestConfig, None, None]:
    """Fixture that provides a connected driver for testing.

    This fixture is parameterized to run tests with all bundled drivers.
    """
    driver_type, placeholder, named_placeholder = request.param
    connection = dbinterface.connect(driver_type)
    try:
        yield DriverTestConfig(connection, placeholder, named_placeholder)
    finally:
        dbinterface.close(connection)


@pytest.fixture
def users(driver) -> Generator[str, None, None]:
    """Creates an empty users table for the test and drops it afterwards."""
    dbinterface.execute(driver.connection, "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT)")
    yield "users"
    dbinterface.execute(driver.connection, "DROP TABLE IF EXISTS users")

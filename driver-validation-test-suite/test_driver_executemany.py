"""
Tests for batch execution to validate consistent behavior across all drivers.
"""
import pytest

import dbinterface
from dbinterface.exceptions import ParameterError


def _names(driver) -> list[tuple[int, str]]:
    rows = dbinterface.execute(driver.connection, "SELECT id, name FROM users ORDER BY id")
    return [(row["id"], row["name"]) for row in rows]


def test_executemany_positional_columns(driver, users):
    dbinterface.executemany(
        driver.connection,
        f"INSERT INTO users (id, name) VALUES ({driver.positional(2)})",
        ([1, 2, 3], ["a", "b", "c"]),
    )

    assert _names(driver) == [(1, "a"), (2, "b"), (3, "c")]


def test_executemany_named_columns(driver, users):
    dbinterface.executemany(
        driver.connection,
        f"INSERT INTO users (id, name) VALUES ({driver.named('id', 'name')})",
        {"id": [1, 2], "name": ["a", "b"]},
    )

    assert _names(driver) == [(1, "a"), (2, "b")]


def test_executemany_on_prepared_statement(driver, users):
    insert = dbinterface.prepare(driver.connection, f"INSERT INTO users (id, name) VALUES ({driver.positional(2)})")

    dbinterface.executemany(insert, ((10, 20), ("x", "y")))

    assert _names(driver) == [(10, "x"), (20, "y")]


def test_executemany_without_params_executes_once(driver, users):
    dbinterface.executemany(driver.connection, "INSERT INTO users (name) VALUES ('only')")

    assert [name for _, name in _names(driver)] == ["only"]


def test_executemany_mismatched_columns_inserts_nothing(driver, users):
    with pytest.raises(ParameterError):
        dbinterface.executemany(
            driver.connection,
            f"INSERT INTO users (id, name) VALUES ({driver.positional(2)})",
            ([1, 2], ["a"]),
        )

    assert _names(driver) == []

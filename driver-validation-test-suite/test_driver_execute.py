"""
Tests for statement execution to validate consistent behavior across all drivers.
"""
import dbinterface
from dbinterface.protocols import Cursor, Row, Statement


def test_prepare_returns_statement(driver, users):
    statement = dbinterface.prepare(driver.connection, "SELECT id, name FROM users")

    assert isinstance(statement, Statement)


def test_execute_returns_cursor_for_ddl(driver):
    """Statements that produce no rows still return a cursor that iterates nothing."""
    cursor = dbinterface.execute(driver.connection, "CREATE TABLE ddl_only (x INTEGER)")

    assert isinstance(cursor, Cursor)
    assert list(cursor) == []


def test_execute_sql_matches_prepared_statement(driver, users):
    dbinterface.execute(
        driver.connection, f"INSERT INTO users (id, name) VALUES ({driver.positional(2)})", (1, "Alice")
    )
    dbinterface.execute(
        driver.connection, f"INSERT INTO users (id, name) VALUES ({driver.positional(2)})", (2, "Bob")
    )

    sql = f"SELECT id, name FROM users WHERE id >= {driver.placeholder} ORDER BY id"
    composed = [tuple(row) for row in dbinterface.execute(driver.connection, sql, (1,))]
    prepared = [tuple(row) for row in dbinterface.execute(dbinterface.prepare(driver.connection, sql), (1,))]

    assert composed == prepared == [(1, "Alice"), (2, "Bob")]


def test_rows_are_accessible_by_name_and_position(driver, users):
    dbinterface.execute(
        driver.connection, f"INSERT INTO users (id, name) VALUES ({driver.positional(2)})", (1, "Alice")
    )

    [row] = dbinterface.execute(driver.connection, "SELECT id, name FROM users")

    assert isinstance(row, Row)
    assert len(row) == 2
    assert row["id"] == 1
    assert row["name"] == "Alice"
    assert row[0] == 1
    assert row[1] == "Alice"


def test_named_parameters(driver, users):
    dbinterface.execute(
        driver.connection,
        f"INSERT INTO users (id, name) VALUES ({driver.named('id', 'name')})",
        {"id": 5, "name": "Eve"},
    )

    rows = dbinterface.execute(driver.connection, f"SELECT name FROM users WHERE id = {driver.named('id')}", {"id": 5})
    assert [row["name"] for row in rows] == ["Eve"]


def test_prepared_statement_is_reusable(driver, users):
    insert = dbinterface.prepare(driver.connection, f"INSERT INTO users (id, name) VALUES ({driver.positional(2)})")
    dbinterface.execute(insert, (1, "a"))
    dbinterface.execute(insert, (2, "b"))

    rows = dbinterface.execute(driver.connection, "SELECT id FROM users ORDER BY id")
    assert [row["id"] for row in rows] == [1, 2]


def test_prepare_with_connection_supplier(driver, users):
    statement = dbinterface.prepare(lambda: driver.connection, "SELECT id FROM users")

    assert list(dbinterface.execute(statement)) == []

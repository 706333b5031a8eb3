import pytest

from dbinterface import executemany, prepare
from dbinterface.exceptions import ParameterError
from recording_driver import BatchRecordingConnection


def test_executemany_without_params_executes_once(statement):
    executemany(statement)

    assert statement.executions == [()]


def test_executemany_with_empty_params_executes_once(statement):
    executemany(statement, ())

    assert statement.executions == [()]


def test_executemany_positional_columns(statement):
    executemany(statement, ([1, 2, 3], ["a", "b", "c"]))

    assert [tuple(row) for row in statement.executions] == [(1, "a"), (2, "b"), (3, "c")]


def test_executemany_named_columns(statement):
    executemany(statement, {"ids": [1, 2, 3], "names": ["a", "b", "c"]})

    assert [dict(row) for row in statement.executions] == [
        {"ids": 1, "names": "a"},
        {"ids": 2, "names": "b"},
        {"ids": 3, "names": "c"},
    ]


def test_executemany_row_views_read_through_columns(statement):
    params = ([10, 20], ("x", "y"), [True, False])

    executemany(statement, params)

    assert len(statement.executions) == 2
    for i, row in enumerate(statement.executions):
        assert len(row) == len(params)
        for j in range(len(params)):
            assert row[j] == params[j][i]


def test_executemany_mismatched_lengths(statement):
    with pytest.raises(ParameterError) as excinfo:
        executemany(statement, {"ids": [1, 2], "names": ["a"]})

    assert "'ids' has 2" in str(excinfo.value)
    assert "'names' has 1" in str(excinfo.value)
    assert statement.executions == []


def test_executemany_mismatch_in_later_column(statement):
    with pytest.raises(ParameterError):
        executemany(statement, ([1, 2, 3], [1, 2, 3], [1, 2]))

    assert statement.executions == []


def test_executemany_empty_columns_execute_nothing(statement):
    executemany(statement, ([], []))

    assert statement.executions == []


def test_executemany_returns_nothing_and_closes_cursors(statement):
    result = executemany(statement, ([1, 2], ["a", "b"]))

    assert result is None
    assert all(cursor.closed for cursor in statement.cursors)


def test_executemany_sql_prepares_once(connection):
    executemany(connection, "INSERT INTO users (id, name) VALUES (?, ?)", ([1, 2], ["a", "b"]))

    [statement] = connection.statements
    assert [tuple(row) for row in statement.executions] == [(1, "a"), (2, "b")]


def test_executemany_uses_statement_override():
    conn = BatchRecordingConnection()
    statement = prepare(conn, "INSERT INTO users (id) VALUES (?)")

    executemany(statement, ([1, 2, 3],))

    assert statement.batches == [([1, 2, 3],)]
    assert statement.executions == []

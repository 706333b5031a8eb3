"""Generic operations callers use against any driver.

Each operation dispatches to the matching method on the driver object it is given and raises
`OperationNotImplemented` when the driver does not provide it. Two operations carry a default composition that drivers
inherit for free:

    execute(connection, sql, params)      == execute(prepare(connection, sql), params)
    executemany(connection, sql, params)  == executemany(prepare(connection, sql), params)

and `executemany(statement, params)` is built on single row `execute` calls over lazy views of the column oriented
parameters (see `dbinterface.parameters`). Drivers with a faster path may provide their own `execute`/`executemany`
methods (see the override protocols in `dbinterface.protocols`) as long as they preserve these semantics.

Every operation may block while the driver talks to its backend. No timeout or retry policy is applied here.
"""
import logging
from typing import Any, Callable, overload, TYPE_CHECKING

from dbinterface.drivers import get_driver
from dbinterface.exceptions import DatabaseError, OperationNotImplemented
from dbinterface.parameters import ParameterBatch
from dbinterface.protocols import BatchConnection, BatchStatement, DirectConnection

if TYPE_CHECKING:
    from dbinterface.protocols import Connection, Cursor, Statement
    from dbinterface.shared_types import ColumnParams, Params


logger = logging.getLogger(__name__)

_UNSET: Any = object()


def connect(driver: "str | Any", *args: Any, **kwargs: Any) -> "Connection":
    """Opens a connection using a registered driver tag or any object with a `connect` factory.

    Example:
        ```python
        conn = connect("sqlite", {"database": "app.db"})
        conn = connect(SQLiteConnection, {"database": "app.db"})
        ```

    Raises:
        OperationNotImplemented: If the tag is unknown or the driver has no `connect` factory.
    """
    if isinstance(driver, str):
        factory = get_driver(driver)
    else:
        factory = _require(driver, "connect")

    return factory(*args, **kwargs)


def prepare(connection: "Connection | Callable[[], Connection]", sql: str) -> "Statement":
    """Prepares a statement against a connection.

    `connection` may also be a zero-argument function returning a connection. It is called first, which allows
    deferring connection retrieval until a statement is actually needed.
    """
    prepare_statement = getattr(connection, "prepare", None)
    if callable(prepare_statement):
        return prepare_statement(sql)

    if callable(connection):
        return prepare(connection(), sql)

    raise OperationNotImplemented("prepare", connection)


@overload
def execute(statement: "Statement", params: "Params" = (), /) -> "Cursor":
    ...


@overload
def execute(connection: "Connection", sql: str, params: "Params" = (), /) -> "Cursor":
    ...


def execute(target, sql_or_params=(), params=_UNSET, /):
    """Executes a prepared statement, or prepares and executes SQL against a connection.

    `params` is a sequence for positional placeholders or a mapping for named placeholders. A cursor is always
    returned, statements that produce no rows return a cursor that iterates nothing.
    """
    if isinstance(sql_or_params, str):
        return _execute_sql(target, sql_or_params, () if params is _UNSET else params)

    if params is not _UNSET:
        raise TypeError("execute() on a statement takes a single params argument")

    return _execute_statement(target, sql_or_params)


@overload
def executemany(statement: "Statement", params: "ColumnParams" = (), /) -> None:
    ...


@overload
def executemany(connection: "Connection", sql: str, params: "ColumnParams" = (), /) -> None:
    ...


def executemany(target, sql_or_params=(), params=_UNSET, /):
    """Executes a statement once per row of column oriented parameters, discarding the results.

    Each parameter slot holds one value per row, e.g. `{"id": [1, 2], "name": ["a", "b"]}` executes the statement
    twice. All columns must be the same length, otherwise `ParameterError` is raised before anything executes. With no
    parameters the statement is executed exactly once.
    """
    if isinstance(sql_or_params, str):
        _executemany_sql(target, sql_or_params, () if params is _UNSET else params)
        return

    if params is not _UNSET:
        raise TypeError("executemany() on a statement takes a single params argument")

    _executemany_statement(target, sql_or_params)


def close(resource: "Connection | Statement | Cursor"):
    """Closes a connection, statement, or cursor.

    Whether closing an already closed resource is a no-op or an error is decided, and documented, by each driver.
    """
    _require(resource, "close")()


def last_row_id(cursor: "Cursor") -> int:
    """Returns the id of the last row inserted by the cursor's execution, when the driver supports it."""
    return _require(cursor, "last_row_id")()


def _execute_statement(statement: "Statement", params: "Params") -> "Cursor":
    cursor = _require(statement, "execute")(params)
    if cursor is None:
        raise DatabaseError(
            f"`execute` for `{type(statement).__qualname__}` returned no cursor", driver=type(statement)
        )

    return cursor


def _execute_sql(connection: "Connection", sql: str, params: "Params") -> "Cursor":
    match connection:
        case DirectConnection():
            cursor = connection.execute(sql, params)
            if cursor is None:
                raise DatabaseError(
                    f"`execute` for `{type(connection).__qualname__}` returned no cursor", driver=type(connection)
                )

            return cursor

        case _:
            return _execute_statement(prepare(connection, sql), params)


def _executemany_statement(statement: "Statement", params: "ColumnParams"):
    match statement:
        case BatchStatement():
            statement.executemany(params)

        case _ if len(params) == 0:
            _discard(_execute_statement(statement, ()))

        case _:
            batch = ParameterBatch(params)
            logger.debug("Executing %r once for each of %d batch rows", statement, len(batch))
            for row in batch:
                _discard(_execute_statement(statement, row))


def _executemany_sql(connection: "Connection", sql: str, params: "ColumnParams"):
    match connection:
        case BatchConnection():
            connection.executemany(sql, params)

        case _:
            _executemany_statement(prepare(connection, sql), params)


def _discard(cursor: "Cursor"):
    close_cursor = getattr(cursor, "close", None)
    if callable(close_cursor):
        close_cursor()


def _require(target: Any, operation: str) -> Callable[..., Any]:
    method = getattr(target, operation, None)
    if not callable(method):
        raise OperationNotImplemented(operation, target)

    return method

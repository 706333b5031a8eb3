"""Prepared statements for the SQLite driver."""
import sqlite3
from collections.abc import Mapping
from typing import Any, TYPE_CHECKING

from dbinterface.exceptions import DatabaseError
from dbinterface.ext.drivers.sqlite.cursor import SQLiteCursor

if TYPE_CHECKING:
    from dbinterface.ext.drivers.sqlite.driver import SQLiteConnection
    from dbinterface.shared_types import Params


class SQLiteStatement:
    """A statement prepared against a `SQLiteConnection`.

    Executing a closed statement, or a statement whose connection has been closed, raises `DatabaseError`. Closing is
    idempotent.

    Attributes:
        connection: The connection the statement was prepared against.
        sql: The statement's SQL text.
    """
    def __init__(self, connection: "SQLiteConnection", sql: str):
        self.connection = connection
        self.sql = sql
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def execute(self, params: "Params" = ()) -> SQLiteCursor:
        """Executes the statement with positional (`?`) or named (`:name`) parameters."""
        if self._closed:
            raise DatabaseError("Cannot execute a closed statement.", driver=type(self))

        if self.connection.closed:
            raise DatabaseError("Cannot execute a statement whose connection has been closed.", driver=type(self))

        cursor = self.connection.handle.cursor()
        try:
            cursor.execute(self.sql, bind_parameters(params))
        except sqlite3.Error as error:
            cursor.close()
            raise DatabaseError(str(error), driver=type(self)) from error

        return SQLiteCursor(cursor)

    def close(self):
        self._closed = True

    def __repr__(self):
        return f"<{type(self).__name__} {self.sql!r}>"


def bind_parameters(params: "Params") -> tuple[Any, ...] | list[Any] | dict[str, Any]:
    """Converts parameters to the concrete types sqlite3 binds.

    sqlite3 only binds named parameters from a real dict, so mapping views are copied into one. Other sequences,
    including lazy batch row views, are materialized as a tuple.
    """
    match params:
        case tuple() | list() | dict():
            return params

        case Mapping():
            return dict(params)

        case _:
            return tuple(params)

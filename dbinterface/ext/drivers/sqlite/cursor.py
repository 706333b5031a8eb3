"""Result cursors and rows for the SQLite driver."""
import sqlite3
from typing import Any, Iterator

from dbinterface.exceptions import DatabaseError


class SQLiteCursor:
    """Streams the rows produced by executing a `SQLiteStatement`.

    Rows are fetched from sqlite3 one at a time as the cursor is iterated, a cursor can only be iterated once. Queries
    that return no rows (DDL, INSERT, UPDATE, ...) produce a cursor with no columns that iterates nothing. Closing is
    idempotent, iterating a closed cursor raises `DatabaseError`.

    Attributes:
        columns: The result column names in result order.
    """
    def __init__(self, cursor: sqlite3.Cursor):
        self._cursor = cursor
        self._closed = False
        self.columns: tuple[str, ...] = tuple(description[0] for description in cursor.description or ())
        self._positions: dict[str, int] = {}
        for position, name in enumerate(self.columns):
            self._positions.setdefault(name, position)

    @property
    def closed(self) -> bool:
        return self._closed

    def last_row_id(self) -> int:
        """The rowid of the last row inserted through this cursor."""
        return self._cursor.lastrowid

    def close(self):
        if self._closed:
            return

        self._cursor.close()
        self._closed = True

    def __iter__(self) -> "SQLiteCursor":
        return self

    def __next__(self) -> "SQLiteRow":
        if self._closed:
            raise DatabaseError("Cannot iterate a closed cursor.", driver=type(self))

        try:
            values = self._cursor.fetchone()
        except sqlite3.Error as error:
            raise DatabaseError(str(error), driver=type(self)) from error

        if values is None:
            raise StopIteration

        return SQLiteRow(self.columns, self._positions, values)

    def __repr__(self):
        return f"<{type(self).__name__} columns={self.columns!r}>"


class SQLiteRow:
    """A single result row.

    Values are accessible by zero based position (`row[0]`), by column name (`row["name"]`), and as attributes
    (`row.name`). When a result has duplicate column names, name lookups return the first of them. `len()` is the number
    of columns.
    """
    __slots__ = ("_columns", "_positions", "_values")

    def __init__(self, columns: tuple[str, ...], positions: dict[str, int], values: tuple[Any, ...]):
        self._columns = columns
        self._positions = positions
        self._values = values

    def keys(self) -> tuple[str, ...]:
        return self._columns

    def __getitem__(self, key: int | slice | str) -> Any:
        if isinstance(key, str):
            try:
                return self._values[self._positions[key]]
            except KeyError:
                raise KeyError(f"No column named {key!r}") from None

        return self._values[key]

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        try:
            return self._values[self._positions[name]]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no column named {name!r}") from None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other):
        if not isinstance(other, SQLiteRow):
            return NotImplemented

        return self._columns == other._columns and self._values == other._values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(zip(self._columns, self._values))!r})"

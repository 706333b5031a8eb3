import logging
import re
import sqlite3
import warnings
from typing import Literal, NotRequired, TypedDict

from dbinterface.drivers import register_driver
from dbinterface.exceptions import DatabaseError, DatabaseWarning, DriverConnectFailed
from dbinterface.ext.drivers.sqlite.connection_protocol import SQLite3Connection
from dbinterface.ext.drivers.sqlite.statement import SQLiteStatement


logger = logging.getLogger(__name__)

_EXPLAIN = re.compile(r"\s*explain\b", re.IGNORECASE)

# Define the user-facing literal type for clarity
SQLiteIsolationLevelAlias = Literal[
    "DBINTERFACE_DEFAULT", "SQLITE_DEFAULT", "DEFERRED", "IMMEDIATE", "EXCLUSIVE", "NONE"
]


class SQLiteSettings(TypedDict):
    """Configuration settings for SQLite database connections.

    Attributes:
        database: Path to the SQLite database file. Use ":memory:" for an in-memory database.
        isolation_level: Transaction isolation level to use. Available options:

            - `"DBINTERFACE_DEFAULT"`: Uses autocommit mode (`isolation_level=None`) so every statement commits
            - `"SQLITE_DEFAULT"`: Uses the sqlite3 module's default isolation level
            - `"DEFERRED"`: Defers locking the database until the first read/write
            - `"IMMEDIATE"`: Acquires a lock immediately when a transaction begins
            - `"EXCLUSIVE"`: Acquires an exclusive lock on the entire database
            - `"NONE"`: Same as `DBINTERFACE_DEFAULT`

            Anything other than autocommit requires calling `commit()` to persist changes.
    """
    database: str
    isolation_level: NotRequired[SQLiteIsolationLevelAlias]


@register_driver("sqlite")
class SQLiteConnection:
    """A connection to a SQLite database through the standard library sqlite3 module.

    Closing is idempotent: closing a connection that is already closed does nothing. Closing while a transaction is
    still open discards its changes and emits a `DatabaseWarning`.

    Attributes:
        handle: The underlying sqlite3.Connection instance
        settings: The configuration settings used for this connection
    """
    _default_settings = SQLiteSettings(database=":memory:", isolation_level="DBINTERFACE_DEFAULT")

    def __init__(self, handle: SQLite3Connection, settings: SQLiteSettings):
        """
        Args:
            handle: An established SQLite database connection
            settings: Configuration settings used for this connection
        """
        if not isinstance(handle, SQLite3Connection):
            raise TypeError(
                f"Expected connection implementing the {SQLite3Connection.__qualname__} protocol, {type(handle)} does not."
            )

        self.handle = handle
        self.settings = settings
        self._closed = False

    @classmethod
    def connect(cls, settings: SQLiteSettings | None = None) -> "SQLiteConnection":
        """Opens a connection to a SQLite database.

        Args:
            settings: Optional configuration settings for the connection. If omitted, defaults to an in-memory
                database in autocommit mode.

        Raises:
            DriverConnectFailed: If the connection attempt fails
        """
        _settings = cls._default_settings | (settings or {})
        try:
            handle = sqlite3.connect(_settings["database"])
        except sqlite3.Error as error:
            raise DriverConnectFailed("Failed to connect to the SQLite database.", driver=cls) from error

        match isolation_level := _settings["isolation_level"]:
            case "SQLITE_DEFAULT":
                pass # Do nothing, it's the default
            case "DBINTERFACE_DEFAULT" | "NONE":
                handle.isolation_level = None
            case _: # DEFERRED, IMMEDIATE, EXCLUSIVE
                handle.isolation_level = isolation_level

        logger.debug("Connected to SQLite database %r", _settings["database"])
        return cls(handle, _settings)

    @property
    def closed(self) -> bool:
        return self._closed

    def prepare(self, sql: str) -> SQLiteStatement:
        """Validates a query and returns a reusable statement for it.

        The query is compiled without being run by explaining it on a throwaway cursor, so syntax errors, unknown
        tables or columns, and multiple statements are reported here rather than on first execution. sqlite3 then
        caches the compiled statement by SQL text when the statement executes.

        Raises:
            DatabaseError: If the connection is closed, the SQL is empty or incomplete, or SQLite cannot compile it
        """
        if self._closed:
            raise DatabaseError("Cannot prepare a statement on a closed connection.", driver=type(self))

        # Newline keeps a trailing line comment from swallowing the terminator
        if not sql.strip() or not sqlite3.complete_statement(f"{sql}\n;"):
            raise DatabaseError(f"Not a complete SQL statement: {sql!r}", driver=type(self))

        self._compile(sql)
        return SQLiteStatement(self, sql)

    def commit(self):
        try:
            self.handle.commit()
        except sqlite3.Error as error:
            raise DatabaseError(str(error), driver=type(self)) from error

    def rollback(self):
        try:
            self.handle.rollback()
        except sqlite3.Error as error:
            raise DatabaseError(str(error), driver=type(self)) from error

    def close(self):
        """Closes the connection. Does nothing if it is already closed."""
        if self._closed:
            return

        if self.handle.in_transaction:
            warnings.warn(
                DatabaseWarning("Closing a SQLite connection with an open transaction, its changes are discarded."),
                stacklevel=2,
            )

        try:
            self.handle.close()
        except sqlite3.Error as error:
            raise DatabaseError(str(error), driver=type(self)) from error

        self._closed = True
        logger.debug("Closed SQLite database %r", self.settings["database"])

    def _compile(self, sql: str):
        explain = sql if _EXPLAIN.match(sql) else f"EXPLAIN {sql}"
        cursor = self.handle.cursor()
        try:
            cursor.execute(explain)
        except sqlite3.ProgrammingError as error:
            # Placeholders are only bound after the statement compiled
            if "bindings" not in str(error):
                raise DatabaseError(str(error), driver=type(self)) from error
        except sqlite3.Error as error:
            raise DatabaseError(str(error), driver=type(self)) from error
        finally:
            cursor.close()

    def __repr__(self):
        state = "closed" if self._closed else "open"
        return f"<{type(self).__name__} {self.settings['database']!r} ({state})>"

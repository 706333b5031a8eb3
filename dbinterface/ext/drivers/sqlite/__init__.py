"""SQLite driver implementation for DBInterface.

This package implements the DBInterface contract on top of the standard library sqlite3 module. It is registered
under the `"sqlite"` driver tag, so importing it is optional: `dbinterface.connect("sqlite")` loads it on demand.

Key features:

- In-memory or file-based database support
- Configurable transaction isolation levels
- Positional (`?`) and named (`:name`) parameters
- Lazily streamed rows accessible by zero based position, column name, or attribute

Example:
    ```python
    import dbinterface
    from dbinterface.ext.drivers.sqlite import SQLiteConnection, SQLiteSettings

    # Connect to an in-memory SQLite database (default)
    conn = dbinterface.connect("sqlite")

    # Or connect to a file-based database with custom settings
    conn = SQLiteConnection.connect(SQLiteSettings(database="my_database.db", isolation_level="IMMEDIATE"))

    dbinterface.execute(conn, "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT)")
    dbinterface.executemany(conn, "INSERT INTO users (name) VALUES (:name)", {"name": ["Alice", "Bob"]})
    conn.commit()

    statement = dbinterface.prepare(conn, "SELECT id, name FROM users WHERE name = ?")
    for row in dbinterface.execute(statement, ("Bob",)):
        print(row.id, row["name"], row[0])

    dbinterface.close(conn)
    ```
"""

from .cursor import SQLiteCursor, SQLiteRow
from .driver import SQLiteConnection, SQLiteSettings
from .statement import SQLiteStatement


__all__ = ["SQLiteConnection", "SQLiteCursor", "SQLiteRow", "SQLiteSettings", "SQLiteStatement"]

"""DBInterface Package.

DBInterface is a minimal database client contract. Drivers implement a small set of capabilities (connections,
prepared statements, cursors, and rows) and application code uses the same handful of operations against any of them:

-   **Uniform Operations**: `connect`, `prepare`, `execute`, `executemany`, `close`, and `last_row_id` dispatch to
    whichever driver object they are given and fail with `OperationNotImplemented` when a driver is missing a piece.
-   **Structural Contracts**: Drivers satisfy `Connection`, `Statement`, `Cursor`, and `Row` by shape, no base class is
    required.
-   **Generic Batch Execution**: `executemany` works for every driver by executing one row at a time over lazy views
    of column oriented parameters.
-   **Statement Caching**: `StatementCache` prepares a statement once per caller chosen key, even under concurrent
    first use.

Example:
    ```python
    import dbinterface

    conn = dbinterface.connect("sqlite")
    dbinterface.execute(conn, "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT)")
    dbinterface.executemany(conn, "INSERT INTO users (id, name) VALUES (?, ?)", ([1, 2], ["Alice", "Bob"]))
    for row in dbinterface.execute(conn, "SELECT * FROM users WHERE id = ?", (2,)):
        print(row["name"], row.id)

    dbinterface.close(conn)
    ```

Note:
This `__init__.py` file uses a custom `__getattr__` to lazily load submodules and the public symbols, keeping import
time low for drivers that only need the protocols.
"""
import importlib
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dbinterface.drivers import add_driver, disable_driver, register_driver
    from dbinterface.exceptions import (
        BaseDatabaseException,
        DatabaseError,
        DatabaseWarning,
        DriverConnectFailed,
        OperationNotImplemented,
        ParameterError,
    )
    from dbinterface.operations import close, connect, execute, executemany, last_row_id, prepare
    from dbinterface.parameters import ColumnRowView, NamedColumnRowView, ParameterBatch
    from dbinterface.protocols import Connection, Cursor, Row, Statement
    from dbinterface.statement_cache import StatementCache, get_global_cache

__lookup = {
    "connect": "dbinterface.operations",
    "prepare": "dbinterface.operations",
    "execute": "dbinterface.operations",
    "executemany": "dbinterface.operations",
    "close": "dbinterface.operations",
    "last_row_id": "dbinterface.operations",
    "Connection": "dbinterface.protocols",
    "Statement": "dbinterface.protocols",
    "Cursor": "dbinterface.protocols",
    "Row": "dbinterface.protocols",
    "ColumnRowView": "dbinterface.parameters",
    "NamedColumnRowView": "dbinterface.parameters",
    "ParameterBatch": "dbinterface.parameters",
    "StatementCache": "dbinterface.statement_cache",
    "get_global_cache": "dbinterface.statement_cache",
    "add_driver": "dbinterface.drivers",
    "disable_driver": "dbinterface.drivers",
    "register_driver": "dbinterface.drivers",
    "BaseDatabaseException": "dbinterface.exceptions",
    "DatabaseError": "dbinterface.exceptions",
    "DatabaseWarning": "dbinterface.exceptions",
    "DriverConnectFailed": "dbinterface.exceptions",
    "OperationNotImplemented": "dbinterface.exceptions",
    "ParameterError": "dbinterface.exceptions",
}

__all__ = list(__lookup.keys())

__modules = set()

# Iterate the local folder and search for all py files and folders
for _path in Path(__file__).parent.iterdir():
    if _path.name.startswith("_"):
        continue

    if not _path.is_dir() and _path.suffix != ".py":
        continue

    __modules.add(_path.stem)


def __getattr__(name):
    """Lazily loads submodules and the public symbols of the dbinterface package.

    Names listed in `__lookup` are imported from their submodule on first access; any other name that matches a
    submodule (e.g. `dbinterface.ext`) imports that submodule.

    Raises:
        ImportError: If a symbol listed in `__lookup` cannot be imported from its module.
        AttributeError: If the name is neither a known symbol nor a submodule.
    """
    if name in __lookup:
        try:
            module = importlib.import_module(__lookup[name])
        except Exception as e:
            raise ImportError(f"Failed to import {name} from {__lookup[name]}: {e}") from e

        return getattr(module, name)

    if name in __modules:
        return importlib.import_module(f"dbinterface.{name}")

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

import sqlite3
from typing import Protocol, runtime_checkable


@runtime_checkable
class SQLite3Connection(Protocol):
    @property
    def in_transaction(self) -> bool: ...

    def close(self) -> None: ...

    def commit(self) -> None: ...

    def cursor(self) -> sqlite3.Cursor: ...

    def rollback(self) -> None: ...

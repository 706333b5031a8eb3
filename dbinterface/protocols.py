"""Capability contracts are the interface between application code and a database driver. Each contract is a set of
operations rather than a base class: any driver type that provides the operations satisfies the contract, no
inheritance is required. All of the protocols are runtime checkable so callers can use `isinstance` to test for
structural conformance.

The required roles are `Connection`, `Statement`, `Cursor`, and `Row`. The remaining protocols describe optional
overrides a driver may provide when it has a faster path than the generic compositions in `dbinterface.operations`.
Overrides must preserve the semantics of the composition they replace.
"""
from typing import Any, Iterator, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from dbinterface.shared_types import ColumnParams, Params


@runtime_checkable
class Connection(Protocol):
    """A live, stateful link to a database backend.

    Connections are created by a driver's `connect` factory and are owned by the caller that obtained them, who must
    close them explicitly. Statements prepared against a connection are only valid while it remains open.
    """
    def prepare(self, sql: str) -> "Statement":
        """Validates and prepares a query, returning a reusable statement."""
        ...

    def close(self) -> None:
        """Closes the connection so no further queries can be processed."""
        ...


@runtime_checkable
class Statement(Protocol):
    """A validated, prepared query that can be executed repeatedly with different parameters."""
    def execute(self, params: "Params") -> "Cursor":
        """Executes the statement, always returning a cursor, even when the query produces no rows."""
        ...

    def close(self) -> None:
        """Closes the statement so it cannot be executed again."""
        ...


@runtime_checkable
class Cursor(Protocol):
    """The result of an execution, an iterable of rows.

    DDL and DML statements produce a cursor that iterates nothing.
    """
    def __iter__(self) -> Iterator["Row"]:
        ...

    def close(self) -> None:
        """Closes the cursor, invalidating further iteration."""
        ...


@runtime_checkable
class Row(Protocol):
    """A single record, indexable by column name and by column position.

    Drivers choose zero or one based positions and must document which. `len()` reports the number of columns.
    """
    def __getitem__(self, key: int | str) -> Any:
        ...

    def __len__(self) -> int:
        ...


# ---------------------------------------- #
# Optional Overrides                       #
# ---------------------------------------- #
@runtime_checkable
class DirectConnection(Protocol):
    """A connection that can execute SQL without an explicit prepare step."""
    def execute(self, sql: str, params: "Params") -> Cursor:
        ...


@runtime_checkable
class BatchConnection(Protocol):
    """A connection with its own batch execution for column oriented parameters."""
    def executemany(self, sql: str, params: "ColumnParams") -> None:
        ...


@runtime_checkable
class BatchStatement(Protocol):
    """A statement with its own batch execution for column oriented parameters."""
    def executemany(self, params: "ColumnParams") -> None:
        ...


@runtime_checkable
class LastRowIdCursor(Protocol):
    """A cursor that can report the id of the last row inserted by its execution."""
    def last_row_id(self) -> int:
        ...

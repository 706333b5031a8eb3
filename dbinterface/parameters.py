"""Lazy row views over column oriented batch parameters.

Batch callers naturally hand over parameters one column per placeholder ("insert these ids and these names") while
`Statement.execute` binds one row at a time. The views in this module bridge the two without transposing or copying
the batch: a view holds a reference to the columns and a row index, and looking up placeholder `j` returns
`columns[j][index]`.

    batch = ParameterBatch({"id": [1, 2, 3], "name": ["a", "b", "c"]})
    len(batch)           # 3
    dict(batch.row(1))   # {"id": 2, "name": "b"}

Positions are zero based, like any Python sequence.
"""
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, TYPE_CHECKING

from dbinterface.exceptions import ParameterError

if TYPE_CHECKING:
    from dbinterface.shared_types import ColumnParams


class ColumnRowView(Sequence[Any]):
    """Positional parameters for a single batch row, read through from the columns."""
    __slots__ = ("_columns", "_index")

    def __init__(self, columns: Sequence[Sequence[Any]], index: int):
        self._columns = columns
        self._index = index

    def __getitem__(self, position):
        if isinstance(position, slice):
            return [self[i] for i in range(*position.indices(len(self)))]

        return self._columns[position][self._index]

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} row={self._index} {tuple(self)!r}>"


class NamedColumnRowView(Mapping[str, Any]):
    """Named parameters for a single batch row, read through from the columns."""
    __slots__ = ("_columns", "_index")

    def __init__(self, columns: Mapping[str, Sequence[Any]], index: int):
        self._columns = columns
        self._index = index

    def __getitem__(self, name: str) -> Any:
        return self._columns[name][self._index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} row={self._index} {dict(self)!r}>"


class ParameterBatch:
    """A validated set of column oriented parameters.

    Construction fails with `ParameterError` when the columns do not all have the same number of values, so a batch
    that exists can always be executed in full. `len()` is the number of rows and iterating yields one lazy view per
    row, in order.

    Attributes:
        columns: The column oriented parameters, positional or named.
        named: Whether the columns are keyed by placeholder name.
    """
    def __init__(self, columns: "ColumnParams"):
        self.columns = columns
        self.named = isinstance(columns, Mapping)
        self._row_count = _measure(columns)

    def row(self, index: int) -> ColumnRowView | NamedColumnRowView:
        if not 0 <= index < self._row_count:
            raise IndexError(f"Batch row {index} is out of range for a batch of {self._row_count} rows")

        if self.named:
            return NamedColumnRowView(self.columns, index)

        return ColumnRowView(self.columns, index)

    def __iter__(self) -> Iterator[ColumnRowView | NamedColumnRowView]:
        for index in range(self._row_count):
            yield self.row(index)

    def __len__(self) -> int:
        return self._row_count

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {len(self.columns)} parameters x {self._row_count} rows>"


def _measure(columns: "ColumnParams") -> int:
    labelled = list(columns.items()) if isinstance(columns, Mapping) else list(enumerate(columns))
    if not labelled:
        return 0

    first_label, first_column = labelled[0]
    expected = len(first_column)
    mismatched = [(label, len(column)) for label, column in labelled[1:] if len(column) != expected]
    if mismatched:
        details = ", ".join(f"parameter {label!r} has {length}" for label, length in mismatched)
        raise ParameterError(
            f"Parameters provided to executemany do not all have the same number of values: parameter "
            f"{first_label!r} has {expected}, {details}"
        )

    return expected

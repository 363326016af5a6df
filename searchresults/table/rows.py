"""Row-wise access to column-oriented tables.

Tables are stored column by column, either as `pd.DataFrame` or as a mapping of column name to column values.
`RowIterator` walks all columns in lockstep and yields one `RowView` per row without materializing the table row-wise.

Views and iterators reference the values of the source table and are only valid as long as the table is not modified.
Tables handed out by the result records are never modified.
"""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

import numpy as np
import pandas as pd

from searchresults.config import get_default_config
from searchresults.constants.keys import ConfigKeys
from searchresults.exceptions import (
    ColumnLengthMismatchError,
    DuplicateColumnError,
    UnknownColumnError,
)

logger = logging.getLogger()

Table = pd.DataFrame | Mapping[str, Any]

_EXHAUSTED = object()


class RowView:
    """Read-only view of the values of a single table row.

    Values are accessed by column name (`row["xcorr"]`) or by column position (`row[0]`).
    Iterating a row yields its values in column order.

    The column name to position mapping is shared by all rows of one `RowIterator`, each row owns its values.
    """

    __slots__ = ("_column_index", "_values")

    def __init__(self, column_index: Mapping[str, int], values: tuple) -> None:
        self._column_index = column_index
        self._values = values

    @property
    def column_index(self) -> Mapping[str, int]:
        return self._column_index

    @property
    def columns(self) -> tuple:
        return tuple(self._column_index)

    def __getitem__(self, key):
        if isinstance(key, int | np.integer | slice):
            return self._values[key]

        try:
            position = self._column_index[key]
        except KeyError:
            raise UnknownColumnError(key, list(self._column_index)) from None
        return self._values[position]

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other):
        if not isinstance(other, RowView):
            return NotImplemented
        return self.columns == other.columns and self._values == other._values

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}" for name, value in zip(self._column_index, self._values)
        )
        return f"RowView({fields})"

    def to_dict(self) -> dict:
        """Copy the row into a new dict of column name to value."""
        return dict(zip(self._column_index, self._values))


def _column_lengths(columns: list[tuple[str, Any]]) -> dict[str, int]:
    """Lengths of all columns which know their length."""
    return {
        name: len(column) for name, column in columns if hasattr(column, "__len__")
    }


class RowIterator(Iterator):
    """Single pass iterator over the rows of a table.

    One cursor per column is advanced in lockstep, iteration ends as soon as the first column is exhausted.
    Columns of unequal length are therefore truncated to the shortest column, which is logged as warning.
    Column names must be unique.
    With `strict_column_lengths` set, unequal column lengths are rejected when the iterator is created.

    Parameters
    ----------

    table : pd.DataFrame or Mapping[str, Any]
        Table to iterate. Mappings must map column names to iterable columns.

    strict_column_lengths : bool, default None
        Raise `ColumnLengthMismatchError` if columns differ in length.
        If None, the `rows.strict_column_lengths` value of the default config is used.

    """

    def __init__(self, table: Table, strict_column_lengths: bool | None = None):
        if strict_column_lengths is None:
            strict_column_lengths = get_default_config()[ConfigKeys.ROWS][
                ConfigKeys.STRICT_COLUMN_LENGTHS
            ]

        columns = list(table.items())

        names = [name for name, _ in columns]
        if len(set(names)) != len(names):
            raise DuplicateColumnError(
                sorted({str(name) for name in names if names.count(name) > 1})
            )

        if strict_column_lengths:
            column_lengths = _column_lengths(columns)
            if len(set(column_lengths.values())) > 1:
                raise ColumnLengthMismatchError(column_lengths)

        self._column_index = MappingProxyType(
            {name: position for position, (name, _) in enumerate(columns)}
        )
        self._cursors = [iter(column) for _, column in columns]
        self._column_lengths = _column_lengths(columns)
        self._n_rows = 0

    @property
    def columns(self) -> tuple:
        return tuple(self._column_index)

    @property
    def n_rows(self) -> int:
        """Number of rows produced so far."""
        return self._n_rows

    def __next__(self) -> RowView:
        # a table without columns has no rows
        if not self._cursors:
            raise StopIteration

        values = []
        for position, cursor in enumerate(self._cursors):
            value = next(cursor, _EXHAUSTED)
            if value is _EXHAUSTED:
                self._stop(position)
                raise StopIteration
            values.append(value)

        self._n_rows += 1
        return RowView(self._column_index, tuple(values))

    def _stop(self, exhausted_position: int) -> None:
        """Release the cursors and warn if other columns still held values."""
        # columns before the exhausted one already yielded a value for the incomplete row
        truncated = exhausted_position > 0 or any(
            next(cursor, _EXHAUSTED) is not _EXHAUSTED
            for cursor in self._cursors[exhausted_position + 1 :]
        )
        if truncated:
            logger.warning(
                f"Columns differ in length, rows were truncated to the shortest column after {self._n_rows} rows. "
                f"Column lengths: {self._column_lengths}"
            )

        self._cursors = []


def iter_rows(
    table: Table | None, strict_column_lengths: bool | None = None
) -> RowIterator | None:
    """Iterate the rows of an optional table.

    Parameters
    ----------

    table : pd.DataFrame, Mapping[str, Any] or None
        Table to iterate, None if the table is absent.

    strict_column_lengths : bool, default None
        See `RowIterator`.

    Returns
    -------

    RowIterator or None
        Iterator over the rows, None if the table is absent.
        A present table without rows results in an iterator without rows.

    """
    if table is None:
        return None
    return RowIterator(table, strict_column_lengths=strict_column_lengths)

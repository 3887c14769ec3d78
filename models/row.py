"""
models/row.py
-------------
A materialized result row whose values are tagged by kind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ValueKind(str, Enum):
    """The kind of a single column value."""
    NULL = "null"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    BYTES = "bytes"
    OTHER = "other"

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        """Classify a value returned by a DB-API driver."""
        if value is None:
            return cls.NULL
        if isinstance(value, int):  # bool included
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.TEXT
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.BYTES
        return cls.OTHER


@dataclass(frozen=True)
class Row:
    """
    One row of a query result.

    Attributes:
        columns: Column names, in select order.
        values: Column values, same length as ``columns``.
    """
    columns: tuple[str, ...]
    values: tuple[Any, ...]

    def __post_init__(self):
        if len(self.columns) != len(self.values):
            raise ValueError(
                f"Row has {len(self.values)} values for {len(self.columns)} columns"
            )

    @classmethod
    def from_cursor(cls, description, record) -> "Row":
        """Build a Row from a DB-API cursor description and one fetched record."""
        columns = tuple(col[0] for col in description)
        return cls(columns=columns, values=tuple(record))

    @property
    def kinds(self) -> tuple[ValueKind, ...]:
        """Kind of every value, in column order."""
        return tuple(ValueKind.of(v) for v in self.values)

    def kind(self, key: Union[int, str]) -> ValueKind:
        """Kind of the value at a column index or name."""
        return ValueKind.of(self[key])

    def get(self, name: str, default: Any = None) -> Any:
        """Value of the named column, or ``default`` if there is no such column."""
        try:
            return self[name]
        except KeyError:
            return default

    def as_dict(self) -> dict[str, Any]:
        """Column name to value mapping."""
        return dict(zip(self.columns, self.values))

    def __getitem__(self, key: Union[int, str]) -> Any:
        if isinstance(key, str):
            try:
                return self.values[self.columns.index(key)]
            except ValueError:
                raise KeyError(key) from None
        return self.values[key]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __str__(self) -> str:
        return ", ".join("NULL" if v is None else str(v) for v in self.values)

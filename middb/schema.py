"""Table schemas: column types and column definitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace


class DataType(enum.Enum):
    """Type of a column's values."""

    INT64 = "INT64"
    STRING = "STRING"
    BYTES = "BYTES"
    BOOL = "BOOL"

    def is_compatible(self, other: DataType) -> bool:
        return self is other

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Column:
    """A named, typed column at a position in its table."""

    name: str
    data_type: DataType
    nullable: bool = True
    position: int = 0

    @classmethod
    def non_null(cls, name: str, data_type: DataType) -> Column:
        return cls(name, data_type, nullable=False)


class TableSchema:
    """A table name with its ordered columns."""

    def __init__(self, name: str, columns=()) -> None:
        self.name = name
        self.columns: list[Column] = [
            replace(col, position=i) for i, col in enumerate(columns)
        ]

    @classmethod
    def empty(cls, name: str) -> TableSchema:
        return cls(name)

    def add_column(self, column: Column) -> None:
        self.columns.append(replace(column, position=len(self.columns)))

    def column_count(self) -> int:
        return len(self.columns)

    def get_column(self, name: str) -> Column | None:
        return next((c for c in self.columns if c.name == name), None)

    def get_column_index(self, name: str) -> int | None:
        return next((i for i, c in enumerate(self.columns) if c.name == name), None)

    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableSchema):
            return NotImplemented
        return self.name == other.name and self.columns == other.columns

    def __repr__(self) -> str:
        return f"TableSchema(name={self.name!r}, columns={self.columns!r})"


class TableSchemaBuilder:
    """Fluent construction of a TableSchema."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._columns: list[Column] = []

    def column(self, name: str, data_type: DataType, nullable: bool) -> TableSchemaBuilder:
        self._columns.append(Column(name, data_type, nullable=nullable))
        return self

    def build(self) -> TableSchema:
        return TableSchema(self.name, self._columns)
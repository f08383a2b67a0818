"""Column and table descriptors.

A table can be described two ways:

- a ``TableDescriptor`` value holding the name and ordered columns, or
- a ``ColumnEnum`` subclass whose members are the columns, with a
  ``table_name()`` static method naming the table.

Both are accepted wherever the facade expects a table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Tuple, runtime_checkable


@runtime_checkable
class DatabaseColumn(Protocol):
    """Anything the SQL builder can treat as a column.

    ``str(column)`` must be the bare column name.
    """

    def column_string(self) -> str: ...


@dataclass(frozen=True)
class ColumnSpec:
    """Definition of a single column: name, SQL type and constraint clause."""

    name: str
    sql_type: str
    constraints: str = ""

    def type(self) -> str:
        return self.sql_type

    def column_string(self) -> str:
        """Fragment used in CREATE TABLE.

        The three parts are always joined with single spaces, so a column
        without constraints keeps a trailing space (``"saved datetime "``).
        """
        return " ".join((self.name, self.sql_type, self.constraints))

    def __str__(self) -> str:
        return self.name


class ColumnEnum(Enum):
    """Enum base for authoring a table as a set of column members.

    Example:
        >>> class Users(ColumnEnum):
        ...     ID = ColumnSpec("id", "integer", "primary key")
        ...     NAME = ColumnSpec("name", "varchar(255)", "not null")
        ...
        ...     @staticmethod
        ...     def table_name():
        ...         return "users"
        >>> str(Users.NAME)
        'name'
    """

    @property
    def spec(self) -> ColumnSpec:
        return self.value

    @property
    def column_name(self) -> str:
        return self.value.name

    def type(self) -> str:
        return self.value.sql_type

    def column_string(self) -> str:
        return self.value.column_string()

    def __str__(self) -> str:
        return self.value.name


@dataclass(frozen=True)
class TableDescriptor:
    """A table name plus its ordered column specifications."""

    name: str
    columns: Tuple[ColumnSpec, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of columns but store an immutable tuple
        object.__setattr__(self, "columns", tuple(self.columns))

    def table_name(self) -> str:
        return self.name

    def column(self, name: str) -> ColumnSpec:
        """Look up a column by its bare name.

        Raises:
            KeyError: If the table has no such column
        """
        for col in self.columns:
            if col.name == name:
                return col
        raise KeyError(name)

    def __str__(self) -> str:
        return self.name


__all__ = [
    "DatabaseColumn",
    "ColumnSpec",
    "ColumnEnum",
    "TableDescriptor",
]

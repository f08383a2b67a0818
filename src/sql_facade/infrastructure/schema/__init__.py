"""Table descriptors and the schema resolver."""

from .core import ColumnEnum, ColumnSpec, DatabaseColumn, TableDescriptor
from .resolver import TABLE_NAME_ACCESSOR, resolve_columns, resolve_table_name

__all__ = [
    "ColumnSpec",
    "ColumnEnum",
    "DatabaseColumn",
    "TableDescriptor",
    "TABLE_NAME_ACCESSOR",
    "resolve_table_name",
    "resolve_columns",
]

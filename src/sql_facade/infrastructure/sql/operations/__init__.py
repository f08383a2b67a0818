"""Pure SQL statement builders."""

from .ddl import build_create_table, build_drop_table
from .delete import build_delete
from .insert import build_insert
from .select import WILDCARD, build_aggregate, build_select
from .update import build_update

__all__ = [
    "WILDCARD",
    "build_select",
    "build_aggregate",
    "build_insert",
    "build_update",
    "build_delete",
    "build_create_table",
    "build_drop_table",
]

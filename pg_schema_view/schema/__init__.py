"""Normalized schema model and the pipeline that builds it."""

from .models import (
    Column,
    ForeignKey,
    Index,
    PrimaryKey,
    SchemaCatalog,
    Table,
    TableKind,
    UniqueConstraint,
)
from .transform import ConstraintKey, TableKey, normalize
from .filtering import filter_tables

__all__ = [
    # Model
    "Column",
    "ForeignKey",
    "Index",
    "PrimaryKey",
    "SchemaCatalog",
    "Table",
    "TableKind",
    "UniqueConstraint",
    # Pipeline
    "ConstraintKey",
    "TableKey",
    "normalize",
    "filter_tables",
]

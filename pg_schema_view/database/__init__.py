"""Database introspection module for pg-schema-view.

This module fetches the raw catalog rows that the schema normalizer
folds into a :class:`~pg_schema_view.schema.models.SchemaCatalog`.
"""

from .models import (
    IntrospectionResult,
    RawColumn,
    RawForeignKey,
    RawIndex,
    RawPrimaryKey,
    RawTable,
    RawUniqueConstraint,
)
from .base import CatalogIntrospector
from .postgres import PostgresIntrospector, mask_password

__all__ = [
    # Raw catalog rows
    "IntrospectionResult",
    "RawColumn",
    "RawForeignKey",
    "RawIndex",
    "RawPrimaryKey",
    "RawTable",
    "RawUniqueConstraint",
    # Introspectors
    "CatalogIntrospector",
    "PostgresIntrospector",
    "mask_password",
]

"""Abstract base class for catalog introspection."""

import logging
import time
from abc import ABC, abstractmethod
from typing import List

from .models import (
    IntrospectionResult,
    RawColumn,
    RawForeignKey,
    RawIndex,
    RawPrimaryKey,
    RawTable,
    RawUniqueConstraint,
)

logger = logging.getLogger(__name__)


class CatalogIntrospector(ABC):
    """Abstract base class for catalog introspection.

    Subclasses implement one method per catalog query. Each query returns
    flat rows already restricted to the requested schemas; grouping them
    into tables is left to the normalizer.
    """

    @abstractmethod
    def connect(self):
        """Establish connection to the database."""
        pass

    @abstractmethod
    def close(self):
        """Close the database connection."""
        pass

    @abstractmethod
    def get_tables(self, schemas: List[str]) -> List[RawTable]:
        """Get tables, views and materialized views in the given schemas."""
        pass

    @abstractmethod
    def get_columns(self, schemas: List[str]) -> List[RawColumn]:
        """Get columns ordered by schema, table and ordinal position."""
        pass

    @abstractmethod
    def get_primary_keys(self, schemas: List[str]) -> List[RawPrimaryKey]:
        """Get primary key columns."""
        pass

    @abstractmethod
    def get_unique_constraints(self, schemas: List[str]) -> List[RawUniqueConstraint]:
        """Get unique constraint columns."""
        pass

    @abstractmethod
    def get_foreign_keys(self, schemas: List[str]) -> List[RawForeignKey]:
        """Get foreign key columns paired with their referenced columns."""
        pass

    @abstractmethod
    def get_indexes(self, schemas: List[str]) -> List[RawIndex]:
        """Get index columns, excluding indexes that back constraints."""
        pass

    def introspect_schema(self, schemas: List[str]) -> IntrospectionResult:
        """Run every catalog query and return the raw row sets.

        This method provides a common implementation across databases and
        uses the abstract methods for the database-specific queries.

        Args:
            schemas: Schema names to introspect

        Returns:
            IntrospectionResult holding all six row sets
        """
        logger.debug("Introspecting schemas: %s", ", ".join(schemas))
        start = time.monotonic()

        result = IntrospectionResult(
            tables=self.get_tables(schemas),
            columns=self.get_columns(schemas),
            primary_keys=self.get_primary_keys(schemas),
            unique_constraints=self.get_unique_constraints(schemas),
            foreign_keys=self.get_foreign_keys(schemas),
            indexes=self.get_indexes(schemas),
        )

        logger.debug("Introspection completed in %dms", (time.monotonic() - start) * 1000)
        logger.debug("Catalog row counts: %s", result.row_counts())
        return result

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

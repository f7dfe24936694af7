"""Raw catalog row models returned by database introspection.

Each class mirrors one catalog query. Rows are flat and schema-qualified;
folding them into nested entities is the job of
:func:`pg_schema_view.schema.transform.normalize`.
"""

from typing import Optional, List, Union
from dataclasses import dataclass, field


@dataclass
class RawTable:
    """One row per table, view or materialized view."""
    schema: str
    name: str
    kind: str  # 'table', 'view', 'materialized_view'


@dataclass
class RawColumn:
    """One row per table column."""
    schema: str
    table_name: str
    column_name: str
    data_type: str
    is_nullable: Union[str, bool]  # information_schema reports 'YES' / 'NO'
    column_default: Optional[str]
    ordinal_position: int


@dataclass
class RawPrimaryKey:
    """One row per primary key column."""
    schema: str
    table_name: str
    constraint_name: str
    column_name: str
    ordinal_position: int


@dataclass
class RawUniqueConstraint:
    """One row per unique constraint column."""
    schema: str
    table_name: str
    constraint_name: str
    column_name: str
    ordinal_position: int


@dataclass
class RawForeignKey:
    """One row per foreign key column, paired with its referenced column."""
    schema: str
    table_name: str
    constraint_name: str
    column_name: str
    ordinal_position: int
    referenced_schema: str
    referenced_table: str
    referenced_column: str
    on_update: Optional[str] = None
    on_delete: Optional[str] = None


@dataclass
class RawIndex:
    """One row per indexed column of an index not backing a constraint."""
    schema: str
    table_name: str
    index_name: str
    column_name: str
    ordinal_position: Optional[int]
    is_unique: bool
    index_type: str  # btree, gin, gist, ...


@dataclass
class IntrospectionResult:
    """The six row sets produced by one introspection pass."""
    tables: List[RawTable] = field(default_factory=list)
    columns: List[RawColumn] = field(default_factory=list)
    primary_keys: List[RawPrimaryKey] = field(default_factory=list)
    unique_constraints: List[RawUniqueConstraint] = field(default_factory=list)
    foreign_keys: List[RawForeignKey] = field(default_factory=list)
    indexes: List[RawIndex] = field(default_factory=list)

    def row_counts(self) -> dict:
        """Row count per catalog query, for debug logging."""
        return {
            "tables": len(self.tables),
            "columns": len(self.columns),
            "primary_keys": len(self.primary_keys),
            "unique_constraints": len(self.unique_constraints),
            "foreign_keys": len(self.foreign_keys),
            "indexes": len(self.indexes),
        }

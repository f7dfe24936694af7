"""Normalized schema model shared by every renderer.

Instances are frozen: the catalog is built once by the normalizer and
only read afterwards. ``to_dict`` / ``from_dict`` give the JSON wire form,
whose camelCase field names mirror the entity definitions below.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TableKind(str, Enum):
    """Kinds of relations listed in the catalog."""
    TABLE = "table"
    VIEW = "view"
    MATERIALIZED_VIEW = "materialized_view"

    @property
    def label(self) -> str:
        """Human readable label, e.g. ``MATERIALIZED VIEW``."""
        return self.value.replace("_", " ").upper()


@dataclass(frozen=True)
class Column:
    """A table column with flags derived from the table's keys."""
    name: str
    data_type: str
    is_nullable: bool
    default_value: Optional[str] = None
    is_primary_key: bool = False
    is_unique: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "dataType": self.data_type,
            "isNullable": self.is_nullable,
            "defaultValue": self.default_value,
            "isPrimaryKey": self.is_primary_key,
            "isUnique": self.is_unique,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Column":
        return cls(
            name=data["name"],
            data_type=data["dataType"],
            is_nullable=data["isNullable"],
            default_value=data.get("defaultValue"),
            is_primary_key=data.get("isPrimaryKey", False),
            is_unique=data.get("isUnique", False),
        )


@dataclass(frozen=True)
class PrimaryKey:
    """Primary key with columns in ordinal order."""
    name: str
    columns: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "columns": list(self.columns)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrimaryKey":
        return cls(name=data["name"], columns=list(data["columns"]))


@dataclass(frozen=True)
class UniqueConstraint:
    """Unique constraint with columns in ordinal order."""
    name: str
    columns: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "columns": list(self.columns)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UniqueConstraint":
        return cls(name=data["name"], columns=list(data["columns"]))


@dataclass(frozen=True)
class ForeignKey:
    """Foreign key; ``columns[i]`` references ``referenced_columns[i]``."""
    name: str
    columns: List[str]
    referenced_schema: str
    referenced_table: str
    referenced_columns: List[str]
    on_update: Optional[str] = None
    on_delete: Optional[str] = None

    @property
    def referenced_qualified_name(self) -> str:
        return f"{self.referenced_schema}.{self.referenced_table}"

    def actions(self) -> List[str]:
        """Referential actions worth showing; ``NO ACTION`` is the default."""
        actions = []
        if self.on_delete and self.on_delete != "NO ACTION":
            actions.append(f"ON DELETE {self.on_delete}")
        if self.on_update and self.on_update != "NO ACTION":
            actions.append(f"ON UPDATE {self.on_update}")
        return actions

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "columns": list(self.columns),
            "referencedTable": self.referenced_table,
            "referencedSchema": self.referenced_schema,
            "referencedColumns": list(self.referenced_columns),
        }
        if self.on_update is not None:
            data["onUpdate"] = self.on_update
        if self.on_delete is not None:
            data["onDelete"] = self.on_delete
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ForeignKey":
        return cls(
            name=data["name"],
            columns=list(data["columns"]),
            referenced_schema=data["referencedSchema"],
            referenced_table=data["referencedTable"],
            referenced_columns=list(data["referencedColumns"]),
            on_update=data.get("onUpdate"),
            on_delete=data.get("onDelete"),
        )


@dataclass(frozen=True)
class Index:
    """Secondary index with columns in position order."""
    name: str
    columns: List[str]
    is_unique: bool
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "columns": list(self.columns),
            "isUnique": self.is_unique,
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Index":
        return cls(
            name=data["name"],
            columns=list(data["columns"]),
            is_unique=data["isUnique"],
            type=data["type"],
        )


@dataclass(frozen=True)
class Table:
    """A table, view or materialized view; identity is ``(schema, name)``."""
    schema: str
    name: str
    kind: TableKind = TableKind.TABLE
    columns: List[Column] = field(default_factory=list)
    primary_key: Optional[PrimaryKey] = None
    unique_constraints: List[UniqueConstraint] = field(default_factory=list)
    foreign_keys: List[ForeignKey] = field(default_factory=list)
    indexes: List[Index] = field(default_factory=list)

    @property
    def qualified_name(self) -> str:
        """Return fully qualified table name (schema.table)."""
        return f"{self.schema}.{self.name}"

    def get_column(self, name: str) -> Optional[Column]:
        """Get a column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def multi_column_uniques(self) -> List[UniqueConstraint]:
        """Unique constraints spanning more than one column.

        Single-column ones already show up as the column's UNIQUE flag.
        """
        return [u for u in self.unique_constraints if len(u.columns) > 1]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "schema": self.schema,
            "name": self.name,
            "kind": self.kind.value,
            "columns": [c.to_dict() for c in self.columns],
        }
        if self.primary_key is not None:
            data["primaryKey"] = self.primary_key.to_dict()
        data["uniqueConstraints"] = [u.to_dict() for u in self.unique_constraints]
        data["foreignKeys"] = [fk.to_dict() for fk in self.foreign_keys]
        data["indexes"] = [idx.to_dict() for idx in self.indexes]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Table":
        pk = data.get("primaryKey")
        return cls(
            schema=data["schema"],
            name=data["name"],
            kind=TableKind(data.get("kind", TableKind.TABLE.value)),
            columns=[Column.from_dict(c) for c in data.get("columns", [])],
            primary_key=PrimaryKey.from_dict(pk) if pk is not None else None,
            unique_constraints=[UniqueConstraint.from_dict(u) for u in data.get("uniqueConstraints", [])],
            foreign_keys=[ForeignKey.from_dict(fk) for fk in data.get("foreignKeys", [])],
            indexes=[Index.from_dict(idx) for idx in data.get("indexes", [])],
        )


@dataclass(frozen=True)
class SchemaCatalog:
    """Sorted schema names plus tables sorted by ``(schema, name)``."""
    schemas: List[str] = field(default_factory=list)
    tables: List[Table] = field(default_factory=list)

    def tables_in(self, schema: str) -> List[Table]:
        """Tables of one schema, in catalog order."""
        return [t for t in self.tables if t.schema == schema]

    def get_table(self, schema: str, name: str) -> Optional[Table]:
        """Find a table by schema and name."""
        for table in self.tables:
            if table.schema == schema and table.name == name:
                return table
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schemas": list(self.schemas),
            "tables": [t.to_dict() for t in self.tables],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchemaCatalog":
        return cls(
            schemas=list(data.get("schemas", [])),
            tables=[Table.from_dict(t) for t in data.get("tables", [])],
        )

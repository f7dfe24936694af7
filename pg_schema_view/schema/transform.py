"""Fold flat catalog rows into the normalized schema model.

The catalog queries return one row per table, per column, per key column
and per index column. ``normalize`` groups those rows under composite keys,
sorts every group by ordinal position and assembles immutable ``Table``
objects. Column flags (``is_primary_key`` / ``is_unique``) are computed
last, from the finished key collections, so they can never disagree with
them.

Rows that reference a table missing from the table rows are dropped. This
happens when a table is created or dropped between two catalog queries and
is not treated as an error.
"""

import logging
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, TypeVar, Union

from ..database.models import (
    IntrospectionResult,
    RawColumn,
    RawForeignKey,
    RawIndex,
    RawPrimaryKey,
    RawTable,
    RawUniqueConstraint,
)
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

logger = logging.getLogger(__name__)

Row = TypeVar("Row")


class TableKey(NamedTuple):
    """Identity of a table: ``(schema, table)``."""
    schema: str
    table: str


class ConstraintKey(NamedTuple):
    """Identity of a named object inside a table (constraint or index)."""
    schema: str
    table: str
    name: str

    @property
    def table_key(self) -> TableKey:
        return TableKey(self.schema, self.table)


GroupKey = Union[TableKey, ConstraintKey]


def _position(value: Optional[int]) -> int:
    # Index expressions have no column position; they sort first.
    return value if value is not None else 0


def _ordered(rows: List[Row]) -> List[Row]:
    """Sort rows of one group by ordinal position.

    Ties (malformed input) fall back to the column name so the result
    never depends on the order rows arrived in.
    """
    return sorted(rows, key=lambda r: (_position(r.ordinal_position), r.column_name))


def _parse_nullable(value: Union[str, bool, None]) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).upper() == "YES"


def _parse_kind(raw: RawTable) -> TableKind:
    try:
        return TableKind(raw.kind)
    except ValueError:
        logger.warning("Unknown relation kind %r for %s.%s, treating it as a table", raw.kind, raw.schema, raw.name)
        return TableKind.TABLE


def _group_rows(
    rows: Iterable[Row],
    key_fn: Callable[[Row], GroupKey],
    tables: Dict[TableKey, RawTable],
    label: str,
) -> Dict[GroupKey, List[Row]]:
    """Group rows by composite key, dropping rows of unknown tables."""
    groups: Dict[GroupKey, List[Row]] = defaultdict(list)
    dropped = 0
    for row in rows:
        key = key_fn(row)
        if TableKey(key.schema, key.table) not in tables:
            dropped += 1
            continue
        groups[key].append(row)
    if dropped:
        logger.debug("Dropped %d %s row(s) referencing unknown tables", dropped, label)
    return groups


def _build_primary_keys(
    rows: List[RawPrimaryKey], tables: Dict[TableKey, RawTable]
) -> Dict[TableKey, PrimaryKey]:
    groups = _group_rows(rows, lambda r: TableKey(r.schema, r.table_name), tables, "primary key")
    result: Dict[TableKey, PrimaryKey] = {}
    for key, group in groups.items():
        ordered = _ordered(group)
        names = list(dict.fromkeys(r.constraint_name for r in ordered))
        if len(names) > 1:
            logger.warning(
                "Table %s.%s reports several primary key constraints (%s); using %s",
                key.schema, key.table, ", ".join(names), names[0],
            )
        result[key] = PrimaryKey(name=names[0], columns=[r.column_name for r in ordered])
    return result


def _build_unique_constraints(
    rows: List[RawUniqueConstraint], tables: Dict[TableKey, RawTable]
) -> Dict[TableKey, List[UniqueConstraint]]:
    groups = _group_rows(
        rows, lambda r: ConstraintKey(r.schema, r.table_name, r.constraint_name), tables, "unique constraint"
    )
    result: Dict[TableKey, List[UniqueConstraint]] = defaultdict(list)
    for key in sorted(groups):
        ordered = _ordered(groups[key])
        result[key.table_key].append(
            UniqueConstraint(name=key.name, columns=[r.column_name for r in ordered])
        )
    return result


def _build_foreign_keys(
    rows: List[RawForeignKey], tables: Dict[TableKey, RawTable]
) -> Dict[TableKey, List[ForeignKey]]:
    groups = _group_rows(
        rows, lambda r: ConstraintKey(r.schema, r.table_name, r.constraint_name), tables, "foreign key"
    )
    result: Dict[TableKey, List[ForeignKey]] = defaultdict(list)
    for key in sorted(groups):
        # Local and referenced columns come from the same sorted rows, which
        # keeps them paired by ordinal position.
        ordered = _ordered(groups[key])
        first = ordered[0]
        result[key.table_key].append(
            ForeignKey(
                name=key.name,
                columns=[r.column_name for r in ordered],
                referenced_schema=first.referenced_schema,
                referenced_table=first.referenced_table,
                referenced_columns=[r.referenced_column for r in ordered],
                on_update=first.on_update or None,
                on_delete=first.on_delete or None,
            )
        )
    return result


def _build_indexes(rows: List[RawIndex], tables: Dict[TableKey, RawTable]) -> Dict[TableKey, List[Index]]:
    groups = _group_rows(rows, lambda r: ConstraintKey(r.schema, r.table_name, r.index_name), tables, "index")
    result: Dict[TableKey, List[Index]] = defaultdict(list)
    for key in sorted(groups):
        ordered = _ordered(groups[key])
        first = ordered[0]
        result[key.table_key].append(
            Index(
                name=key.name,
                columns=[r.column_name for r in ordered],
                is_unique=bool(first.is_unique),
                type=first.index_type,
            )
        )
    return result


def _build_columns(
    rows: List[RawColumn],
    primary_key: Optional[PrimaryKey],
    unique_constraints: List[UniqueConstraint],
) -> List[Column]:
    """Create columns and derive their key flags from the finished keys."""
    pk_columns = set(primary_key.columns) if primary_key else set()
    unique_columns = {u.columns[0] for u in unique_constraints if len(u.columns) == 1}
    return [
        Column(
            name=row.column_name,
            data_type=row.data_type,
            is_nullable=_parse_nullable(row.is_nullable),
            default_value=row.column_default,
            is_primary_key=row.column_name in pk_columns,
            is_unique=row.column_name in unique_columns,
        )
        for row in _ordered(rows)
    ]


def normalize(
    raw: IntrospectionResult,
    include_indexes: bool = False,
    include_constraints: bool = False,
) -> SchemaCatalog:
    """Build a ``SchemaCatalog`` from raw catalog rows.

    Primary keys are always processed. Unique constraints and foreign keys
    are only collected with ``include_constraints``, indexes only with
    ``include_indexes``.

    Args:
        raw: The six catalog row sets from one introspection pass
        include_indexes: Collect secondary indexes
        include_constraints: Collect unique constraints and foreign keys

    Returns:
        SchemaCatalog with sorted schema names and tables sorted by
        ``(schema, name)``
    """
    tables: Dict[TableKey, RawTable] = {}
    for row in raw.tables:
        tables[TableKey(row.schema, row.name)] = row

    columns = _group_rows(raw.columns, lambda r: TableKey(r.schema, r.table_name), tables, "column")
    primary_keys = _build_primary_keys(raw.primary_keys, tables)
    unique_constraints = _build_unique_constraints(raw.unique_constraints, tables) if include_constraints else {}
    foreign_keys = _build_foreign_keys(raw.foreign_keys, tables) if include_constraints else {}
    indexes = _build_indexes(raw.indexes, tables) if include_indexes else {}

    result: List[Table] = []
    for key in sorted(tables):
        primary_key = primary_keys.get(key)
        uniques = unique_constraints.get(key, [])
        result.append(
            Table(
                schema=key.schema,
                name=key.table,
                kind=_parse_kind(tables[key]),
                columns=_build_columns(columns.get(key, []), primary_key, uniques),
                primary_key=primary_key,
                unique_constraints=list(uniques),
                foreign_keys=list(foreign_keys.get(key, [])),
                indexes=list(indexes.get(key, [])),
            )
        )

    schemas = sorted({key.schema for key in tables})
    logger.debug("Normalized %d table(s) across %d schema(s)", len(result), len(schemas))
    return SchemaCatalog(schemas=schemas, tables=result)

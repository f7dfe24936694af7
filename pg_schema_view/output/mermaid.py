"""Mermaid ER diagram renderer."""

import re
from collections import defaultdict
from typing import Dict, List, Set, Tuple

from ..schema.models import Column, SchemaCatalog

# Many rows of the referencing table point at one row of the referenced table.
_CARDINALITY = "}o--||"


def _type_token(data_type: str) -> str:
    """Mermaid attribute types must be a single word."""
    token = re.sub(r"[^a-z0-9_]+", "_", data_type.lower()).strip("_")
    return token or "unknown"


def _attribute(col: Column) -> str:
    keys = []
    if col.is_primary_key:
        keys.append("PK")
    if col.is_unique and not col.is_primary_key:
        keys.append("UK")
    keys_str = f" {','.join(keys)}" if keys else ""
    comment = "" if col.is_nullable else ' "NOT NULL"'
    return f"    {_type_token(col.data_type)} {col.name}{keys_str}{comment}"


def _edge_label(constraint_name: str) -> str:
    label = re.sub(r"^fk_", "", constraint_name).replace("_", " ")
    return label.replace('"', "'")


def _entity_names(catalog: SchemaCatalog) -> Dict[Tuple[str, str], str]:
    """Map ``(schema, table)`` to an entity name.

    Tables keep their bare name unless the same name occurs in several
    schemas (as a table or as a foreign key target), in which case every
    occurrence becomes ``schema__table``.
    """
    refs: Set[Tuple[str, str]] = set()
    for table in catalog.tables:
        refs.add((table.schema, table.name))
        for fk in table.foreign_keys:
            refs.add((fk.referenced_schema, fk.referenced_table))

    schemas_by_name: Dict[str, Set[str]] = defaultdict(set)
    for schema, name in refs:
        schemas_by_name[name].add(schema)

    return {
        (schema, name): f"{schema}__{name}" if len(schemas_by_name[name]) > 1 else name
        for schema, name in refs
    }


def render_mermaid(catalog: SchemaCatalog, relationships_only: bool = False) -> str:
    """Render the catalog as a Mermaid ``erDiagram``.

    One edge is emitted per (source entity, target entity) pair, however many
    foreign keys link the two. Tables without columns still get an (empty)
    entity block.
    """
    names = _entity_names(catalog)
    lines: List[str] = ["erDiagram", ""]

    for schema_name in catalog.schemas:
        for table in catalog.tables_in(schema_name):
            lines.append(f"  {names[(table.schema, table.name)]} {{")
            if not relationships_only:
                lines.extend(_attribute(col) for col in table.columns)
            lines.append("  }")
            lines.append("")

    seen: Set[Tuple[str, str]] = set()
    for schema_name in catalog.schemas:
        for table in catalog.tables_in(schema_name):
            source = names[(table.schema, table.name)]
            for fk in table.foreign_keys:
                target = names[(fk.referenced_schema, fk.referenced_table)]
                if (source, target) in seen:
                    continue
                seen.add((source, target))
                lines.append(f'  {source} {_CARDINALITY} {target} : "{_edge_label(fk.name)}"')

    return "\n".join(lines)

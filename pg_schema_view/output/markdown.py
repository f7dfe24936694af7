"""Markdown document renderer."""

from typing import List

from ..schema.models import SchemaCatalog, Table, TableKind


def _cell(value: str) -> str:
    return value.replace("|", "\\|")


def _kind_suffix(table: Table) -> str:
    if table.kind == TableKind.TABLE:
        return ""
    return f" ({table.kind.label})"


def _ref_table(table: Table, schema: str, name: str) -> str:
    return f"`{name}`" if schema == table.schema else f"`{schema}.{name}`"


def _render_table(table: Table, include_indexes: bool, include_constraints: bool) -> List[str]:
    lines = [f"### Table: {table.name}{_kind_suffix(table)}", ""]

    if not table.columns:
        lines.extend(["*(no columns)*", ""])
        return lines

    lines.append("| Name | Type | Nullable | Default | Constraints |")
    lines.append("|------|------|----------|---------|-------------|")
    for col in table.columns:
        constraints = []
        if col.is_primary_key:
            constraints.append("PK")
        if col.is_unique and not col.is_primary_key:
            constraints.append("UNIQUE")

        nullable = "Yes" if col.is_nullable else "**No**"
        if col.default_value is None:
            default = "-"
        elif col.default_value == "":
            default = "*(empty)*"
        else:
            default = f"`{_cell(col.default_value)}`"
        constraints_str = ", ".join(constraints) if constraints else "-"
        lines.append(
            f"| {_cell(col.name)} | `{_cell(col.data_type)}` | {nullable} | {default} | {constraints_str} |"
        )
    lines.append("")

    if table.primary_key:
        lines.append(f"**Primary Key:** `{table.primary_key.name}` ({', '.join(table.primary_key.columns)})")
        lines.append("")

    if include_constraints:
        uniques = table.multi_column_uniques()
        if uniques:
            lines.append("**Unique Constraints:**")
            for unique in uniques:
                lines.append(f"- `{unique.name}`: ({', '.join(unique.columns)})")
            lines.append("")

        if table.foreign_keys:
            lines.append("**Foreign Keys:**")
            for fk in table.foreign_keys:
                ref = _ref_table(table, fk.referenced_schema, fk.referenced_table)
                actions = fk.actions()
                actions_str = f" {' '.join(actions)}" if actions else ""
                lines.append(
                    f"- `{fk.name}`: ({', '.join(fk.columns)}) → "
                    f"{ref}({', '.join(fk.referenced_columns)}){actions_str}"
                )
            lines.append("")

    if include_indexes and table.indexes:
        lines.append("**Indexes:**")
        for idx in table.indexes:
            unique_label = " [UNIQUE]" if idx.is_unique else ""
            lines.append(f"- `{idx.name}`: ({', '.join(idx.columns)}){unique_label} [{idx.type}]")
        lines.append("")

    return lines


def render_markdown(
    catalog: SchemaCatalog,
    include_indexes: bool = False,
    include_constraints: bool = False,
) -> str:
    """Render the catalog as a Markdown document."""
    lines = ["# Database Schema", ""]

    for schema_name in catalog.schemas:
        tables = catalog.tables_in(schema_name)
        if not tables:
            continue

        lines.extend([f"## Schema: {schema_name}", ""])
        for table in tables:
            lines.extend(_render_table(table, include_indexes, include_constraints))

    return "\n".join(lines)

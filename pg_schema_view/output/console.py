"""Console renderer built on rich tables."""

import io

from rich import box
from rich.console import Console
from rich.table import Table as RichTable
from rich.text import Text

from ..schema.models import SchemaCatalog, Table, TableKind


_KIND_STYLES = {
    TableKind.TABLE: "bold",
    TableKind.VIEW: "bold blue",
    TableKind.MATERIALIZED_VIEW: "bold magenta",
}


def _table_title(table: Table) -> Text:
    title = Text(table.name, style=_KIND_STYLES[table.kind])
    if table.kind != TableKind.TABLE:
        title.append(f" ({table.kind.label})", style="dim")
    return title


def _columns_table(table: Table) -> RichTable:
    grid = RichTable(box=box.SIMPLE, show_edge=False, pad_edge=False, header_style="bold dim")
    grid.add_column("Name", style="white", overflow="fold")
    grid.add_column("Type", style="bright_black", overflow="fold")
    grid.add_column("Nullable", overflow="fold")
    grid.add_column("Default", style="dim", overflow="fold")
    grid.add_column("Constraints", overflow="fold")

    for col in table.columns:
        nullable = Text("NULL", style="dim") if col.is_nullable else Text("NOT NULL", style="bright_yellow")
        constraints = Text()
        if col.is_primary_key:
            constraints.append("PK", style="bright_green")
        elif col.is_unique:
            constraints.append("UNIQUE", style="bright_cyan")
        if col.default_value is None:
            default = Text()
        elif col.default_value == "":
            default = Text("(empty)", style="italic")
        else:
            default = Text(col.default_value)
        grid.add_row(Text(col.name), Text(col.data_type), nullable, default, constraints)
    return grid


def _print_indexes(console: Console, table: Table) -> None:
    console.print()
    console.print(Text("  Indexes:", style="dim"))
    for idx in table.indexes:
        line = Text("    ")
        line.append(idx.name, style="cyan")
        line.append(f" ({', '.join(idx.columns)})")
        if idx.is_unique:
            line.append(" [UNIQUE]", style="bright_cyan")
        line.append(f" [{idx.type}]", style="dim")
        console.print(line)


def _print_constraints(console: Console, table: Table) -> None:
    for unique in table.multi_column_uniques():
        console.print()
        line = Text("  UNIQUE ", style="dim")
        line.append(unique.name, style="cyan")
        line.append(f": ({', '.join(unique.columns)})", style="dim")
        console.print(line)

    if not table.foreign_keys:
        return

    console.print()
    console.print(Text("  Foreign Keys:", style="dim"))
    for fk in table.foreign_keys:
        ref_table = fk.referenced_table if fk.referenced_schema == table.schema else fk.referenced_qualified_name
        line = Text("    ")
        line.append("FK", style="magenta")
        line.append(" ")
        line.append(fk.name, style="cyan")
        line.append(f": ({', '.join(fk.columns)}) ")
        line.append("→ ")
        line.append(f"{ref_table}({', '.join(fk.referenced_columns)})", style="bold")
        actions = fk.actions()
        if actions:
            line.append(" " + " ".join(actions), style="dim")
        console.print(line)


def render_console(
    catalog: SchemaCatalog,
    include_indexes: bool = False,
    include_constraints: bool = False,
    color: bool = False,
    width: int = 120,
) -> str:
    """Render the catalog as console text.

    Output is produced by an in-memory rich console; ANSI styling is only
    emitted when ``color`` is true.
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )

    for schema_name in catalog.schemas:
        tables = catalog.tables_in(schema_name)
        if not tables:
            continue

        console.print()
        console.print(Text(f"Schema: {schema_name}", style="bold cyan"))
        console.print()

        for table in tables:
            console.print(_table_title(table))

            if not table.columns:
                console.print(Text("  (no columns)", style="bright_black"))
                console.print()
                continue

            console.print(_columns_table(table), soft_wrap=False)

            if include_indexes and table.indexes:
                _print_indexes(console, table)
            if include_constraints:
                _print_constraints(console, table)

            console.print()

    return buffer.getvalue()

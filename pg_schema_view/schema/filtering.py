"""Table selection applied to a normalized catalog."""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from .models import SchemaCatalog, Table

logger = logging.getLogger(__name__)


def _is_selected(table: Table, include: Optional[set], exclude: set) -> bool:
    if table.name.lower() in exclude:
        return False
    if include is not None:
        return table.name in include or table.qualified_name in include
    return True


def filter_tables(
    catalog: SchemaCatalog,
    include: Optional[Iterable[str]] = None,
    exclude: Optional[Iterable[str]] = None,
) -> SchemaCatalog:
    """Return a catalog restricted to the selected tables.

    Exclusion is checked first and compares bare names case-insensitively.
    Inclusion matches either the bare name or ``schema.name``. An empty or
    missing ``include`` keeps every table that is not excluded.

    The schema list is kept as is; renderers skip schemas without tables.
    """
    include_set = set(include) if include else None
    exclude_set = {name.lower() for name in (exclude or [])}
    if include_set is None and not exclude_set:
        return catalog

    if include_set is not None:
        logger.debug("Filtering to tables: %s", ", ".join(sorted(include_set)))
    if exclude_set:
        logger.debug("Excluding tables: %s", ", ".join(sorted(exclude_set)))

    tables = [t for t in catalog.tables if _is_selected(t, include_set, exclude_set)]
    return replace(catalog, tables=tables)

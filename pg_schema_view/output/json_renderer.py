"""JSON renderer: the machine-readable wire form of the catalog."""

import json

from ..schema.models import SchemaCatalog


def render_json(catalog: SchemaCatalog) -> str:
    """Serialize the catalog; ``SchemaCatalog.from_dict`` reverses it."""
    return json.dumps(catalog.to_dict(), indent=2, ensure_ascii=False)

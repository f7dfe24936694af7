"""Renderers turning a SchemaCatalog into text.

The set of formats is closed: ``render`` dispatches once over
``OutputFormat`` and rejects anything else.
"""

from enum import Enum
from typing import Union

from ..errors import UnsupportedOutputError
from ..schema.models import SchemaCatalog
from .console import render_console
from .json_renderer import render_json
from .markdown import render_markdown
from .mermaid import render_mermaid


class OutputFormat(str, Enum):
    """Supported output formats."""
    CONSOLE = "console"
    MARKDOWN = "markdown"
    JSON = "json"
    MERMAID = "mermaid"

    @classmethod
    def values(cls) -> list:
        return [f.value for f in cls]

    @classmethod
    def parse(cls, value: Union[str, "OutputFormat"]) -> "OutputFormat":
        """Convert a selector to an OutputFormat or raise UnsupportedOutputError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnsupportedOutputError(str(value), supported=cls.values())


def render(
    catalog: SchemaCatalog,
    output_format: Union[str, OutputFormat],
    include_indexes: bool = False,
    include_constraints: bool = False,
    relationships_only: bool = False,
    color: bool = False,
) -> str:
    """Render ``catalog`` with the renderer selected by ``output_format``."""
    fmt = OutputFormat.parse(output_format)
    if fmt == OutputFormat.CONSOLE:
        return render_console(catalog, include_indexes, include_constraints, color=color)
    elif fmt == OutputFormat.MARKDOWN:
        return render_markdown(catalog, include_indexes, include_constraints)
    elif fmt == OutputFormat.JSON:
        return render_json(catalog)
    return render_mermaid(catalog, relationships_only)


__all__ = [
    "OutputFormat",
    "render",
    "render_console",
    "render_json",
    "render_markdown",
    "render_mermaid",
]

# =============================================================================
# core/catalog.py  -  Tool Catalog
# =============================================================================
#
# The server exposes exactly one tool.  Its descriptor is built once at import
# time and never changes; discovery just hands it back.
# =============================================================================

from typing import Optional

from core.models import ToolDescriptor

GET_COCKTAIL = ToolDescriptor(
    name="get_cocktail",
    description="Search for cocktail recipes by name",
    input_schema={
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Cocktail name to search for",
            },
        },
        "required": ["name"],
    },
)

_TOOLS: tuple[ToolDescriptor, ...] = (GET_COCKTAIL,)


def list_tools() -> list[ToolDescriptor]:
    """Answer a discovery request.  Cannot fail."""
    return list(_TOOLS)


def get_tool(name: str) -> Optional[ToolDescriptor]:
    """Look up a tool by name, or None if it isn't registered."""
    for tool in _TOOLS:
        if tool.name == name:
            return tool
    return None

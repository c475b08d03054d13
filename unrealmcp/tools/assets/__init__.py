"""Asset Registry search tool for unreal-mcp."""

from typing import TYPE_CHECKING, Optional

from ...config.constants import ROUTE_SEARCH_ASSETS, TOOL_CATEGORY_ASSETS
from ..formatting import expect_object, list_field
from ..registry import ToolSchema, register_tool

if TYPE_CHECKING:
    from ...session import EngineSession


@register_tool(
    name="ue_search_assets",
    description="Search the Unreal Engine Asset Registry by name, class, or path",
    schema=ToolSchema(
        properties={
            "query": {
                "type": "string",
                "description": "Search query string",
            },
            "class_names": {
                "type": "string",
                "description": 'Comma-separated class filter (e.g. "Blueprint,StaticMesh")',
            },
            "path_filter": {
                "type": "string",
                "description": 'Content path filter (e.g. "/Game/Characters")',
            },
        },
        required=["query"],
    ),
    category=TOOL_CATEGORY_ASSETS,
)
async def ue_search_assets(arguments: dict, session: "EngineSession") -> dict:
    """
    Search assets.

    Args:
        arguments: Dictionary with 'query', optional 'class_names' and 'path_filter'
        session: The engine session

    Returns:
        Count plus name/class/path of each asset (metadata is dropped)
    """
    search_filter = build_filter(
        arguments.get("class_names"), arguments.get("path_filter")
    )
    raw = expect_object(
        await session.client.put(
            ROUTE_SEARCH_ASSETS,
            {"query": arguments["query"], "filter": search_filter},
        ),
        "asset search",
    )

    assets = [
        {"Name": a.get("Name"), "Class": a.get("Class"), "Path": a.get("Path")}
        for a in list_field(raw, "Assets", "asset search")
    ]
    return {"Count": len(assets), "Assets": assets}


def build_filter(class_names: Optional[str], path_filter: Optional[str]) -> dict:
    """Build the search filter from the comma-separated class list and path."""
    search_filter = {}
    if class_names:
        names = [name.strip() for name in class_names.split(",")]
        search_filter["classNames"] = [name for name in names if name]
    if path_filter:
        search_filter["paths"] = [path_filter]
    return search_filter

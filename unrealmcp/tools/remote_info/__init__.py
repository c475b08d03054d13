"""Route listing tool for unreal-mcp."""

from typing import TYPE_CHECKING, Any

from ...config.constants import ROUTE_INFO, TOOL_CATEGORY_INFO
from ..registry import ToolSchema, register_tool

if TYPE_CHECKING:
    from ...session import EngineSession


@register_tool(
    name="ue_remote_info",
    description=(
        "List all available HTTP routes on the UE Remote Control API. "
        "Useful for discovering what endpoints are available."
    ),
    schema=ToolSchema(),
    category=TOOL_CATEGORY_INFO,
)
async def ue_remote_info(arguments: dict, session: "EngineSession") -> Any:
    return await session.client.get(ROUTE_INFO)

"""Batch request tool for unreal-mcp."""

from typing import TYPE_CHECKING, Any

from ...config.constants import ROUTE_BATCH, TOOL_CATEGORY_OBJECT
from ..formatting import parse_json_array
from ..registry import ToolSchema, register_tool

if TYPE_CHECKING:
    from ...session import EngineSession


@register_tool(
    name="ue_batch",
    description=(
        "Execute multiple Remote Control operations in a single HTTP round-trip. "
        "Each request is a JSON object for /remote/object/property or "
        "/remote/object/call."
    ),
    schema=ToolSchema(
        properties={
            "requests": {
                "type": "string",
                "description": (
                    "JSON array of request objects. Each object should have the same "
                    "shape as ue_get_property, ue_set_property, or ue_call_function payloads."
                ),
            },
        },
        required=["requests"],
    ),
    category=TOOL_CATEGORY_OBJECT,
)
async def ue_batch(arguments: dict, session: "EngineSession") -> Any:
    requests = parse_json_array(arguments["requests"])
    return await session.client.put(ROUTE_BATCH, {"requests": requests})

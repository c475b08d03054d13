"""Object description tool for unreal-mcp."""

from typing import TYPE_CHECKING

from ...config.constants import ROUTE_DESCRIBE, TOOL_CATEGORY_OBJECT
from ..formatting import expect_object, list_field
from ..registry import ToolSchema, register_tool

if TYPE_CHECKING:
    from ...session import EngineSession


@register_tool(
    name="ue_describe_object",
    description="Get metadata about a UObject: its class, properties, and callable functions",
    schema=ToolSchema(
        properties={
            "object_path": {
                "type": "string",
                "description": "Full object path",
            },
        },
        required=["object_path"],
    ),
    category=TOOL_CATEGORY_OBJECT,
)
async def ue_describe_object(arguments: dict, session: "EngineSession") -> dict:
    """
    Describe an object.

    Args:
        arguments: Dictionary with 'object_path'
        session: The engine session

    Returns:
        Compact summary: class, name, and property/function name lists
    """
    raw = expect_object(
        await session.client.put(
            ROUTE_DESCRIBE, {"objectPath": arguments["object_path"]}
        ),
        "describe",
    )
    return summarize_description(raw)


def summarize_description(raw: dict) -> dict:
    """Reduce a describe payload to names, types and descriptions."""
    properties = list_field(raw, "Properties", "describe")
    functions = list_field(raw, "Functions", "describe")

    def described(entry: dict, summary: dict) -> dict:
        if entry.get("Description"):
            summary["Description"] = entry["Description"]
        return summary

    return {
        "Class": raw.get("Class"),
        "Name": raw.get("Name"),
        "PropertyCount": len(properties),
        "Properties": [
            described(p, {"Name": p.get("Name"), "Type": p.get("Type")})
            for p in properties
        ],
        "FunctionCount": len(functions),
        "Functions": [described(f, {"Name": f.get("Name")}) for f in functions],
    }

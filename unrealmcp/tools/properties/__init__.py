"""Property read/write tools for unreal-mcp."""

from typing import TYPE_CHECKING, Any

from ...config.constants import (
    READ_ACCESS,
    ROUTE_PROPERTY,
    TOOL_CATEGORY_OBJECT,
    WRITE_TRANSACTION_ACCESS,
)
from ..formatting import parse_json_value
from ..registry import ToolSchema, register_tool

if TYPE_CHECKING:
    from ...session import EngineSession


@register_tool(
    name="ue_get_property",
    description="Read a UPROPERTY value from a UObject in Unreal Engine",
    schema=ToolSchema(
        properties={
            "object_path": {
                "type": "string",
                "description": "Full object path (e.g. /Game/Maps/Main.Main:PersistentLevel.MyActor)",
            },
            "property_name": {
                "type": "string",
                "description": "Property name to read",
            },
        },
        required=["object_path", "property_name"],
    ),
    category=TOOL_CATEGORY_OBJECT,
)
async def ue_get_property(arguments: dict, session: "EngineSession") -> Any:
    """Read one property; the endpoint's JSON is returned unmodified."""
    return await session.client.put(
        ROUTE_PROPERTY,
        {
            "objectPath": arguments["object_path"],
            "access": READ_ACCESS,
            "propertyName": arguments["property_name"],
        },
    )


@register_tool(
    name="ue_set_property",
    description="Set a UPROPERTY value on a UObject in Unreal Engine (with undo support)",
    schema=ToolSchema(
        properties={
            "object_path": {
                "type": "string",
                "description": "Full object path",
            },
            "property_name": {
                "type": "string",
                "description": "Property name to set",
            },
            "value": {
                "type": "string",
                "description": (
                    "New property value as a JSON string (will be parsed). "
                    'Examples: "true", "42", \'{"X":1,"Y":2,"Z":3}\''
                ),
            },
        },
        required=["object_path", "property_name", "value"],
    ),
    category=TOOL_CATEGORY_OBJECT,
)
async def ue_set_property(arguments: dict, session: "EngineSession") -> Any:
    """
    Write one property inside an undo transaction.

    A value that is not valid JSON is sent as a plain string, so
    ``value="Hello"`` sets a string property without extra quoting.
    """
    return await session.client.put(
        ROUTE_PROPERTY,
        {
            "objectPath": arguments["object_path"],
            "access": WRITE_TRANSACTION_ACCESS,
            "propertyName": arguments["property_name"],
            "propertyValue": parse_json_value(arguments["value"]),
        },
    )

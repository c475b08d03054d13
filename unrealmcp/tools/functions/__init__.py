"""Function call tools for unreal-mcp."""

from typing import TYPE_CHECKING, Any

from ...config.constants import (
    CONSOLE_COMMAND_FUNCTION,
    ROUTE_CALL,
    SYSTEM_LIBRARY_PATH,
    TOOL_CATEGORY_EXECUTION,
    TOOL_CATEGORY_OBJECT,
)
from ..formatting import parse_json_object
from ..registry import ToolSchema, register_tool

if TYPE_CHECKING:
    from ...session import EngineSession


@register_tool(
    name="ue_call_function",
    description=(
        "Call a UFUNCTION on a UObject in Unreal Engine. For static library "
        "functions, use the Default__ object path (e.g. "
        "/Script/EditorScriptingUtilities.Default__EditorLevelLibrary)."
    ),
    schema=ToolSchema(
        properties={
            "object_path": {
                "type": "string",
                "description": "Full object path or Default__ class path",
            },
            "function_name": {
                "type": "string",
                "description": "Function name to call",
            },
            "parameters": {
                "type": "string",
                "description": (
                    "Function parameters as a JSON object string. "
                    'Example: \'{"NewLocation":{"X":100,"Y":0,"Z":0}}\''
                ),
            },
            "generate_transaction": {
                "type": "boolean",
                "description": "Record in undo history (default: true)",
                "default": True,
            },
        },
        required=["object_path", "function_name"],
    ),
    category=TOOL_CATEGORY_OBJECT,
)
async def ue_call_function(arguments: dict, session: "EngineSession") -> Any:
    """Call a function; malformed parameters never reach the engine."""
    raw_parameters = arguments.get("parameters")
    parameters = parse_json_object(raw_parameters) if raw_parameters else {}

    return await session.client.put(
        ROUTE_CALL,
        {
            "objectPath": arguments["object_path"],
            "functionName": arguments["function_name"],
            "parameters": parameters,
            "generateTransaction": arguments.get("generate_transaction", True),
        },
    )


@register_tool(
    name="ue_exec_console",
    description=(
        "Execute an Unreal Engine console command. Fire-and-forget: output "
        "appears in UE's Output Log, not in the response."
    ),
    schema=ToolSchema(
        properties={
            "command": {
                "type": "string",
                "description": 'Console command (e.g. "stat fps", "HighResShot 1920x1080", "py print(42)")',
            },
        },
        required=["command"],
    ),
    category=TOOL_CATEGORY_EXECUTION,
)
async def ue_exec_console(arguments: dict, session: "EngineSession") -> str:
    command = arguments["command"]
    await session.client.put(
        ROUTE_CALL,
        {
            "objectPath": SYSTEM_LIBRARY_PATH,
            "functionName": CONSOLE_COMMAND_FUNCTION,
            "parameters": {
                "WorldContextObject": {"objectPath": ""},
                "Command": command,
            },
        },
    )
    return f"Console command sent: {command}\nCheck UE Output Log for results."

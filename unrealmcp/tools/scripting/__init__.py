"""Python execution tools for unreal-mcp."""

from typing import TYPE_CHECKING

from ...config.constants import TOOL_CATEGORY_EXECUTION
from ..registry import ToolSchema, register_tool

if TYPE_CHECKING:
    from ...session import EngineSession

LIST_ACTORS_SCRIPT = """
import unreal
actors = unreal.EditorLevelLibrary.get_all_level_actors()
for a in actors:
    loc = a.get_actor_location()
    print(f"{a.get_name()} | {a.get_class().get_name()} | ({loc.x:.0f}, {loc.y:.0f}, {loc.z:.0f})")
"""


@register_tool(
    name="ue_list_actors",
    description=(
        "List all actors in the current editor level. Requires the "
        "Editor Scripting Utilities plugin."
    ),
    schema=ToolSchema(),
    category=TOOL_CATEGORY_EXECUTION,
)
async def ue_list_actors(arguments: dict, session: "EngineSession") -> str:
    """One line per actor: ``name | class | (x, y, z)``."""
    return await session.capture.execute(LIST_ACTORS_SCRIPT)


@register_tool(
    name="ue_exec_python",
    description=(
        "Execute Python code inside the Unreal Engine editor and return what "
        "it prints. Requires the Python Editor Script Plugin. Use the "
        '"unreal" module for UE API access.'
    ),
    schema=ToolSchema(
        properties={
            "code": {
                "type": "string",
                "description": "Python code to execute. Multi-line scripts are supported.",
            },
        },
        required=["code"],
    ),
    category=TOOL_CATEGORY_EXECUTION,
)
async def ue_exec_python(arguments: dict, session: "EngineSession") -> str:
    """
    Execute Python in the editor.

    Args:
        arguments: Dictionary with 'code'
        session: The engine session

    Returns:
        Captured stdout, or "(no output)"
    """
    return await session.capture.execute(arguments["code"])

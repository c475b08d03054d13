"""Tool system for unreal-mcp."""

from .executor import ExecutionResult, ToolExecutor
from .loader import discover_tools, get_tool_info, load_all_tools
from .registry import (
    Tool,
    ToolSchema,
    apply_disabled,
    disable_tool,
    enable_tool,
    get_all_tools,
    get_enabled_tools,
    get_tool,
    get_tool_names,
    register_tool,
    unregister_tool,
)

# Auto-load all built-in tools on import
_loaded = load_all_tools()

__all__ = [
    # Registry
    "Tool",
    "ToolSchema",
    "register_tool",
    "get_all_tools",
    "get_enabled_tools",
    "get_tool",
    "unregister_tool",
    "enable_tool",
    "disable_tool",
    "apply_disabled",
    "get_tool_names",
    # Executor
    "ToolExecutor",
    "ExecutionResult",
    # Loader
    "load_all_tools",
    "get_tool_info",
    "discover_tools",
]

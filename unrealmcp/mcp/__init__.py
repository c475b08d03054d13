"""MCP (Model Context Protocol) server for unreal-mcp."""

from .server import UnrealMCPServer, run_stdio
from .tools import error_result, to_call_result, to_mcp_tool

__all__ = [
    "UnrealMCPServer",
    "run_stdio",
    "to_mcp_tool",
    "to_call_result",
    "error_result",
]

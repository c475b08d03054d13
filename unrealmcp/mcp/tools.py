"""Conversion between registry tools and MCP protocol types."""

from typing import TYPE_CHECKING

from mcp.types import CallToolResult, TextContent
from mcp.types import Tool as MCPTool

if TYPE_CHECKING:
    from ..tools import ExecutionResult, Tool


def to_mcp_tool(tool: "Tool") -> MCPTool:
    """
    Create an MCP tool definition from a registry Tool.

    Args:
        tool: The registry tool

    Returns:
        The MCP tool definition advertised in tools/list
    """
    return MCPTool(
        name=tool.name,
        description=tool.description,
        inputSchema=tool.schema.to_dict(),
    )


def to_call_result(result: "ExecutionResult") -> CallToolResult:
    """Wrap an execution result as a single text block, flagged on failure."""
    return CallToolResult(
        content=[TextContent(type="text", text=result.text)],
        isError=not result.success,
    )


def error_result(message: str) -> CallToolResult:
    """Error result for calls that never reach a tool."""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )

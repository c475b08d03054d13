"""MCP server for unreal-mcp.

Serves the tool registry over stdio. Every tools/call ends in a normal
result; failures are reported with ``isError`` set.
"""

import logging
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from ..config import Settings
from ..config.constants import APP_VERSION, SERVER_NAME
from ..session import EngineSession
from ..tools import ToolExecutor, apply_disabled, get_enabled_tools, get_tool
from .tools import error_result, to_call_result, to_mcp_tool

logger = logging.getLogger(__name__)


class UnrealMCPServer:
    """MCP Server proxying tool calls to Unreal Engine."""

    def __init__(self, settings: Settings, session: Optional[EngineSession] = None):
        """
        Initialize the server.

        Args:
            settings: Application settings
            session: Engine session (built from settings when omitted)
        """
        self.settings = settings
        self.session = session or EngineSession.from_settings(settings)
        self.executor = ToolExecutor(self.session, timeout=settings.tool_timeout)
        self.server = Server(SERVER_NAME)

        unknown = apply_disabled(settings.disabled_tools)
        if unknown:
            logger.warning("Ignoring unknown disabled tools: %s", ", ".join(unknown))

        self._setup_handlers()

    def _setup_handlers(self):
        """Register MCP handlers."""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            return self.list_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
            return await self.call_tool(name, arguments)

    def list_tools(self) -> List[Tool]:
        """MCP definitions of every enabled tool."""
        return [to_mcp_tool(tool) for tool in get_enabled_tools()]

    async def call_tool(
        self, name: str, arguments: Optional[Dict[str, Any]]
    ) -> CallToolResult:
        """
        Dispatch one tools/call request.

        Args:
            name: Tool name
            arguments: Tool arguments from the client

        Returns:
            The call result; never raises for tool failures
        """
        tool = get_tool(name)
        if tool is None or not tool.enabled:
            return error_result(f"Unknown tool: {name}")

        result = await self.executor.execute(tool, arguments or {})
        if result.success:
            logger.debug("%s ok in %.0fms", name, result.duration_ms)
        else:
            logger.info("%s failed: %s", name, result.error)
        return to_call_result(result)

    async def start(self):
        """Serve over stdio until the client disconnects."""
        async with stdio_server() as (read_stream, write_stream):
            logger.info(
                "%s v%s ready, target: %s",
                SERVER_NAME,
                APP_VERSION,
                self.settings.base_url,
            )
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=SERVER_NAME,
                    server_version=APP_VERSION,
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )


async def run_stdio(settings: Settings):
    """Run in stdio mode."""
    server = UnrealMCPServer(settings)
    await server.start()

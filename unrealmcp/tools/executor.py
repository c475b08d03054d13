"""Tool executor for unreal-mcp."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from ..errors import UnrealMCPError
from .formatting import to_text

if TYPE_CHECKING:
    from ..session import EngineSession
    from .registry import Tool

logger = logging.getLogger(__name__)


@dataclass
class ExecutionResult:
    """Result of a tool execution."""

    tool_name: str
    arguments: dict
    result: Optional[str] = None
    error: Optional[str] = None
    success: bool = True
    duration_ms: float = 0.0

    @property
    def text(self) -> str:
        """Text shown to the caller."""
        if self.success:
            return self.result or ""
        return f"Error: {self.error}"


class ToolExecutor:
    """Runs tools and turns every failure into an error result."""

    def __init__(self, session: "EngineSession", timeout: float = 120.0):
        """
        Initialize the tool executor.

        Args:
            session: The engine session tools work against
            timeout: Overall timeout for one tool call in seconds
        """
        self.session = session
        self.timeout = timeout

    async def execute(
        self, tool: "Tool", arguments: Optional[dict] = None
    ) -> ExecutionResult:
        """
        Execute a tool with the given arguments.

        Args:
            tool: The tool to execute
            arguments: The arguments to pass to the tool

        Returns:
            ExecutionResult with the outcome
        """
        arguments = arguments or {}
        start_time = datetime.now()

        def finish(**kwargs) -> ExecutionResult:
            elapsed = (datetime.now() - start_time).total_seconds() * 1000
            return ExecutionResult(
                tool_name=tool.name, arguments=arguments, duration_ms=elapsed, **kwargs
            )

        if not tool.enabled:
            return finish(error=f"Tool '{tool.name}' is disabled", success=False)

        is_valid, error_msg = tool.validate_arguments(arguments)
        if not is_valid:
            return finish(error=error_msg, success=False)

        logger.debug("Calling %s", tool.name)
        try:
            output = await asyncio.wait_for(
                tool.execute(tool.apply_defaults(arguments), self.session),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            return finish(
                error=f"{tool.name} timed out after {self.timeout} seconds",
                success=False,
            )
        except UnrealMCPError as e:
            logger.debug("%s failed: %s", tool.name, e.message)
            return finish(error=e.message, success=False)
        except Exception as e:
            logger.exception("Unexpected error in %s", tool.name)
            return finish(error=str(e) or type(e).__name__, success=False)

        return finish(result=to_text(output))

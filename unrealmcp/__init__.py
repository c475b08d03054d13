"""unreal-mcp: MCP server for the Unreal Engine Remote Control API."""

from .config.constants import APP_NAME, APP_VERSION

__version__ = APP_VERSION

__all__ = ["APP_NAME", "APP_VERSION", "__version__"]

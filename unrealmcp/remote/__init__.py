"""Remote Control invocation for unreal-mcp."""

from .client import RemoteControlClient

__all__ = ["RemoteControlClient"]

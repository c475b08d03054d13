"""Configuration for unreal-mcp."""

from .settings import Settings, get_settings, update_settings

__all__ = ["Settings", "get_settings", "update_settings"]

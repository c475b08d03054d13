"""Command-line interface for unreal-mcp."""

from .main import main
from .utils import console, setup_logging

__all__ = ["main", "console", "setup_logging"]

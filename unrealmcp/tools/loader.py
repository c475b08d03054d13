"""Dynamic tool loader for unreal-mcp."""

import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .registry import get_all_tools

logger = logging.getLogger(__name__)

_INFRASTRUCTURE = ("registry.py", "executor.py", "loader.py", "formatting.py")


def discover_tools(tools_dir: Optional[Path] = None) -> List[str]:
    """
    Discover all tool modules in the tools directory.

    Args:
        tools_dir: Path to tools directory. Defaults to package tools dir.

    Returns:
        List of discovered tool module names
    """
    if tools_dir is None:
        tools_dir = Path(__file__).parent

    discovered = []

    for item in sorted(tools_dir.iterdir()):
        # Skip non-tool items
        if item.name.startswith("_"):
            continue
        if item.name in _INFRASTRUCTURE:
            continue

        # Check if it's a tool module
        if item.is_dir() and (item / "__init__.py").exists():
            discovered.append(item.name)
        elif item.suffix == ".py":
            discovered.append(item.stem)

    return discovered


def load_tool_module(module_name: str) -> bool:
    """
    Load a tool module by name.

    Args:
        module_name: Name of the tool module to load

    Returns:
        True if loaded successfully, False otherwise
    """
    full_module_name = f"{__package__}.{module_name}"

    # Check if already loaded
    if full_module_name in sys.modules:
        return True

    try:
        importlib.import_module(full_module_name)
        return True
    except ImportError as e:
        logger.warning("Failed to load tool module '%s': %s", module_name, e)
        return False


def load_all_tools(tools_dir: Optional[Path] = None) -> List[str]:
    """
    Discover and load all tool modules.

    Args:
        tools_dir: Path to tools directory

    Returns:
        List of successfully loaded tool module names
    """
    discovered = discover_tools(tools_dir)
    loaded = []

    for module_name in discovered:
        if load_tool_module(module_name):
            loaded.append(module_name)

    return loaded


def get_tool_info() -> List[dict]:
    """
    Get information about all registered tools.

    Returns:
        List of tool info dictionaries
    """
    tools = get_all_tools()
    return [
        {
            "name": tool.name,
            "description": tool.description,
            "category": tool.category,
            "enabled": tool.enabled,
            "parameters": (
                list(tool.schema.properties.keys()) if tool.schema.properties else []
            ),
        }
        for tool in tools
    ]

"""Tool registry for unreal-mcp."""

import copy
from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from ..session import EngineSession


@dataclass
class ToolSchema:
    """JSON Schema for tool parameters."""

    type: str = "object"
    properties: Optional[Dict[str, Any]] = None
    required: Optional[List[str]] = None

    def __post_init__(self):
        if self.properties is None:
            self.properties = {}
        if self.required is None:
            self.required = []

    def to_dict(self) -> dict:
        """Convert to dictionary format."""
        return {
            "type": self.type,
            "properties": self.properties,
            "required": self.required,
        }


@dataclass
class Tool:
    """A named operation exposed to MCP clients."""

    name: str
    description: str
    schema: ToolSchema
    execute_fn: Callable
    category: str = "general"
    enabled: bool = True

    async def execute(self, arguments: dict, session: "EngineSession") -> Any:
        """
        Execute the tool with given arguments.

        Args:
            arguments: The validated arguments for the tool
            session: The engine session to work against

        Returns:
            The tool's payload (text or JSON-serializable data)
        """
        return await self.execute_fn(arguments, session)

    def validate_arguments(self, arguments: dict) -> tuple[bool, Optional[str]]:
        """
        Validate arguments against the schema.

        Args:
            arguments: The arguments to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        # Check required fields
        for required_field in self.schema.required or []:
            if required_field not in arguments:
                return False, f"Missing required field: {required_field}"

        # Type checking (basic)
        for key, value in arguments.items():
            if key in (self.schema.properties or {}):
                expected_type = self.schema.properties[key].get("type")
                if expected_type:
                    if not self._check_type(value, expected_type):
                        return (
                            False,
                            f"Invalid type for {key}: expected {expected_type}",
                        )

        return True, None

    def apply_defaults(self, arguments: dict) -> dict:
        """Return a copy of ``arguments`` with schema defaults filled in."""
        resolved = dict(arguments)
        for key, spec in (self.schema.properties or {}).items():
            if key not in resolved and "default" in spec:
                resolved[key] = copy.deepcopy(spec["default"])
        return resolved

    def _check_type(self, value: Any, expected_type: str) -> bool:
        """Check if a value matches the expected type."""
        if expected_type == "boolean":
            return isinstance(value, bool)
        if expected_type in ("integer", "number") and isinstance(value, bool):
            return False

        type_map = {
            "string": str,
            "integer": int,
            "number": (int, float),
            "array": list,
            "object": dict,
        }

        expected = type_map.get(expected_type)
        if expected is None:
            return True  # Unknown type, allow

        return isinstance(value, expected)


# Global tool registry
_tools: Dict[str, Tool] = {}


def register_tool(
    name: str, description: str, schema: ToolSchema, category: str = "general"
) -> Callable:
    """
    Decorator to register a tool.

    Args:
        name: The tool name
        description: Description of what the tool does
        schema: The parameter schema
        category: Tool category for organization

    Returns:
        Decorator function
    """

    def decorator(fn: Callable) -> Callable:
        @wraps(fn)
        async def wrapper(arguments: dict, session: "EngineSession") -> Any:
            return await fn(arguments, session)

        tool = Tool(
            name=name,
            description=description,
            schema=schema,
            execute_fn=wrapper,
            category=category,
        )
        _tools[name] = tool
        return wrapper

    return decorator


def get_all_tools() -> List[Tool]:
    """Get all registered tools."""
    return list(_tools.values())


def get_enabled_tools() -> List[Tool]:
    """Get registered tools that are not disabled."""
    return [tool for tool in _tools.values() if tool.enabled]


def get_tool(name: str) -> Optional[Tool]:
    """Get a tool by name."""
    return _tools.get(name)


def unregister_tool(name: str) -> bool:
    """
    Unregister a tool by name.

    Args:
        name: The tool name to unregister

    Returns:
        True if tool was unregistered, False if not found
    """
    if name in _tools:
        del _tools[name]
        return True
    return False


def get_tool_names() -> List[str]:
    """Get list of all registered tool names."""
    return list(_tools.keys())


def enable_tool(name: str) -> bool:
    """Enable a tool by name."""
    tool = _tools.get(name)
    if tool:
        tool.enabled = True
        return True
    return False


def disable_tool(name: str) -> bool:
    """Disable a tool by name."""
    tool = _tools.get(name)
    if tool:
        tool.enabled = False
        return True
    return False


def apply_disabled(names: List[str]) -> List[str]:
    """
    Disable each named tool.

    Args:
        names: Tool names from configuration

    Returns:
        Names that did not match a registered tool
    """
    return [name for name in names if not disable_tool(name)]

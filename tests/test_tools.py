"""Tests for the tool system."""

import asyncio

import pytest

from unrealmcp.errors import RemoteCallError
from unrealmcp.tools import (
    Tool,
    ToolExecutor,
    ToolSchema,
    apply_disabled,
    disable_tool,
    enable_tool,
    get_all_tools,
    get_enabled_tools,
    get_tool,
    get_tool_info,
    get_tool_names,
    register_tool,
    unregister_tool,
)

EXPECTED_TOOLS = {
    "ue_get_property",
    "ue_set_property",
    "ue_call_function",
    "ue_describe_object",
    "ue_search_assets",
    "ue_list_actors",
    "ue_exec_console",
    "ue_exec_python",
    "ue_batch",
    "ue_remote_info",
}


@pytest.fixture
def sample_tool() -> Tool:
    """Create a sample tool for testing."""

    async def dummy_execute(arguments: dict, session) -> dict:
        return {"echo": arguments}

    return Tool(
        name="test_tool",
        description="A test tool",
        schema=ToolSchema(
            properties={
                "param": {"type": "string", "description": "A parameter"},
                "flag": {"type": "boolean", "default": True},
            },
            required=["param"],
        ),
        execute_fn=dummy_execute,
        category="test",
    )


class TestToolRegistry:
    """Tests for tool registry functions."""

    def test_tools_loaded(self):
        assert EXPECTED_TOOLS <= set(get_tool_names())

    def test_get_tool(self):
        tool = get_tool("ue_exec_python")
        assert tool is not None
        assert tool.category == "execution"
        assert tool.schema.required == ["code"]

    def test_get_nonexistent_tool(self):
        assert get_tool("nonexistent_tool_xyz") is None

    def test_disable_enable_tool(self):
        assert disable_tool("ue_batch") is True
        assert get_tool("ue_batch").enabled is False
        assert "ue_batch" not in [t.name for t in get_enabled_tools()]

        assert enable_tool("ue_batch") is True
        assert get_tool("ue_batch").enabled is True

    def test_disable_nonexistent_tool(self):
        assert disable_tool("nonexistent_tool_xyz") is False

    def test_apply_disabled_reports_unknown(self):
        unknown = apply_disabled(["ue_exec_console", "ue_teleport"])
        assert unknown == ["ue_teleport"]
        assert get_tool("ue_exec_console").enabled is False

    def test_tool_info(self):
        info = {entry["name"]: entry for entry in get_tool_info()}
        assert info["ue_call_function"]["parameters"] == [
            "object_path",
            "function_name",
            "parameters",
            "generate_transaction",
        ]

    def test_decorator_registers_tool(self):
        initial_count = len(get_all_tools())

        @register_tool(
            name="pytest_test_tool_unique",
            description="A tool registered in tests",
            schema=ToolSchema(properties={}, required=[]),
            category="test",
        )
        async def pytest_test_tool_unique(arguments, session):
            return "test result"

        try:
            assert len(get_all_tools()) == initial_count + 1
            assert get_tool("pytest_test_tool_unique").category == "test"
        finally:
            assert unregister_tool("pytest_test_tool_unique") is True


class TestTool:
    """Tests for Tool class."""

    def test_schema_to_dict(self, sample_tool):
        d = sample_tool.schema.to_dict()
        assert d["type"] == "object"
        assert d["properties"]["param"]["type"] == "string"
        assert d["required"] == ["param"]

    def test_validate_arguments(self, sample_tool):
        assert sample_tool.validate_arguments({"param": "value"}) == (True, None)

        is_valid, error = sample_tool.validate_arguments({})
        assert is_valid is False
        assert "param" in error

        is_valid, error = sample_tool.validate_arguments({"param": 3})
        assert is_valid is False
        assert "expected string" in error

    def test_boolean_is_strict(self, sample_tool):
        is_valid, _ = sample_tool.validate_arguments({"param": "x", "flag": "yes"})
        assert is_valid is False

    def test_apply_defaults(self, sample_tool):
        arguments = {"param": "x"}
        assert sample_tool.apply_defaults(arguments) == {"param": "x", "flag": True}
        assert arguments == {"param": "x"}
        assert sample_tool.apply_defaults({"param": "x", "flag": False})["flag"] is False


class TestToolExecutor:
    """Tests for ToolExecutor."""

    @pytest.mark.asyncio
    async def test_success_is_json_text(self, sample_tool):
        result = await ToolExecutor(session=None).execute(sample_tool, {"param": "p"})

        assert result.success is True
        assert result.text == '{\n  "echo": {\n    "param": "p",\n    "flag": true\n  }\n}'

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, sample_tool):
        result = await ToolExecutor(session=None).execute(sample_tool, {})

        assert result.success is False
        assert result.text == "Error: Missing required field: param"

    @pytest.mark.asyncio
    async def test_disabled_tool(self, sample_tool):
        sample_tool.enabled = False
        result = await ToolExecutor(session=None).execute(sample_tool, {"param": "p"})

        assert result.success is False
        assert "disabled" in result.error

    @pytest.mark.asyncio
    async def test_domain_error_becomes_result(self, sample_tool):
        async def failing(arguments, session):
            raise RemoteCallError("PUT", "/remote/object/call", 404, "nope")

        sample_tool.execute_fn = failing
        result = await ToolExecutor(session=None).execute(sample_tool, {"param": "p"})

        assert result.success is False
        assert result.text == "Error: UE PUT /remote/object/call -> 404: nope"

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_result(self, sample_tool):
        async def broken(arguments, session):
            raise KeyError("surprise")

        sample_tool.execute_fn = broken
        result = await ToolExecutor(session=None).execute(sample_tool, {"param": "p"})

        assert result.success is False
        assert "surprise" in result.error

    @pytest.mark.asyncio
    async def test_timeout(self, sample_tool):
        async def slow(arguments, session):
            await asyncio.sleep(5)

        sample_tool.execute_fn = slow
        result = await ToolExecutor(session=None, timeout=0.01).execute(
            sample_tool, {"param": "p"}
        )

        assert result.success is False
        assert "timed out" in result.error

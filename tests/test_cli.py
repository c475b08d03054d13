"""Tests for the command line interface."""

import pytest

from unrealmcp.config import get_settings, update_settings
from unrealmcp.interface.main import build_settings, main, parse_arguments


@pytest.fixture(autouse=True)
def restore_settings():
    original = get_settings()
    yield
    update_settings(**original.__dict__)


class TestArguments:
    def test_defaults(self):
        args = parse_arguments([])
        assert args.command is None
        assert args.host is None
        assert args.debug is None

    def test_overrides_applied(self):
        args = parse_arguments(
            ["--host", "10.0.0.5", "--port", "30020", "--ssh-user", "dev", "--debug", "check"]
        )
        settings = build_settings(args)

        assert args.command == "check"
        assert settings.ue_host == "10.0.0.5"
        assert settings.ue_port == 30020
        assert settings.ssh_user == "dev"
        assert settings.debug is True
        assert settings.base_url == "http://10.0.0.5:30020"

    def test_tools_info(self):
        args = parse_arguments(["tools", "info", "ue_batch"])
        assert args.command == "tools"
        assert args.tools_command == "info"
        assert args.name == "ue_batch"


class TestMain:
    def test_tools_list_exits_cleanly(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["tools", "list"])
        assert exc_info.value.code == 0

    def test_unknown_tool_info(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["tools", "info", "ue_teleport"])
        assert exc_info.value.code == 1

    def test_invalid_port_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--port", "70000", "tools", "list"])
        assert exc_info.value.code == 1

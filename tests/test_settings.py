"""Tests for application settings."""

import pytest

from unrealmcp.config import Settings, get_settings, update_settings
from unrealmcp.errors import ConfigError

UE_VARS = [
    "UE_HOST",
    "UE_PORT",
    "UE_SSH_USER",
    "UE_CAPTURE_RETRIEVAL",
    "UE_REMOTE_OS",
    "UE_DISABLED_TOOLS",
    "UE_CAPTURE_TIMEOUT",
    "UE_MCP_DEBUG",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in UE_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()
    assert settings.ue_host == "127.0.0.1"
    assert settings.ue_port == 30010
    assert settings.ssh_user == "unreal"
    assert settings.base_url == "http://127.0.0.1:30010"
    assert settings.capture_retrieval == "ssh"
    assert settings.remote_os == "windows"
    assert settings.settle_delay == 0.2
    assert settings.disabled_tools == []
    assert settings.debug is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("UE_HOST", "10.0.0.5")
    monkeypatch.setenv("UE_PORT", "30020")
    monkeypatch.setenv("UE_SSH_USER", "builder")
    monkeypatch.setenv("UE_CAPTURE_TIMEOUT", "2.5")
    monkeypatch.setenv("UE_DISABLED_TOOLS", "ue_exec_python, ue_batch,")
    monkeypatch.setenv("UE_MCP_DEBUG", "true")

    settings = Settings()

    assert settings.base_url == "http://10.0.0.5:30020"
    assert settings.ssh_user == "builder"
    assert settings.capture_timeout == 2.5
    assert settings.disabled_tools == ["ue_exec_python", "ue_batch"]
    assert settings.debug is True


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("UE_PORT", "not-a-port")
    with pytest.raises(ConfigError):
        Settings()


def test_port_out_of_range():
    with pytest.raises(ConfigError):
        Settings(ue_port=70000)


def test_unknown_retrieval():
    with pytest.raises(ConfigError):
        Settings(capture_retrieval="ftp")


def test_unknown_remote_os():
    with pytest.raises(ConfigError):
        Settings(remote_os="amiga")


def test_update_settings_replaces_global():
    updated = update_settings(ue_host="editor.local")
    assert get_settings() is updated
    assert get_settings().ue_host == "editor.local"

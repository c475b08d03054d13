"""Application settings for unreal-mcp."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import ConfigError
from .constants import (
    DEFAULT_CAPTURE_DIR,
    DEFAULT_CAPTURE_TIMEOUT,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_SETTLE_DELAY,
    DEFAULT_SSH_CONNECT_TIMEOUT,
    DEFAULT_SSH_PORT,
    DEFAULT_SSH_TIMEOUT,
    DEFAULT_SSH_USER,
    DEFAULT_TOOL_TIMEOUT,
    DEFAULT_UE_HOST,
    DEFAULT_UE_PORT,
    REMOTE_OS_CHOICES,
    REMOTE_OS_WINDOWS,
    RETRIEVAL_MODES,
    RETRIEVAL_SSH,
)


def _env(name: str, default):
    return lambda: os.getenv(name, default)


def _env_list(name: str):
    def factory() -> List[str]:
        raw = os.getenv(name, "")
        return [item.strip() for item in raw.split(",") if item.strip()]

    return factory


def _env_bool(name: str):
    return lambda: os.getenv(name, "false").lower() in ("1", "true", "yes")


@dataclass
class Settings:
    """Application settings.

    Values come from the environment (``UE_*`` variables, optionally from a
    ``.env`` file) and are read once at startup.
    """

    # Remote Control endpoint
    ue_host: str = field(default_factory=_env("UE_HOST", DEFAULT_UE_HOST))
    ue_port: int = field(default_factory=_env("UE_PORT", DEFAULT_UE_PORT))
    http_timeout: float = field(
        default_factory=_env("UE_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
    )

    # SSH retrieval channel
    ssh_user: str = field(default_factory=_env("UE_SSH_USER", DEFAULT_SSH_USER))
    ssh_port: int = field(default_factory=_env("UE_SSH_PORT", DEFAULT_SSH_PORT))
    ssh_connect_timeout: int = field(
        default_factory=_env("UE_SSH_CONNECT_TIMEOUT", DEFAULT_SSH_CONNECT_TIMEOUT)
    )
    ssh_timeout: float = field(
        default_factory=_env("UE_SSH_TIMEOUT", DEFAULT_SSH_TIMEOUT)
    )
    remote_os: str = field(default_factory=_env("UE_REMOTE_OS", REMOTE_OS_WINDOWS))

    # Capture protocol
    capture_dir: str = field(
        default_factory=_env("UE_CAPTURE_DIR", DEFAULT_CAPTURE_DIR)
    )
    capture_retrieval: str = field(
        default_factory=_env("UE_CAPTURE_RETRIEVAL", RETRIEVAL_SSH)
    )
    settle_delay: float = field(
        default_factory=_env("UE_CAPTURE_SETTLE_DELAY", DEFAULT_SETTLE_DELAY)
    )
    poll_interval: float = field(
        default_factory=_env("UE_CAPTURE_POLL_INTERVAL", DEFAULT_POLL_INTERVAL)
    )
    capture_timeout: float = field(
        default_factory=_env("UE_CAPTURE_TIMEOUT", DEFAULT_CAPTURE_TIMEOUT)
    )

    # Tool Settings
    tool_timeout: float = field(
        default_factory=_env("UE_TOOL_TIMEOUT", DEFAULT_TOOL_TIMEOUT)
    )
    disabled_tools: List[str] = field(default_factory=_env_list("UE_DISABLED_TOOLS"))

    debug: bool = field(default_factory=_env_bool("UE_MCP_DEBUG"))

    def __post_init__(self):
        """Coerce environment strings and reject invalid values."""
        self.ue_port = self._coerce("ue_port", int)
        self.ssh_port = self._coerce("ssh_port", int)
        self.ssh_connect_timeout = self._coerce("ssh_connect_timeout", int)
        for name in (
            "http_timeout",
            "ssh_timeout",
            "settle_delay",
            "poll_interval",
            "capture_timeout",
            "tool_timeout",
        ):
            setattr(self, name, self._coerce(name, float))

        if not 0 < self.ue_port < 65536:
            raise ConfigError(f"UE port out of range: {self.ue_port}")
        if self.capture_retrieval not in RETRIEVAL_MODES:
            raise ConfigError(
                f"Unknown capture retrieval '{self.capture_retrieval}' "
                f"(expected one of: {', '.join(RETRIEVAL_MODES)})"
            )
        if self.remote_os not in REMOTE_OS_CHOICES:
            raise ConfigError(
                f"Unknown remote OS '{self.remote_os}' "
                f"(expected one of: {', '.join(REMOTE_OS_CHOICES)})"
            )
        if self.poll_interval <= 0:
            raise ConfigError("Capture poll interval must be positive")

    def _coerce(self, name: str, kind: type):
        value = getattr(self, name)
        try:
            return kind(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value for {name}: {value!r}") from e

    @property
    def base_url(self) -> str:
        """Base URL of the Remote Control HTTP API."""
        return f"http://{self.ue_host}:{self.ue_port}"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def update_settings(**kwargs) -> Settings:
    """Replace global settings, overriding the environment with ``kwargs``."""
    global _settings
    _settings = Settings(**kwargs)
    return _settings

"""Retrieval channels for capture results.

A channel reads one result file and removes it. ``read`` returns None
while the file does not exist yet; the protocol treats that as "not
ready" and polls again. A file that exists but cannot be read raises
ResultUnreadableError, which the protocol also polls through while
remembering the cause. Any other failure raises.
"""

import asyncio
import logging
import shlex
import socket
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional

import paramiko
from paramiko.ssh_exception import NoValidConnectionsError

from ..config.constants import REMOTE_OS_WINDOWS, RETRIEVAL_LOCAL, RETRIEVAL_SSH
from ..errors import ConfigError, ResultUnreadableError, RetrievalTransportError

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)

# stderr fragments from `type` (cmd.exe) and `cat` for an absent file or directory
MISSING_FILE_MARKERS = (
    "cannot find the file",
    "cannot find the path",
    "no such file or directory",
)


def is_missing_file(stderr: str) -> bool:
    """True if a failed read only means the file is not there yet."""
    lowered = stderr.lower()
    return any(marker in lowered for marker in MISSING_FILE_MARKERS)


class ResultRetriever(ABC):
    """Reads a result file back from the engine host."""

    name: str = "base"

    @abstractmethod
    async def read(self, path: str) -> Optional[str]:
        """
        Read and remove the result file.

        Args:
            path: Result file path in forward-slash form

        Returns:
            File contents, or None if the file does not exist yet

        Raises:
            ResultUnreadableError: The file could not be read this time
            RetrievalTransportError: The channel itself failed
        """
        pass


class SSHRetriever(ResultRetriever):
    """Reads result files over a short-lived SSH session."""

    name = RETRIEVAL_SSH

    def __init__(
        self,
        host: str,
        user: str,
        port: int = 22,
        connect_timeout: int = 3,
        timeout: float = 10.0,
        remote_os: str = REMOTE_OS_WINDOWS,
        client_factory: Optional[Callable[[], paramiko.SSHClient]] = None,
    ):
        """
        Initialize the SSH channel.

        Args:
            host: Engine host
            user: SSH user
            port: SSH port
            connect_timeout: TCP connect timeout in seconds
            timeout: Timeout for the remote read command in seconds
            remote_os: "windows" (cmd.exe) or "posix" shell syntax
            client_factory: Builds the SSH client (defaults to paramiko.SSHClient)
        """
        self.host = host
        self.user = user
        self.port = port
        self.connect_timeout = connect_timeout
        self.timeout = timeout
        self.remote_os = remote_os
        self._client_factory = client_factory or paramiko.SSHClient

    @property
    def target(self) -> str:
        return f"{self.user}@{self.host}:{self.port}"

    def remote_command(self, path: str) -> str:
        """Shell command that prints the file and then deletes it."""
        if self.remote_os == REMOTE_OS_WINDOWS:
            native = path.replace("/", "\\")
            return f'type "{native}" && del "{native}"'
        quoted = shlex.quote(path)
        return f"cat {quoted} && rm -f {quoted}"

    async def read(self, path: str) -> Optional[str]:
        return await asyncio.to_thread(self._read_blocking, path)

    def _read_blocking(self, path: str) -> Optional[str]:
        client = self._client_factory()
        client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        try:
            client.connect(
                hostname=self.host,
                port=self.port,
                username=self.user,
                timeout=self.connect_timeout,
            )
            _, stdout, stderr = client.exec_command(
                self.remote_command(path), timeout=self.timeout
            )
            out = stdout.read().decode("utf-8", errors="replace")
            err = stderr.read().decode("utf-8", errors="replace").strip()
            status = stdout.channel.recv_exit_status()
        except paramiko.AuthenticationException as e:
            raise RetrievalTransportError(
                f"SSH authentication failed for {self.target}: {e}"
            ) from e
        except socket.timeout as e:
            raise RetrievalTransportError(
                f"SSH to {self.target} timed out after {self.timeout}s"
            ) from e
        except (NoValidConnectionsError, paramiko.SSHException, OSError) as e:
            raise RetrievalTransportError(f"SSH to {self.target} failed: {e}") from e
        finally:
            client.close()

        if status == 0:
            return out
        if is_missing_file(err):
            logger.debug("Result %s not written yet", path)
            return None
        raise ResultUnreadableError(err or f"remote read exited with status {status}")


class LocalRetriever(ResultRetriever):
    """Reads result files from a filesystem shared with the engine."""

    name = RETRIEVAL_LOCAL

    async def read(self, path: str) -> Optional[str]:
        result_file = Path(path)
        try:
            content = result_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise ResultUnreadableError(f"Cannot read {path}: {e}") from e

        result_file.unlink(missing_ok=True)
        return content


def create_retriever(
    settings: "Settings",
    ssh_client_factory: Optional[Callable[[], paramiko.SSHClient]] = None,
) -> ResultRetriever:
    """
    Build the retrieval channel selected in settings.

    Args:
        settings: Application settings
        ssh_client_factory: SSH client factory (defaults to paramiko.SSHClient)

    Returns:
        The configured ResultRetriever
    """
    if settings.capture_retrieval == RETRIEVAL_SSH:
        return SSHRetriever(
            host=settings.ue_host,
            user=settings.ssh_user,
            port=settings.ssh_port,
            connect_timeout=settings.ssh_connect_timeout,
            timeout=settings.ssh_timeout,
            remote_os=settings.remote_os,
            client_factory=ssh_client_factory,
        )
    if settings.capture_retrieval == RETRIEVAL_LOCAL:
        return LocalRetriever()
    raise ConfigError(f"Unknown capture retrieval '{settings.capture_retrieval}'")

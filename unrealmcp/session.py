"""Engine session: the collaborators every tool works against."""

from dataclasses import dataclass
from typing import Callable, Optional

import httpx
import paramiko

from .capture import CaptureProtocol, create_retriever
from .config import Settings
from .remote import RemoteControlClient


@dataclass
class EngineSession:
    """Remote Control client and capture protocol bound to one engine."""

    settings: Settings
    client: RemoteControlClient
    capture: CaptureProtocol

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        ssh_client_factory: Optional[Callable[[], paramiko.SSHClient]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "EngineSession":
        """
        Build a session from settings.

        Args:
            settings: Application settings
            ssh_client_factory: SSH client factory for the ssh retrieval channel
            transport: Optional httpx transport for the Remote Control client

        Returns:
            A ready EngineSession
        """
        client = RemoteControlClient(
            settings.base_url, timeout=settings.http_timeout, transport=transport
        )
        capture = CaptureProtocol(
            client,
            create_retriever(settings, ssh_client_factory),
            capture_dir=settings.capture_dir,
            settle_delay=settings.settle_delay,
            poll_interval=settings.poll_interval,
            timeout=settings.capture_timeout,
        )
        return cls(settings=settings, client=client, capture=capture)

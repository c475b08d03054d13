"""Error types for unreal-mcp.

Every failure a tool can hit is an ``UnrealMCPError``. The tool executor
catches them at the tool boundary and turns them into error results, so
the classes exist to keep the failure kinds distinguishable for callers
and tests rather than to be caught individually.
"""

from typing import Optional

# Upper bound on how much of an upstream response body ends up in messages
MAX_BODY_SNIPPET = 500


class UnrealMCPError(Exception):
    """Base exception for all unreal-mcp failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(UnrealMCPError):
    """Invalid startup configuration."""


class TransportError(UnrealMCPError):
    """The Remote Control endpoint could not be reached."""

    def __init__(self, method: str, path: str, reason: str):
        super().__init__(f"UE {method} {path} unreachable: {reason}")
        self.method = method
        self.path = path
        self.reason = reason


class RemoteCallError(UnrealMCPError):
    """The endpoint answered with a non-success status."""

    def __init__(self, method: str, path: str, status_code: int, body: str = ""):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body_snippet = (body or "")[:MAX_BODY_SNIPPET]
        super().__init__(f"UE {method} {path} -> {status_code}: {self.body_snippet}")


class MalformedInputError(UnrealMCPError):
    """A caller-supplied JSON-encoded argument could not be used."""


class RemotePayloadError(UnrealMCPError):
    """A response body did not have the shape the tool needs to inspect."""


class CaptureError(UnrealMCPError):
    """Base class for out-of-band capture failures."""


class HarnessDispatchError(CaptureError):
    """The harness could not be submitted to the engine."""


class RetrievalTransportError(CaptureError):
    """The retrieval channel failed (unreachable, auth, local error)."""


class ResultUnreadableError(RetrievalTransportError):
    """The result file could not be read this time; polling continues."""


class CaptureTimeoutError(RetrievalTransportError):
    """The result file did not appear before the capture deadline."""

    def __init__(
        self, message: str, attempts: int = 0, last_error: Optional[str] = None
    ):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class RetrievalParseError(CaptureError):
    """The retrieved result record was not valid."""

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw


class RemoteExecutionError(CaptureError):
    """The executed code raised; the message is the captured traceback."""

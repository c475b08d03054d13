"""Out-of-band output capture for code run inside the engine."""

from .harness import build_harness, result_path_for
from .protocol import CaptureProtocol
from .retrieval import (
    LocalRetriever,
    ResultRetriever,
    SSHRetriever,
    create_retriever,
)

__all__ = [
    "CaptureProtocol",
    "build_harness",
    "result_path_for",
    "ResultRetriever",
    "SSHRetriever",
    "LocalRetriever",
    "create_retriever",
]

"""Out-of-band capture protocol.

Remote Control offers no channel for the output of Python run inside the
editor, so execution is split in two: the harness is dispatched over
HTTP and writes a result record to disk, then a retrieval channel reads
that record back.
"""

import asyncio
import json
import logging
import uuid
from typing import TYPE_CHECKING, Callable, Optional

from ..config.constants import (
    NO_OUTPUT,
    PYTHON_COMMAND_FUNCTION,
    PYTHON_LIBRARY_PATH,
    ROUTE_CALL,
)
from ..errors import (
    CaptureTimeoutError,
    HarnessDispatchError,
    RemoteCallError,
    RemoteExecutionError,
    ResultUnreadableError,
    RetrievalParseError,
    TransportError,
)
from .harness import build_harness, result_path_for

if TYPE_CHECKING:
    from ..remote import RemoteControlClient
    from .retrieval import ResultRetriever

logger = logging.getLogger(__name__)


class CaptureProtocol:
    """Runs Python inside the engine and recovers its output."""

    def __init__(
        self,
        client: "RemoteControlClient",
        retriever: "ResultRetriever",
        capture_dir: str,
        settle_delay: float = 0.2,
        poll_interval: float = 0.2,
        timeout: float = 10.0,
        request_id_factory: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize the capture protocol.

        Args:
            client: Remote Control client used for dispatch
            retriever: Channel that reads result files back
            capture_dir: Directory on the engine host for result files
            settle_delay: Wait between dispatch and the first read
            poll_interval: Wait between reads while the file is absent
            timeout: Longest time to keep polling after the settle delay
            request_id_factory: Source of request ids (defaults to uuid4 hex)
        """
        self.client = client
        self.retriever = retriever
        self.capture_dir = capture_dir
        self.settle_delay = settle_delay
        self.poll_interval = poll_interval
        self.timeout = timeout
        self._request_id_factory = request_id_factory or (lambda: uuid.uuid4().hex)

    async def execute(self, code: str) -> str:
        """
        Execute code in the engine and return its captured stdout.

        Args:
            code: Python source

        Returns:
            Captured output, or NO_OUTPUT if nothing was printed

        Raises:
            HarnessDispatchError: The harness was not accepted
            RetrievalTransportError: The result could not be read back
            RetrievalParseError: The result record was invalid
            RemoteExecutionError: The code raised inside the engine
        """
        request_id = self._request_id_factory()
        result_path = result_path_for(self.capture_dir, request_id)
        harness = build_harness(code, result_path, request_id)

        logger.debug("Capture %s: dispatching harness", request_id)
        await self._dispatch(harness)

        await asyncio.sleep(self.settle_delay)

        raw = await self._retrieve(result_path, request_id)
        return self._parse(raw, request_id)

    async def _dispatch(self, harness: str) -> None:
        try:
            await self.client.put(
                ROUTE_CALL,
                {
                    "objectPath": PYTHON_LIBRARY_PATH,
                    "functionName": PYTHON_COMMAND_FUNCTION,
                    "parameters": {"PythonCommand": harness},
                },
            )
        except (TransportError, RemoteCallError) as e:
            raise HarnessDispatchError(f"Harness dispatch failed: {e.message}") from e

    async def _retrieve(self, result_path: str, request_id: str) -> str:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.timeout
        attempts = 0
        last_error = None

        while True:
            attempts += 1
            try:
                raw = await self.retriever.read(result_path)
            except ResultUnreadableError as e:
                logger.debug("Capture %s: read failed: %s", request_id, e.message)
                last_error = e.message
                raw = None
            if raw is not None:
                logger.debug(
                    "Capture %s: result read after %d attempt(s)", request_id, attempts
                )
                return raw

            if loop.time() >= deadline:
                message = (
                    f"No result at {result_path} after {attempts} read(s) "
                    f"over {self.timeout}s"
                )
                if last_error:
                    message += f"; last error: {last_error}"
                raise CaptureTimeoutError(
                    message, attempts=attempts, last_error=last_error
                )
            await asyncio.sleep(self.poll_interval)

    def _parse(self, raw: str, request_id: str) -> str:
        try:
            record = json.loads(raw)
        except ValueError as e:
            raise RetrievalParseError(f"Result is not valid JSON: {e}", raw) from e

        if not isinstance(record, dict):
            raise RetrievalParseError("Result is not a JSON object", raw)

        output = record.get("output")
        error = record.get("error")
        if not isinstance(output, str):
            raise RetrievalParseError("Result has no string 'output' field", raw)
        if error is not None and not isinstance(error, str):
            raise RetrievalParseError("Result 'error' field is not a string", raw)

        owner = record.get("request_id")
        if owner != request_id:
            raise RetrievalParseError(
                f"Result belongs to request {owner!r}, expected {request_id!r}", raw
            )

        if error is not None:
            raise RemoteExecutionError(error)

        return output or NO_OUTPUT

"""Test fixtures for unreal-mcp tests."""

import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from unrealmcp.capture import ResultRetriever
from unrealmcp.config import Settings
from unrealmcp.config.constants import PYTHON_LIBRARY_PATH, ROUTE_CALL
from unrealmcp.session import EngineSession
from unrealmcp.tools import get_all_tools


class MockEngine:
    """Stand-in for the Remote Control HTTP API."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Tuple[int, str]] = {}
        self.run_python = False
        self.fail_with: Optional[Exception] = None

    def respond(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        status: int = 200,
        text: Optional[str] = None,
    ):
        content = text if text is not None else json.dumps(json_body)
        self.routes[(method, path)] = (status, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with

        body = json.loads(request.content) if request.content else None
        key = (request.method, request.url.path)

        if (
            self.run_python
            and key == ("PUT", ROUTE_CALL)
            and body.get("objectPath") == PYTHON_LIBRARY_PATH
        ):
            # Run the harness the way the editor's interpreter would
            exec(body["parameters"]["PythonCommand"], {})
            return httpx.Response(200, json={"ReturnValue": True})

        if key not in self.routes:
            return httpx.Response(404, text=f"No route {key}")
        status, content = self.routes[key]
        return httpx.Response(status, text=content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def bodies(self) -> List[Any]:
        return [json.loads(r.content) if r.content else None for r in self.requests]


MISSING = "The system cannot find the file specified."


class FakeChannel:
    def __init__(self, status: int):
        self.status = status

    def recv_exit_status(self) -> int:
        return self.status


class FakeStream:
    def __init__(self, text: str, channel: FakeChannel):
        self._data = text.encode("utf-8")
        self.channel = channel

    def read(self) -> bytes:
        return self._data


class FakeSSHClient:
    """Stand-in for paramiko.SSHClient driven by a FakeSSH script."""

    def __init__(self, script: "FakeSSH"):
        self.script = script

    def set_missing_host_key_policy(self, policy):
        self.script.policies.append(policy)

    def connect(self, **kwargs):
        self.script.connects.append(kwargs)
        if self.script.connect_error is not None:
            raise self.script.connect_error

    def exec_command(self, command: str, timeout: Optional[float] = None):
        self.script.commands.append(command)
        self.script.timeouts.append(timeout)
        if self.script.exec_error is not None:
            raise self.script.exec_error
        if self.script.results:
            status, stdout, stderr = self.script.results.pop(0)
        else:
            status, stdout, stderr = 1, "", MISSING
        channel = FakeChannel(status)
        return None, FakeStream(stdout, channel), FakeStream(stderr, channel)

    def close(self):
        self.script.closed += 1


class FakeSSH:
    """SSH client factory returning scripted (status, stdout, stderr) results."""

    def __init__(
        self,
        results: Optional[List[Tuple[int, str, str]]] = None,
        connect_error: Optional[Exception] = None,
        exec_error: Optional[Exception] = None,
    ):
        self.results = list(results or [])
        self.connect_error = connect_error
        self.exec_error = exec_error
        self.policies: List[Any] = []
        self.connects: List[Dict[str, Any]] = []
        self.commands: List[str] = []
        self.timeouts: List[Optional[float]] = []
        self.closed = 0

    def __call__(self) -> FakeSSHClient:
        return FakeSSHClient(self)


class FakeRetriever(ResultRetriever):
    """Retriever returning scripted contents (None means not written yet)."""

    name = "fake"

    def __init__(self, contents: Optional[List[Optional[str]]] = None):
        self.contents = list(contents or [])
        self.paths: List[str] = []

    async def read(self, path: str) -> Optional[str]:
        self.paths.append(path)
        if self.contents:
            return self.contents.pop(0)
        return None


def make_record(output: str = "", error: Optional[str] = None, request_id: str = "req1") -> str:
    """Serialized result record as the harness writes it."""
    return json.dumps({"request_id": request_id, "output": output, "error": error})


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Create test settings."""
    return Settings(
        ue_host="ue.test",
        ue_port=30010,
        ssh_user="tester",
        ssh_port=22,
        remote_os="windows",
        capture_dir=str(tmp_path),
        capture_retrieval="local",
        settle_delay=0,
        poll_interval=0.01,
        capture_timeout=0.5,
        http_timeout=5,
        tool_timeout=5,
        disabled_tools=[],
        debug=False,
    )


@pytest.fixture
def engine() -> MockEngine:
    """Create a mock Remote Control endpoint."""
    return MockEngine()


@pytest.fixture
def fake_ssh() -> FakeSSH:
    return FakeSSH()


@pytest.fixture
def session(settings, engine, fake_ssh) -> EngineSession:
    """Engine session wired to the mock endpoint."""
    return EngineSession.from_settings(
        settings, ssh_client_factory=fake_ssh, transport=engine.transport
    )


@pytest.fixture(autouse=True)
def reset_tool_state():
    """Re-enable every tool after each test."""
    yield
    for tool in get_all_tools():
        tool.enabled = True

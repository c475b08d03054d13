"""Harness generation for the capture protocol.

The harness is Python source run inside the editor's embedded
interpreter. It captures stdout and any traceback from the caller's
code and leaves a JSON record at a per-request path for the retrieval
channel to pick up.
"""

import posixpath
from functools import lru_cache
from pathlib import Path

from jinja2 import Template

from ..config.constants import RESULT_FILE_PREFIX


@lru_cache(maxsize=1)
def _load_template() -> Template:
    """Load the Jinja2 harness template."""
    template_path = Path(__file__).parent / "harness.jinja"
    return Template(template_path.read_text(encoding="utf-8"))


def result_path_for(capture_dir: str, request_id: str) -> str:
    """Result file path for one request, in forward-slash form."""
    directory = capture_dir.replace("\\", "/")
    return posixpath.join(directory, f"{RESULT_FILE_PREFIX}{request_id}.json")


def build_harness(code: str, result_path: str, request_id: str) -> str:
    """
    Wrap code in the capture harness.

    Args:
        code: Python source to run inside the engine
        result_path: Where the harness writes its JSON record
        request_id: Identifier echoed in the record

    Returns:
        Harness source
    """
    # repr() yields Python literals, so no value can break out of its slot
    return _load_template().render(
        code=repr(code),
        result_path=repr(result_path),
        request_id=repr(request_id),
    ).strip()

import sys
from pathlib import Path

import pytest

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.clients.aws`) works during pytest collection
# regardless of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import structlog  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Operation context bound by one test must not leak into the next."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()

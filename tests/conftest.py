"""Test configuration and fixtures."""

import logfire
import pytest

from baz.domain.model import Baz

# Keep spans local; nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)


def make_baz(payload: str | None = "hello", baz_id: int | None = None) -> Baz:
    """Helper to build a Baz for tests.

    Args:
        payload: Payload string
        baz_id: Optional id (None means unpersisted)

    Returns:
        Baz instance
    """
    return Baz(id=baz_id, payload=payload)


@pytest.fixture(autouse=True)
def _test_environment_variables(monkeypatch):
    """Run every test as the test environment against no real server."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    for name in ("DEBUG", "DATABASE__URL", "OBSERVABILITY__LOGFIRE_TOKEN"):
        monkeypatch.delenv(name, raising=False)

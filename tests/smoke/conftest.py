"""
Smoke-test fixtures for the Blog API.

Provides the ``smoke_base_url`` module-scoped fixture. When
``TEST_BASE_URL`` is set the suite runs against that deployment;
otherwise a server is started in-process with
:func:`app.server.run_server` on a throwaway SQLite database and closed
when the module finishes.

Key SDET Concepts Demonstrated:
- Module-scoped URL fixtures so the in-process server is closed before other suites run
- Server start/stop hooks bound to an explicit database URL
"""

from __future__ import annotations

import os
from collections.abc import Generator

import pytest
import requests

from app.server import close_server, run_server


def _check_healthy(url: str) -> None:
    response = requests.get(f"{url}/health", timeout=5)
    response.raise_for_status()


@pytest.fixture(scope="module")
def smoke_base_url(tmp_path_factory) -> Generator[str, None, None]:
    """Yield the base URL of a healthy Blog API server."""
    external_url = os.getenv("TEST_BASE_URL")
    if external_url:
        _check_healthy(external_url)
        yield external_url.rstrip("/")
        return

    db_path = tmp_path_factory.mktemp("smoke") / "smoke_blog.db"
    base_url = run_server(
        f"sqlite:///{db_path}?check_same_thread=False",
        config_name="testing",
    )
    try:
        _check_healthy(base_url)
        yield base_url
    finally:
        close_server()

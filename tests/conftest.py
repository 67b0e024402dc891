"""
Pytest configuration and shared fixtures for srclibkit tests.
"""

import os
import pytest

# Import test fixtures to make them available to all tests
# ruff: noqa: F401
from tests.fixtures.toolchains import (
    srclib_dir,
    make_toolchain,
    go_toolchain,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "posix: tests relying on POSIX permission bits or symlinks",
    )


def pytest_collection_modifyitems(config, items):
    """Skip POSIX-only tests on Windows."""
    if os.name != "nt":
        return
    skip_posix = pytest.mark.skip(reason="requires POSIX permissions and symlinks")
    for item in items:
        if "posix" in item.keywords:
            item.add_marker(skip_posix)


@pytest.fixture(autouse=True)
def clean_srclibpath(monkeypatch):
    """Keep the developer's SRCLIBPATH out of tests."""
    monkeypatch.delenv("SRCLIBPATH", raising=False)

"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _debug_logging(caplog: pytest.LogCaptureFixture) -> Iterator[None]:
    """Capture the library's debug output so failing tests show the move trail."""
    caplog.set_level(logging.DEBUG, logger="schack")
    yield

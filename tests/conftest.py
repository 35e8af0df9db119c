"""Shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from simple_mcp.utils.logging_setup import reset_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo handlers installed by ``configure_logging`` (e.g. via ``serve``)."""
    yield
    reset_logging()

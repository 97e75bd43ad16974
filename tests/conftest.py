"""Pytest configuration and fixtures for binci tests.

This module ensures the binci package is importable during tests
without requiring installation.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add src directory to path for development testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from binci.context import InvocationContext  # noqa: E402


@pytest.fixture
def context() -> InvocationContext:
    """Fixed, non-interactive invocation context."""
    return InvocationContext(
        instance_id="abc123",
        cwd="/home/user/project",
        environ={"HOME": "/home/user", "EMPTY": ""},
        interactive=False,
    )

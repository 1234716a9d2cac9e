"""Shared pytest fixtures for kvconf test suite."""

from __future__ import annotations

# Disable Rich colors and force wide terminal BEFORE any imports
# Rich checks these at import time
import os

os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"
os.environ["COLUMNS"] = "200"  # Prevent text wrapping in CLI output

from collections.abc import Callable
from pathlib import Path

import pytest

# pylint: disable=redefined-outer-name

SAMPLE_CONFIG = """\

number = 1234
every = 3m20s

database:
\tusername = admin
\tport=5432

log:
\tpath=../out/log.txt
\tlevel=fatal
"""


@pytest.fixture
def sample_text() -> str:
    """Return a document with a default section and two named sections."""
    return SAMPLE_CONFIG


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Build a helper writing config text into the pytest temp directory."""

    def _write(text: str, name: str = "app.conf") -> Path:
        """Write ``text`` to ``name`` and return the path."""
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_file(write_config: Callable[[str, str], Path], sample_text: str) -> Path:
    """Write the sample document to disk."""
    return write_config(sample_text, "app.conf")

"""Shared pytest fixtures and configuration for the valuekit test suite.

Guidelines
----------
* Core tests must be pure — no I/O, no mocking.
* CLI tests write JSON inputs under ``tmp_path`` and read results
  through ``capsys``.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], str]:
    """Return a helper that dumps *data* to ``tmp_path/name`` and
    returns the path as a string."""

    def _write(name: str, data: Any) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write

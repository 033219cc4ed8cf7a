# tests/conftest.py
from __future__ import annotations

import pytest

from nearprime import runtime
from nearprime.primality import clear_cache


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path, monkeypatch):
    """Fresh workspace, default settings and an empty primality cache for every test."""
    monkeypatch.setenv("NEARPRIME_HOME", str(tmp_path / "workspace"))
    runtime.reset()
    clear_cache()
    yield
    runtime.reset()
    clear_cache()

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep developer `~/.svcs/settings.json` and SVCS_* variables out of tests."""

    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("SVCS_PROJECT_ROOT", raising=False)
    monkeypatch.delenv("SVCS_DEBUG", raising=False)


@pytest.fixture
def project(tmp_path):
    """Create a working directory with two files."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "b.txt").write_text("beta")
    return root

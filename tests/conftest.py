"""Pytest configuration for libresolve tests."""

import pytest


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Point user settings at an empty home and run from an empty project dir."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("LIBRESOLVE_LOG_PATH", raising=False)
    monkeypatch.delenv("LIBRESOLVE_LOG_LEVEL", raising=False)
    monkeypatch.chdir(project)
    return {"home": home, "project": project}

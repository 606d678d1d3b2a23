"""
Global test configuration.
"""

import logging
import os

import pytest


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_strictnum_env(request, monkeypatch):
    """Ensure a clean STRICTNUM_* environment for each test.

    Escape hatch: mark a test with @pytest.mark.allow_env_pollution to keep
    the current environment unchanged.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("STRICTNUM_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def neutral_project_config(request, monkeypatch, tmp_path):
    """Point the project-file lookup at an empty temp pyproject.toml.

    Prevents a developer's real [tool.strictnum] table from leaking into
    tests. Tests that exercise the file loader set their own path.
    """
    if request.node.get_closest_marker("allow_real_project_config"):
        return

    pyproject = tmp_path / "isolated" / "pyproject.toml"
    pyproject.parent.mkdir(parents=True, exist_ok=True)
    pyproject.write_text("")
    monkeypatch.setenv("STRICTNUM_PYPROJECT_PATH", str(pyproject))


@pytest.fixture
def write_pyproject(tmp_path, monkeypatch):
    """Write a pyproject.toml and point the loader at it."""

    def _write(content: str):
        path = tmp_path / "project" / "pyproject.toml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        monkeypatch.setenv("STRICTNUM_PYPROJECT_PATH", str(path))
        return path

    return _write


# --- Logging Fixtures ---
@pytest.fixture
def strictnum_debug_logs(caplog):
    """Capture DEBUG records from the strictnum loggers."""
    caplog.set_level(logging.DEBUG, logger="strictnum")
    return caplog


# --- Test Environment Markers ---
def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Invariants every conversion must uphold",
        "allow_env_pollution: Keep STRICTNUM_* variables from the real environment",
        "allow_real_project_config: Use the real pyproject.toml lookup",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)

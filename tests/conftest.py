"""Pytest configuration shared by all tests.

Makes the project root importable and isolates every test from the real
environment: a fresh workspace under tmp_path, no leftover OTEL_* variables,
a clean settings cache and run phase.
"""

import logging
import os
import sys

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from otelbuild.config import get_settings  # noqa: E402
from otelbuild.services import logs  # noqa: E402
from otelbuild.services.runtime.phase import RunPhase, set_run_phase  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for key in list(os.environ):
        if key.startswith("OTEL_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PWD", str(tmp_path))
    monkeypatch.setenv("OTEL_TEMP_BUILD_DIR", str(tmp_path / ".otel-build"))
    get_settings.cache_clear()
    set_run_phase(RunPhase.UNSET)
    monkeypatch.setattr(logs, "_logger_path", "")
    yield
    package_logger = logging.getLogger("otelbuild")
    for handler in [h for h in package_logger.handlers if isinstance(h, logging.FileHandler)]:
        package_logger.removeHandler(handler)
        handler.close()
    get_settings.cache_clear()
    set_run_phase(RunPhase.UNSET)


@pytest.fixture
def workspace_root(tmp_path):
    return tmp_path / ".otel-build"

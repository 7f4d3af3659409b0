"""Pytest configuration for the floxwrap test suite.

Ensures the *src* directory is on *sys.path* so the *floxwrap* package can be
imported when running tests without installing the project into the active
virtual environment.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

ROOT_DIR = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT_DIR / "src"
if SRC_DIR.exists() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

# Property tests share function-scoped fixtures with @given.
settings.register_profile(
    "floxwrap_ci", suppress_health_check=(HealthCheck.function_scoped_fixture,)
)
settings.load_profile("floxwrap_ci")


class _Execd(Exception):
    """Raised by the fake execvp in place of replacing the process."""


@pytest.fixture()
def fake_exec(monkeypatch):
    """Stub out both exec calls with a recorder that never returns."""

    calls: list[tuple[str, list[str]]] = []

    def _execvp(file, args):  # noqa: D401 – test stub
        calls.append((file, list(args)))
        raise _Execd(file)

    def _execvpe(file, args, env):  # noqa: D401 – test stub
        calls.append((file, list(args)))
        raise _Execd(file)

    import os

    monkeypatch.setattr(os, "execvp", _execvp)
    monkeypatch.setattr(os, "execvpe", _execvpe)
    return calls


@pytest.fixture()
def syslog_records(monkeypatch):
    """Swap the floxwrap logger's handlers for an in-memory capture."""

    import logging

    from floxwrap.logger import logger

    records: list[logging.LogRecord] = []

    class _Capture(logging.Handler):
        def emit(self, record):  # noqa: D401 – test stub
            records.append(record)

    monkeypatch.setattr(logger, "handlers", [_Capture()])
    return records


@pytest.fixture()
def execd():
    return _Execd

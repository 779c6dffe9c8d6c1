"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

# Add project root to Python path so 'protokit' is findable without install,
# and the tests directory so 'sample_types' is importable by the CLI tests
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(Path(__file__).parent))

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every PROTOKIT_* variable and reset the cached config."""
    import os
    from protokit.config import reset_config

    for key in list(os.environ):
        if key.startswith("PROTOKIT_"):
            monkeypatch.delenv(key, raising=False)

    reset_config()
    yield monkeypatch
    reset_config()


@pytest.fixture
def make_template():
    """Factory for throwaway classes, so tests can mutate them freely."""
    def _make(name: str, bases: tuple = (), **members):
        return type(name, bases, members)
    return _make


@pytest.fixture
def capture_logs(caplog):
    """Capture protokit debug records."""
    import logging
    caplog.set_level(logging.DEBUG, logger="protokit")
    return caplog

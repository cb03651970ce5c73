"""Root test configuration: isolate tests from local config and clean runtime artifacts"""

from pathlib import Path

import pytest

from pagesmith.config import Settings


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_FILES = ["pagesmith.db", "test.db"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop any PAGESMITH_* variables from the developer's shell."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"PAGESMITH_{name.upper()}", raising=False)


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove DB files created during the test session."""
    yield
    for name in _CLEANUP_FILES:
        p = _PROJECT_ROOT / name
        if p.exists():
            p.unlink()

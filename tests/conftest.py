"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

SAMPLE_ENV = """\
# comment
KAKAO_NATIVE_APP_KEY=abc123

OTHER=ignored-key-unused
"""


@pytest.fixture
def write_env(tmp_path: Path):
    """Return a helper that writes .env content and returns its path."""

    def _write(content: str, name: str = ".env") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_env(write_env) -> Path:
    """Return the path to a .env holding the Kakao key and one unrelated key."""

    return write_env(SAMPLE_ENV)


@pytest.fixture
def warnings_seen() -> list[str]:
    """Collect warning messages in place of stderr."""

    return []

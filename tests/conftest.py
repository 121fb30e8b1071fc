"""Test configuration for the word counter."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Generator

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wordcount.config import Settings, reset_settings_cache  # noqa: E402
from wordcount.host.buffer import TextBufferHost  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against default settings."""

    for name in ("UNIT_LABEL", "STATUS_ICON", "LANGUAGE_IDS", "LOG_LEVEL"):
        monkeypatch.delenv(f"WORDCOUNT_{name}", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    """Return a test client for the FastAPI application."""

    from wordcount.app import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def settings() -> Settings:
    return Settings(unit_label="chars", status_icon="")


@pytest.fixture
def host() -> TextBufferHost:
    return TextBufferHost()


@pytest.fixture
def sample_markdown() -> str:
    return "\n".join(
        [
            "# Application (1000)",
            "## Motivation (20)",
            "I want to build tools.",
            "## Experience (10)",
            "- Five years of Python",
            "Plain closing paragraph.",
        ]
    )

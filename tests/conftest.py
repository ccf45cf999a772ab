"""Shared test fixtures for the ssrcheck test suite.

Detector tests run against an in-memory Source so they never touch disk or
the network. Source tests use tmp_path (local) or mock the GitHub client
functions (remote). HTTP tests drive the FastAPI app through ASGITransport.
"""

import logging
from collections.abc import AsyncGenerator, Sequence
from typing import Optional

import pytest
import structlog
from httpx import ASGITransport, AsyncClient

from ssrcheck.core.config import Settings, get_settings
from ssrcheck.main import create_app
from ssrcheck.sources.base import SOURCE_EXTENSIONS, Source


# ---------------------------------------------------------------------------
# In-memory Source
# ---------------------------------------------------------------------------


class MemorySource(Source):
    """Source over a {path: content} dict. Directories are implied by paths."""

    def __init__(self, files: Optional[dict[str, str]] = None) -> None:
        self.files = dict(files or {})
        self.searches: list[tuple[tuple[str, ...], Optional[str]]] = []

    async def list_entries(self) -> list[str]:
        entries: list[str] = []
        for path in sorted(self.files):
            parts = path.split("/")
            for depth in range(1, len(parts) + 1):
                entry = "/".join(parts[:depth])
                if entry not in entries:
                    entries.append(entry)
        return entries

    async def read_file(self, relative_path: str) -> Optional[str]:
        return self.files.get(relative_path)

    async def contains_any(
        self,
        tokens: Sequence[str],
        under: Optional[str] = None,
    ) -> bool:
        self.searches.append((tuple(tokens), under))
        prefix = f"{under}/" if under else ""
        for path, content in self.files.items():
            if not path.startswith(prefix) or not path.endswith(SOURCE_EXTENSIONS):
                continue
            if any(token in content for token in tokens):
                return True
        return False


@pytest.fixture
def make_source():
    """Factory fixture: build a MemorySource from a {path: content} dict."""
    return MemorySource


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer / CI environment variables out of Settings."""
    for name in (
        "GITHUB_TOKEN",
        "GITHUB_API_BASE",
        "DETECTION_PROFILE",
        "CHECK_RATE_LIMIT",
        "SENTRY_DSN",
        "CORS_ORIGINS",
        "PORT",
        "HOST",
        "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo logging configuration done by the code under test.

    The CLI points structlog at the stderr stream CliRunner provides, which
    is closed once the invocation returns.
    """
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)


# ---------------------------------------------------------------------------
# HTTP app
# ---------------------------------------------------------------------------


def _override_settings() -> Settings:
    return Settings(
        github_token="",
        detection_profile="extended",
        sentry_dsn="",
        debug=False,
    )


@pytest.fixture
def app():
    """Create the FastAPI app with settings overridden.

    The SlowAPI limiter keeps in-memory counters for the whole process, so
    they are reset before each test.
    """
    from ssrcheck.core.limiter import limiter

    limiter.reset()

    test_app = create_app()
    test_app.dependency_overrides[get_settings] = _override_settings
    return test_app


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client wired to the test app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

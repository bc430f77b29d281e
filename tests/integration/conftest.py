"""Shared fixtures for integration tests.

Uses the module-level ``app`` from ``moviedb.api.main`` with the
request session bound to the seeded in-memory catalog. Rate
limiting is switched off so tests can hammer the endpoints.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import Session, sessionmaker

from moviedb.api.database import get_db
from moviedb.api.dependencies.rate_limit import check_rate_limit
from moviedb.api.main import app
from tests.conftest import make_token

# ---------------------------------------------------------------------------
# Auto-mark all tests in this directory as "integration"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply ``@pytest.mark.integration`` to every test collected here."""
    integration_marker = pytest.mark.integration
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(integration_marker)


# ---------------------------------------------------------------------------
# Auth helpers
# ---------------------------------------------------------------------------


def auth_headers(email: str = "alice@example.com") -> dict[str, str]:
    """Authorization header carrying a fresh token for *email*."""
    return {"Authorization": f"Bearer {make_token(email)}"}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
async def client(session_factory: sessionmaker[Session]) -> AsyncGenerator[AsyncClient, None]:
    """Provide an ``httpx.AsyncClient`` wired to the real app.

    The app's database dependency is overridden to use the sample
    catalog, committing like the production dependency does.
    """

    def override_get_db() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[check_rate_limit] = lambda: None
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()

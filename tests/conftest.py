"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("CIRCLE_CI_API_TOKEN", "circle_test_token")
    monkeypatch.setenv("CI_COMMIT_REF_NAME", "feature/login")
    monkeypatch.setenv("CI_COMMIT_SHA", "abc123def456")
    monkeypatch.setenv("CI_PROJECT_NAME", "storefront")
    for name in (
        "CIRCLE_CI_API_LIMIT",
        "CIRCLE_CI_API_URL",
        "CIRCLE_CI_TIMEOUT",
        "WATCH_ITERATIONS",
        "WATCH_INTERVAL_SECONDS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx AsyncClient."""
    with patch("httpx.AsyncClient") as mock:
        client_instance = AsyncMock()
        mock.return_value.__aenter__.return_value = client_instance
        yield client_instance


@pytest.fixture
def mock_sleep():
    """Sleep replacement that returns immediately."""
    return AsyncMock()


@pytest.fixture
def mock_circleci():
    """Create a mock CircleCIClient that never finds a build."""
    client = MagicMock()
    client.find_build = AsyncMock(return_value=None)
    client.get_build_status = AsyncMock(return_value="running")
    client.get_build_url = AsyncMock(return_value="https://circleci.example.com/gh/org/storefront/42")
    client.get_build = AsyncMock()
    return client


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def circleci_client():
    """Create a CircleCIClient with test config."""
    from buildwatch.services.circleci.client import CircleCIClient
    return CircleCIClient(
        "https://circleci.example.com/api/v1.1/project/gh/org",
        "storefront",
        "circle_test_token",
    )


@pytest.fixture
def watch_config():
    """Create a WatchConfig with a small budget."""
    from buildwatch.core.config import WatchConfig
    return WatchConfig(
        token="circle_test_token",
        branch="feature/login",
        commit_sha="abc123def456",
        project="storefront",
        limit=10,
        max_iterations=5,
        interval=10.0,
    )

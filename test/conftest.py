"""
Test Configuration and Fixtures

This module provides:
- Environment setup (in-memory store backend, key prefix, test log dir)
- DI container reset between tests
- FastAPI TestClient against the test app

Architecture:
- Unit tests (test/**/unit/): pure domain functions and use cases with mocks or in-memory repos
- Integration tests (test/**/integration/): HTTP API through the test app with the memory backend
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and key_str_generator read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['STORE_BACKEND'] = 'memory'
    os.environ['TOTAL_SEATS'] = '35'
    os.environ['DEFAULT_SEAT_PRICE'] = '25.0'

    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    os.environ['KVROCKS_KEY_PREFIX'] = 'test_' if worker_id == 'master' else f'test_{worker_id}_'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator, Iterator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402


@pytest.fixture(autouse=True)
def reset_container() -> Iterator[None]:
    """Fresh in-memory store and mirror for every test."""
    container.reset_singletons()
    yield
    container.reset_singletons()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app) as test_client:
        yield test_client

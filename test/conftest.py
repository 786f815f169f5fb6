"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings
- Kvrocks isolation with worker-specific key prefixes
- DI container reset between tests

Architecture:
- Unit tests (test/**/unit/): in-memory ledger store and token ledger
- Integration tests: FastAPI TestClient, or a real Kvrocks when one is reachable
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are built at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    if worker_id == 'master':
        os.environ['KVROCKS_KEY_PREFIX'] = 'test_'
    else:
        os.environ['KVROCKS_KEY_PREFIX'] = f'test_{worker_id}_'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # The app under test always starts on the in-memory store
    os.environ['LEDGER_STORE_BACKEND'] = 'memory'


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    """Every test starts with a fresh ledger store and token ledger."""
    container.reset_singletons()
    yield
    container.reset_singletons()

"""Pytest configuration for async testing.

This configuration provides:
1. Test markers (unit, integration)
2. Automatic asyncio marking of coroutine tests
3. Shared fakes: mock logger, mocked ArangoDB handle, in-memory store
4. Casbin models built from the model files in tests/fixtures/
"""

import inspect
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest
from casbin.model import Model

from casbin_arango_adapter.infrastructure.authorization.arango_adapter import (
    ArangoAdapter,
)
from tests.utils.policy_store import FakeCursor, InMemoryPolicyStore

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)

FIXTURES_DIR = Path(__file__).parent / "fixtures"
RBAC_MODEL_PATH = str(FIXTURES_DIR / "rbac_model.conf")
RBAC_WITH_DOMAINS_MODEL_PATH = str(FIXTURES_DIR / "rbac_with_domains_model.conf")


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a live ArangoDB"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        function = getattr(item, "function", None)
        if function is not None and inspect.iscoroutinefunction(function):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Returns a Mock with the LoggerProtocol methods. bind()/with_context()
    return the same mock so bound loggers can be asserted on too.

    Usage:
        def test_something(mock_logger):
            adapter = ArangoAdapter(store, logger=mock_logger)
            ...
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    logger.critical = Mock()
    logger.bind = Mock(return_value=logger)
    logger.with_context = Mock(return_value=logger)
    return logger


@pytest.fixture
def mock_database():
    """Provide a mocked python-arango-async database handle.

    ``aql.execute`` is an AsyncMock returning an empty FakeCursor; tests set
    ``return_value`` (or ``side_effect``) to script query results.
    """
    database = MagicMock()
    database.aql.execute = AsyncMock(return_value=FakeCursor())
    return database


@pytest.fixture
def memory_store():
    """Provide an empty in-memory policy store."""
    return InMemoryPolicyStore()


@pytest.fixture
def adapter(memory_store, mock_logger):
    """Provide an ArangoAdapter over the in-memory store."""
    return ArangoAdapter(memory_store, logger=mock_logger)


def load_model(path: str) -> Model:
    """Build a Casbin model from a .conf file."""
    model = Model()
    model.load_model(path)
    return model


@pytest.fixture
def rbac_model():
    """Provide the basic RBAC model (p = sub, obj, act; g = _, _)."""
    return load_model(RBAC_MODEL_PATH)


@pytest.fixture
def rbac_with_domains_model():
    """Provide the RBAC-with-domains model (g = _, _, _)."""
    return load_model(RBAC_WITH_DOMAINS_MODEL_PATH)

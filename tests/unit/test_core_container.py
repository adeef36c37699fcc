"""Unit tests for the container (composition root).

Tests cover:
- get_logger() console adapter singleton, configured from settings
- get_arango_database() connection manager singleton
- create_adapter() collection bootstrap and adapter wiring
- init_enforcer()/get_enforcer()/shutdown_enforcer() lifecycle

Note:
    Factories use local imports inside the function, so we patch at the
    actual import location (e.g., casbin.AsyncEnforcer), not at the
    container module level.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from casbin_arango_adapter.core.container import (
    authorization,
    create_adapter,
    get_arango_database,
    get_enforcer,
    get_logger,
    init_enforcer,
    shutdown_enforcer,
)

AUTHZ = "casbin_arango_adapter.core.container.authorization"
INFRA = "casbin_arango_adapter.core.container.infrastructure"
ADAPTER_CLS = (
    "casbin_arango_adapter.infrastructure.authorization.arango_adapter.ArangoAdapter"
)


@pytest.fixture
def reset_enforcer():
    """Clear the enforcer singleton around each lifecycle test."""
    authorization._enforcer = None
    yield
    authorization._enforcer = None


@pytest.fixture
def mock_arango():
    """ArangoDatabase stand-in with awaitable methods."""
    arango = MagicMock()
    arango.connect = AsyncMock(return_value=MagicMock(name="handle"))
    arango.ensure_collection = AsyncMock(return_value=False)
    arango.close = AsyncMock()
    return arango


@pytest.fixture
def container_settings():
    """Patched settings used by the authorization factories."""
    with patch(f"{AUTHZ}.settings") as mock_settings:
        mock_settings.arango_url = "http://localhost:8529"
        mock_settings.arango_database = "_system"
        mock_settings.casbin_collection = "casbin"
        mock_settings.create_collection = True
        yield mock_settings


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger() container function."""

    def test_get_logger_uses_settings(self):
        """Test the console adapter gets format and level from settings."""
        get_logger.cache_clear()
        try:
            with patch(f"{INFRA}.settings") as mock_settings:
                mock_settings.use_json_logs = True
                mock_settings.log_level = "DEBUG"
                with patch(
                    "casbin_arango_adapter.infrastructure.logging.console_adapter."
                    "ConsoleAdapter"
                ) as adapter_cls:
                    logger = get_logger()

            adapter_cls.assert_called_once_with(use_json=True, level="DEBUG")
            assert logger is adapter_cls.return_value
        finally:
            get_logger.cache_clear()

    def test_get_logger_is_singleton(self):
        """Test get_logger() returns the same instance on multiple calls."""
        get_logger.cache_clear()
        try:
            assert get_logger() is get_logger()
        finally:
            get_logger.cache_clear()


@pytest.mark.unit
class TestGetArangoDatabase:
    """Test get_arango_database() container function."""

    def test_built_from_settings_without_connecting(self):
        """Test connection parameters come from settings."""
        get_arango_database.cache_clear()
        try:
            with patch(f"{INFRA}.settings") as mock_settings:
                mock_settings.arango_url = "http://arangodb:8529"
                mock_settings.arango_database = "authz"
                mock_settings.arango_username = "casbin"
                mock_settings.arango_password = "secret"

                database = get_arango_database()

            assert database.url == "http://arangodb:8529"
            assert database.database_name == "authz"
            assert database.is_connected is False
            assert get_arango_database() is database
        finally:
            get_arango_database.cache_clear()


@pytest.mark.unit
class TestCreateAdapter:
    """Test create_adapter() container function."""

    @pytest.mark.asyncio
    async def test_create_adapter_wires_database(
        self, container_settings, mock_arango, mock_logger
    ):
        """Test the adapter is built on the connected database handle."""
        with (
            patch(f"{AUTHZ}.get_arango_database", return_value=mock_arango),
            patch(f"{AUTHZ}.get_logger", return_value=mock_logger),
            patch(ADAPTER_CLS) as adapter_cls,
        ):
            adapter = await create_adapter()

        mock_arango.connect.assert_awaited_once()
        mock_arango.ensure_collection.assert_awaited_once_with("casbin")
        adapter_cls.from_database.assert_called_once_with(
            mock_arango.connect.return_value,
            collection="casbin",
            logger=mock_logger,
        )
        assert adapter is adapter_cls.from_database.return_value

    @pytest.mark.asyncio
    async def test_create_adapter_logs_created_collection(
        self, container_settings, mock_arango, mock_logger
    ):
        """Test a warning is logged when the collection had to be created."""
        mock_arango.ensure_collection.return_value = True

        with (
            patch(f"{AUTHZ}.get_arango_database", return_value=mock_arango),
            patch(f"{AUTHZ}.get_logger", return_value=mock_logger),
            patch(ADAPTER_CLS),
        ):
            await create_adapter()

        mock_logger.warning.assert_called_once_with(
            "policy_collection_created", collection="casbin"
        )

    @pytest.mark.asyncio
    async def test_create_adapter_without_bootstrap(
        self, container_settings, mock_arango, mock_logger
    ):
        """Test the collection is not touched when creation is disabled."""
        container_settings.create_collection = False

        with (
            patch(f"{AUTHZ}.get_arango_database", return_value=mock_arango),
            patch(f"{AUTHZ}.get_logger", return_value=mock_logger),
            patch(ADAPTER_CLS),
        ):
            await create_adapter()

        mock_arango.ensure_collection.assert_not_called()


@pytest.mark.unit
@pytest.mark.usefixtures("reset_enforcer")
class TestEnforcerLifecycle:
    """Test init_enforcer(), get_enforcer() and shutdown_enforcer()."""

    def test_get_enforcer_before_init_raises(self):
        """Test get_enforcer() requires init_enforcer() first."""
        with pytest.raises(RuntimeError, match="not initialized"):
            get_enforcer()

    @pytest.mark.asyncio
    async def test_init_enforcer_loads_policy(self, mock_logger):
        """Test the enforcer is built with the adapter and loads policy."""
        adapter = MagicMock()
        with (
            patch(f"{AUTHZ}.create_adapter", AsyncMock(return_value=adapter)),
            patch(f"{AUTHZ}.get_logger", return_value=mock_logger),
            patch("casbin.AsyncEnforcer") as enforcer_cls,
        ):
            enforcer_cls.return_value.load_policy = AsyncMock()

            enforcer = await init_enforcer("model.conf")

        enforcer_cls.assert_called_once_with("model.conf", adapter)
        enforcer.load_policy.assert_awaited_once()
        assert get_enforcer() is enforcer
        mock_logger.info.assert_called_once_with(
            "casbin_enforcer_initialized", model_path="model.conf"
        )

    @pytest.mark.asyncio
    async def test_init_enforcer_twice_raises(self, mock_logger):
        """Test the singleton cannot be initialized twice."""
        with (
            patch(f"{AUTHZ}.create_adapter", AsyncMock(return_value=MagicMock())),
            patch(f"{AUTHZ}.get_logger", return_value=mock_logger),
            patch("casbin.AsyncEnforcer") as enforcer_cls,
        ):
            enforcer_cls.return_value.load_policy = AsyncMock()
            await init_enforcer("model.conf")

            with pytest.raises(RuntimeError, match="already initialized"):
                await init_enforcer("model.conf")

    @pytest.mark.asyncio
    async def test_init_enforcer_load_failure_leaves_no_singleton(self, mock_logger):
        """Test a failed initial load does not publish the enforcer."""
        with (
            patch(f"{AUTHZ}.create_adapter", AsyncMock(return_value=MagicMock())),
            patch(f"{AUTHZ}.get_logger", return_value=mock_logger),
            patch("casbin.AsyncEnforcer") as enforcer_cls,
        ):
            enforcer_cls.return_value.load_policy = AsyncMock(
                side_effect=ConnectionError("down")
            )

            with pytest.raises(ConnectionError):
                await init_enforcer("model.conf")

        with pytest.raises(RuntimeError):
            get_enforcer()

    @pytest.mark.asyncio
    async def test_shutdown_enforcer(self, mock_arango):
        """Test shutdown drops the singleton and closes the client."""
        authorization._enforcer = MagicMock()

        with patch(f"{AUTHZ}.get_arango_database", return_value=mock_arango):
            await shutdown_enforcer()

        mock_arango.close.assert_awaited_once()
        with pytest.raises(RuntimeError):
            get_enforcer()

"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection and log format selection
- Validation (log level, collection name)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from casbin_arango_adapter.core.config import Settings, get_settings
from casbin_arango_adapter.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default values with an empty environment."""

    def test_defaults(self):
        """Test a local ArangoDB and the 'casbin' collection by default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.arango_url == "http://localhost:8529"
        assert settings.arango_database == "_system"
        assert settings.arango_username == "root"
        assert settings.arango_password == ""
        assert settings.casbin_collection == "casbin"
        assert settings.create_collection is True


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test values read from environment variables."""

    def test_reads_arango_settings(self):
        """Test connection settings come from the environment."""
        env_values = {
            "ARANGO_URL": "http://arangodb:8529",
            "ARANGO_DATABASE": "authz",
            "ARANGO_USERNAME": "casbin",
            "ARANGO_PASSWORD": "secret",
            "CASBIN_COLLECTION": "rules",
            "CREATE_COLLECTION": "false",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings(_env_file=None)

        assert settings.arango_url == "http://arangodb:8529"
        assert settings.arango_database == "authz"
        assert settings.arango_username == "casbin"
        assert settings.arango_password == "secret"
        assert settings.casbin_collection == "rules"
        assert settings.create_collection is False

    def test_environment_variable_names_are_case_insensitive(self):
        """Test lower-case variable names are accepted."""
        with patch.dict(os.environ, {"casbin_collection": "policies"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.casbin_collection == "policies"


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_is_upper_cased(self):
        """Test log level names are normalized."""
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"

    def test_log_level_invalid(self):
        """Test unknown log levels are rejected."""
        with patch.dict(os.environ, {"LOG_LEVEL": "VERBOSE"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

        assert any(
            "log_level must be one of" in str(error)
            for error in exc_info.value.errors()
        )

    def test_collection_name_stripped(self):
        """Test surrounding whitespace is removed from the collection name."""
        with patch.dict(os.environ, {"CASBIN_COLLECTION": "  rules  "}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.casbin_collection == "rules"

    def test_collection_name_blank(self):
        """Test a blank collection name is rejected."""
        with patch.dict(os.environ, {"CASBIN_COLLECTION": "   "}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

        assert any(
            "casbin_collection must not be empty" in str(error)
            for error in exc_info.value.errors()
        )

    def test_invalid_environment(self):
        """Test unknown environments are rejected."""
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


@pytest.mark.unit
class TestEnvironmentProperties:
    """Test environment detection properties."""

    @pytest.mark.parametrize(
        ("environment", "is_development", "is_production", "use_json_logs"),
        [
            ("development", True, False, False),
            ("testing", False, False, True),
            ("ci", False, False, True),
            ("production", False, True, True),
        ],
    )
    def test_properties(
        self, environment, is_development, is_production, use_json_logs
    ):
        """Test the derived flags for every environment."""
        with patch.dict(os.environ, {"ENVIRONMENT": environment}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.is_development is is_development
        assert settings.is_production is is_production
        assert settings.use_json_logs is use_json_logs


@pytest.mark.unit
class TestGetSettings:
    """Test the cached settings accessor."""

    def test_get_settings_is_cached(self):
        """Test repeated calls return the same instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()

    def test_cache_clear_reloads(self):
        """Test cache_clear() picks up environment changes."""
        get_settings.cache_clear()
        try:
            with patch.dict(os.environ, {"CASBIN_COLLECTION": "first"}):
                first = get_settings()
            get_settings.cache_clear()
            with patch.dict(os.environ, {"CASBIN_COLLECTION": "second"}):
                second = get_settings()

            assert first.casbin_collection == "first"
            assert second.casbin_collection == "second"
        finally:
            get_settings.cache_clear()

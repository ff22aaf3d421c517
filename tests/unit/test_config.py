"""
Unit tests for catalog configuration.
"""

import pytest

from httpstatus.config import CatalogConfig


class TestCatalogConfig:
    """Tests for CatalogConfig."""

    def test_defaults(self):
        """Test default values."""
        config = CatalogConfig()
        assert config.log_level == "WARNING"
        assert config.output_format == "text"
        assert config.include_aliases is False
        config.validate()

    def test_from_env_defaults(self, clean_env):
        """Test from_env() with nothing set."""
        assert CatalogConfig.from_env() == CatalogConfig()

    def test_from_env(self, clean_env):
        """Test reading every variable."""
        clean_env.setenv("HTTPSTATUS_LOG_LEVEL", "DEBUG")
        clean_env.setenv("HTTPSTATUS_OUTPUT", "json")
        clean_env.setenv("HTTPSTATUS_ALIASES", "yes")

        config = CatalogConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.output_format == "json"
        assert config.include_aliases is True

    def test_alias_flag_off_values(self, clean_env):
        """Test that anything but a true-ish value disables aliases."""
        clean_env.setenv("HTTPSTATUS_ALIASES", "0")
        assert CatalogConfig.from_env().include_aliases is False

    def test_lowercase_log_level_accepted(self):
        """Test that log level matching ignores case."""
        CatalogConfig(log_level="debug").validate()

    def test_invalid_log_level(self):
        """Test that unknown log levels fail fast."""
        with pytest.raises(ValueError, match="log level"):
            CatalogConfig(log_level="LOUD").validate()

    def test_invalid_output_format(self):
        """Test that unknown formats fail fast."""
        with pytest.raises(ValueError, match="output format"):
            CatalogConfig(output_format="yaml").validate()

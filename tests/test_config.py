"""
Tests for settings, logging setup and query parsing
"""

import logging

import pytest
from pydantic import ValidationError

from microshop.api_gateway.config import Settings as GatewaySettings
from microshop.users_service.config import Settings as UsersSettings
from microshop.shared.utils.logger import DEFAULT_LOGGING_CONFIG, load_logging_config, setup_logging
from microshop.shared.utils.validators import apply_limit, parse_limit, parse_number


class TestSettings:
    """Environment driven configuration"""

    def test_defaults(self):
        settings = UsersSettings()
        assert settings.service_name == "users-service"
        assert settings.port == 3001

    def test_backend_urls_from_environment(self, monkeypatch):
        monkeypatch.setenv("USERS_SERVICE_URL", "http://10.0.0.11:3001/")
        monkeypatch.setenv("PRODUCTS_SERVICE_URL", "http://10.0.0.12:3002")
        monkeypatch.setenv("PROXY_TIMEOUT", "2.5")

        settings = GatewaySettings()
        assert settings.users_service_url == "http://10.0.0.11:3001"
        assert settings.products_service_url == "http://10.0.0.12:3002"
        assert settings.proxy_timeout == 2.5

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("PROXY_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            GatewaySettings()

    def test_invalid_log_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")
        with pytest.raises(ValidationError):
            UsersSettings()


class TestLogging:
    """Logging configuration loading"""

    def test_default_config_when_no_file(self):
        config = load_logging_config(None)
        assert config == DEFAULT_LOGGING_CONFIG
        assert config is not DEFAULT_LOGGING_CONFIG

    def test_yaml_config(self, tmp_path):
        path = tmp_path / "logging.yml"
        path.write_text(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "root:\n"
            "  level: WARNING\n"
        )

        config = load_logging_config(str(path))
        assert config["root"]["level"] == "WARNING"

    def test_setup_logging_applies_level(self):
        setup_logging("test-service", log_level="debug", log_format="console")
        assert logging.getLogger().level == logging.DEBUG

        setup_logging("test-service", log_level="INFO")
        assert logging.getLogger().level == logging.INFO


class TestQueryParsing:
    """Lenient numeric parsing"""

    @pytest.mark.parametrize("value, expected", [
        (None, None), ("5", 5), ("5abc", 5), (" 3", 3), ("abc", None), ("", None), ("-2", -2)
    ])
    def test_parse_limit(self, value, expected):
        assert parse_limit(value) == expected

    @pytest.mark.parametrize("value, expected", [
        (None, None), ("100", 100.0), ("49.99", 49.99), ("1e2", 100.0), ("x", None), (".5", 0.5)
    ])
    def test_parse_number(self, value, expected):
        assert parse_number(value) == expected

    def test_apply_limit(self):
        assert apply_limit([1, 2, 3], None) == [1, 2, 3]
        assert apply_limit([1, 2, 3], 2) == [1, 2]
        assert apply_limit([1, 2, 3], -1) == []

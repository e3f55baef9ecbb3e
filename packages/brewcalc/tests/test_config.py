"""
Tests for brewcalc configuration and logging setup.
"""

import logging

import pytest

from brewcalc.config import BrewCalcConfig, get_config
from brewcalc.exceptions import ConfigurationError
from brewcalc.ibu import IbuMethod
from brewcalc.logging_config import setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("BREWCALC_IBU_METHOD", raising=False)
    monkeypatch.delenv("BREWCALC_LOG_LEVEL", raising=False)
    return monkeypatch


class TestGetConfig:
    """Tests for environment-driven configuration."""

    def test_defaults(self, clean_env):
        config = get_config()
        assert config.ibu_method == IbuMethod.TINSETH
        assert config.log_level == "WARNING"

    def test_ibu_method(self, clean_env):
        clean_env.setenv("BREWCALC_IBU_METHOD", "Garetz")
        assert get_config().ibu_method == IbuMethod.GARETZ

    def test_empty_ibu_method(self, clean_env):
        clean_env.setenv("BREWCALC_IBU_METHOD", "")
        assert get_config().ibu_method == IbuMethod.TINSETH

    def test_invalid_ibu_method(self, clean_env):
        clean_env.setenv("BREWCALC_IBU_METHOD", "bitterest")
        with pytest.raises(ConfigurationError, match="BREWCALC_IBU_METHOD"):
            get_config()

    def test_log_level(self, clean_env):
        clean_env.setenv("BREWCALC_LOG_LEVEL", "debug")
        config = get_config()
        assert config.log_level == "DEBUG"
        assert config.numeric_log_level == logging.DEBUG

    def test_invalid_log_level(self, clean_env):
        clean_env.setenv("BREWCALC_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigurationError, match="BREWCALC_LOG_LEVEL"):
            get_config()


class TestSetupLogging:
    """Tests for logging setup."""

    @pytest.fixture
    def fresh_root(self, monkeypatch):
        root = logging.RootLogger(logging.WARNING)
        library_logger = logging.getLogger("brewcalc")
        monkeypatch.setattr(logging, "root", root)
        monkeypatch.setattr(library_logger, "level", library_logger.level)
        return root

    def test_configures_library_logger(self, fresh_root, monkeypatch):
        monkeypatch.setattr(fresh_root, "handlers", [])

        setup_logging(BrewCalcConfig(log_level="DEBUG"))

        assert logging.getLogger("brewcalc").level == logging.DEBUG
        assert fresh_root.level == logging.DEBUG
        assert len(fresh_root.handlers) == 1

    def test_noop_when_configured(self, fresh_root, monkeypatch):
        handler = logging.NullHandler()
        monkeypatch.setattr(fresh_root, "handlers", [handler])
        library_level = logging.getLogger("brewcalc").level

        setup_logging(BrewCalcConfig(log_level="DEBUG"))

        assert logging.getLogger("brewcalc").level == library_level
        assert fresh_root.handlers == [handler]

    def test_reads_environment(self, fresh_root, clean_env):
        clean_env.setattr(fresh_root, "handlers", [])
        clean_env.setenv("BREWCALC_LOG_LEVEL", "INFO")

        setup_logging()

        assert logging.getLogger("brewcalc").level == logging.INFO

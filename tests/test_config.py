"""Tests for configuration and logging setup."""

import logging


class TestConfig:
    """Test environment configuration."""

    def test_defaults(self, monkeypatch):
        from marketlens import config

        for name in ("MARKETLENS_CHART_URL", "MARKETLENS_SEARCH_URL", "MARKETLENS_USER_AGENT", "MARKETLENS_TIMEOUT", "MARKETLENS_LOG_LEVEL", "MARKETLENS_LOG_DIR"):
            monkeypatch.delenv(name, raising=False)

        settings = config.get_settings()

        assert settings["chart_url"] == config.DEFAULT_CHART_URL
        assert settings["search_url"] == config.DEFAULT_SEARCH_URL
        assert settings["user_agent"] == config.DEFAULT_USER_AGENT
        assert settings["timeout"] is None
        assert settings["log_level"] == "WARNING"
        assert settings["log_dir"] is None

    def test_non_positive_timeout_is_ignored(self, monkeypatch):
        from marketlens import config

        monkeypatch.setenv("MARKETLENS_TIMEOUT", "0")

        assert config.get_timeout() is None

    def test_log_level(self, monkeypatch):
        from marketlens import config

        monkeypatch.setenv("MARKETLENS_LOG_LEVEL", "debug")
        assert config.get_log_level() == "DEBUG"

        monkeypatch.setenv("MARKETLENS_LOG_LEVEL", "loud")
        assert config.get_log_level() == "WARNING"

    def test_invalid_values_logged_under_package(self, monkeypatch, caplog):
        """Test that ignored settings are reported through the package logger."""
        from marketlens import config

        monkeypatch.setenv("MARKETLENS_TIMEOUT", "soon")

        with caplog.at_level(logging.WARNING, logger="marketlens.config"):
            assert config.get_timeout() is None

        assert [record.name for record in caplog.records] == ["marketlens.config"]
        assert "MARKETLENS_TIMEOUT" in caplog.records[0].getMessage()

    def test_log_dir(self, monkeypatch, tmp_path):
        from marketlens import config

        monkeypatch.setenv("MARKETLENS_LOG_DIR", str(tmp_path))
        assert config.get_log_dir() == str(tmp_path)

        monkeypatch.setenv("MARKETLENS_LOG_DIR", "")
        assert config.get_log_dir() is None

    def test_empty_user_agent_uses_default(self, monkeypatch):
        from marketlens import config

        monkeypatch.setenv("MARKETLENS_USER_AGENT", "")

        assert config.get_user_agent() == config.DEFAULT_USER_AGENT


class TestLogger:
    """Test logger setup."""

    def test_handlers_not_duplicated(self):
        from marketlens.logger import setup_logger

        setup_logger("marketlens", logging.INFO)
        logger = setup_logger("marketlens", logging.DEBUG)

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        from marketlens.logger import setup_logger

        logger = setup_logger("marketlens", logging.INFO, log_dir=str(tmp_path))
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        log_files = list(tmp_path.glob("marketlens_*.log"))
        assert len(log_files) == 1
        assert "hello" in log_files[0].read_text(encoding="utf-8")
        for handler in logger.handlers:
            handler.close()

    def test_file_handler_added_to_configured_logger(self, tmp_path):
        """Test that a log directory given later still gets a file handler."""
        from marketlens.logger import setup_logger

        setup_logger("marketlens", logging.INFO)
        logger = setup_logger("marketlens", logging.INFO, log_dir=str(tmp_path))

        assert sum(isinstance(handler, logging.FileHandler) for handler in logger.handlers) == 1
        assert len(logger.handlers) == 2

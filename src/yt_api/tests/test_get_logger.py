"""
Unit tests for the package logger setup.
"""

import logging
from logging.handlers import TimedRotatingFileHandler

import pytest
import pytz

from yt_api.utils import get_logger as logger_module
from yt_api.utils.get_logger import LocalFileFormatter, LocalTimeFormatter, get_logger, set_level

pytestmark = pytest.mark.unit


@pytest.fixture
def logger_names(monkeypatch):
    """Track loggers created by a test and drop them from the cache afterwards."""
    monkeypatch.setattr(logger_module, "Default_Level", logging.WARNING)
    saved = {
        name: (logger.level, [handler.level for handler in logger.handlers])
        for name, logger in logger_module.Logger_Cache.items()
    }
    names: list[str] = []
    yield names
    for name, (level, handler_levels) in saved.items():
        logger = logger_module.Logger_Cache[name]
        logger.setLevel(level)
        for handler, handler_level in zip(logger.handlers, handler_levels):
            handler.setLevel(handler_level)
    for name in names:
        logger = logger_module.Logger_Cache.pop(name, None)
        if logger is None:
            continue
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


class TestLevelFromEnv:
    def test_default_is_warning(self, monkeypatch):
        monkeypatch.delenv("YT_API_LOG_LEVEL", raising=False)

        assert logger_module._level_from_env() == logging.WARNING

    @pytest.mark.parametrize(("value", "expected"), [("debug", logging.DEBUG), ("ERROR", logging.ERROR)])
    def test_valid_level(self, monkeypatch, value, expected):
        monkeypatch.setenv("YT_API_LOG_LEVEL", value)

        assert logger_module._level_from_env() == expected

    def test_invalid_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("YT_API_LOG_LEVEL", "chatty")

        assert logger_module._level_from_env() == logging.WARNING


class TestGetLogger:
    def test_console_handler(self, logger_names):
        logger_names.append("yt_api.test.console")
        logger = get_logger("yt_api.test.console")

        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, LocalTimeFormatter)

    def test_cached(self, logger_names):
        logger_names.append("yt_api.test.cached")

        assert get_logger("yt_api.test.cached") is get_logger("yt_api.test.cached", level=logging.DEBUG)

    def test_file_handler(self, logger_names, monkeypatch, tmp_path):
        log_dir = tmp_path / "logs"
        monkeypatch.setattr(logger_module, "LOG_DIR", str(log_dir))
        logger_names.append("yt_api.test.file")

        logger = get_logger("yt_api.test.file", level=logging.INFO, filename="nested/requests.log")
        logger.info("getting https://www.googleapis.com/youtube/v3/search")
        for handler in logger.handlers:
            handler.flush()

        file_handlers = [h for h in logger.handlers if isinstance(h, TimedRotatingFileHandler)]
        assert len(file_handlers) == 1
        assert isinstance(file_handlers[0].formatter, LocalFileFormatter)
        log_file = log_dir / "requests.log"
        assert log_file.exists()
        assert "youtube/v3/search" in log_file.read_text()


class TestSetLevel:
    def test_updates_cached_loggers(self, logger_names):
        logger_names.append("yt_api.test.level")
        logger = get_logger("yt_api.test.level")

        set_level(logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert all(handler.level == logging.DEBUG for handler in logger.handlers)
        assert logger_module.Default_Level == logging.DEBUG

    def test_applies_to_new_loggers(self, logger_names):
        set_level(logging.ERROR)
        logger_names.append("yt_api.test.later")

        assert get_logger("yt_api.test.later").level == logging.ERROR


class TestLocalTimeFormatter:
    def test_uses_configured_timezone(self, monkeypatch):
        monkeypatch.setattr(logger_module, "TIMEZONE", pytz.timezone("Asia/Tokyo"))
        record = logging.LogRecord("yt_api.search", logging.INFO, __file__, 1, "decoded", None, None)
        # 2024-01-01 00:30:00 UTC
        record.created = 1704069000.0

        output = LocalTimeFormatter().format(record)

        assert output.startswith("09:30:00 AM")
        assert output.endswith("decoded")

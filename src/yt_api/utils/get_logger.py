import logging
import os
from datetime import UTC, datetime
from logging.handlers import TimedRotatingFileHandler

import pytz

"""
Package logger setup
logs to console and optionally to /tmp/log/yt_api
"""

LOG_DIR = "/tmp/log/yt_api"
TIMEZONE = pytz.timezone(os.getenv("YT_API_LOG_TIMEZONE", "UTC"))

Logger_Cache: dict[str, logging.Logger] = {}


def _level_from_env() -> int:
    level_name = os.getenv("YT_API_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


Default_Level = _level_from_env()


def set_level(level):
    """Change the level of every logger handed out so far and of future ones."""
    global Default_Level
    Default_Level = level
    for logger in Logger_Cache.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


class LocalTimeFormatter(logging.Formatter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.local_tz = TIMEZONE

    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC).replace(tzinfo=pytz.utc)
        local_time = utc_dt.astimezone(self.local_tz)

        record.local_time = local_time.strftime("%I:%M:%S %p")
        record.name = record.name[0:24]
        if record.levelno == logging.WARN:
            self._style._fmt = "%(local_time)-10s %(name)-24s:%(levelname)-8s =====> Warning %(message)s"
        elif record.levelno >= logging.ERROR:
            self._style._fmt = "\n%(local_time)-10s %(name)-24s =====> ERROR \n%(message)s\n---END ERROR ---\n"
        else:
            self._style._fmt = "%(local_time)-10s %(name)-24s:%(levelname)-8s %(message)s"

        return super().format(record)


class LocalFileFormatter(logging.Formatter):
    def format(self, record):
        utc_dt = datetime.fromtimestamp(record.created, UTC).replace(tzinfo=pytz.utc)

        record.local_time = utc_dt.strftime("%Y-%m-%d %H:%M:%S")
        if record.levelno >= logging.WARN:
            self._style._fmt = "\n===== ERROR Source: %(name)s =====\n%(local_time)s:%(message)s\n---END ERROR ---\n"
        else:
            self._style._fmt = "%(local_time)s:%(name)15s:%(levelname)s %(message)s"

        return super().format(record)


def get_logger(name: str, level=None, filename=None) -> logging.Logger:
    """Return a logger with the specified name."""
    if name in Logger_Cache:
        return Logger_Cache[name]

    if level is None:
        level = Default_Level
    logger = logging.getLogger(name)
    logger.setLevel(level)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(LocalTimeFormatter())
    logger.addHandler(ch)

    if filename:
        os.makedirs(LOG_DIR, exist_ok=True)
        fullpath = os.path.join(LOG_DIR, os.path.basename(filename))
        try:
            fh = TimedRotatingFileHandler(fullpath, when="midnight", backupCount=30)
        except FileNotFoundError:
            # rotation unavailable, plain file
            fh = logging.FileHandler(fullpath)
        fh.setLevel(level)
        fh.setFormatter(LocalFileFormatter())
        logger.addHandler(fh)

    logger.propagate = False
    Logger_Cache[name] = logger

    return logger

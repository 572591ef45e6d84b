"""
Runtime configuration for the YouTube Data API client.

Everything is read from the environment at call time so tests and callers
can override it with plain environment variables or a .env file.
"""

import os

from dotenv import find_dotenv, load_dotenv

from yt_api.utils.get_logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3"
DEFAULT_TIMEOUT = 30.0

# Environment variables, first match wins for the API key
API_KEY_ENV_VARS = ("YOUTUBE_API_KEY", "YT_API_KEY")
BASE_URL_ENV_VAR = "YOUTUBE_API_BASE_URL"
TIMEOUT_ENV_VAR = "YOUTUBE_API_TIMEOUT"


def load_env() -> bool:
    """Load environment variables from an env file.

    Uses the file named by ENV_FILE when set, otherwise the nearest .env
    found from the current working directory. Variables already present in
    the environment are not overridden.

    Returns:
        True if a file was loaded
    """
    env_file = os.getenv("ENV_FILE") or find_dotenv(usecwd=True)
    if not env_file:
        return False
    return load_dotenv(env_file)


def get_base_url() -> str:
    """Base URL of the Data API, without a trailing slash."""
    return os.getenv(BASE_URL_ENV_VAR, DEFAULT_BASE_URL).rstrip("/")


def get_default_timeout() -> float:
    """Total request timeout in seconds."""
    raw = os.getenv(TIMEOUT_ENV_VAR)
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {TIMEOUT_ENV_VAR}={raw!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning(f"Ignoring non-positive {TIMEOUT_ENV_VAR}={raw!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    return timeout

"""
YouTube Auth - API key value type.
The key is sent as the ``key`` query parameter on every request.
"""

import os
from dataclasses import dataclass

from yt_api.config import API_KEY_ENV_VARS, load_env
from yt_api.utils.get_logger import get_logger

logger = get_logger(__name__)


def mask_key(value: str) -> str:
    """Keep the first 4 characters of a credential, hide the rest."""
    if len(value) <= 4:
        return "****"
    return f"{value[:4]}****"


@dataclass(frozen=True, repr=False)
class ApiKey:
    """Immutable YouTube Data API key."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("YouTube API key must be a non-empty string")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ApiKey({mask_key(self.value)!r})"

    @classmethod
    def from_env(cls, name: str | None = None) -> "ApiKey":
        """Load the key from the environment (after reading any .env file).

        Args:
            name: Variable to read. Defaults to YOUTUBE_API_KEY, then YT_API_KEY.

        Raises:
            ValueError: If none of the variables is set
        """
        load_env()
        names = (name,) if name else API_KEY_ENV_VARS
        for env_name in names:
            value = os.getenv(env_name)
            if value and value.strip():
                logger.info(f"Loaded YouTube API key via env var {env_name}")
                return cls(value.strip())

        logger.error(f"{' / '.join(names)} not available in environment")
        raise ValueError(f"{' / '.join(names)} not available in environment")

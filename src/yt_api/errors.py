"""
Errors raised while sending a request to the YouTube Data API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yt_api.models import ApiErrorResponse


class YouTubeApiError(Exception):
    """Base class for failures of a request send."""


class TransportError(YouTubeApiError):
    """
    Raised when the GET could not complete.

    This can happen due to:
    - DNS or connection failures
    - The request timing out
    - The connection dropping while the body is read

    The aiohttp (or timeout) exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class DecodeError(YouTubeApiError):
    """
    Raised when the response body does not decode into the expected model.

    When YouTube answered with its error payload (quota exceeded, invalid
    key, bad parameter) ``api_error`` holds it decoded, so callers can
    branch on ``api_error.error.code`` or ``api_error.reason``.
    """

    def __init__(
        self,
        message: str,
        body: str = "",
        status: int | None = None,
        api_error: ApiErrorResponse | None = None,
    ):
        super().__init__(message)
        self.body = body
        self.status = status
        self.api_error = api_error

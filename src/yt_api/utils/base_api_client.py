"""
Base API Client - Shared request building and execution for every endpoint.
Endpoint builders inherit from BaseRequest and only declare their path,
default part, response model and setters.
"""

from collections.abc import Generator
from datetime import UTC, datetime
from enum import Enum
from typing import Any, ClassVar, Generic, Self, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError
from yarl import URL

from yt_api.auth import ApiKey, mask_key
from yt_api.config import get_base_url, get_default_timeout
from yt_api.errors import DecodeError, TransportError
from yt_api.models import ApiErrorResponse
from yt_api.utils.get_logger import get_logger

logger = get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

MAX_RESULTS_LIMIT = 50


def to_query_value(value: Any) -> str:
    """Render one parameter value the way the Data API expects it."""
    # bool first, it is also an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, list | tuple):
        return ",".join(to_query_value(v) for v in value)
    if hasattr(value, "to_query"):
        return value.to_query()
    return str(value)


class BaseRequest(Generic[ResponseT]):
    """
    Chainable accumulator of query parameters for one ``*.list`` endpoint.

    Setters return the builder. Awaiting the builder (or ``send()``) issues
    exactly one GET and decodes the body into ``response_model``.
    """

    path: ClassVar[str]
    default_part: ClassVar[str] = "snippet"
    response_model: ClassVar[type[BaseModel]]

    def __init__(self, key: ApiKey | str):
        self._key = key if isinstance(key, ApiKey) else ApiKey(key)
        self._part = self.default_part
        self._params: dict[str, Any] = {}
        self._timeout: float | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._redacted_params()!r})"

    def _set(self, name: str, value: Any) -> Self:
        """Store a parameter under its wire name; None unsets it."""
        if value is None:
            self._params.pop(name, None)
        else:
            self._params[name] = value
        return self

    # -------------------------------
    # Parameters shared by every endpoint
    # -------------------------------
    def part(self, *parts: str) -> Self:
        """Resource parts to return, e.g. ``part("snippet", "statistics")``."""
        if not parts:
            raise ValueError("part requires at least one resource part")
        self._part = ",".join(parts)
        return self

    def max_results(self, max_results: int | None) -> Self:
        if max_results is not None and not 0 <= max_results <= MAX_RESULTS_LIMIT:
            raise ValueError(
                f"max_results must be between 0 and {MAX_RESULTS_LIMIT}, got {max_results}"
            )
        return self._set("maxResults", max_results)

    def page_token(self, page_token: str | None) -> Self:
        return self._set("pageToken", page_token)

    def timeout(self, seconds: float | None) -> Self:
        """Total request timeout in seconds; None uses the configured default."""
        if seconds is not None and seconds <= 0:
            raise ValueError(f"timeout must be positive, got {seconds}")
        self._timeout = seconds
        return self

    # -------------------------------
    # Query building
    # -------------------------------
    @property
    def endpoint(self) -> str:
        return f"{get_base_url()}/{self.path}"

    def params(self) -> dict[str, str]:
        """Query parameters exactly as they will be sent, key first."""
        params = {"key": str(self._key), "part": self._part}
        params.update({name: to_query_value(value) for name, value in self._params.items()})
        return params

    @property
    def url(self) -> str:
        """Full request URL with the URL-encoded query string."""
        return str(URL(self.endpoint).with_query(self.params()))

    def _redacted_params(self) -> dict[str, str]:
        params = self.params()
        params["key"] = mask_key(params["key"])
        return params

    def _redacted_url(self) -> str:
        return str(URL(self.endpoint).with_query(self._redacted_params()))

    # -------------------------------
    # Execution
    # -------------------------------
    @classmethod
    def decode(cls, body: str | bytes, status: int | None = None) -> ResponseT:
        """Decode a response body into the endpoint's response model.

        Raw bytes are validated as UTF-8 JSON; invalid UTF-8 is a decode failure.

        Raises:
            DecodeError: If the body is not JSON or does not match the model
        """
        try:
            return cls.response_model.model_validate_json(body)  # type: ignore[return-value]
        except ValidationError as e:
            api_error = _parse_api_error(body)
            if api_error is not None:
                message = (
                    f"YouTube API error {api_error.error.code} "
                    f"({api_error.reason or 'unknown'}): {api_error.error.message}"
                )
            else:
                message = f"failed to deserialize {cls.response_model.__name__}: {e}"
            logger.warning(f"{message} (status={status})")
            if isinstance(body, bytes):
                body = body.decode("utf-8", errors="replace")
            raise DecodeError(message, body=body, status=status, api_error=api_error) from e

    async def send(self) -> ResponseT:
        """Issue the GET request and decode the response.

        Raises:
            TransportError: If the request could not complete
            DecodeError: If the body does not decode into the response model
        """
        redacted_url = self._redacted_url()
        logger.debug(f"getting {redacted_url}")

        request_timeout = aiohttp.ClientTimeout(total=self._timeout or get_default_timeout())
        try:
            async with (
                aiohttp.ClientSession(timeout=request_timeout) as session,
                session.get(self.endpoint, params=self.params()) as response,
            ):
                status = response.status
                body = await response.read()
        except (TimeoutError, aiohttp.ClientError) as e:
            error_detail = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
            logger.error(f"Error making request to {redacted_url}: {error_detail}")
            raise TransportError(
                f"failed to connect to the api: {error_detail}", url=redacted_url
            ) from e

        result = self.decode(body, status)
        logger.debug(f"decoded {type(result).__name__} from {self.path} (status={status})")
        return result

    def __await__(self) -> Generator[Any, None, ResponseT]:
        return self.send().__await__()


def _parse_api_error(body: str | bytes) -> ApiErrorResponse | None:
    try:
        return ApiErrorResponse.model_validate_json(body)
    except ValidationError:
        return None

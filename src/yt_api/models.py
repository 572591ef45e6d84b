"""
Shared YouTube Models - Pydantic models reused by every endpoint.
Follows Pydantic 2.0 patterns; absent JSON fields stay None.
"""

from yt_api.utils.pydantic_tools import YouTubeModel


class PageInfo(YouTubeModel):
    """Paging counters of a list response."""

    total_results: int
    results_per_page: int


class Thumbnail(YouTubeModel):
    url: str
    width: int | None = None
    height: int | None = None


class Thumbnails(YouTubeModel):
    """Thumbnail images keyed by resolution."""

    default: Thumbnail | None = None
    medium: Thumbnail | None = None
    high: Thumbnail | None = None
    standard: Thumbnail | None = None
    maxres: Thumbnail | None = None

    def best(self) -> Thumbnail | None:
        """Highest resolution thumbnail present, if any."""
        for quality in ("maxres", "standard", "high", "medium", "default"):
            thumbnail = getattr(self, quality)
            if thumbnail is not None:
                return thumbnail
        return None


class Localized(YouTubeModel):
    title: str | None = None
    description: str | None = None


class ListResponse(YouTubeModel):
    """Envelope fields shared by every ``*.list`` response."""

    kind: str
    etag: str
    next_page_token: str | None = None
    prev_page_token: str | None = None
    page_info: PageInfo


# -------------------------------
# Error payload
# -------------------------------
class ApiErrorDetail(YouTubeModel):
    message: str | None = None
    domain: str | None = None
    reason: str | None = None
    location: str | None = None
    location_type: str | None = None


class ApiError(YouTubeModel):
    code: int
    message: str
    status: str | None = None
    errors: list[ApiErrorDetail] | None = None


class ApiErrorResponse(YouTubeModel):
    """YouTube's ``{"error": {...}}`` body returned on failed requests."""

    error: ApiError

    @property
    def reason(self) -> str | None:
        """Reason of the first error detail (e.g. ``quotaExceeded``)."""
        if self.error.errors:
            return self.error.errors[0].reason
        return None

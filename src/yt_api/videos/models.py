"""
Video Models - Parameter enums and response models for ``videos.list``.
"""

from datetime import datetime
from enum import Enum

from yt_api.models import ListResponse, Localized, Thumbnails
from yt_api.utils.pydantic_tools import YouTubeModel


class Chart(str, Enum):
    MOST_POPULAR = "mostPopular"


class Rating(str, Enum):
    LIKE = "like"
    DISLIKE = "dislike"


class VideoSnippet(YouTubeModel):
    published_at: datetime | None = None
    channel_id: str | None = None
    title: str | None = None
    description: str | None = None
    thumbnails: Thumbnails | None = None
    channel_title: str | None = None
    tags: list[str] | None = None
    category_id: str | None = None
    live_broadcast_content: str | None = None
    default_language: str | None = None
    localized: Localized | None = None


class VideoContentDetails(YouTubeModel):
    duration: str | None = None  # ISO 8601, e.g. PT4M13S
    dimension: str | None = None
    definition: str | None = None
    caption: str | None = None
    licensed_content: bool | None = None


class VideoStatistics(YouTubeModel):
    """Counters; YouTube sends them as strings, they decode to int."""

    view_count: int | None = None
    like_count: int | None = None
    comment_count: int | None = None
    favorite_count: int | None = None


class VideoStatus(YouTubeModel):
    upload_status: str | None = None
    privacy_status: str | None = None
    license: str | None = None
    embeddable: bool | None = None
    made_for_kids: bool | None = None


class Video(YouTubeModel):
    kind: str
    etag: str
    id: str
    snippet: VideoSnippet | None = None
    content_details: VideoContentDetails | None = None
    statistics: VideoStatistics | None = None
    status: VideoStatus | None = None

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.id}"


class VideoListResponse(ListResponse):
    """Model for a ``videos.list`` response."""

    items: list[Video]

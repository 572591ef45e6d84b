"""
Search Models - Parameter enums and response models for ``search.list``.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from yt_api.models import ListResponse, Thumbnails
from yt_api.utils.pydantic_tools import YouTubeModel


# -------------------------------
# Request parameter values
# -------------------------------
class ChannelType(str, Enum):
    ANY = "any"
    SHOW = "show"


class EventType(str, Enum):
    COMPLETED = "completed"
    LIVE = "live"
    UPCOMING = "upcoming"


class Order(str, Enum):
    DATE = "date"
    RATING = "rating"
    RELEVANCE = "relevance"
    TITLE = "title"
    VIDEO_COUNT = "videoCount"
    VIEW_COUNT = "viewCount"


class SafeSearch(str, Enum):
    MODERATE = "moderate"
    NONE = "none"
    STRICT = "strict"


class ItemType(str, Enum):
    CHANNEL = "channel"
    PLAYLIST = "playlist"
    VIDEO = "video"


class VideoCaption(str, Enum):
    ANY = "any"
    CLOSED_CAPTION = "closedCaption"
    NONE = "none"


class VideoDefinition(str, Enum):
    ANY = "any"
    HIGH = "high"
    STANDARD = "standard"


class VideoDimension(str, Enum):
    TWO_D = "2d"
    THREE_D = "3d"
    ANY = "any"


class VideoDuration(str, Enum):
    ANY = "any"
    LONG = "long"
    MEDIUM = "medium"
    SHORT = "short"


class VideoLicense(str, Enum):
    ANY = "any"
    CREATIVE_COMMON = "creativeCommon"
    YOUTUBE = "youtube"


class VideoType(str, Enum):
    ANY = "any"
    EPISODE = "episode"
    MOVIE = "movie"


@dataclass(frozen=True)
class VideoLocation:
    """Center of a geographic search, sent as ``latitude,longitude``."""

    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"latitude must be between -90 and 90, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"longitude must be between -180 and 180, got {self.longitude}")

    def to_query(self) -> str:
        return f"{self.latitude},{self.longitude}"


# -------------------------------
# Response models
# -------------------------------
class SearchResultId(YouTubeModel):
    """Identifier of a search hit; which id is set depends on ``kind``."""

    kind: str
    video_id: str | None = None
    channel_id: str | None = None
    playlist_id: str | None = None

    @property
    def value(self) -> str | None:
        return self.video_id or self.channel_id or self.playlist_id


class SearchSnippet(YouTubeModel):
    published_at: datetime | None = None
    channel_id: str | None = None
    title: str | None = None
    description: str | None = None
    thumbnails: Thumbnails | None = None
    channel_title: str | None = None
    live_broadcast_content: str | None = None


class SearchResult(YouTubeModel):
    kind: str
    etag: str
    id: SearchResultId
    snippet: SearchSnippet | None = None


class SearchListResponse(ListResponse):
    """Model for a ``search.list`` response."""

    region_code: str | None = None
    items: list[SearchResult]

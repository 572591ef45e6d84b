"""
Playlist Models - Response models for ``playlists.list``.
"""

from datetime import datetime

from yt_api.models import ListResponse, Localized, Thumbnails
from yt_api.utils.pydantic_tools import YouTubeModel


class PlaylistSnippet(YouTubeModel):
    published_at: datetime | None = None
    channel_id: str | None = None
    title: str | None = None
    description: str | None = None
    thumbnails: Thumbnails | None = None
    channel_title: str | None = None
    default_language: str | None = None
    localized: Localized | None = None
    tags: list[str] | None = None


class PlaylistStatus(YouTubeModel):
    privacy_status: str | None = None


class PlaylistContentDetails(YouTubeModel):
    item_count: int | None = None


class PlaylistPlayer(YouTubeModel):
    embed_html: str | None = None


class Playlist(YouTubeModel):
    """A playlist resource; which sections are set depends on ``part``."""

    kind: str
    etag: str
    id: str
    snippet: PlaylistSnippet | None = None
    status: PlaylistStatus | None = None
    content_details: PlaylistContentDetails | None = None
    player: PlaylistPlayer | None = None
    localizations: dict[str, Localized] | None = None


class PlaylistListResponse(ListResponse):
    """Model for a ``playlists.list`` response."""

    items: list[Playlist]

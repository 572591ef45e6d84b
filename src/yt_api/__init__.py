"""
yt_api - Async client for the YouTube Data API v3.

This package provides:
- ApiKey: credential value sent with every request
- SearchRequest / PlaylistRequest / VideosRequest: chainable builders,
  awaiting one issues a single GET and returns the decoded response
- Models: Pydantic models for the list responses
- TransportError / DecodeError: failures surfaced by a request
"""

from yt_api.auth import ApiKey
from yt_api.errors import DecodeError, TransportError, YouTubeApiError
from yt_api.models import (
    ApiError,
    ApiErrorDetail,
    ApiErrorResponse,
    Localized,
    PageInfo,
    Thumbnail,
    Thumbnails,
)
from yt_api.playlists import Playlist, PlaylistListResponse, PlaylistRequest
from yt_api.search import (
    ChannelType,
    EventType,
    ItemType,
    Order,
    SafeSearch,
    SearchListResponse,
    SearchRequest,
    SearchResult,
    VideoCaption,
    VideoDefinition,
    VideoDimension,
    VideoDuration,
    VideoLicense,
    VideoLocation,
    VideoType,
)
from yt_api.videos import Chart, Rating, Video, VideoListResponse, VideosRequest

__version__ = "0.4.0"

__all__ = [
    # Auth
    "ApiKey",
    # Errors
    "YouTubeApiError",
    "TransportError",
    "DecodeError",
    # Builders
    "SearchRequest",
    "PlaylistRequest",
    "VideosRequest",
    # Search parameter values
    "ChannelType",
    "EventType",
    "ItemType",
    "Order",
    "SafeSearch",
    "VideoCaption",
    "VideoDefinition",
    "VideoDimension",
    "VideoDuration",
    "VideoLicense",
    "VideoLocation",
    "VideoType",
    # Videos parameter values
    "Chart",
    "Rating",
    # Models
    "ApiError",
    "ApiErrorDetail",
    "ApiErrorResponse",
    "Localized",
    "PageInfo",
    "Thumbnail",
    "Thumbnails",
    "SearchListResponse",
    "SearchResult",
    "PlaylistListResponse",
    "Playlist",
    "VideoListResponse",
    "Video",
]

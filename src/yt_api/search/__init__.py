"""
Search Package - ``search.list`` builder and models.
"""

from yt_api.search.core import SearchRequest
from yt_api.search.models import (
    ChannelType,
    EventType,
    ItemType,
    Order,
    SafeSearch,
    SearchListResponse,
    SearchResult,
    SearchResultId,
    SearchSnippet,
    VideoCaption,
    VideoDefinition,
    VideoDimension,
    VideoDuration,
    VideoLicense,
    VideoLocation,
    VideoType,
)

__all__ = [
    # Core
    "SearchRequest",
    # Parameter values
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
    # Models
    "SearchListResponse",
    "SearchResult",
    "SearchResultId",
    "SearchSnippet",
]

"""
Videos Package - ``videos.list`` builder and models.
"""

from yt_api.videos.core import VideosRequest
from yt_api.videos.models import (
    Chart,
    Rating,
    Video,
    VideoContentDetails,
    VideoListResponse,
    VideoSnippet,
    VideoStatistics,
    VideoStatus,
)

__all__ = [
    "VideosRequest",
    "Chart",
    "Rating",
    "Video",
    "VideoContentDetails",
    "VideoListResponse",
    "VideoSnippet",
    "VideoStatistics",
    "VideoStatus",
]

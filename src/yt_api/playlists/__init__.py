"""
Playlists Package - ``playlists.list`` builder and models.
"""

from yt_api.playlists.core import PlaylistRequest
from yt_api.playlists.models import (
    Playlist,
    PlaylistContentDetails,
    PlaylistListResponse,
    PlaylistPlayer,
    PlaylistSnippet,
    PlaylistStatus,
)

__all__ = [
    "PlaylistRequest",
    "Playlist",
    "PlaylistContentDetails",
    "PlaylistListResponse",
    "PlaylistPlayer",
    "PlaylistSnippet",
    "PlaylistStatus",
]

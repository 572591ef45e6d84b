"""
Playlist Core - Request builder for the ``playlists.list`` endpoint.
"""

from typing import Self

from yt_api.playlists.models import PlaylistListResponse
from yt_api.utils.base_api_client import BaseRequest


class PlaylistRequest(BaseRequest[PlaylistListResponse]):
    """
    Builder for ``playlists.list``.

    YouTube requires exactly one of ``channel_id``, ``id`` or ``mine``; the
    server reports the error when none is set.
    """

    path = "playlists"
    default_part = "snippet"
    response_model = PlaylistListResponse

    def channel_id(self, channel_id: str | None) -> Self:
        return self._set("channelId", channel_id)

    def id(self, *playlist_ids: str) -> Self:
        """One or more playlist ids; no arguments unsets the filter."""
        return self._set("id", list(playlist_ids) or None)

    def mine(self, mine: bool | None) -> Self:
        return self._set("mine", mine)

    def hl(self, language: str | None) -> Self:
        """Language of the ``localized`` snippet fields."""
        return self._set("hl", language)

    def on_behalf_of_content_owner(self, content_owner: str | None) -> Self:
        return self._set("onBehalfOfContentOwner", content_owner)

    def on_behalf_of_content_owner_channel(self, channel_id: str | None) -> Self:
        return self._set("onBehalfOfContentOwnerChannel", channel_id)

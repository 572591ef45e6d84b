"""
Search Core - Request builder for the ``search.list`` endpoint.

Costs 100 quota units per call, whatever the number of results.
"""

from datetime import datetime
from typing import Self

from yt_api.search.models import (
    ChannelType,
    EventType,
    ItemType,
    Order,
    SafeSearch,
    SearchListResponse,
    VideoCaption,
    VideoDefinition,
    VideoDimension,
    VideoDuration,
    VideoLicense,
    VideoLocation,
    VideoType,
)
from yt_api.utils.base_api_client import BaseRequest


class SearchRequest(BaseRequest[SearchListResponse]):
    """
    Builder for ``search.list``.

    Example:
        response = await SearchRequest(key).q("rust lang").item_type(ItemType.VIDEO)
    """

    path = "search"
    default_part = "snippet"
    response_model = SearchListResponse

    def q(self, query: str | None) -> Self:
        """Search terms; supports the ``-`` (NOT) and ``|`` (OR) operators."""
        return self._set("q", query)

    def channel_id(self, channel_id: str | None) -> Self:
        return self._set("channelId", channel_id)

    def channel_type(self, channel_type: ChannelType | None) -> Self:
        return self._set("channelType", channel_type)

    def event_type(self, event_type: EventType | None) -> Self:
        """Restrict to broadcast events; requires ``item_type(ItemType.VIDEO)``."""
        return self._set("eventType", event_type)

    def for_content_owner(self, for_content_owner: bool | None) -> Self:
        return self._set("forContentOwner", for_content_owner)

    def for_developer(self, for_developer: bool | None) -> Self:
        return self._set("forDeveloper", for_developer)

    def for_mine(self, for_mine: bool | None) -> Self:
        return self._set("forMine", for_mine)

    def location(self, location: VideoLocation | None) -> Self:
        """Geographic center; YouTube requires ``location_radius`` alongside it."""
        return self._set("location", location)

    def location_radius(self, radius: str | None) -> Self:
        """Radius such as ``"1500m"``, ``"5km"`` or ``"10mi"``."""
        return self._set("locationRadius", radius)

    def on_behalf_of_content_owner(self, content_owner: str | None) -> Self:
        return self._set("onBehalfOfContentOwner", content_owner)

    def order(self, order: Order | None) -> Self:
        return self._set("order", order)

    def published_after(self, published_after: datetime | None) -> Self:
        return self._set("publishedAfter", published_after)

    def published_before(self, published_before: datetime | None) -> Self:
        return self._set("publishedBefore", published_before)

    def region_code(self, region_code: str | None) -> Self:
        """ISO 3166-1 alpha-2 country code."""
        return self._set("regionCode", region_code)

    def relevance_language(self, language: str | None) -> Self:
        """ISO 639-1 two-letter language code."""
        return self._set("relevanceLanguage", language)

    def safe_search(self, safe_search: SafeSearch | None) -> Self:
        return self._set("safeSearch", safe_search)

    def topic_id(self, topic_id: str | None) -> Self:
        return self._set("topicId", topic_id)

    def item_type(self, *item_types: ItemType) -> Self:
        """Resource types to return (``type``); no arguments unsets the filter."""
        return self._set("type", list(item_types) or None)

    def video_caption(self, video_caption: VideoCaption | None) -> Self:
        return self._set("videoCaption", video_caption)

    def video_category_id(self, category_id: str | None) -> Self:
        return self._set("videoCategoryId", category_id)

    def video_definition(self, video_definition: VideoDefinition | None) -> Self:
        return self._set("videoDefinition", video_definition)

    def video_dimension(self, video_dimension: VideoDimension | None) -> Self:
        return self._set("videoDimension", video_dimension)

    def video_duration(self, video_duration: VideoDuration | None) -> Self:
        return self._set("videoDuration", video_duration)

    def video_embeddable(self, video_embeddable: bool | None) -> Self:
        return self._set("videoEmbeddable", video_embeddable)

    def video_license(self, video_license: VideoLicense | None) -> Self:
        return self._set("videoLicense", video_license)

    def video_syndicated(self, video_syndicated: bool | None) -> Self:
        return self._set("videoSyndicated", video_syndicated)

    def video_type(self, video_type: VideoType | None) -> Self:
        return self._set("videoType", video_type)

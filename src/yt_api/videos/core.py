"""
Video Core - Request builder for the ``videos.list`` endpoint.
"""

from typing import Self

from yt_api.utils.base_api_client import BaseRequest
from yt_api.videos.models import Chart, Rating, VideoListResponse


class VideosRequest(BaseRequest[VideoListResponse]):
    """Builder for ``videos.list``; costs 1 quota unit per call."""

    path = "videos"
    default_part = "snippet,contentDetails"
    response_model = VideoListResponse

    def id(self, *video_ids: str) -> Self:
        """One or more video ids; no arguments unsets the filter."""
        return self._set("id", list(video_ids) or None)

    def chart(self, chart: Chart | None) -> Self:
        return self._set("chart", chart)

    def hl(self, language: str | None) -> Self:
        return self._set("hl", language)

    def max_height(self, max_height: int | None) -> Self:
        return self._set("maxHeight", max_height)

    def max_width(self, max_width: int | None) -> Self:
        return self._set("maxWidth", max_width)

    def my_rating(self, rating: Rating | None) -> Self:
        return self._set("myRating", rating)

    def region_code(self, region_code: str | None) -> Self:
        """Only used together with ``chart``."""
        return self._set("regionCode", region_code)

    def video_category_id(self, category_id: str | None) -> Self:
        """Only used together with ``chart``."""
        return self._set("videoCategoryId", category_id)

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class YouTubeModel(BaseModel):
    """Base model for YouTube Data API payloads.

    Attributes are snake_case, the wire names are YouTube's camelCase.
    Fields YouTube did not send stay ``None``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json(self, **kwargs: Any) -> str:
        """Serialize back to YouTube's camelCase JSON, dropping absent fields."""
        kwargs.setdefault("by_alias", True)
        kwargs.setdefault("exclude_none", True)
        return self.model_dump_json(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Dump as a plain dict using YouTube's field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

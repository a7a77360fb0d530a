"""
Pydantic model for gallery view requests.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.models.context import Depth
from core.utils.constants import (
    JSON_FLAG_PARAMS,
    PARAM_ALBUM,
    PARAM_IMAGE,
    PARAM_SEARCH_WORDS,
)


class GalleryViewRequest(BaseModel):
    """
    Validation model for the gallery JSON view.

    Context priority: words (search) > image > album > gallery root.
    The sort and sortdirection parameters are not read: search results
    are always newest first.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    depth: Depth = Field(
        default=Depth.SHALLOW,
        description="Listing depth, from ?json=deep or ?api=deep",
    )

    words: str | None = Field(
        None,
        description="Search words; presence (even empty) selects the search context",
    )

    album: str | None = Field(
        None,
        description="Album path, e.g. travel/paris",
    )

    image: str | None = Field(
        None,
        description="Image filename inside album, or a full album-relative image path",
    )

    @field_validator("album", "image")
    @classmethod
    def normalize_path(cls, value: str | None) -> str | None:
        """Strip surrounding slashes and reject relative segments.

        Input:  "/travel/paris/"
        Output: "travel/paris"
        """
        if value is None:
            return None

        path = value.strip("/")
        if not path:
            return None

        segments = path.split("/")
        if any(segment in ("", ".", "..") for segment in segments):
            raise ValueError(f"Invalid path '{value}'")

        return path

    @property
    def image_path(self) -> str | None:
        """Album-relative path of the requested image."""
        if self.image is None:
            return None
        if self.album and "/" not in self.image:
            return f"{self.album}/{self.image}"
        return self.image

    @classmethod
    def params_from_query(cls, query: dict[str, str]) -> dict[str, Any]:
        """Map raw query string parameters onto model fields."""
        flag = next((query[name] for name in JSON_FLAG_PARAMS if name in query), None)

        return {
            "depth": Depth.from_flag(flag),
            "words": query.get(PARAM_SEARCH_WORDS),
            "album": query.get(PARAM_ALBUM),
            "image": query.get(PARAM_IMAGE),
        }

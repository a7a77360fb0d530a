"""Catalog record models for albums and images."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from core.utils.constants import ROOT_PARENT


class AlbumRecord(BaseModel):
    """Album as stored in the gallery catalog."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    path: StrictStr = Field(..., min_length=1, description="Album path, e.g. travel/paris")
    parent: StrictStr = Field(ROOT_PARENT, description="Parent album path, '/' for top-level albums")
    sort_order: int = Field(0, description="Position among sibling albums")

    title: str | None = Field(None, description="Album title")
    description: str | None = Field(None, description="Album description")
    date: str | None = Field(None, description="Album date (YYYY-MM-DD HH:MM:SS)")
    updated_date: str | None = Field(
        None,
        description="Last update date (YYYY-MM-DD HH:MM:SS); derived from images when unset",
    )
    custom_data: str | None = Field(None, description="Free-form custom data")
    show: bool = Field(True, description="False for unpublished albums")
    thumb: str | None = Field(None, description="Path of the image used as album thumbnail")

    @property
    def is_top_level(self) -> bool:
        return self.parent == ROOT_PARENT


class ImageRecord(BaseModel):
    """Image as stored in the gallery catalog."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    path: StrictStr = Field(..., min_length=1, description="Image path, e.g. travel/paris/eiffel.jpg")
    parent: StrictStr = Field(..., min_length=1, description="Path of the album holding the image")
    sort_order: int = Field(0, description="Position within the album")

    title: str | None = None
    description: str | None = None
    date: str | None = Field(None, description="Image date (YYYY-MM-DD HH:MM:SS)")
    width: int = 0
    height: int = 0

    credit: str | None = None
    copyright: str | None = None
    location: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    tags: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict, description="Raw EXIF/IPTC metadata")

    @property
    def filename(self) -> str:
        return self.path.rsplit("/", 1)[-1]

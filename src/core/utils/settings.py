"""Gallery display options loaded from the environment."""

import os

from pydantic import BaseModel, ConfigDict, Field

from core.utils.constants import (
    DEFAULT_IMAGE_SIZE,
    DEFAULT_THUMB_SIZE,
    ENV_GALLERY_BASE_URL,
    ENV_GALLERY_DESCRIPTION,
    ENV_GALLERY_IMAGE_SIZE,
    ENV_GALLERY_THUMB_SIZE,
    ENV_GALLERY_TITLE,
)


class GalleryOptions(BaseModel):
    """Site-wide options every projection reads."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    title: str = Field("", description="Gallery title")
    description: str = Field("", description="Gallery description")
    image_size: int = Field(DEFAULT_IMAGE_SIZE, gt=0, description="Sized image edge in pixels")
    thumb_size: int = Field(DEFAULT_THUMB_SIZE, gt=0, description="Thumbnail edge in pixels")
    base_url: str = Field("", description="Prefix for album and cache URLs")

    @classmethod
    def from_env(cls) -> "GalleryOptions":
        """Build options from GALLERY_* environment variables.

        Raises:
            pydantic.ValidationError: If a size is not a positive integer
        """
        return cls(
            title=os.getenv(ENV_GALLERY_TITLE, ""),
            description=os.getenv(ENV_GALLERY_DESCRIPTION, ""),
            image_size=os.getenv(ENV_GALLERY_IMAGE_SIZE, DEFAULT_IMAGE_SIZE),
            thumb_size=os.getenv(ENV_GALLERY_THUMB_SIZE, DEFAULT_THUMB_SIZE),
            base_url=os.getenv(ENV_GALLERY_BASE_URL, ""),
        )

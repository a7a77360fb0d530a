"""Request context resolved once per request and passed to the projectors."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from core.gallery.objects import Album, Gallery, Image
from core.gallery.search import SearchEngine
from core.utils.constants import DEEP_FLAG_VALUE


class Depth(str, Enum):
    """How far gallery and album listings descend."""

    SHALLOW = "shallow"
    DEEP = "deep"

    @classmethod
    def from_flag(cls, value: str | None) -> "Depth":
        """``?json=deep`` selects deep listings, any other value shallow ones."""
        return cls.DEEP if value == DEEP_FLAG_VALUE else cls.SHALLOW


class ContextKind(str, Enum):
    """The single resource a request is scoped to, in priority order."""

    SEARCH = "search"
    IMAGE = "image"
    ALBUM = "album"
    GALLERY = "gallery"


class RequestContext(BaseModel):
    """Exactly one active context plus the listing depth.

    For IMAGE and ALBUM contexts a missing target (None) means the
    requested resource does not exist.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ContextKind
    gallery: Gallery
    depth: Depth = Depth.SHALLOW
    album: Album | None = None
    image: Image | None = None
    search: SearchEngine | None = None
    requested_path: str | None = Field(None, description="Album or image path named by the request")

    @model_validator(mode="after")
    def validate_search_engine(self) -> "RequestContext":
        if self.kind is ContextKind.SEARCH and self.search is None:
            raise ValueError("search context requires a search engine")
        return self

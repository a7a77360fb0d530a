"""JSON shapes returned by the gallery view.

Optional keys are NotRequired: they are left out entirely when the
underlying value is empty, never emitted as null.
"""

from typing import Any

from typing_extensions import NotRequired, TypedDict


class ImageProjection(TypedDict):
    path: str
    title: NotRequired[str]
    description: NotRequired[str]
    date: int
    url_full: str
    url_sized: str
    url_thumb: str
    width: int
    height: int
    index: int
    credit: NotRequired[str]
    copyright: NotRequired[str]
    # verbose only
    location: NotRequired[str]
    city: NotRequired[str]
    state: NotRequired[str]
    country: NotRequired[str]
    tags: NotRequired[list[str]]
    metadata: NotRequired[dict[str, Any]]


class AlbumProjection(TypedDict):
    path: str
    title: NotRequired[str]
    description: NotRequired[str]
    date: int
    date_updated: NotRequired[int]
    custom_data: NotRequired[str]
    unpublished: NotRequired[bool]
    image_size: int
    thumb_size: int
    thumb_url: NotRequired[str]
    albums: NotRequired[list["AlbumProjection"]]
    images: NotRequired[list[ImageProjection]]
    parent_album: NotRequired["AlbumProjection"]
    next: NotRequired["AlbumProjection"]
    prev: NotRequired["AlbumProjection"]


class GalleryProjection(TypedDict):
    title: NotRequired[str]
    description: NotRequired[str]
    image_size: int
    thumb_size: int
    albums: NotRequired[list[AlbumProjection]]


class SearchProjection(TypedDict):
    thumb_size: int
    images: NotRequired[list[ImageProjection]]
    albums: NotRequired[list[AlbumProjection]]


"""
Projections of gallery objects into JSON-ready mappings.

Each projector is a pure function of the object it is given plus the
request depth; nothing is read from ambient state. Optional keys follow
include_if_present: absent rather than empty or null.
"""

from typing import Any, cast

from aws_lambda_powertools import Logger

from core.gallery.objects import Album, Gallery, Image
from core.gallery.search import SearchEngine
from core.models.context import ContextKind, Depth, RequestContext
from core.models.errors import NotFoundError
from core.models.projections import (
    AlbumProjection,
    GalleryProjection,
    ImageProjection,
    SearchProjection,
)
from core.projection.fields import include_if_present
from core.utils.constants import (
    ERROR_CODE_ALBUM_NOT_FOUND,
    ERROR_CODE_IMAGE_NOT_FOUND,
    MESSAGE_ALBUM_NOT_FOUND,
    MESSAGE_IMAGE_NOT_FOUND,
    SEARCH_SORT_DIRECTION,
    SEARCH_SORT_TYPE,
)
from core.utils.settings import GalleryOptions
from core.utils.time import date_to_timestamp

JsonDict = dict[str, Any]

logger = Logger(UTC=True)


def project_context(context: RequestContext) -> JsonDict:
    """Build the response body: one top-level key named after the context.

    Raises:
        NotFoundError: If the requested album or image does not exist
    """
    options = context.gallery.options

    if context.kind is ContextKind.SEARCH:
        search = cast(SearchEngine, context.search)
        return {"search": project_search(search, options=options)}

    if context.kind is ContextKind.IMAGE:
        if context.image is None:
            raise NotFoundError(
                message=MESSAGE_IMAGE_NOT_FOUND,
                error_code=ERROR_CODE_IMAGE_NOT_FOUND,
                details={"path": context.requested_path},
            )
        return {"image": project_image(context.image, verbose=True, options=options)}

    if context.kind is ContextKind.ALBUM:
        if context.album is None:
            raise NotFoundError(
                message=MESSAGE_ALBUM_NOT_FOUND,
                error_code=ERROR_CODE_ALBUM_NOT_FOUND,
                details={"path": context.requested_path},
            )
        return {
            "album": project_album(
                context.album,
                thumb_only=False,
                depth=context.depth,
                options=options,
            )
        }

    return {"gallery": project_gallery(context.gallery, depth=context.depth)}


def project_gallery(gallery: Gallery, *, depth: Depth) -> GalleryProjection:
    """Gallery info plus its top-level albums."""
    options = gallery.options
    data: JsonDict = {}

    include_if_present(data, "title", gallery.title)
    include_if_present(data, "description", gallery.description)
    data["image_size"] = options.image_size
    data["thumb_size"] = options.thumb_size

    albums = [
        project_album(album, thumb_only=depth is Depth.SHALLOW, depth=depth, options=options)
        for album in gallery.albums()
    ]
    include_if_present(data, "albums", albums)

    return cast(GalleryProjection, data)


def project_album(
    album: Album,
    *,
    thumb_only: bool,
    depth: Depth,
    options: GalleryOptions,
) -> AlbumProjection:
    """Album info; with thumb_only=False also its contents and neighbours.

    Sub-albums are thumb-only when the request depth is shallow, whatever
    thumb_only was for this album. Parent, next and prev are always thumb-only.
    """
    record = album.record
    data: JsonDict = {"path": album.path}

    include_if_present(data, "title", record.title)
    include_if_present(data, "description", record.description)
    data["date"] = date_to_timestamp(record.date)

    # Albums without direct images can compute a negative update date; the
    # cause is unverified, so only strictly positive values are exposed.
    date_updated = date_to_timestamp(album.updated_date())
    if date_updated > 0:
        data["date_updated"] = date_updated

    include_if_present(data, "custom_data", record.custom_data)
    if not album.is_published:
        data["unpublished"] = True
    data["image_size"] = options.image_size
    data["thumb_size"] = options.thumb_size

    thumb = album.thumb_image()
    if thumb is not None:
        data["thumb_url"] = thumb.thumbnail_url(options.thumb_size)

    if not thumb_only:
        subalbums = [
            project_album(subalbum, thumb_only=depth is Depth.SHALLOW, depth=depth, options=options)
            for subalbum in album.subalbums()
        ]
        include_if_present(data, "albums", subalbums)

        images = [project_image(image, verbose=False, options=options) for image in album.images()]
        include_if_present(data, "images", images)

        # "parent" is reserved in JavaScript clients
        _include_neighbour(data, "parent_album", album.parent(), depth=depth, options=options)
        _include_neighbour(data, "next", album.next_album(), depth=depth, options=options)
        _include_neighbour(data, "prev", album.prev_album(), depth=depth, options=options)

    return cast(AlbumProjection, data)


def _include_neighbour(
    data: JsonDict,
    key: str,
    album: Album | None,
    *,
    depth: Depth,
    options: GalleryOptions,
) -> None:
    if album is None:
        return
    data[key] = project_album(album, thumb_only=True, depth=depth, options=options)


def project_image(image: Image, *, verbose: bool, options: GalleryOptions) -> ImageProjection:
    """Image info; verbose adds location, tags and raw metadata."""
    record = image.record
    data: JsonDict = {}

    data["path"] = image.relative_path()
    include_if_present(data, "title", record.title)
    include_if_present(data, "description", record.description)
    data["date"] = date_to_timestamp(record.date)
    data["url_full"] = image.full_image_url()
    data["url_sized"] = image.sized_image_url(options.image_size)
    data["url_thumb"] = image.thumbnail_url(options.thumb_size)
    data["width"] = int(record.width)
    data["height"] = int(record.height)
    data["index"] = int(image.index())
    include_if_present(data, "credit", record.credit)
    include_if_present(data, "copyright", record.copyright)

    if verbose:
        include_if_present(data, "location", record.location)
        include_if_present(data, "city", record.city)
        include_if_present(data, "state", record.state)
        include_if_present(data, "country", record.country)
        include_if_present(data, "tags", list(record.tags))
        include_if_present(data, "metadata", dict(record.metadata))

    return cast(ImageProjection, data)


def project_search(search: SearchEngine, *, options: GalleryOptions) -> SearchProjection:
    """Matching images and albums, newest first regardless of requested order."""
    search.set_sort_type(SEARCH_SORT_TYPE)
    search.set_sort_direction(SEARCH_SORT_DIRECTION)

    data: JsonDict = {"thumb_size": options.thumb_size}

    images = [project_image(image, verbose=False, options=options) for image in search.images()]
    include_if_present(data, "images", images)

    albums = [
        project_album(album, thumb_only=True, depth=Depth.SHALLOW, options=options)
        for album in search.albums()
    ]
    include_if_present(data, "albums", albums)

    logger.debug(
        "Search projected",
        extra={"words": search.words, "images": len(images), "albums": len(albums)},
    )

    return cast(SearchProjection, data)

"""
Gallery, album and image objects over the read-only catalog.

These objects answer the questions the projections ask (parent, siblings,
thumbnail, position in album, URLs) and fetch from the catalog lazily.
An instance lives for a single request; per-instance caches never outlive it.
"""

from __future__ import annotations

from aws_lambda_powertools import Logger

from core.models.catalog import AlbumRecord, ImageRecord
from core.repositories.catalog_repository import GalleryCatalogRepository
from core.utils.constants import ROOT_PARENT
from core.utils.settings import GalleryOptions
from core.utils.urls import GalleryUrls

logger = Logger(UTC=True)


class Image:
    """A single image and the URLs of its variants."""

    def __init__(
        self,
        record: ImageRecord,
        *,
        catalog: GalleryCatalogRepository,
        urls: GalleryUrls,
        index: int | None = None,
    ) -> None:
        self.record = record
        self._catalog = catalog
        self._urls = urls
        self._index = index

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def filename(self) -> str:
        return self.record.filename

    @property
    def album_path(self) -> str:
        return self.record.parent

    def full_image(self) -> str:
        """Location of the original below the album root, unencoded."""
        return self._urls.full_image(self.path)

    def relative_path(self) -> str:
        """Full-image location with the album root stripped, e.g. travel/paris/eiffel.jpg."""
        return self._urls.strip_album_root(self.full_image())

    def full_image_url(self) -> str:
        return self._urls.full_image_url(self.path)

    def sized_image_url(self, size: int) -> str:
        return self._urls.sized_image_url(self.path, size)

    def thumbnail_url(self, size: int) -> str:
        return self._urls.thumbnail_url(self.path, size)

    def index(self) -> int:
        """0-based position of the image within its album."""
        if self._index is None:
            siblings = self._catalog.list_album_images(album_path=self.album_path)
            self._index = next(
                (position for position, sibling in enumerate(siblings) if sibling.path == self.path),
                0,
            )
        return self._index


class Album:
    """An album with lazy access to its neighbours and contents."""

    def __init__(
        self,
        record: AlbumRecord,
        *,
        catalog: GalleryCatalogRepository,
        urls: GalleryUrls,
    ) -> None:
        self.record = record
        self._catalog = catalog
        self._urls = urls
        self._images: list[Image] | None = None
        self._siblings: list[AlbumRecord] | None = None

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def is_published(self) -> bool:
        return self.record.show

    def _wrap(self, record: AlbumRecord) -> Album:
        return Album(record, catalog=self._catalog, urls=self._urls)

    def parent(self) -> Album | None:
        if self.record.is_top_level:
            return None

        record = self._catalog.fetch_album(path=self.record.parent)
        if record is None:
            logger.warning(
                "Album parent missing from catalog",
                extra={"path": self.path, "parent": self.record.parent},
            )
            return None

        return self._wrap(record)

    def _sibling_records(self) -> list[AlbumRecord]:
        if self._siblings is None:
            self._siblings = self._catalog.list_child_albums(parent=self.record.parent)
        return self._siblings

    def _sibling_at(self, offset: int) -> Album | None:
        siblings = self._sibling_records()
        positions = [position for position, sibling in enumerate(siblings) if sibling.path == self.path]
        if not positions:
            return None

        target = positions[0] + offset
        if 0 <= target < len(siblings):
            return self._wrap(siblings[target])
        return None

    def next_album(self) -> Album | None:
        return self._sibling_at(1)

    def prev_album(self) -> Album | None:
        return self._sibling_at(-1)

    def subalbums(self) -> list[Album]:
        records = self._catalog.list_child_albums(parent=self.path)
        return [self._wrap(record) for record in records if record.path != self.path]

    def images(self) -> list[Image]:
        if self._images is None:
            records = self._catalog.list_album_images(album_path=self.path)
            self._images = [
                Image(record, catalog=self._catalog, urls=self._urls, index=position)
                for position, record in enumerate(records)
            ]
        return self._images

    def thumb_image(self) -> Image | None:
        """Explicit album thumbnail, else first image, else first sub-album's thumbnail."""
        return self._find_thumb(seen=set())

    def _find_thumb(self, *, seen: set[str]) -> Image | None:
        seen.add(self.path)

        if self.record.thumb:
            record = self._catalog.fetch_image(path=self.record.thumb)
            if record is not None:
                return Image(record, catalog=self._catalog, urls=self._urls)
            logger.debug(
                "Album thumbnail image missing, falling back",
                extra={"path": self.path, "thumb": self.record.thumb},
            )

        images = self.images()
        if images:
            return images[0]

        for subalbum in self.subalbums():
            if subalbum.path in seen:
                continue
            thumb = subalbum._find_thumb(seen=seen)
            if thumb is not None:
                return thumb

        return None

    def updated_date(self) -> str | None:
        """Stored update date, else the newest date among direct images."""
        if self.record.updated_date:
            return self.record.updated_date

        dates = [image.record.date for image in self.images() if image.record.date]
        return max(dates) if dates else None


class Gallery:
    """Entry point to the catalog: the root albums and lookups by path."""

    def __init__(self, catalog: GalleryCatalogRepository, options: GalleryOptions) -> None:
        self.catalog = catalog
        self.options = options
        self.urls = GalleryUrls(options.base_url)

    @property
    def title(self) -> str:
        return self.options.title

    @property
    def description(self) -> str:
        return self.options.description

    def albums(self) -> list[Album]:
        """Top-level albums only."""
        records = self.catalog.list_child_albums(parent=ROOT_PARENT)
        return [self.wrap_album(record) for record in records]

    def get_album(self, path: str) -> Album | None:
        record = self.catalog.fetch_album(path=path)
        return self.wrap_album(record) if record is not None else None

    def get_image(self, path: str) -> Image | None:
        record = self.catalog.fetch_image(path=path)
        return self.wrap_image(record) if record is not None else None

    def wrap_album(self, record: AlbumRecord) -> Album:
        return Album(record, catalog=self.catalog, urls=self.urls)

    def wrap_image(self, record: ImageRecord, *, index: int | None = None) -> Image:
        return Image(record, catalog=self.catalog, urls=self.urls, index=index)

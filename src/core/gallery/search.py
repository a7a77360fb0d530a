"""Search over the gallery catalog."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from aws_lambda_powertools import Logger

from core.filters.words_filter import WordsFilter
from core.gallery.objects import Album, Gallery, Image
from core.models.catalog import AlbumRecord, ImageRecord
from core.models.errors import SearchError
from core.utils.constants import ALLOWED_SORT_DIRECTIONS, ALLOWED_SORT_TYPES

logger = Logger(UTC=True)

_SORT_KEYS: dict[str, Callable[[AlbumRecord | ImageRecord], Any]] = {
    "date": lambda record: record.date or "",
    "title": lambda record: (record.title or "").lower(),
    "path": lambda record: record.path,
}


class SearchEngine:
    """Words search with a configurable result order.

    Sort order defaults to title ascending; callers may change it with
    set_sort_type / set_sort_direction before fetching results.
    """

    def __init__(
        self,
        gallery: Gallery,
        *,
        words: str | None = None,
        sort_type: str = "title",
        sort_direction: str = "ASC",
    ) -> None:
        self.gallery = gallery
        self.words = words or ""
        self.sort_type = "title"
        self.sort_direction = "ASC"
        self._filter = WordsFilter()

        self.set_sort_type(sort_type)
        self.set_sort_direction(sort_direction)

    def set_sort_type(self, sort_type: str) -> None:
        if sort_type not in ALLOWED_SORT_TYPES:
            raise SearchError(
                message=f"Unsupported sort type '{sort_type}'",
                details={"sort_type": sort_type, "allowed": sorted(ALLOWED_SORT_TYPES)},
            )
        self.sort_type = sort_type

    def set_sort_direction(self, sort_direction: str) -> None:
        direction = sort_direction.upper()
        if direction not in ALLOWED_SORT_DIRECTIONS:
            raise SearchError(
                message=f"Unsupported sort direction '{sort_direction}'",
                details={"sort_direction": sort_direction},
            )
        self.sort_direction = direction

    def images(self) -> list[Image]:
        records = self._filter.apply(self.gallery.catalog.list_all_images(), self.words)
        logger.debug("Image search matched", extra={"words": self.words, "count": len(records)})
        positions = self._album_positions({record.parent for record in records})
        return [
            self.gallery.wrap_image(record, index=positions.get(record.path, 0))
            for record in self._sort(records)
        ]

    def albums(self) -> list[Album]:
        records = self._filter.apply(self.gallery.catalog.list_all_albums(), self.words)
        logger.debug("Album search matched", extra={"words": self.words, "count": len(records)})
        return [self.gallery.wrap_album(record) for record in self._sort(records)]

    def _album_positions(self, album_paths: set[str]) -> dict[str, int]:
        """Image path -> position within its album, one catalog query per album."""
        positions: dict[str, int] = {}
        for album_path in sorted(album_paths):
            siblings = self.gallery.catalog.list_album_images(album_path=album_path)
            positions.update((sibling.path, position) for position, sibling in enumerate(siblings))
        return positions

    def _sort(self, records: list[Any]) -> list[Any]:
        key = _SORT_KEYS[self.sort_type]
        # path breaks ties so equal keys keep a stable order
        ordered = sorted(records, key=lambda record: record.path)
        return sorted(ordered, key=key, reverse=self.sort_direction == "DESC")

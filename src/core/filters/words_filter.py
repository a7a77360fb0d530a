"""Word-based matching for gallery search."""

from collections.abc import Iterable
from typing import TypeVar

from core.models.catalog import AlbumRecord, ImageRecord

RecordT = TypeVar("RecordT", AlbumRecord, ImageRecord)


class WordsFilter:
    """Match records against search words using case-insensitive containment.

    Every word must occur somewhere in the record's title, description,
    path or tags. Order of words does not matter.
    """

    @staticmethod
    def split(words: str | None) -> list[str]:
        """Split a search string into lowercase words."""
        if not words:
            return []
        return [word.lower() for word in words.split() if word.strip()]

    @staticmethod
    def searchable_text(record: AlbumRecord | ImageRecord) -> str:
        parts: list[str] = [record.path, record.title or "", record.description or ""]
        if isinstance(record, ImageRecord):
            parts.extend(record.tags)
        return " ".join(parts).lower()

    @classmethod
    def apply(cls, records: Iterable[RecordT], words: str | None) -> list[RecordT]:
        """Return the records matching all words. No words matches everything."""
        terms = cls.split(words)
        if not terms:
            return list(records)

        return [
            record
            for record in records
            if all(term in cls.searchable_text(record) for term in terms)
        ]

from core.filters.words_filter import WordsFilter
from core.models.catalog import AlbumRecord, ImageRecord


def _image(path: str, **fields) -> ImageRecord:
    return ImageRecord(path=path, parent=path.rsplit("/", 1)[0], **fields)


class TestWordsFilter:
    def test_split_lowercases_and_drops_blanks(self) -> None:
        assert WordsFilter.split("  Eiffel   TOWER ") == ["eiffel", "tower"]

    def test_split_empty(self) -> None:
        assert WordsFilter.split(None) == []
        assert WordsFilter.split("") == []

    def test_no_words_matches_everything(self) -> None:
        records = [_image("a/1.jpg"), _image("a/2.jpg")]

        assert WordsFilter.apply(records, "") == records

    def test_matches_title_case_insensitively(self) -> None:
        records = [_image("a/1.jpg", title="Eiffel Tower"), _image("a/2.jpg", title="Louvre")]

        result = WordsFilter.apply(records, "eiffel")

        assert [record.path for record in result] == ["a/1.jpg"]

    def test_all_words_must_match(self) -> None:
        records = [
            _image("a/1.jpg", title="Tower", description="at night"),
            _image("a/2.jpg", title="Tower", description="at noon"),
        ]

        result = WordsFilter.apply(records, "tower night")

        assert [record.path for record in result] == ["a/1.jpg"]

    def test_matches_image_tags_and_path(self) -> None:
        records = [_image("paris/1.jpg", tags=["sunset"]), _image("rome/2.jpg")]

        assert [r.path for r in WordsFilter.apply(records, "sunset")] == ["paris/1.jpg"]
        assert [r.path for r in WordsFilter.apply(records, "rome")] == ["rome/2.jpg"]

    def test_matches_albums(self) -> None:
        records = [AlbumRecord(path="travel", title="Travel"), AlbumRecord(path="family")]

        result = WordsFilter.apply(records, "TRAVEL")

        assert [record.path for record in result] == ["travel"]

import pytest
from pydantic import ValidationError

from core.models.context import Depth
from handlers.gallery_view.models import GalleryViewRequest


class TestParamsFromQuery:
    def test_json_flag_deep(self) -> None:
        params = GalleryViewRequest.params_from_query({"json": "deep"})

        assert params["depth"] is Depth.DEEP

    def test_api_flag_deep(self) -> None:
        params = GalleryViewRequest.params_from_query({"api": "deep"})

        assert params["depth"] is Depth.DEEP

    @pytest.mark.parametrize("query", [{}, {"json": ""}, {"json": "1"}, {"api": "DEEP"}])
    def test_other_values_are_shallow(self, query) -> None:
        assert GalleryViewRequest.params_from_query(query)["depth"] is Depth.SHALLOW

    def test_json_wins_over_api(self) -> None:
        params = GalleryViewRequest.params_from_query({"json": "1", "api": "deep"})

        assert params["depth"] is Depth.SHALLOW

    def test_maps_query_names(self) -> None:
        params = GalleryViewRequest.params_from_query({"album": "travel", "image": "a.jpg", "words": "x"})

        assert params["album"] == "travel"
        assert params["image"] == "a.jpg"
        assert params["words"] == "x"

    def test_sort_parameters_are_not_read(self) -> None:
        params = GalleryViewRequest.params_from_query({"sort": "random", "sortdirection": "sideways"})

        assert set(params) == {"depth", "words", "album", "image"}


class TestGalleryViewRequest:
    def test_defaults(self) -> None:
        request = GalleryViewRequest()

        assert request.depth is Depth.SHALLOW
        assert request.words is None
        assert request.album is None
        assert request.image_path is None

    def test_album_slashes_are_stripped(self) -> None:
        assert GalleryViewRequest(album="/travel/paris/").album == "travel/paris"

    def test_blank_album_is_none(self) -> None:
        assert GalleryViewRequest(album="/").album is None

    @pytest.mark.parametrize("value", ["../secret", "travel//paris", "travel/./paris"])
    def test_rejects_relative_segments(self, value) -> None:
        with pytest.raises(ValidationError):
            GalleryViewRequest(album=value)

    def test_image_path_joins_album_and_filename(self) -> None:
        request = GalleryViewRequest(album="travel/paris", image="eiffel.jpg")

        assert request.image_path == "travel/paris/eiffel.jpg"

    def test_image_path_accepts_full_path(self) -> None:
        request = GalleryViewRequest(image="travel/paris/eiffel.jpg")

        assert request.image_path == "travel/paris/eiffel.jpg"

    def test_empty_words_still_selects_search(self) -> None:
        assert GalleryViewRequest(words="").words == ""


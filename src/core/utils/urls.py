"""URL layout for original, sized and thumbnail images."""

from pathlib import PurePosixPath
from urllib.parse import quote

from core.utils.constants import ALBUM_FOLDER, CACHE_FOLDER


class GalleryUrls:
    """Build image URLs below a configurable site prefix.

    Layout:
        {base}/albums/travel/paris/eiffel.jpg
        {base}/cache/travel/paris/eiffel_595.jpg
        {base}/cache/travel/paris/eiffel_100_cw100_ch100_thumb.jpg
    """

    def __init__(self, base_url: str = "") -> None:
        self.base_url = base_url.rstrip("/")

    @property
    def album_root(self) -> str:
        return f"{self.base_url}/{ALBUM_FOLDER}/"

    def full_image(self, path: str) -> str:
        """Unencoded location of the original, as the album tree names it."""
        return f"{self.album_root}{path}"

    def strip_album_root(self, location: str) -> str:
        """Turn a full-image location back into an album-relative path."""
        return location.replace(self.album_root, "", 1)

    def full_image_url(self, path: str) -> str:
        return f"{self.album_root}{quote(path)}"

    def sized_image_url(self, path: str, size: int) -> str:
        return self._cache_url(path, f"_{size}")

    def thumbnail_url(self, path: str, size: int) -> str:
        return self._cache_url(path, f"_{size}_cw{size}_ch{size}_thumb")

    def _cache_url(self, path: str, suffix: str) -> str:
        image = PurePosixPath(path)
        cached = image.with_name(f"{image.stem}{suffix}{image.suffix}")
        return f"{self.base_url}/{CACHE_FOLDER}/{quote(str(cached))}"

"""Abstract contract for reading the gallery catalog."""

from abc import ABC, abstractmethod

from core.models.catalog import AlbumRecord, ImageRecord


class GalleryCatalogRepository(ABC):
    """Read-only contract for the album and image records of a gallery.

    Implementations could be DynamoDB, PostgreSQL, a directory scan, etc.
    Domain objects depend on this interface, not the implementation.
    Every list is returned in ascending sort order.
    """

    @abstractmethod
    def fetch_album(self, *, path: str) -> AlbumRecord | None:
        """Fetch a single album.

        Args:
            path: Album path, e.g. "travel/paris"

        Returns:
            AlbumRecord or None if not found

        Raises:
            CatalogError: If the fetch fails
        """

    @abstractmethod
    def fetch_image(self, *, path: str) -> ImageRecord | None:
        """Fetch a single image.

        Args:
            path: Image path, e.g. "travel/paris/eiffel.jpg"

        Returns:
            ImageRecord or None if not found

        Raises:
            CatalogError: If the fetch fails
        """

    @abstractmethod
    def list_child_albums(self, *, parent: str) -> list[AlbumRecord]:
        """List the direct sub-albums of an album ('/' for the gallery root).

        Raises:
            CatalogError: If the query fails
        """

    @abstractmethod
    def list_album_images(self, *, album_path: str) -> list[ImageRecord]:
        """List the direct images of an album.

        Raises:
            CatalogError: If the query fails
        """

    @abstractmethod
    def list_all_albums(self) -> list[AlbumRecord]:
        """List every album in the catalog, used by search.

        Raises:
            CatalogError: If the query fails
        """

    @abstractmethod
    def list_all_images(self) -> list[ImageRecord]:
        """List every image in the catalog, used by search.

        Raises:
            CatalogError: If the query fails
        """

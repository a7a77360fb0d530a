"""
Business logic for the gallery JSON view.

Resolves the single active request context (search, image, album or the
gallery root) and hands it to the projectors.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.gallery.objects import Gallery
from core.gallery.search import SearchEngine
from core.infrastructure.aws.dynamodb_catalog import DynamoDBCatalog
from core.models.context import ContextKind, RequestContext
from core.projection.projectors import project_context
from core.repositories.catalog_repository import GalleryCatalogRepository
from core.utils.settings import GalleryOptions

from .models import GalleryViewRequest

JsonDict = dict[str, Any]

logger = Logger(UTC=True)


class GalleryViewService:
    """Application service behind the gallery JSON view."""

    def __init__(
        self,
        catalog: GalleryCatalogRepository | None = None,
        options: GalleryOptions | None = None,
    ) -> None:
        self.options = options or GalleryOptions.from_env()
        self.catalog = catalog or DynamoDBCatalog()
        self.gallery = Gallery(self.catalog, self.options)

    def resolve_context(self, request: GalleryViewRequest) -> RequestContext:
        """Pick exactly one context: search > image > album > gallery.

        A missing album or image still yields its context, with no target;
        the projectors turn that into a not-found error.

        Raises:
            CatalogError: If the catalog lookup fails
        """
        if request.words is not None:
            search = SearchEngine(self.gallery, words=request.words)
            return RequestContext(
                kind=ContextKind.SEARCH,
                gallery=self.gallery,
                depth=request.depth,
                search=search,
            )

        image_path = request.image_path
        if image_path is not None:
            image = self.gallery.get_image(image_path)
            if image is None:
                logger.warning("Requested image not in catalog", extra={"path": image_path})

            return RequestContext(
                kind=ContextKind.IMAGE,
                gallery=self.gallery,
                depth=request.depth,
                image=image,
                requested_path=image_path,
            )

        if request.album is not None:
            album = self.gallery.get_album(request.album)
            if album is None:
                logger.warning("Requested album not in catalog", extra={"path": request.album})

            return RequestContext(
                kind=ContextKind.ALBUM,
                gallery=self.gallery,
                depth=request.depth,
                album=album,
                requested_path=request.album,
            )

        return RequestContext(
            kind=ContextKind.GALLERY,
            gallery=self.gallery,
            depth=request.depth,
        )

    def render(self, request: GalleryViewRequest) -> tuple[ContextKind, JsonDict]:
        """Resolve the context and project it into the response body.

        Raises:
            NotFoundError: If the requested album or image does not exist
        """
        context = self.resolve_context(request)

        logger.debug(
            "Request context resolved",
            extra={"kind": context.kind.value, "depth": context.depth.value},
        )

        return context.kind, project_context(context)

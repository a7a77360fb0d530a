"""DynamoDB-backed implementation of GalleryCatalogRepository."""

from decimal import Decimal
from typing import Any, TypeVar

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.catalog import AlbumRecord, ImageRecord
from core.models.errors import CatalogError
from core.repositories.catalog_repository import GalleryCatalogRepository
from core.utils.constants import (
    ERROR_CODE_CATALOG_FETCH_FAILED,
    ERROR_CODE_CATALOG_INVALID_FORMAT,
    ERROR_CODE_CATALOG_LIST_FAILED,
    KIND_ALBUM,
    KIND_IMAGE,
    PARENT_INDEX_NAME,
)

Item = dict[str, Any]
RecordT = TypeVar("RecordT", bound=BaseModel)

logger = Logger(UTC=True)


def normalize_item(value: Any) -> Any:
    """Replace DynamoDB Decimals with int/float so items serialize to JSON."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {key: normalize_item(inner) for key, inner in value.items()}
    if isinstance(value, (list, set, tuple)):
        return [normalize_item(inner) for inner in value]
    return value


class DynamoDBCatalog(GalleryCatalogRepository):
    """DynamoDB-backed catalog with error handling.

    Table layout:
    - partition key ``kind`` ("album" | "image"), sort key ``path``
    - GSI ``parent-index``: partition ``parent``, sort ``sort_order``

    All boto3 errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def fetch_album(self, *, path: str) -> AlbumRecord | None:
        item = self._fetch(kind=KIND_ALBUM, path=path)
        return self._to_record(AlbumRecord, item) if item is not None else None

    def fetch_image(self, *, path: str) -> ImageRecord | None:
        item = self._fetch(kind=KIND_IMAGE, path=path)
        return self._to_record(ImageRecord, item) if item is not None else None

    def list_child_albums(self, *, parent: str) -> list[AlbumRecord]:
        items = self._query_children(kind=KIND_ALBUM, parent=parent)
        return self._sorted([self._to_record(AlbumRecord, item) for item in items])

    def list_album_images(self, *, album_path: str) -> list[ImageRecord]:
        items = self._query_children(kind=KIND_IMAGE, parent=album_path)
        return self._sorted([self._to_record(ImageRecord, item) for item in items])

    def list_all_albums(self) -> list[AlbumRecord]:
        items = self._query_pages(
            {"KeyConditionExpression": Key("kind").eq(KIND_ALBUM)},
            context={"kind": KIND_ALBUM},
        )
        return [self._to_record(AlbumRecord, item) for item in items]

    def list_all_images(self) -> list[ImageRecord]:
        items = self._query_pages(
            {"KeyConditionExpression": Key("kind").eq(KIND_IMAGE)},
            context={"kind": KIND_IMAGE},
        )
        return [self._to_record(ImageRecord, item) for item in items]

    def _fetch(self, *, kind: str, path: str) -> Item | None:
        logger.debug("Fetching catalog item", extra={"kind": kind, "path": path})

        try:
            response = self._db.get_item(key={"kind": kind, "path": path})
        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"kind": kind, "path": path})
            raise CatalogError(
                message="Unable to read the gallery catalog",
                error_code=ERROR_CODE_CATALOG_FETCH_FAILED,
                details={"kind": kind, "path": path},
            ) from exc

        item = response.get("Item")
        if item is None:
            return None

        if not isinstance(item, dict):
            raise CatalogError(
                message="Invalid catalog item format",
                error_code=ERROR_CODE_CATALOG_INVALID_FORMAT,
                details={"kind": kind, "path": path},
            )

        return item

    def _query_children(self, *, kind: str, parent: str) -> list[Item]:
        return self._query_pages(
            {
                "IndexName": PARENT_INDEX_NAME,
                "KeyConditionExpression": Key("parent").eq(parent),
                "FilterExpression": Attr("kind").eq(kind),
                "ScanIndexForward": True,
            },
            context={"kind": kind, "parent": parent},
        )

    def _query_pages(self, query_kwargs: dict[str, Any], *, context: dict[str, Any]) -> list[Item]:
        """Run a query to exhaustion, following LastEvaluatedKey."""
        logger.debug("Querying catalog", extra=context)

        items: list[Item] = []
        kwargs = dict(query_kwargs)

        try:
            while True:
                response = self._db.query(**kwargs)
                page_items = response.get("Items", [])

                if not isinstance(page_items, list):
                    raise CatalogError(
                        message="Invalid query response from DynamoDB",
                        error_code=ERROR_CODE_CATALOG_LIST_FAILED,
                        details=context,
                    )

                items.extend(page_items)

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    break
                kwargs["ExclusiveStartKey"] = last_evaluated_key

        except ClientError as exc:
            logger.error("DynamoDB query failed", extra=context)
            raise CatalogError(
                message="Unable to list the gallery catalog",
                error_code=ERROR_CODE_CATALOG_LIST_FAILED,
                details=context,
            ) from exc

        return items

    @staticmethod
    def _to_record(model: type[RecordT], item: Item) -> RecordT:
        try:
            return model.model_validate(normalize_item(item))
        except PydanticValidationError as exc:
            logger.error(
                "Malformed catalog item",
                extra={"path": item.get("path"), "errors": exc.errors(include_url=False)},
            )
            raise CatalogError(
                message="Invalid catalog item format",
                error_code=ERROR_CODE_CATALOG_INVALID_FORMAT,
                details={"path": item.get("path")},
            ) from exc

    @staticmethod
    def _sorted(records: list[RecordT]) -> list[RecordT]:
        # GSI order is undefined between equal sort_order values
        return sorted(records, key=lambda record: (record.sort_order, record.path))  # type: ignore[attr-defined]

"""
Pytest configuration and fixtures for gallery view tests.
Provides AWS mocking, the DynamoDB catalog table and an in-memory catalog.
"""

import os
from collections.abc import Callable
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from core.gallery.objects import Gallery
from core.models.catalog import AlbumRecord, ImageRecord
from core.repositories.catalog_repository import GalleryCatalogRepository
from core.utils.constants import ROOT_PARENT
from core.utils.settings import GalleryOptions

os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("GALLERY_CATALOG_TABLE_NAME", "gallery-catalog-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "gallery-view")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "GalleryView")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.pop("AWS_ENDPOINT_URL", None)


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_catalog_table(dynamodb_resource):
    """Helper to create the catalog table with its parent GSI."""
    table_name = os.getenv("GALLERY_CATALOG_TABLE_NAME")

    return dynamodb_resource.create_table(
        TableName=table_name,
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[
            {"AttributeName": "kind", "KeyType": "HASH"},
            {"AttributeName": "path", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "kind", "AttributeType": "S"},
            {"AttributeName": "path", "AttributeType": "S"},
            {"AttributeName": "parent", "AttributeType": "S"},
            {"AttributeName": "sort_order", "AttributeType": "N"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": "parent-index",
                "KeySchema": [
                    {"AttributeName": "parent", "KeyType": "HASH"},
                    {"AttributeName": "sort_order", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            },
        ],
    )


@pytest.fixture(scope="function")
def gallery_table(dynamodb_resource):
    """
    Create the DynamoDB catalog table for testing.

    moto discards the table when the mock context exits.
    """
    table_name = os.getenv("GALLERY_CATALOG_TABLE_NAME")

    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
    except ClientError:
        table = _create_catalog_table(dynamodb_resource)
        table.wait_until_exists()

    return table


@pytest.fixture
def catalog_put_items(gallery_table) -> Callable[[list[dict[str, Any]]], list[dict[str, Any]]]:
    """
    Helper to insert catalog items into DynamoDB.

    Usage:
        catalog_put_items([{"kind": "album", "path": "travel", "parent": "/"}])
    """

    def _put(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        with gallery_table.batch_writer() as batch:
            for item in items:
                batch.put_item(Item=item)
        return items

    return _put


class InMemoryCatalog(GalleryCatalogRepository):
    """Catalog double backed by plain lists."""

    def __init__(
        self,
        albums: list[AlbumRecord] | None = None,
        images: list[ImageRecord] | None = None,
    ) -> None:
        self.albums = list(albums or [])
        self.images = list(images or [])
        self.calls: list[str] = []

    def fetch_album(self, *, path: str) -> AlbumRecord | None:
        self.calls.append(f"fetch_album:{path}")
        return next((album for album in self.albums if album.path == path), None)

    def fetch_image(self, *, path: str) -> ImageRecord | None:
        self.calls.append(f"fetch_image:{path}")
        return next((image for image in self.images if image.path == path), None)

    def list_child_albums(self, *, parent: str) -> list[AlbumRecord]:
        self.calls.append(f"list_child_albums:{parent}")
        children = [album for album in self.albums if album.parent == parent]
        return sorted(children, key=lambda album: (album.sort_order, album.path))

    def list_album_images(self, *, album_path: str) -> list[ImageRecord]:
        self.calls.append(f"list_album_images:{album_path}")
        children = [image for image in self.images if image.parent == album_path]
        return sorted(children, key=lambda image: (image.sort_order, image.path))

    def list_all_albums(self) -> list[AlbumRecord]:
        return list(self.albums)

    def list_all_images(self) -> list[ImageRecord]:
        return list(self.images)


@pytest.fixture
def sample_album_items() -> list[dict[str, Any]]:
    """Album records of the sample gallery."""
    return [
        {
            "path": "travel",
            "parent": ROOT_PARENT,
            "sort_order": 1,
            "title": "Travel",
            "description": "Trips and holidays",
            "date": "2014-11-20 10:00:00",
        },
        {
            "path": "travel/paris",
            "parent": "travel",
            "sort_order": 1,
            "title": "Paris",
            "description": "A week in Paris",
            "date": "2014-11-24 00:00:00",
            "thumb": "travel/paris/eiffel.jpg",
        },
        {
            "path": "travel/rome",
            "parent": "travel",
            "sort_order": 2,
            "title": "Rome",
            "date": "2015-04-02 09:30:00",
        },
        {
            "path": "family",
            "parent": ROOT_PARENT,
            "sort_order": 2,
            "title": "Family",
            "date": "2013-07-01 12:00:00",
            "custom_data": "private",
            "show": False,
        },
    ]


@pytest.fixture
def sample_image_items() -> list[dict[str, Any]]:
    """Image records of the sample gallery."""
    return [
        {
            "path": "travel/paris/eiffel.jpg",
            "parent": "travel/paris",
            "sort_order": 1,
            "title": "Eiffel Tower",
            "description": "At night",
            "date": "2014-11-24 01:40:22",
            "width": 1024,
            "height": 768,
            "credit": "Jane Doe",
            "city": "Paris",
            "country": "France",
            "tags": ["tower", "night"],
            "metadata": {"EXIFModel": "X100"},
        },
        {
            "path": "travel/paris/louvre.jpg",
            "parent": "travel/paris",
            "sort_order": 2,
            "title": "Louvre",
            "date": "2014-11-25 14:12:00",
            "width": 800,
            "height": 600,
        },
        {
            "path": "family/picnic.jpg",
            "parent": "family",
            "sort_order": 1,
            "title": "Picnic",
            "date": "2013-07-01 13:45:00",
            "width": 640,
            "height": 480,
        },
    ]


@pytest.fixture
def in_memory_catalog(sample_album_items, sample_image_items) -> InMemoryCatalog:
    return InMemoryCatalog(
        albums=[AlbumRecord(**item) for item in sample_album_items],
        images=[ImageRecord(**item) for item in sample_image_items],
    )


@pytest.fixture
def gallery_options() -> GalleryOptions:
    return GalleryOptions(title="My Gallery", description="Photos", image_size=595, thumb_size=100)


@pytest.fixture
def sample_gallery(in_memory_catalog, gallery_options) -> Gallery:
    return Gallery(in_memory_catalog, gallery_options)


@pytest.fixture
def seeded_catalog_table(
    catalog_put_items,
    sample_album_items,
    sample_image_items,
) -> list[dict[str, Any]]:
    """DynamoDB catalog table pre-populated with the sample gallery."""

    items = [{"kind": "album", **album} for album in sample_album_items]
    items += [{"kind": "image", **image} for image in sample_image_items]
    return catalog_put_items(items)


@pytest.fixture
def make_catalog() -> Callable[..., InMemoryCatalog]:
    """
    Factory for ad-hoc in-memory catalogs.

    Usage:
        catalog = make_catalog(albums=[AlbumRecord(path="a")], images=[])
    """
    return InMemoryCatalog

#!/usr/bin/env python3
"""
Seed script to populate the gallery catalog table.

Run:
    GALLERY_CATALOG_TABLE_NAME=gallery-catalog \
    AWS_ENDPOINT_URL=http://localhost:4566 \
      python seed/seed_gallery.py --limit 20
"""

import argparse
import json
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, cast

from aws_lambda_powertools import Logger

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter
from core.utils.constants import KIND_ALBUM, KIND_IMAGE

logger = Logger(service="seed")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed albums and images into the gallery catalog")

    parser.add_argument(
        "--data-file",
        type=Path,
        default=Path(__file__).parent / "data" / "gallery.json",
        help="JSON file with 'albums' and 'images' lists",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of images to seed",
    )

    return parser.parse_args()


def load_sample_data(data_file: Path) -> dict[str, Any]:
    # DynamoDB rejects floats
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f, parse_float=Decimal))


def seed_gallery() -> None:
    try:
        args = parse_args()
        data = load_sample_data(args.data_file)
        adapter = DynamoDBAdapter()

        logger.info("Starting seeding process", extra={"data_file": str(args.data_file)})

        albums = cast(list[dict[str, Any]], data.get("albums", []))
        for album in albums:
            adapter.put_item(item={"kind": KIND_ALBUM, **album})
            logger.info("Seeded album", extra={"path": album["path"]})

        images = cast(list[dict[str, Any]], data.get("images", []))
        for image in images[: args.limit]:
            adapter.put_item(item={"kind": KIND_IMAGE, **image})
            logger.info("Seeded image", extra={"path": image["path"]})

        logger.info(
            "Seeding completed",
            extra={"albums": len(albums), "images": len(images[: args.limit])},
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_gallery()

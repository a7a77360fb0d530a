"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Search Errors
ERROR_CODE_INVALID_SEARCH = "INVALID_SEARCH"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_ALBUM_NOT_FOUND = "ALBUM_NOT_FOUND"
ERROR_CODE_IMAGE_NOT_FOUND = "IMAGE_NOT_FOUND"

# Catalog / DynamoDB Errors
ERROR_CODE_CATALOG = "CATALOG_ERROR"
ERROR_CODE_CATALOG_FETCH_FAILED = "CATALOG_FETCH_FAILED"
ERROR_CODE_CATALOG_LIST_FAILED = "CATALOG_LIST_FAILED"
ERROR_CODE_CATALOG_INVALID_FORMAT = "CATALOG_INVALID_FORMAT"

# ============================================================================
# Not Found Messages
# ============================================================================

MESSAGE_ALBUM_NOT_FOUND = "Album does not exist."
MESSAGE_IMAGE_NOT_FOUND = "Image does not exist."

# ============================================================================
# Request Parameters
# ============================================================================

# Either flag selects the JSON view; the value "deep" selects recursive listings
JSON_FLAG_PARAMS: Final[tuple[str, ...]] = ("json", "api")
DEEP_FLAG_VALUE = "deep"

PARAM_ALBUM = "album"
PARAM_IMAGE = "image"
PARAM_SEARCH_WORDS = "words"

# ============================================================================
# Catalog Layout
# ============================================================================

KIND_ALBUM = "album"
KIND_IMAGE = "image"

# Parent value stored on top-level albums
ROOT_PARENT = "/"

PARENT_INDEX_NAME = "parent-index"

# ============================================================================
# Gallery Options
# ============================================================================

DEFAULT_IMAGE_SIZE = 595
DEFAULT_THUMB_SIZE = 100

ALBUM_FOLDER = "albums"
CACHE_FOLDER = "cache"

# ============================================================================
# Search Constraints
# ============================================================================

ALLOWED_SORT_TYPES: Final[frozenset[str]] = frozenset({"date", "title", "path"})
ALLOWED_SORT_DIRECTIONS: Final[frozenset[str]] = frozenset({"ASC", "DESC"})

SEARCH_SORT_TYPE = "date"
SEARCH_SORT_DIRECTION = "DESC"

# ============================================================================
# Date / Time Formats
# ============================================================================

# Catalog dates, e.g. 2014-11-24 01:40:22 (local wall clock)
CATALOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# ============================================================================
# API Gateway Configuration
# ============================================================================

DEFAULT_CONTENT_TYPE = "application/json; charset=UTF-8"
CORS_METHODS = "GET,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization"

HEADER_ORIGIN = "Origin"
HEADER_HOST = "Host"
HEADER_VARY = "Vary"
HEADER_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
HEADER_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_GALLERY_TABLE_NAME = "GALLERY_CATALOG_TABLE_NAME"
ENV_GALLERY_TITLE = "GALLERY_TITLE"
ENV_GALLERY_DESCRIPTION = "GALLERY_DESCRIPTION"
ENV_GALLERY_IMAGE_SIZE = "GALLERY_IMAGE_SIZE"
ENV_GALLERY_THUMB_SIZE = "GALLERY_THUMB_SIZE"
ENV_GALLERY_BASE_URL = "GALLERY_BASE_URL"

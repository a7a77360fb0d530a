"""Custom exception classes for the gallery view service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_CATALOG,
    ERROR_CODE_INVALID_SEARCH,
    ERROR_CODE_RESOURCE_NOT_FOUND,
)


class GalleryServiceError(Exception):
    """
    Base exception for all gallery view service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class NotFoundError(GalleryServiceError):
    """Raised when the album or image a request resolves to does not exist."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class CatalogError(GalleryServiceError):
    """Raised when reading the gallery catalog fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CATALOG,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class SearchError(GalleryServiceError):
    """Raised when search parameters are invalid."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_SEARCH,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )

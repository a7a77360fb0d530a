"""
Centralized API response builder for AWS Lambda / API Gateway.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from core.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    DEFAULT_CONTENT_TYPE,
    HEADER_ALLOW_CREDENTIALS,
    HEADER_ALLOW_ORIGIN,
    HEADER_ORIGIN,
    HEADER_VARY,
)

JsonDict = dict[str, Any]


def append_header(headers: dict[str, str], name: str, value: str) -> None:
    """Append a token to a comma-separated header, keeping existing values.

    The header name is matched case-insensitively so values set by other
    layers under a different casing are extended rather than shadowed.
    """
    for key, existing in headers.items():
        if key.lower() != name.lower():
            continue

        tokens = [token.strip() for token in existing.split(",") if token.strip()]
        if value.lower() not in (token.lower() for token in tokens):
            tokens.append(value)
        headers[key] = ", ".join(tokens)
        return

    headers[name] = value


class ResponseBuilder:
    """Factory for API Gateway-compatible HTTP responses."""

    DEFAULT_HEADERS: dict[str, str] = {
        "Content-Type": DEFAULT_CONTENT_TYPE,
    }

    @staticmethod
    def _build_headers(
        cors_origin: str | None = None,
        extra: dict[str, str] | None = None,
    ) -> dict[str, str]:
        headers: dict[str, str] = dict(ResponseBuilder.DEFAULT_HEADERS)

        if extra:
            headers.update(extra)

        if cors_origin:
            headers[HEADER_ALLOW_ORIGIN] = cors_origin
            headers[HEADER_ALLOW_CREDENTIALS] = "true"

        # Caches must keep one copy per Origin
        append_header(headers, HEADER_VARY, HEADER_ORIGIN)

        return headers

    @staticmethod
    def _response(
        *,
        status: HTTPStatus,
        body: JsonDict,
        cors_origin: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> JsonDict:
        return {
            "statusCode": status.value,
            "headers": ResponseBuilder._build_headers(cors_origin, headers),
            "body": json.dumps(body),
        }

    @staticmethod
    def ok(
        body: JsonDict,
        *,
        cors_origin: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> JsonDict:
        return ResponseBuilder._response(
            status=HTTPStatus.OK,
            body=body,
            cors_origin=cors_origin,
            headers=headers,
        )

    @staticmethod
    def preflight(*, cors_origin: str | None = None) -> JsonDict:
        """204 answer to a CORS preflight (OPTIONS) request."""
        headers = ResponseBuilder._build_headers(cors_origin)
        if cors_origin:
            headers["Access-Control-Allow-Methods"] = CORS_METHODS
            headers["Access-Control-Allow-Headers"] = CORS_HEADERS

        return {
            "statusCode": HTTPStatus.NO_CONTENT.value,
            "headers": headers,
            "body": "",
        }

    @staticmethod
    def error(
        *,
        status: HTTPStatus,
        message: str,
        details: Any = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        payload: JsonDict = {
            "error": True,
            "status": status.value,
            "message": message,
        }

        if details:
            payload["details"] = details

        return ResponseBuilder._response(
            status=status,
            body=payload,
            cors_origin=cors_origin,
        )

    @staticmethod
    def bad_request(
        message: str,
        *,
        details: Any = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return ResponseBuilder.error(
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            details=details,
            cors_origin=cors_origin,
        )

    @staticmethod
    def validation_error(
        *,
        message: str,
        details: Any = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """422 Unprocessable Entity validation error."""
        return ResponseBuilder.error(
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            message=message,
            details=details,
            cors_origin=cors_origin,
        )

    @staticmethod
    def not_found(
        message: str = "Resource not found",
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        """404 with exactly the error, status and message keys."""
        return ResponseBuilder.error(
            status=HTTPStatus.NOT_FOUND,
            message=message,
            cors_origin=cors_origin,
        )

    @staticmethod
    def internal_error(
        message: str = "Internal server error",
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        return ResponseBuilder.error(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
            cors_origin=cors_origin,
        )

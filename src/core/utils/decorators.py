"""
Common decorators and helpers for API Gateway Lambda handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import (
    CatalogError,
    NotFoundError,
    SearchError,
)
from core.utils.cors import allowed_cors_origin
from core.utils.response import ResponseBuilder

logger = Logger(service="api-gateway-handler", UTC=True)

JsonDict = dict[str, Any]


def _get_user_friendly_message(exc: Exception) -> str:
    """
    Convert technical exception messages into user-friendly ones.

    Preserves specific validation messages while making generic errors friendly.
    """
    exc_str = str(exc)

    friendly_prefixes = (
        "Invalid",
        "Missing",
        "Required",
        "Unsupported",
        "Cannot",
        "Unable to",
        "Failed to",
        "Album",
        "Image",
    )

    if exc_str and any(exc_str.startswith(prefix) for prefix in friendly_prefixes):
        return exc_str

    if isinstance(exc, ValueError):
        return "The provided parameters are invalid. Please check your request and try again."

    if isinstance(exc, (KeyError, AttributeError)):
        return "A required parameter is missing. Please check your request and try again."

    if isinstance(exc, TypeError):
        return "The request format is incorrect. Please check your request and try again."

    return "We encountered an issue processing your request. Please try again."


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        request_id: AWS request ID
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if level == "exception":
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for API Gateway Lambda handlers.

    Provides:
    - CORS origin resolution from the request headers
    - Automatic CORS preflight (OPTIONS) handling
    - Centralized exception handling and error responses
    - Request ID tracking and structured logging

    Every response, error responses included, carries ``Vary: Origin`` and
    the echoed origin when the request qualifies for CORS.

    Example:
        @api_gateway_handler
        def lambda_handler(event, context):
            return ResponseBuilder.ok({"gallery": {}})
    """

    @wraps(func)
    def wrapper(event: Any, context: Any) -> JsonDict:
        cors_origin = allowed_cors_origin(event.get("headers"))

        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.preflight(cors_origin=cors_origin)

        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)

        except NotFoundError as exc:
            _log_error(
                "Resource not found",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.not_found(exc.message, cors_origin=cors_origin)

        except SearchError as exc:
            _log_error(
                "Invalid request in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.bad_request(
                exc.message,
                details=exc.details,
                cors_origin=cors_origin,
            )

        except CatalogError as exc:
            _log_error(
                "Catalog error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.internal_error(exc.message, cors_origin=cors_origin)

        # Client errors (4xx) - Bad Request
        except (
            ValueError,
            KeyError,
            TypeError,
            AttributeError,
        ) as exc:
            _log_error(
                "Validation error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.bad_request(
                _get_user_friendly_message(exc),
                cors_origin=cors_origin,
            )

        # Server errors (5xx) - Connection/Network issues
        except (ConnectionError, OSError) as exc:
            _log_error(
                "Connection error",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.error(
                status=HTTPStatus.SERVICE_UNAVAILABLE,
                message="Unable to connect to required services. Please try again later.",
                cors_origin=cors_origin,
            )

        except Exception as exc:
            _log_error(
                "Unexpected error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.internal_error(
                "We're experiencing technical difficulties. Please try again in a few moments.",
                cors_origin=cors_origin,
            )

    return wrapper

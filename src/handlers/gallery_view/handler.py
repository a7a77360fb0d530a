"""
Lambda handler serving the read-only gallery JSON view.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import NotFoundError
from core.utils.constants import JSON_FLAG_PARAMS
from core.utils.cors import allowed_cors_origin
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_query

from .models import GalleryViewRequest
from .service import GalleryViewService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Serve the gallery, an album, an image or search results as JSON.

    Query parameters:
        json / api: "deep" for recursive listings, anything else for shallow
        words: search words (selects the search view)
        image: image filename (with album) or full image path
        album: album path

    Args:
        event: API Gateway event payload.
        context: AWS Lambda runtime context.

    Returns:
        API Gateway-compatible response dictionary.
    """
    logger.info(
        "Received gallery view request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    cors_origin = allowed_cors_origin(event.get("headers"))
    query_params = event.get("queryStringParameters") or {}

    is_valid, result = validate_query(
        GalleryViewRequest,
        GalleryViewRequest.params_from_query(query_params),
        parameter_names={"depth": JSON_FLAG_PARAMS[0]},
        cors_origin=cors_origin,
    )
    if not is_valid:
        logger.warning("Request validation failed", extra={"query_params": query_params})
        return result

    request: GalleryViewRequest = result

    service = GalleryViewService()

    try:
        kind, body = service.render(request)
    except NotFoundError as exc:
        logger.warning(
            "Gallery resource not found",
            extra={"error_code": exc.error_code, "details": exc.details},
        )
        return ResponseBuilder.not_found(exc.message, cors_origin=cors_origin)

    metrics.add_metadata(key="context", value=kind.value)
    metrics.add_metric(name="GalleryViewServed", unit=MetricUnit.Count, value=1)

    logger.info(
        "Gallery view served",
        extra={"context": kind.value, "depth": request.depth.value},
    )

    return ResponseBuilder.ok(body, cors_origin=cors_origin)

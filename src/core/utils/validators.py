"""Query string validation for API Gateway handlers."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.utils.response import JsonDict, ResponseBuilder

QueryModelT = TypeVar("QueryModelT", bound=BaseModel)

_MESSAGES_BY_ERROR_TYPE = {
    "missing": "Parameter is required",
    "enum": "Unsupported parameter value",
}


def describe_query_errors(
    errors: list[dict[str, Any]],
    *,
    parameter_names: dict[str, str] | None = None,
) -> list[dict[str, str]]:
    """Turn Pydantic errors into ``{"parameter", "message"}`` pairs.

    Only the first location segment is reported, translated back to the
    query string name it was read from (``depth`` -> ``json``). Pydantic's
    ``input``, ``ctx`` and ``url`` entries never reach the client.
    """
    parameter_names = parameter_names or {}
    described: list[dict[str, str]] = []

    for err in errors:
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else "query"
        error_type = err.get("type", "")

        message = _MESSAGES_BY_ERROR_TYPE.get(error_type)
        if message is None and error_type.endswith("_type"):
            message = "Invalid value type"
        if message is None:
            message = str(err.get("msg", "Invalid value")).removeprefix("Value error,").strip()

        described.append(
            {
                "parameter": parameter_names.get(field, field),
                "message": message,
            }
        )

    return described


def validate_query(
    model: type[QueryModelT],
    params: dict[str, Any],
    *,
    parameter_names: dict[str, str] | None = None,
    cors_origin: str | None = None,
) -> tuple[bool, QueryModelT | JsonDict]:
    """Validate parameters read from the query string.

    Args:
        model: Pydantic model class
        params: Parameters already mapped onto the model's field names
        parameter_names: Field name -> query string name, for error details
        cors_origin: Optional CORS origin for the error response

    Returns:
        (True, validated_model) on success
        (False, 422 response) on validation failure
    """
    try:
        return True, model.model_validate(params)

    except ValidationError as exc:
        return (
            False,
            ResponseBuilder.validation_error(
                message="Invalid query parameters",
                details=describe_query_errors(exc.errors(), parameter_names=parameter_names),
                cors_origin=cors_origin,
            ),
        )

from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def gallery_view_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/",
        "queryStringParameters": {"json": "1"},
        "headers": {"Host": "example.com"},
    }


@pytest.fixture
def album_view_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/",
        "queryStringParameters": {"json": "1", "album": "travel/paris"},
        "headers": {"Host": "example.com", "Origin": "https://cdn.example.com"},
    }

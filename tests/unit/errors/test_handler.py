"""Tests for status code classification."""

from datetime import UTC, datetime, timedelta
from email.utils import format_datetime

import pytest
from httpx import Response

from harvest_client.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    HTTPStatusError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from harvest_client.errors.handler import error_class_for, raise_for_status


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [200, 201, 204])
def test_raise_for_status_success_response(status_code):
    raise_for_status(Response(status_code=status_code))


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status_code", "exc_class"),
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (422, ValidationError),
        (418, ClientError),
        (500, ServerError),
        (503, ServerError),
    ],
)
def test_raise_for_status_maps_status_codes(status_code, exc_class):
    response = Response(status_code=status_code, text="nope")

    with pytest.raises(exc_class) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == status_code
    assert exc_info.value.response is response
    assert exc_info.value.body == "nope"


@pytest.mark.unit
def test_raise_for_status_plain_text_message():
    response = Response(status_code=400, headers={"content-type": "text/plain"}, text="Bad request")

    with pytest.raises(BadRequestError) as exc_info:
        raise_for_status(response)

    assert str(exc_info.value) == "HTTP 400: Bad request"
    assert exc_info.value.error_detail is None


@pytest.mark.unit
def test_raise_for_status_empty_body():
    with pytest.raises(ServerError) as exc_info:
        raise_for_status(Response(status_code=500))

    assert str(exc_info.value) == "HTTP 500"
    assert exc_info.value.body == ""


@pytest.mark.unit
def test_raise_for_status_with_harvest_error_body():
    response = Response(
        status_code=401,
        json={"error": "invalid_token", "error_description": "The access token is invalid."},
    )

    with pytest.raises(UnauthorizedError) as exc_info:
        raise_for_status(response)

    assert "The access token is invalid." in str(exc_info.value)
    assert exc_info.value.error_detail.error == "invalid_token"
    assert '"invalid_token"' in exc_info.value.body


@pytest.mark.unit
def test_raise_for_status_validation_message():
    response = Response(status_code=422, json={"message": "Name has already been taken"})

    with pytest.raises(ValidationError) as exc_info:
        raise_for_status(response)

    assert str(exc_info.value) == "HTTP 422: Name has already been taken"


@pytest.mark.unit
def test_raise_for_status_429_rate_limit():
    response = Response(status_code=429, headers={"retry-after": "15"}, text="Too many requests")

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.retry_after == 15


@pytest.mark.unit
def test_raise_for_status_429_unparseable_retry_after():
    response = Response(status_code=429, headers={"retry-after": "soon"})

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.retry_after is None


@pytest.mark.unit
def test_raise_for_status_long_body_truncated_in_message():
    response = Response(status_code=500, text="x" * 1000)

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert len(str(exc_info.value)) < 250
    assert len(exc_info.value.body) == 1000


@pytest.mark.unit
def test_raise_for_status_unusual_status():
    with pytest.raises(HTTPStatusError) as exc_info:
        raise_for_status(Response(status_code=302))

    assert not isinstance(exc_info.value, (ClientError, ServerError))


@pytest.mark.unit
def test_error_class_for_uses_declared_status():
    assert error_class_for(NotFoundError.status) is NotFoundError
    assert error_class_for(429) is RateLimitError
    assert error_class_for(451) is ClientError
    assert error_class_for(599) is ServerError
    assert error_class_for(304) is HTTPStatusError


@pytest.mark.unit
def test_raise_for_status_429_retry_after_http_date():
    retry_at = datetime.now(UTC) + timedelta(seconds=120)
    response = Response(status_code=429, headers={"retry-after": format_datetime(retry_at, usegmt=True)})

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert 100 <= exc_info.value.retry_after <= 121


@pytest.mark.unit
def test_raise_for_status_429_retry_after_in_the_past():
    response = Response(status_code=429, headers={"retry-after": "Wed, 21 Oct 2015 07:28:00 GMT"})

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.retry_after == 0

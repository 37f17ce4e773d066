"""Turn non-2xx Harvest responses into exceptions."""

import math
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

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
from harvest_client.errors.models import ErrorDetail

MESSAGE_BODY_LIMIT = 200

STATUS_ERRORS: dict[int, type[HTTPStatusError]] = {
    cls.status: cls
    for cls in (
        BadRequestError,
        UnauthorizedError,
        ForbiddenError,
        NotFoundError,
        ConflictError,
        ValidationError,
        RateLimitError,
    )
}


def error_class_for(status_code: int) -> type[HTTPStatusError]:
    """Pick the most specific ``HTTPStatusError`` subclass for a status code."""
    if status_code in STATUS_ERRORS:
        return STATUS_ERRORS[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return HTTPStatusError


def _retry_after(response: httpx.Response) -> int | None:
    """Seconds to wait according to ``Retry-After``, as delta-seconds or an HTTP-date."""
    value = response.headers.get("retry-after", "").strip()
    if value.isdigit():
        return int(value)
    try:
        retry_at = parsedate_to_datetime(value)
    except (ValueError, TypeError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=UTC)
    # Dates in the past (clock skew) mean "now".
    return max(0, math.ceil((retry_at - datetime.now(UTC)).total_seconds()))


def _status_message(status_code: int, body: str, error_detail: ErrorDetail | None) -> str:
    if error_detail is not None:
        return f"HTTP {status_code}: {error_detail.to_exception_message()}"
    preview = body[:MESSAGE_BODY_LIMIT]
    return f"HTTP {status_code}: {preview}" if preview else f"HTTP {status_code}"


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching ``HTTPStatusError`` unless ``response`` is 2xx.

    The message comes from the Harvest error payload when there is one,
    otherwise from the start of the raw body. The full body text is kept on
    the exception either way.

    Raises:
        HTTPStatusError: Or one of its subclasses, chosen by status code.
    """
    if response.is_success:
        return

    status_code = response.status_code
    body = response.text
    error_detail = ErrorDetail.from_response(response)

    kwargs = {
        "status_code": status_code,
        "body": body,
        "response": response,
        "error_detail": error_detail,
    }
    exc_class = error_class_for(status_code)
    if exc_class is RateLimitError:
        kwargs["retry_after"] = _retry_after(response)

    raise exc_class(_status_message(status_code, body, error_detail), **kwargs)

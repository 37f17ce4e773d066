"""Exception hierarchy of the Harvest client.

Every exception derives from ``HarvestError``. Failures that happen before a
response exists (bad URL, unencodable body, deadline, connection failure)
are siblings of ``HTTPStatusError``, so ``except HTTPStatusError`` only
catches answers the server actually gave.
"""

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    import httpx

    from harvest_client.errors.models import ErrorDetail


class HarvestError(Exception):
    """Base exception for everything the client raises."""


class URLError(HarvestError):
    """Base URL and path do not form a valid absolute URL."""


class EncodingError(HarvestError):
    """Request body or query options cannot be serialized."""


class DecodingError(HarvestError):
    """Response body is not valid JSON or does not match the expected shape.

    ``status_code`` and ``response`` are kept so callers can still inspect
    what the server sent.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class DeadlineExceededError(HarvestError):
    """The per-call deadline or the transport timeout expired."""


class TransportError(HarvestError):
    """Connection-level failure below HTTP, such as DNS or a refused connection."""


class HTTPStatusError(HarvestError):
    """Server answered with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response.
        body: Full response body text.
        response: The ``httpx.Response`` itself.
        error_detail: Parsed Harvest error payload, if the body had one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
        response: "httpx.Response | None" = None,
        error_detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.response = response
        self.error_detail = error_detail


class ClientError(HTTPStatusError):
    """4xx: the request was rejected."""


class BadRequestError(ClientError):
    status: ClassVar[int] = 400


class UnauthorizedError(ClientError):
    """Token missing, expired or revoked."""

    status: ClassVar[int] = 401


class ForbiddenError(ClientError):
    """Token is valid but the user lacks the permission."""

    status: ClassVar[int] = 403


class NotFoundError(ClientError):
    status: ClassVar[int] = 404


class ConflictError(ClientError):
    status: ClassVar[int] = 409


class ValidationError(ClientError):
    """Harvest refused the submitted fields; ``str(exc)`` holds its message."""

    status: ClassVar[int] = 422


class RateLimitError(ClientError):
    """Request quota exhausted.

    ``retry_after`` is the server's ``Retry-After`` hint in seconds. The
    client never waits on it; callers decide whether and when to retry.
    """

    status: ClassVar[int] = 429

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(HTTPStatusError):
    """5xx: Harvest failed to handle a valid request."""

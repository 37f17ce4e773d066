"""Error taxonomy and Harvest error payload handling."""

from harvest_client.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    DeadlineExceededError,
    DecodingError,
    EncodingError,
    ForbiddenError,
    HarvestError,
    HTTPStatusError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
    URLError,
    ValidationError,
)
from harvest_client.errors.handler import raise_for_status
from harvest_client.errors.models import ErrorDetail

__all__ = [
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "DeadlineExceededError",
    "DecodingError",
    "EncodingError",
    "ErrorDetail",
    "ForbiddenError",
    "HTTPStatusError",
    "HarvestError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "URLError",
    "UnauthorizedError",
    "ValidationError",
    "raise_for_status",
]

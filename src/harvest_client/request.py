"""Request construction: URL joining, query encoding and JSON bodies.

Nothing in this module touches the network. ``build_request`` produces a
``RequestEnvelope`` that ``HarvestClient.send`` later turns into an
``httpx.Request``.

Query options and request bodies are plain dataclasses whose fields default
to ``UNSET``. Only fields that are set make it onto the wire, which is what
gives ``PATCH`` calls their partial-update semantics::

    envelope = build_request(
        "https://api.harvestapp.com/v2",
        "PATCH",
        "clients/1",
        body=ClientUpdateRequest(is_active=False),
    )
    envelope.body  # b'{"is_active":false}'
"""

import dataclasses
import json
import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime
from typing import Any

import httpx

from harvest_client.errors.exceptions import EncodingError, URLError
from harvest_client.types import UNSET

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


@dataclasses.dataclass(frozen=True)
class RequestEnvelope:
    """A fully-formed outgoing request."""

    method: str
    url: str
    params: tuple[tuple[str, str], ...] = ()
    body: bytes | None = None

    @property
    def headers(self) -> dict[str, str]:
        if self.body is None:
            return {}
        return {"Content-Type": JSON_CONTENT_TYPE}

    def to_httpx(self, client: httpx.AsyncClient) -> httpx.Request:
        """Build the ``httpx.Request`` for this envelope on ``client``."""
        return client.build_request(
            self.method,
            self.url,
            params=list(self.params) if self.params else None,
            content=self.body,
            headers=self.headers,
        )


def json_key(field: dataclasses.Field) -> str:
    """Wire name of a dataclass field (``metadata={"json": ...}`` overrides)."""
    return field.metadata.get("json", field.name)


def format_datetime(value: datetime) -> str:
    """Format as ISO-8601 UTC with a ``Z`` suffix; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def join_url(base_url: str, path: str) -> str:
    """Join ``path`` onto ``base_url`` and validate the result.

    Raises:
        URLError: If the result is not an absolute http(s) URL with a host.
    """
    if not path:
        joined = base_url.rstrip("/")
    else:
        joined = f"{base_url.rstrip('/')}/{path.lstrip('/')}"

    try:
        url = httpx.URL(joined)
    except (httpx.InvalidURL, TypeError) as e:
        raise URLError(f"Invalid URL {joined!r}: {e}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise URLError(f"Not an absolute http(s) URL: {joined!r}")

    return joined


def to_json_value(value: Any) -> Any:
    """Convert a dataclass tree into JSON-compatible Python values.

    Unset fields are dropped; ``None`` is kept and becomes ``null``.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        result = {}
        for field in dataclasses.fields(value):
            field_value = getattr(value, field.name)
            if field_value is UNSET:
                continue
            result[json_key(field)] = to_json_value(field_value)
        return result
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    if isinstance(value, dict):
        return {key: to_json_value(item) for key, item in value.items()}
    return value


def encode_body(body: Any) -> bytes | None:
    """Serialize a request body dataclass to JSON bytes.

    Raises:
        EncodingError: If ``body`` is not a dataclass instance or contains
            values JSON cannot represent.
    """
    if body is None:
        return None

    if not dataclasses.is_dataclass(body) or isinstance(body, type):
        raise EncodingError(f"Request body must be a dataclass instance, got {type(body).__name__}")

    try:
        return json.dumps(to_json_value(body), separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Cannot encode {type(body).__name__} as JSON: {e}") from e


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (str, int, float)):
        return str(value)
    raise EncodingError(f"Unsupported query value type: {type(value).__name__}")


def encode_query(options: Any) -> list[tuple[str, str]]:
    """Flatten an options dataclass into ordered ``(key, value)`` pairs.

    Unset and ``None`` fields are left out, so empty options produce no
    query string at all. Pairs follow field declaration order.

    Raises:
        EncodingError: If ``options`` is not a dataclass instance or holds a
            value with no query representation.
    """
    if options is None:
        return []

    if not dataclasses.is_dataclass(options) or isinstance(options, type):
        raise EncodingError(f"Query options must be a dataclass instance, got {type(options).__name__}")

    params = []
    for field in dataclasses.fields(options):
        value = getattr(options, field.name)
        if value is UNSET or value is None:
            continue
        if isinstance(value, Sequence) and not isinstance(value, str):
            formatted = ",".join(_format_query_value(item) for item in value)
        else:
            formatted = _format_query_value(value)
        params.append((json_key(field), formatted))
    return params


def build_request(
    base_url: str,
    method: str,
    path: str,
    query: Any = None,
    body: Any = None,
) -> RequestEnvelope:
    """Build a request envelope for ``method`` on ``base_url``/``path``.

    Args:
        base_url: Absolute API root, e.g. ``https://api.harvestapp.com/v2``.
        method: HTTP method.
        path: Path relative to ``base_url``.
        query: Optional options dataclass turned into query parameters.
        body: Optional dataclass sent as the JSON payload.

    Returns:
        The request envelope.

    Raises:
        URLError: If the URL is not valid.
        EncodingError: If the query or body cannot be serialized.
    """
    url = join_url(base_url, path)
    params = tuple(encode_query(query))
    payload = encode_body(body)

    logger.debug(f"Built {method.upper()} {url} with {len(params)} query parameter(s)")

    return RequestEnvelope(method=method.upper(), url=url, params=params, body=payload)

"""Response decoding into typed dataclasses.

``decode_model`` walks a dataclass's type hints and converts a parsed JSON
object field by field:

- keys the dataclass does not declare are ignored;
- missing keys leave the field at ``UNSET``;
- ``null`` becomes ``None`` when the annotation admits ``None`` and
  ``UNSET`` otherwise;
- ``datetime`` fields accept ISO-8601 strings and are normalized to UTC.
"""

import dataclasses
import json
import logging
import types
from datetime import UTC, date, datetime
from functools import cache
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

import httpx

from harvest_client.errors.exceptions import DecodingError
from harvest_client.errors.handler import raise_for_status
from harvest_client.request import json_key
from harvest_client.types import UNSET, Unset

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NoneType = type(None)


class ShapeError(ValueError):
    """Value does not match the annotated type. Carries the field path."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path or '<root>'}: {message}")
        self.path = path


def parse_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


@cache
def _field_hints(model: type) -> dict[str, Any]:
    return get_type_hints(model)


def _convert(tp: Any, value: Any, path: str) -> Any:
    if tp is Any:
        return value

    origin = get_origin(tp)

    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(tp) if arg is not Unset]
        if value is None:
            return None if _NoneType in args else UNSET
        candidates = [arg for arg in args if arg is not _NoneType]
        if len(candidates) == 1:
            return _convert(candidates[0], value, path)
        for candidate in candidates:
            try:
                return _convert(candidate, value, path)
            except ShapeError:
                continue
        raise ShapeError(path, f"{value!r} matches none of {candidates}")

    if value is None:
        raise ShapeError(path, "unexpected null")

    if origin is list:
        if not isinstance(value, list):
            raise ShapeError(path, f"expected array, got {type(value).__name__}")
        (item_type,) = get_args(tp) or (Any,)
        return [_convert(item_type, item, f"{path}[{index}]") for index, item in enumerate(value)]

    if origin is dict or tp is dict:
        if not isinstance(value, dict):
            raise ShapeError(path, f"expected object, got {type(value).__name__}")
        return dict(value)

    if dataclasses.is_dataclass(tp):
        return _decode_dataclass(tp, value, path)

    if tp is datetime:
        if not isinstance(value, str):
            raise ShapeError(path, f"expected timestamp string, got {type(value).__name__}")
        try:
            return parse_datetime(value)
        except ValueError as e:
            raise ShapeError(path, f"invalid timestamp {value!r}") from e

    if tp is date:
        if not isinstance(value, str):
            raise ShapeError(path, f"expected date string, got {type(value).__name__}")
        try:
            return date.fromisoformat(value)
        except ValueError as e:
            raise ShapeError(path, f"invalid date {value!r}") from e

    if tp is bool:
        if not isinstance(value, bool):
            raise ShapeError(path, f"expected boolean, got {type(value).__name__}")
        return value

    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ShapeError(path, f"expected integer, got {type(value).__name__}")
        return value

    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ShapeError(path, f"expected number, got {type(value).__name__}")
        return float(value)

    if tp is str:
        if not isinstance(value, str):
            raise ShapeError(path, f"expected string, got {type(value).__name__}")
        return value

    raise ShapeError(path, f"unsupported annotation {tp!r}")


def _decode_dataclass(model: type, data: Any, path: str) -> Any:
    if not isinstance(data, dict):
        raise ShapeError(path, f"expected object, got {type(data).__name__}")

    hints = _field_hints(model)
    kwargs = {}
    for field in dataclasses.fields(model):
        key = json_key(field)
        if key not in data:
            continue
        field_path = f"{path}.{key}" if path else key
        converted = _convert(hints[field.name], data[key], field_path)
        if converted is not UNSET:
            kwargs[field.name] = converted
    return model(**kwargs)


def decode_model(model: type[T], data: Any, path: str = "") -> T:
    """Build a ``model`` dataclass from parsed JSON ``data``.

    ``path`` prefixes field paths in error messages.

    Raises:
        DecodingError: If ``data`` does not match the shape of ``model``.
    """
    try:
        return _decode_dataclass(model, data, path)
    except ShapeError as e:
        raise DecodingError(f"Cannot decode {model.__name__}: {e}") from e


def parse_json(response: httpx.Response) -> Any:
    """Parse the JSON body of ``response``.

    Raises:
        DecodingError: If the body is not valid JSON.
    """
    try:
        return json.loads(response.content)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodingError(
            f"Response body is not valid JSON: {e}",
            status_code=response.status_code,
            response=response,
        ) from e


def decode_response(response: httpx.Response, model: type[T] | None) -> T | None:
    """Check the status of ``response`` and decode its body into ``model``.

    Args:
        response: The raw HTTP response.
        model: Destination dataclass, or None when no body is expected.

    Returns:
        The decoded dataclass, or None when ``model`` is None.

    Raises:
        HTTPStatusError: If the status is not 2xx.
        DecodingError: If the body is empty, malformed or has the wrong shape.
    """
    raise_for_status(response)

    if model is None:
        return None
    if not response.content.strip():
        raise DecodingError(
            f"Response body is empty, expected {model.__name__}",
            status_code=response.status_code,
            response=response,
        )

    data = parse_json(response)
    try:
        return decode_model(model, data)
    except DecodingError as e:
        logger.warning(f"Decoding HTTP {response.status_code} response as {model.__name__} failed: {e}")
        raise DecodingError(str(e), status_code=response.status_code, response=response) from e

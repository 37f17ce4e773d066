"""Common types for the Harvest client.

Fields on request and entity dataclasses default to ``UNSET`` so that an
absent value can be told apart from a present falsy one (``False``, ``0``,
``""``) or an explicit ``None``::

    ClientUpdateRequest(is_active=False)  # sends {"is_active": false}
    ClientUpdateRequest()                 # sends {}
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx


class Unset:
    """Type of the ``UNSET`` sentinel. There is only ever one instance."""

    _instance: "Unset | None" = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __copy__(self) -> "Unset":
        return self

    def __deepcopy__(self, memo: dict) -> "Unset":
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET = Unset()

T = TypeVar("T")


def is_set(value: Any) -> bool:
    """Return True unless ``value`` is the ``UNSET`` sentinel."""
    return value is not UNSET


def value_or(value: "T | Unset", default: T) -> T:
    """Return ``value``, or ``default`` when it is unset."""
    if value is UNSET:
        return default
    return value  # type: ignore[return-value]


@dataclass
class Response(Generic[T]):
    """Raw response metadata alongside the decoded result."""

    status_code: int
    content: bytes
    headers: httpx.Headers
    parsed: T | None = None

    @classmethod
    def from_httpx(cls, response: httpx.Response, parsed: T | None = None) -> "Response[T]":
        return cls(
            status_code=response.status_code,
            content=response.content,
            headers=response.headers,
            parsed=parsed,
        )

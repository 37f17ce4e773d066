"""Page-link pagination for list endpoints.

Harvest embeds pagination in every list response body::

    {
        "clients": [...],
        "per_page": 100,
        "total_pages": 3,
        "total_entries": 253,
        "next_page": 2,
        "previous_page": null,
        "page": 1,
        "links": {
            "first": "https://api.harvestapp.com/v2/clients?page=1&per_page=100",
            "next": "https://api.harvestapp.com/v2/clients?page=2&per_page=100",
            "previous": null,
            "last": "https://api.harvestapp.com/v2/clients?page=3&per_page=100"
        }
    }

When the body has no ``links`` object, links are taken from an RFC 8288
``Link`` header instead. Only one page is decoded at a time; following
``next`` is up to the caller.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import httpx

from harvest_client.decoding import decode_model, parse_json
from harvest_client.errors.exceptions import DecodingError
from harvest_client.errors.handler import raise_for_status

logger = logging.getLogger(__name__)

T = TypeVar("T")

LINK_RELS = ("first", "next", "previous", "last")


@dataclass(frozen=True)
class PageLinks:
    """Absolute page URLs, copied verbatim from the server."""

    first: str | None = None
    last: str | None = None
    next: str | None = None
    previous: str | None = None


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata for one decoded page."""

    per_page: int
    total_pages: int
    total_entries: int
    page: int
    next_page: int | None = None
    previous_page: int | None = None
    links: PageLinks = field(default_factory=PageLinks)

    @property
    def has_next(self) -> bool:
        return self.next_page is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_page is not None


@dataclass(frozen=True)
class ResourceList(Generic[T]):
    """One page of a list endpoint: items in server order plus pagination."""

    items: list[T]
    pagination: Pagination

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def _require_int(raw: Mapping[str, Any], key: str) -> int:
    if key not in raw:
        raise DecodingError(f"Pagination field {key!r} is missing")
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodingError(f"Pagination field {key!r} must be an integer, got {value!r}")
    return value


def _optional_int(raw: Mapping[str, Any], key: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodingError(f"Pagination field {key!r} must be an integer or null, got {value!r}")
    return value


def _link_url(value: Any, rel: str) -> str | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise DecodingError(f"Page link {rel!r} must be a string, got {value!r}")
    try:
        httpx.URL(value)
    except httpx.InvalidURL as e:
        raise DecodingError(f"Page link {rel!r} is malformed: {value!r}") from e
    return value


def parse_link_header(links: Mapping[str, Mapping[str, str]]) -> PageLinks:
    """Build ``PageLinks`` from ``httpx.Response.links``.

    ``httpx`` keys parsed ``Link`` header entries by their ``rel``; ``prev``
    is accepted as an alias of ``previous``.
    """
    found = {}
    for rel, link in links.items():
        name = "previous" if rel == "prev" else rel
        if name in LINK_RELS:
            found[name] = _link_url(link.get("url"), name)
    return PageLinks(**found)


def parse_links(raw: Any) -> PageLinks:
    """Build ``PageLinks`` from the embedded ``links`` object."""
    if not isinstance(raw, Mapping):
        raise DecodingError(f"Pagination links must be an object, got {type(raw).__name__}")
    return PageLinks(**{rel: _link_url(raw.get(rel), rel) for rel in LINK_RELS})


def parse_pagination(
    raw: Mapping[str, Any],
    header_links: Mapping[str, Mapping[str, str]] | None = None,
) -> Pagination:
    """Decode the pagination block of a list response.

    Args:
        raw: The parsed response body.
        header_links: ``httpx.Response.links``, used when ``raw`` carries no
            ``links`` object.

    Returns:
        Pagination metadata with its page links.

    Raises:
        DecodingError: If fields are missing or mistyped, the page numbers
            contradict each other, or a non-empty collection has no links.
    """
    per_page = _require_int(raw, "per_page")
    total_pages = _require_int(raw, "total_pages")
    total_entries = _require_int(raw, "total_entries")
    page = _require_int(raw, "page")
    next_page = _optional_int(raw, "next_page")
    previous_page = _optional_int(raw, "previous_page")

    if (next_page is not None) != (page < total_pages):
        raise DecodingError(f"Inconsistent pagination: next_page={next_page} on page {page} of {total_pages}")
    if next_page is not None and next_page != page + 1:
        raise DecodingError(f"Inconsistent pagination: next_page={next_page} does not follow page {page}")
    if (previous_page is not None) != (page > 1):
        raise DecodingError(f"Inconsistent pagination: previous_page={previous_page} on page {page}")
    if previous_page is not None and previous_page != page - 1:
        raise DecodingError(f"Inconsistent pagination: previous_page={previous_page} does not precede page {page}")

    if raw.get("links") is not None:
        links = parse_links(raw["links"])
    elif header_links:
        links = parse_link_header(header_links)
    else:
        links = None

    if links is None:
        if total_pages >= 1:
            raise DecodingError("Pagination has no links in the body or the Link header")
        links = PageLinks()
    else:
        if total_pages >= 1 and (links.first is None or links.last is None):
            raise DecodingError("Pagination links must include 'first' and 'last'")
        if (links.next is not None) != (next_page is not None):
            raise DecodingError("Pagination link 'next' disagrees with next_page")
        if (links.previous is not None) != (previous_page is not None):
            raise DecodingError("Pagination link 'previous' disagrees with previous_page")

    return Pagination(
        per_page=per_page,
        total_pages=total_pages,
        total_entries=total_entries,
        page=page,
        next_page=next_page,
        previous_page=previous_page,
        links=links,
    )


def parse_page(response: httpx.Response, collection_key: str, model: type[T]) -> ResourceList[T]:
    """Decode one page of a list endpoint.

    Args:
        response: The raw HTTP response.
        collection_key: Body key holding the items, e.g. ``"clients"``.
        model: Dataclass for each item.

    Raises:
        HTTPStatusError: If the status is not 2xx.
        DecodingError: If the body, an item or the pagination is malformed.
    """
    raise_for_status(response)

    data = parse_json(response)
    try:
        if not isinstance(data, dict):
            raise DecodingError(f"List response must be an object, got {type(data).__name__}")

        raw_items = data.get(collection_key)
        if not isinstance(raw_items, list):
            raise DecodingError(f"List response has no {collection_key!r} array")

        items = [decode_model(model, item, f"{collection_key}[{index}]") for index, item in enumerate(raw_items)]

        pagination = parse_pagination(data, response.links)
    except DecodingError as e:
        raise DecodingError(str(e), status_code=response.status_code, response=response) from e

    if len(items) > pagination.per_page:
        logger.warning(f"Page {pagination.page} holds {len(items)} items but per_page is {pagination.per_page}")

    return ResourceList(items=items, pagination=pagination)

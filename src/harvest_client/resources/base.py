"""Generic resource services.

Every Harvest resource follows the same shape, so one service class carries
the whole pipeline (build request → send → decode → paginate) and each
resource only declares its path, collection key and dataclasses::

    class ClientService(ResourceService[Client, ClientListOptions, ClientCreateRequest, ClientUpdateRequest]):
        path = "clients"
        collection_key = "clients"
        entity = Client
        options_type = ClientListOptions

Every operation has a ``*_detailed`` twin returning ``Response`` so callers
can reach the status code and headers.
"""

import dataclasses
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

import httpx

from harvest_client.decoding import decode_response
from harvest_client.pagination import ResourceList, parse_page
from harvest_client.request import build_request
from harvest_client.types import Response

if TYPE_CHECKING:
    from harvest_client.client import HarvestClient

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")
OptionsT = TypeVar("OptionsT")
CreateT = TypeVar("CreateT")
UpdateT = TypeVar("UpdateT")
M = TypeVar("M")


class BaseService:
    """Shared plumbing: one request, one response, one decode."""

    path: ClassVar[str]

    def __init__(self, client: "HarvestClient") -> None:
        self._client = client

    async def _send(
        self,
        method: str,
        path: str,
        *,
        query: Any = None,
        body: Any = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        envelope = build_request(self._client.base_url, method, path, query=query, body=body)
        return await self._client.send(envelope, timeout=timeout)

    async def _fetch(
        self,
        method: str,
        path: str,
        model: type[M] | None,
        *,
        query: Any = None,
        body: Any = None,
        timeout: float | None = None,
    ) -> Response[M]:
        response = await self._send(method, path, query=query, body=body, timeout=timeout)
        return Response.from_httpx(response, decode_response(response, model))


class ResourceService(BaseService, Generic[EntityT, OptionsT, CreateT, UpdateT]):
    """List/get/create/update/delete for one collection resource."""

    collection_key: ClassVar[str]
    entity: ClassVar[type]
    options_type: ClassVar[type]

    def item_path(self, id: int | str) -> str:
        return f"{self.path}/{id}"

    async def list_detailed(
        self, options: OptionsT | None = None, *, timeout: float | None = None
    ) -> Response[ResourceList[EntityT]]:
        response = await self._send("GET", self.path, query=options, timeout=timeout)
        page = parse_page(response, self.collection_key, self.entity)
        logger.debug(
            f"Listed {len(page.items)} {self.collection_key} "
            f"(page {page.pagination.page}/{page.pagination.total_pages})"
        )
        return Response.from_httpx(response, page)

    async def list(self, options: OptionsT | None = None, *, timeout: float | None = None) -> ResourceList[EntityT]:
        """Fetch one page of the collection."""
        return (await self.list_detailed(options, timeout=timeout)).parsed

    async def iter_pages(
        self, options: OptionsT | None = None, *, timeout: float | None = None
    ) -> AsyncIterator[ResourceList[EntityT]]:
        """Yield successive pages, requesting ``next_page`` until there is none.

        ``timeout`` applies to each page request separately.
        """
        options = options if options is not None else self.options_type()
        while True:
            page = await self.list(options, timeout=timeout)
            yield page
            if not page.pagination.has_next:
                return
            options = dataclasses.replace(options, page=page.pagination.next_page)

    async def get_detailed(self, id: int | str, *, timeout: float | None = None) -> Response[EntityT]:
        return await self._fetch("GET", self.item_path(id), self.entity, timeout=timeout)

    async def get(self, id: int | str, *, timeout: float | None = None) -> EntityT:
        """Fetch one item by id."""
        return (await self.get_detailed(id, timeout=timeout)).parsed

    async def create_detailed(self, request: CreateT, *, timeout: float | None = None) -> Response[EntityT]:
        return await self._fetch("POST", self.path, self.entity, body=request, timeout=timeout)

    async def create(self, request: CreateT, *, timeout: float | None = None) -> EntityT:
        """Create an item and return it as stored by the server."""
        return (await self.create_detailed(request, timeout=timeout)).parsed

    async def update_detailed(
        self, id: int | str, request: UpdateT, *, timeout: float | None = None
    ) -> Response[EntityT]:
        return await self._fetch("PATCH", self.item_path(id), self.entity, body=request, timeout=timeout)

    async def update(self, id: int | str, request: UpdateT, *, timeout: float | None = None) -> EntityT:
        """Partially update an item; unset request fields are left untouched."""
        return (await self.update_detailed(id, request, timeout=timeout)).parsed

    async def delete_detailed(self, id: int | str, *, timeout: float | None = None) -> Response[None]:
        return await self._fetch("DELETE", self.item_path(id), None, timeout=timeout)

    async def delete(self, id: int | str, *, timeout: float | None = None) -> None:
        """Delete an item."""
        await self.delete_detailed(id, timeout=timeout)

"""Clients: ``/clients``."""

from dataclasses import dataclass
from datetime import datetime

from harvest_client.resources.base import ResourceService
from harvest_client.types import UNSET, Unset


@dataclass(frozen=True)
class Client:
    id: int | Unset = UNSET
    name: str | Unset = UNSET
    is_active: bool | Unset = UNSET
    address: str | Unset = UNSET
    statement_key: str | Unset = UNSET
    currency: str | Unset = UNSET
    created_at: datetime | Unset = UNSET
    updated_at: datetime | Unset = UNSET


@dataclass
class ClientListOptions:
    is_active: bool | Unset = UNSET
    updated_since: datetime | Unset = UNSET
    page: int | Unset = UNSET
    per_page: int | Unset = UNSET


@dataclass
class ClientCreateRequest:
    name: str | Unset = UNSET
    is_active: bool | Unset = UNSET
    address: str | None | Unset = UNSET
    currency: str | Unset = UNSET


@dataclass
class ClientUpdateRequest:
    name: str | Unset = UNSET
    is_active: bool | Unset = UNSET
    address: str | None | Unset = UNSET
    currency: str | Unset = UNSET


class ClientService(ResourceService[Client, ClientListOptions, ClientCreateRequest, ClientUpdateRequest]):
    path = "clients"
    collection_key = "clients"
    entity = Client
    options_type = ClientListOptions

"""Client contacts: ``/contacts``."""

from dataclasses import dataclass
from datetime import datetime

from harvest_client.resources.base import ResourceService
from harvest_client.resources.common import ClientRef
from harvest_client.types import UNSET, Unset


@dataclass(frozen=True)
class Contact:
    id: int | Unset = UNSET
    client: ClientRef | Unset = UNSET
    title: str | Unset = UNSET
    first_name: str | Unset = UNSET
    last_name: str | Unset = UNSET
    email: str | Unset = UNSET
    phone_office: str | Unset = UNSET
    phone_mobile: str | Unset = UNSET
    fax: str | Unset = UNSET
    created_at: datetime | Unset = UNSET
    updated_at: datetime | Unset = UNSET


@dataclass
class ContactListOptions:
    client_id: int | Unset = UNSET
    updated_since: datetime | Unset = UNSET
    page: int | Unset = UNSET
    per_page: int | Unset = UNSET


@dataclass
class ContactCreateRequest:
    client_id: int | Unset = UNSET
    first_name: str | Unset = UNSET
    title: str | None | Unset = UNSET
    last_name: str | None | Unset = UNSET
    email: str | None | Unset = UNSET
    phone_office: str | None | Unset = UNSET
    phone_mobile: str | None | Unset = UNSET
    fax: str | None | Unset = UNSET


@dataclass
class ContactUpdateRequest:
    client_id: int | Unset = UNSET
    first_name: str | Unset = UNSET
    title: str | None | Unset = UNSET
    last_name: str | None | Unset = UNSET
    email: str | None | Unset = UNSET
    phone_office: str | None | Unset = UNSET
    phone_mobile: str | None | Unset = UNSET
    fax: str | None | Unset = UNSET


class ContactService(ResourceService[Contact, ContactListOptions, ContactCreateRequest, ContactUpdateRequest]):
    path = "contacts"
    collection_key = "contacts"
    entity = Contact
    options_type = ContactListOptions

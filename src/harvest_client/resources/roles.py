"""Roles: ``/roles``."""

from dataclasses import dataclass
from datetime import datetime

from harvest_client.resources.base import ResourceService
from harvest_client.types import UNSET, Unset


@dataclass(frozen=True)
class Role:
    id: int | Unset = UNSET
    name: str | Unset = UNSET
    user_ids: list[int] | Unset = UNSET
    created_at: datetime | Unset = UNSET
    updated_at: datetime | Unset = UNSET


@dataclass
class RoleListOptions:
    page: int | Unset = UNSET
    per_page: int | Unset = UNSET


@dataclass
class RoleCreateRequest:
    name: str | Unset = UNSET
    user_ids: list[int] | Unset = UNSET


@dataclass
class RoleUpdateRequest:
    name: str | Unset = UNSET
    user_ids: list[int] | Unset = UNSET


class RoleService(ResourceService[Role, RoleListOptions, RoleCreateRequest, RoleUpdateRequest]):
    path = "roles"
    collection_key = "roles"
    entity = Role
    options_type = RoleListOptions

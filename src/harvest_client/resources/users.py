"""Users: ``/users`` and the authenticated user at ``/users/me``."""

from dataclasses import dataclass
from datetime import datetime

from harvest_client.resources.base import ResourceService
from harvest_client.types import UNSET, Response, Unset


@dataclass(frozen=True)
class User:
    id: int | Unset = UNSET
    first_name: str | Unset = UNSET
    last_name: str | Unset = UNSET
    email: str | Unset = UNSET
    telephone: str | Unset = UNSET
    timezone: str | Unset = UNSET
    has_access_to_all_future_projects: bool | Unset = UNSET
    is_contractor: bool | Unset = UNSET
    is_active: bool | Unset = UNSET
    weekly_capacity: int | Unset = UNSET
    default_hourly_rate: float | Unset = UNSET
    cost_rate: float | Unset = UNSET
    roles: list[str] | Unset = UNSET
    access_roles: list[str] | Unset = UNSET
    avatar_url: str | Unset = UNSET
    created_at: datetime | Unset = UNSET
    updated_at: datetime | Unset = UNSET


@dataclass
class UserListOptions:
    is_active: bool | Unset = UNSET
    updated_since: datetime | Unset = UNSET
    page: int | Unset = UNSET
    per_page: int | Unset = UNSET


@dataclass
class UserCreateRequest:
    first_name: str | Unset = UNSET
    last_name: str | Unset = UNSET
    email: str | Unset = UNSET
    timezone: str | Unset = UNSET
    has_access_to_all_future_projects: bool | Unset = UNSET
    is_contractor: bool | Unset = UNSET
    is_active: bool | Unset = UNSET
    weekly_capacity: int | Unset = UNSET
    default_hourly_rate: float | None | Unset = UNSET
    cost_rate: float | None | Unset = UNSET
    roles: list[str] | Unset = UNSET
    access_roles: list[str] | Unset = UNSET


@dataclass
class UserUpdateRequest(UserCreateRequest):
    pass


class UserService(ResourceService[User, UserListOptions, UserCreateRequest, UserUpdateRequest]):
    path = "users"
    collection_key = "users"
    entity = User
    options_type = UserListOptions

    async def me_detailed(self, *, timeout: float | None = None) -> Response[User]:
        return await self._fetch("GET", f"{self.path}/me", User, timeout=timeout)

    async def me(self, *, timeout: float | None = None) -> User:
        """Fetch the user the access token belongs to."""
        return (await self.me_detailed(timeout=timeout)).parsed

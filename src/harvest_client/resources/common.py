"""Summary objects Harvest nests inside other resources."""

from dataclasses import dataclass

from harvest_client.types import UNSET, Unset


@dataclass(frozen=True)
class ClientRef:
    id: int | Unset = UNSET
    name: str | Unset = UNSET
    currency: str | Unset = UNSET


@dataclass(frozen=True)
class ProjectRef:
    id: int | Unset = UNSET
    name: str | Unset = UNSET
    code: str | Unset = UNSET


@dataclass(frozen=True)
class TaskRef:
    id: int | Unset = UNSET
    name: str | Unset = UNSET


@dataclass(frozen=True)
class UserRef:
    id: int | Unset = UNSET
    name: str | Unset = UNSET

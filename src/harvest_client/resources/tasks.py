"""Tasks: ``/tasks``."""

from dataclasses import dataclass
from datetime import datetime

from harvest_client.resources.base import ResourceService
from harvest_client.types import UNSET, Unset


@dataclass(frozen=True)
class Task:
    id: int | Unset = UNSET
    name: str | Unset = UNSET
    billable_by_default: bool | Unset = UNSET
    default_hourly_rate: float | Unset = UNSET
    is_default: bool | Unset = UNSET
    is_active: bool | Unset = UNSET
    created_at: datetime | Unset = UNSET
    updated_at: datetime | Unset = UNSET


@dataclass
class TaskListOptions:
    is_active: bool | Unset = UNSET
    updated_since: datetime | Unset = UNSET
    page: int | Unset = UNSET
    per_page: int | Unset = UNSET


@dataclass
class TaskCreateRequest:
    name: str | Unset = UNSET
    billable_by_default: bool | Unset = UNSET
    default_hourly_rate: float | None | Unset = UNSET
    is_default: bool | Unset = UNSET
    is_active: bool | Unset = UNSET


@dataclass
class TaskUpdateRequest:
    name: str | Unset = UNSET
    billable_by_default: bool | Unset = UNSET
    default_hourly_rate: float | None | Unset = UNSET
    is_default: bool | Unset = UNSET
    is_active: bool | Unset = UNSET


class TaskService(ResourceService[Task, TaskListOptions, TaskCreateRequest, TaskUpdateRequest]):
    path = "tasks"
    collection_key = "tasks"
    entity = Task
    options_type = TaskListOptions

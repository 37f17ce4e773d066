"""Time entries: ``/time_entries``, including timer stop/restart."""

from dataclasses import dataclass, field
from datetime import date, datetime

from harvest_client.resources.base import ResourceService
from harvest_client.resources.common import ClientRef, ProjectRef, TaskRef, UserRef
from harvest_client.types import UNSET, Unset


@dataclass(frozen=True)
class TimeEntry:
    id: int | Unset = UNSET
    spent_date: date | Unset = UNSET
    user: UserRef | Unset = UNSET
    client: ClientRef | Unset = UNSET
    project: ProjectRef | Unset = UNSET
    task: TaskRef | Unset = UNSET
    hours: float | Unset = UNSET
    notes: str | Unset = UNSET
    is_locked: bool | Unset = UNSET
    locked_reason: str | Unset = UNSET
    is_closed: bool | Unset = UNSET
    is_billed: bool | Unset = UNSET
    timer_started_at: datetime | Unset = UNSET
    started_time: str | Unset = UNSET
    ended_time: str | Unset = UNSET
    is_running: bool | Unset = UNSET
    billable: bool | Unset = UNSET
    budgeted: bool | Unset = UNSET
    billable_rate: float | Unset = UNSET
    cost_rate: float | Unset = UNSET
    created_at: datetime | Unset = UNSET
    updated_at: datetime | Unset = UNSET


@dataclass
class TimeEntryListOptions:
    user_id: int | Unset = UNSET
    client_id: int | Unset = UNSET
    project_id: int | Unset = UNSET
    task_id: int | Unset = UNSET
    is_billed: bool | Unset = UNSET
    is_running: bool | Unset = UNSET
    updated_since: datetime | Unset = UNSET
    from_: date | Unset = field(default=UNSET, metadata={"json": "from"})
    to: date | Unset = UNSET
    page: int | Unset = UNSET
    per_page: int | Unset = UNSET


@dataclass
class TimeEntryCreateRequest:
    project_id: int | Unset = UNSET
    task_id: int | Unset = UNSET
    spent_date: date | Unset = UNSET
    user_id: int | Unset = UNSET
    started_time: str | Unset = UNSET
    ended_time: str | Unset = UNSET
    hours: float | Unset = UNSET
    notes: str | None | Unset = UNSET


@dataclass
class TimeEntryUpdateRequest:
    project_id: int | Unset = UNSET
    task_id: int | Unset = UNSET
    spent_date: date | Unset = UNSET
    started_time: str | None | Unset = UNSET
    ended_time: str | None | Unset = UNSET
    hours: float | Unset = UNSET
    notes: str | None | Unset = UNSET


class TimeEntryService(
    ResourceService[TimeEntry, TimeEntryListOptions, TimeEntryCreateRequest, TimeEntryUpdateRequest]
):
    path = "time_entries"
    collection_key = "time_entries"
    entity = TimeEntry
    options_type = TimeEntryListOptions

    async def stop(self, id: int | str, *, timeout: float | None = None) -> TimeEntry:
        """Stop a running timer."""
        response = await self._fetch("PATCH", f"{self.item_path(id)}/stop", TimeEntry, timeout=timeout)
        return response.parsed

    async def restart(self, id: int | str, *, timeout: float | None = None) -> TimeEntry:
        """Restart a stopped timer."""
        response = await self._fetch("PATCH", f"{self.item_path(id)}/restart", TimeEntry, timeout=timeout)
        return response.parsed

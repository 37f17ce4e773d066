"""Projects: ``/projects``."""

from dataclasses import dataclass
from datetime import date, datetime

from harvest_client.resources.base import ResourceService
from harvest_client.resources.common import ClientRef
from harvest_client.types import UNSET, Unset


@dataclass(frozen=True)
class Project:
    id: int | Unset = UNSET
    client: ClientRef | Unset = UNSET
    name: str | Unset = UNSET
    code: str | Unset = UNSET
    is_active: bool | Unset = UNSET
    is_billable: bool | Unset = UNSET
    is_fixed_fee: bool | Unset = UNSET
    bill_by: str | Unset = UNSET
    hourly_rate: float | Unset = UNSET
    budget: float | Unset = UNSET
    budget_by: str | Unset = UNSET
    budget_is_monthly: bool | Unset = UNSET
    notify_when_over_budget: bool | Unset = UNSET
    over_budget_notification_percentage: float | Unset = UNSET
    show_budget_to_all: bool | Unset = UNSET
    cost_budget: float | Unset = UNSET
    cost_budget_include_expenses: bool | Unset = UNSET
    fee: float | Unset = UNSET
    notes: str | Unset = UNSET
    starts_on: date | Unset = UNSET
    ends_on: date | Unset = UNSET
    created_at: datetime | Unset = UNSET
    updated_at: datetime | Unset = UNSET


@dataclass
class ProjectListOptions:
    is_active: bool | Unset = UNSET
    client_id: int | Unset = UNSET
    updated_since: datetime | Unset = UNSET
    page: int | Unset = UNSET
    per_page: int | Unset = UNSET


@dataclass
class ProjectCreateRequest:
    client_id: int | Unset = UNSET
    name: str | Unset = UNSET
    code: str | None | Unset = UNSET
    is_active: bool | Unset = UNSET
    is_billable: bool | Unset = UNSET
    is_fixed_fee: bool | Unset = UNSET
    bill_by: str | Unset = UNSET
    hourly_rate: float | None | Unset = UNSET
    budget: float | None | Unset = UNSET
    budget_by: str | Unset = UNSET
    budget_is_monthly: bool | Unset = UNSET
    notify_when_over_budget: bool | Unset = UNSET
    over_budget_notification_percentage: float | Unset = UNSET
    show_budget_to_all: bool | Unset = UNSET
    cost_budget: float | None | Unset = UNSET
    cost_budget_include_expenses: bool | Unset = UNSET
    fee: float | None | Unset = UNSET
    notes: str | None | Unset = UNSET
    starts_on: date | None | Unset = UNSET
    ends_on: date | None | Unset = UNSET


@dataclass
class ProjectUpdateRequest(ProjectCreateRequest):
    pass


class ProjectService(ResourceService[Project, ProjectListOptions, ProjectCreateRequest, ProjectUpdateRequest]):
    path = "projects"
    collection_key = "projects"
    entity = Project
    options_type = ProjectListOptions

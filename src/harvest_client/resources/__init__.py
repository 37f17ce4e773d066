"""Per-resource services and their request/response dataclasses."""

from harvest_client.resources.base import BaseService, ResourceService
from harvest_client.resources.clients import (
    Client,
    ClientCreateRequest,
    ClientListOptions,
    ClientService,
    ClientUpdateRequest,
)
from harvest_client.resources.common import ClientRef, ProjectRef, TaskRef, UserRef
from harvest_client.resources.company import Company, CompanyService
from harvest_client.resources.contacts import (
    Contact,
    ContactCreateRequest,
    ContactListOptions,
    ContactService,
    ContactUpdateRequest,
)
from harvest_client.resources.invoices import (
    Invoice,
    InvoiceCreateRequest,
    InvoiceLineItem,
    InvoiceLineItemRequest,
    InvoiceListOptions,
    InvoiceService,
    InvoiceUpdateRequest,
)
from harvest_client.resources.projects import (
    Project,
    ProjectCreateRequest,
    ProjectListOptions,
    ProjectService,
    ProjectUpdateRequest,
)
from harvest_client.resources.roles import Role, RoleCreateRequest, RoleListOptions, RoleService, RoleUpdateRequest
from harvest_client.resources.tasks import Task, TaskCreateRequest, TaskListOptions, TaskService, TaskUpdateRequest
from harvest_client.resources.time_entries import (
    TimeEntry,
    TimeEntryCreateRequest,
    TimeEntryListOptions,
    TimeEntryService,
    TimeEntryUpdateRequest,
)
from harvest_client.resources.users import User, UserCreateRequest, UserListOptions, UserService, UserUpdateRequest

__all__ = [
    "BaseService",
    "Client",
    "ClientCreateRequest",
    "ClientListOptions",
    "ClientRef",
    "ClientService",
    "ClientUpdateRequest",
    "Company",
    "CompanyService",
    "Contact",
    "ContactCreateRequest",
    "ContactListOptions",
    "ContactService",
    "ContactUpdateRequest",
    "Invoice",
    "InvoiceCreateRequest",
    "InvoiceLineItem",
    "InvoiceLineItemRequest",
    "InvoiceListOptions",
    "InvoiceService",
    "InvoiceUpdateRequest",
    "Project",
    "ProjectCreateRequest",
    "ProjectListOptions",
    "ProjectRef",
    "ProjectService",
    "ProjectUpdateRequest",
    "ResourceService",
    "Role",
    "RoleCreateRequest",
    "RoleListOptions",
    "RoleService",
    "RoleUpdateRequest",
    "Task",
    "TaskCreateRequest",
    "TaskListOptions",
    "TaskRef",
    "TaskService",
    "TaskUpdateRequest",
    "TimeEntry",
    "TimeEntryCreateRequest",
    "TimeEntryListOptions",
    "TimeEntryService",
    "TimeEntryUpdateRequest",
    "User",
    "UserCreateRequest",
    "UserListOptions",
    "UserRef",
    "UserService",
    "UserUpdateRequest",
]

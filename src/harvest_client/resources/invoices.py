"""Invoices: ``/invoices``, with nested line items."""

from dataclasses import dataclass, field
from datetime import date, datetime

from harvest_client.resources.base import ResourceService
from harvest_client.resources.common import ClientRef, ProjectRef
from harvest_client.types import UNSET, Unset


@dataclass(frozen=True)
class InvoiceLineItem:
    id: int | Unset = UNSET
    project: ProjectRef | Unset = UNSET
    kind: str | Unset = UNSET
    description: str | Unset = UNSET
    quantity: float | Unset = UNSET
    unit_price: float | Unset = UNSET
    amount: float | Unset = UNSET
    taxed: bool | Unset = UNSET
    taxed2: bool | Unset = UNSET


@dataclass(frozen=True)
class Invoice:
    id: int | Unset = UNSET
    client: ClientRef | Unset = UNSET
    line_items: list[InvoiceLineItem] | Unset = UNSET
    client_key: str | Unset = UNSET
    number: str | Unset = UNSET
    purchase_order: str | Unset = UNSET
    amount: float | Unset = UNSET
    due_amount: float | Unset = UNSET
    tax: float | Unset = UNSET
    tax_amount: float | Unset = UNSET
    tax2: float | Unset = UNSET
    tax2_amount: float | Unset = UNSET
    discount: float | Unset = UNSET
    discount_amount: float | Unset = UNSET
    subject: str | Unset = UNSET
    notes: str | Unset = UNSET
    currency: str | Unset = UNSET
    state: str | Unset = UNSET
    period_start: date | Unset = UNSET
    period_end: date | Unset = UNSET
    issue_date: date | Unset = UNSET
    due_date: date | Unset = UNSET
    payment_term: str | Unset = UNSET
    sent_at: datetime | Unset = UNSET
    paid_at: datetime | Unset = UNSET
    paid_date: date | Unset = UNSET
    closed_at: datetime | Unset = UNSET
    created_at: datetime | Unset = UNSET
    updated_at: datetime | Unset = UNSET


@dataclass
class InvoiceListOptions:
    client_id: int | Unset = UNSET
    project_id: int | Unset = UNSET
    updated_since: datetime | Unset = UNSET
    from_: date | Unset = field(default=UNSET, metadata={"json": "from"})
    to: date | Unset = UNSET
    state: str | Unset = UNSET
    page: int | Unset = UNSET
    per_page: int | Unset = UNSET


@dataclass
class InvoiceLineItemRequest:
    id: int | Unset = UNSET
    project_id: int | None | Unset = UNSET
    kind: str | Unset = UNSET
    description: str | None | Unset = UNSET
    quantity: float | Unset = UNSET
    unit_price: float | Unset = UNSET
    taxed: bool | Unset = UNSET
    taxed2: bool | Unset = UNSET
    # Only honored on update: removes the line item with this id.
    destroy: bool | Unset = field(default=UNSET, metadata={"json": "_destroy"})


@dataclass
class InvoiceCreateRequest:
    client_id: int | Unset = UNSET
    number: str | None | Unset = UNSET
    purchase_order: str | None | Unset = UNSET
    tax: float | None | Unset = UNSET
    tax2: float | None | Unset = UNSET
    discount: float | None | Unset = UNSET
    subject: str | None | Unset = UNSET
    notes: str | None | Unset = UNSET
    currency: str | Unset = UNSET
    issue_date: date | Unset = UNSET
    due_date: date | Unset = UNSET
    payment_term: str | Unset = UNSET
    line_items: list[InvoiceLineItemRequest] | Unset = UNSET


@dataclass
class InvoiceUpdateRequest(InvoiceCreateRequest):
    pass


class InvoiceService(ResourceService[Invoice, InvoiceListOptions, InvoiceCreateRequest, InvoiceUpdateRequest]):
    path = "invoices"
    collection_key = "invoices"
    entity = Invoice
    options_type = InvoiceListOptions

"""The authenticated account's company: ``/company``."""

from dataclasses import dataclass

from harvest_client.resources.base import BaseService
from harvest_client.types import UNSET, Response, Unset


@dataclass(frozen=True)
class Company:
    base_uri: str | Unset = UNSET
    full_domain: str | Unset = UNSET
    name: str | Unset = UNSET
    is_active: bool | Unset = UNSET
    week_start_day: str | Unset = UNSET
    wants_timestamp_timers: bool | Unset = UNSET
    time_format: str | Unset = UNSET
    date_format: str | Unset = UNSET
    plan_type: str | Unset = UNSET
    clock: str | Unset = UNSET
    currency_code_display: str | Unset = UNSET
    currency_symbol_display: str | Unset = UNSET
    decimal_symbol: str | Unset = UNSET
    thousands_separator: str | Unset = UNSET
    color_scheme: str | Unset = UNSET
    weekly_capacity: int | Unset = UNSET
    expense_feature: bool | Unset = UNSET
    invoice_feature: bool | Unset = UNSET
    estimate_feature: bool | Unset = UNSET
    approval_feature: bool | Unset = UNSET


class CompanyService(BaseService):
    """Singleton resource: there is exactly one company per account."""

    path = "company"

    async def get_detailed(self, *, timeout: float | None = None) -> Response[Company]:
        return await self._fetch("GET", self.path, Company, timeout=timeout)

    async def get(self, *, timeout: float | None = None) -> Company:
        return (await self.get_detailed(timeout=timeout)).parsed

"""Harvest API client.

Example:
    ```python
    from harvest_client import HarvestClient, HarvestConfig
    from harvest_client.resources.clients import ClientCreateRequest, ClientListOptions

    async with HarvestClient(HarvestConfig.from_env()) as harvest:
        page = await harvest.clients.list(ClientListOptions(is_active=True))
        for client in page.items:
            print(client.name)

        created = await harvest.clients.create(ClientCreateRequest(name="Acme", currency="EUR"))
        await harvest.clients.delete(created.id)
    ```
"""

import asyncio
import logging

import httpx

from harvest_client.auth.headers import HarvestAuth
from harvest_client.config import HarvestConfig
from harvest_client.errors.exceptions import DeadlineExceededError, DecodingError, TransportError
from harvest_client.request import RequestEnvelope
from harvest_client.resources.clients import ClientService
from harvest_client.resources.company import CompanyService
from harvest_client.resources.contacts import ContactService
from harvest_client.resources.invoices import InvoiceService
from harvest_client.resources.projects import ProjectService
from harvest_client.resources.roles import RoleService
from harvest_client.resources.tasks import TaskService
from harvest_client.resources.time_entries import TimeEntryService
from harvest_client.resources.users import UserService
from harvest_client.transport import create_transport_stack

logger = logging.getLogger(__name__)


class HarvestClient:
    """Entry point holding the configuration, the connection pool and one service per resource.

    The client keeps no per-call state, so one instance can be shared by
    concurrent tasks.

    Args:
        config: Immutable connection settings.
        transport: Innermost transport; ``httpx.MockTransport`` in tests.
        auth: Authentication provider. Defaults to ``HarvestAuth`` built
            from ``config``.
        enable_error_logging: Log failed responses through
            ``ErrorLoggingTransport``.
    """

    def __init__(
        self,
        config: HarvestConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        auth: httpx.Auth | None = None,
        enable_error_logging: bool = True,
    ) -> None:
        self.config = config
        self._http = httpx.AsyncClient(
            auth=auth or HarvestAuth(config.access_token, config.account_id),
            headers={"User-Agent": config.user_agent, "Accept": "application/json"},
            timeout=config.timeout,
            transport=create_transport_stack(transport, enable_error_logging=enable_error_logging),
        )

        self.clients = ClientService(self)
        self.company = CompanyService(self)
        self.contacts = ContactService(self)
        self.invoices = InvoiceService(self)
        self.projects = ProjectService(self)
        self.roles = RoleService(self)
        self.tasks = TaskService(self)
        self.time_entries = TimeEntryService(self)
        self.users = UserService(self)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def __aenter__(self) -> "HarvestClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._http.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def send(self, envelope: RequestEnvelope, *, timeout: float | None = None) -> httpx.Response:
        """Dispatch one request and return the raw response.

        Status codes are not checked here; that is the decoder's job.

        Args:
            envelope: The request to send.
            timeout: Deadline in seconds for the whole round-trip.

        Raises:
            DeadlineExceededError: If ``timeout`` or the transport timeout expires.
            DecodingError: If the body cannot be decoded with its Content-Encoding.
            TransportError: If the connection fails or httpx rejects the request.
            asyncio.CancelledError: If the calling task is cancelled.
        """
        request = envelope.to_httpx(self._http)
        logger.debug(f"Sending {request.method} {request.url}")

        try:
            async with asyncio.timeout(timeout):
                return await self._http.send(request)
        except TimeoutError as e:
            if timeout is not None:
                message = f"{request.method} {request.url} did not complete within {timeout}s"
            else:
                message = f"{request.method} {request.url} timed out in the transport: {e}"
            raise DeadlineExceededError(message) from e
        except httpx.TimeoutException as e:
            raise DeadlineExceededError(f"{request.method} {request.url} timed out: {e}") from e
        except httpx.DecodingError as e:
            raise DecodingError(f"{request.method} {request.url} returned an undecodable body: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

"""Harvest client - typed async client for the Harvest v2 time tracking API.

- One request pipeline shared by every resource: request building, JSON
  encoding with unset-field omission, response decoding and pagination
- Structured errors classified from HTTP status codes
- Multi-source credential resolution
- Testing utilities built on ``httpx.MockTransport``

Example:
    ```python
    from harvest_client import HarvestClient, HarvestConfig

    async with HarvestClient(HarvestConfig.from_env()) as harvest:
        client = await harvest.clients.get(1)
        print(client.name, client.currency)
    ```
"""

from harvest_client.client import HarvestClient
from harvest_client.config import HarvestConfig
from harvest_client.types import UNSET, Response, Unset, is_set, value_or

__version__ = "0.1.0"

__all__ = [
    "UNSET",
    "HarvestClient",
    "HarvestConfig",
    "Response",
    "Unset",
    "__version__",
    "is_set",
    "value_or",
]

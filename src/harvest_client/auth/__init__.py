"""Authentication components for the Harvest client.

- Multi-source credential resolution (value → env → .env → default)
- ``HarvestAuth``: bearer token and ``Harvest-Account-Id`` headers

Example:
    ```python
    from harvest_client.auth import CredentialResolver, HarvestAuth

    resolver = CredentialResolver()
    auth = HarvestAuth(
        access_token=resolver.resolve(env_var_name="HARVEST_ACCESS_TOKEN", required=True),
        account_id=resolver.resolve(env_var_name="HARVEST_ACCOUNT_ID", required=True),
    )
    ```
"""

from harvest_client.auth.credentials import CredentialResolver
from harvest_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from harvest_client.auth.headers import HarvestAuth

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "HarvestAuth",
]

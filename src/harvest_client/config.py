"""Immutable client configuration."""

from dataclasses import dataclass, field

from harvest_client.auth.credentials import CredentialResolver
from harvest_client.request import join_url

DEFAULT_BASE_URL = "https://api.harvestapp.com/v2"
DEFAULT_USER_AGENT = "harvest-client (https://pypi.org/project/harvest-client/)"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class HarvestConfig:
    """Connection settings shared by every resource service.

    Args:
        access_token: Personal access token or OAuth2 access token.
        account_id: Harvest account the token acts on.
        base_url: API root every request path is joined to.
        user_agent: Harvest rejects requests without a User-Agent.
        timeout: Transport timeout in seconds.

    Raises:
        URLError: If ``base_url`` is not an absolute http(s) URL.
    """

    access_token: str = field(repr=False)
    account_id: str
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        join_url(self.base_url, "")

    @classmethod
    def from_env(
        cls,
        *,
        access_token: str | None = None,
        account_id: str | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        resolver: CredentialResolver | None = None,
    ) -> "HarvestConfig":
        """Build a config from explicit values, the environment and ``.env``.

        Reads ``HARVEST_ACCESS_TOKEN`` (or the file named by
        ``HARVEST_ACCESS_TOKEN_FILE``), ``HARVEST_ACCOUNT_ID``,
        ``HARVEST_BASE_URL`` and ``HARVEST_USER_AGENT``.

        Raises:
            CredentialNotFoundError: If the token or account id is missing.
        """
        resolver = resolver or CredentialResolver()

        token = resolver.resolve(value=access_token, env_var_name="HARVEST_ACCESS_TOKEN")
        if token is None:
            token = resolver.resolve_from_file(env_var_name="HARVEST_ACCESS_TOKEN_FILE")
        if token is None:
            token = resolver.resolve(env_var_name="HARVEST_ACCESS_TOKEN", required=True)

        return cls(
            access_token=token,
            account_id=resolver.resolve(
                value=account_id, env_var_name="HARVEST_ACCOUNT_ID", required=True, mask_in_logs=False
            ),
            base_url=resolver.resolve(
                value=base_url, env_var_name="HARVEST_BASE_URL", default=DEFAULT_BASE_URL, mask_in_logs=False
            ),
            user_agent=resolver.resolve(
                value=user_agent, env_var_name="HARVEST_USER_AGENT", default=DEFAULT_USER_AGENT, mask_in_logs=False
            ),
            timeout=timeout,
        )

"""Header-based authentication for the Harvest API.

Harvest authenticates every request with a personal access token (or OAuth2
access token) in a bearer ``Authorization`` header, plus the account the
token should act on in ``Harvest-Account-Id``.
"""

from collections.abc import Generator

import httpx


class HarvestAuth(httpx.Auth):
    """Attach Harvest's bearer token and account id to each request.

    Example:
        ```python
        auth = HarvestAuth(access_token="...", account_id="123456")
        async with httpx.AsyncClient(auth=auth) as http:
            ...
        ```
    """

    def __init__(self, access_token: str, account_id: str | int):
        self._access_token = access_token
        self._account_id = str(account_id)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._access_token}"
        request.headers["Harvest-Account-Id"] = self._account_id
        yield request

    def __repr__(self) -> str:
        return f"HarvestAuth(access_token='***', account_id={self._account_id!r})"

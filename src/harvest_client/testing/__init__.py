"""Testing utilities for code built on the Harvest client.

Example:
    ```python
    from harvest_client import HarvestClient, HarvestConfig
    from harvest_client.testing import RecordingHandler, create_mock_response


    async def test_get_client():
        handler = RecordingHandler()
        handler.add("GET", "/v2/clients/1", create_mock_response({"id": 1, "name": "Acme"}))

        async with HarvestClient(HarvestConfig("token", "123"), transport=handler.transport()) as harvest:
            client = await harvest.clients.get(1)

        assert client.name == "Acme"
        assert handler.requests[0].method == "GET"
    ```
"""

from harvest_client.testing.factories import (
    RecordingHandler,
    create_error_response,
    create_mock_response,
    load_fixture,
)

__all__ = [
    "RecordingHandler",
    "create_error_response",
    "create_mock_response",
    "load_fixture",
]

"""Transport layer that logs requests and failed responses.

```python
from harvest_client.transport.error_logging import ErrorLoggingTransport
import httpx

transport = ErrorLoggingTransport(wrapped_transport=httpx.AsyncHTTPTransport())

async with httpx.AsyncClient(transport=transport) as client:
    response = await client.get("https://api.harvestapp.com/v2/clients")
```
"""

import logging

import httpx

logger = logging.getLogger(__name__)

BODY_PREVIEW_LENGTH = 500


class ErrorLoggingTransport(httpx.AsyncBaseTransport):
    """Log every exchange at DEBUG and every 4xx/5xx at WARNING.

    Only the method, URL, status and (for errors) the start of the body are
    logged; request headers, which carry the access token, never are.

    Args:
        wrapped_transport: The underlying transport to wrap
        body_preview_length: How much of an error body to include
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        body_preview_length: int = BODY_PREVIEW_LENGTH,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.body_preview_length = body_preview_length

    async def __aenter__(self):
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        try:
            response = await self._wrapped_transport.handle_async_request(request)
        except httpx.TransportError as e:
            logger.warning(f"Request {request.method} {request.url} failed: {e!r}")
            raise

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if response.status_code >= 400:
            await response.aread()
            preview = response.text[: self.body_preview_length]
            logger.warning(f"Request {request.method} {request.url} failed with {response.status_code}: {preview}")

        return response

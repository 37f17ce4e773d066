"""Transport layer components for composable HTTP middleware.

Transport layers wrap an ``httpx.AsyncBaseTransport`` and can be stacked.
The client never retries on its own; to add retries, pass a retrying
transport as ``transport`` and it will be wrapped like any other.

Example:
    ```python
    from harvest_client.transport import create_transport_stack

    transport = create_transport_stack(enable_error_logging=True)
    ```
"""

import httpx

from harvest_client.transport.error_logging import ErrorLoggingTransport


def create_transport_stack(
    transport: httpx.AsyncBaseTransport | None = None,
    *,
    enable_error_logging: bool = True,
) -> httpx.AsyncBaseTransport:
    """Compose the transport layers used by ``HarvestClient``.

    Args:
        transport: Innermost transport. Defaults to ``httpx.AsyncHTTPTransport``.
        enable_error_logging: Wrap the stack in ``ErrorLoggingTransport``.

    Returns:
        The outermost transport.
    """
    stack = transport if transport is not None else httpx.AsyncHTTPTransport()
    if enable_error_logging:
        stack = ErrorLoggingTransport(wrapped_transport=stack)
    return stack


__all__ = ["ErrorLoggingTransport", "create_transport_stack"]

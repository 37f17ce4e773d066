"""Tests for request dispatch: deadlines, cancellation and transport failures."""

import asyncio

import httpx
import pytest

from harvest_client import HarvestClient, HarvestConfig
from harvest_client.errors import DeadlineExceededError, DecodingError, HarvestError, HTTPStatusError, TransportError
from harvest_client.request import build_request


def make_client(handler):
    config = HarvestConfig(access_token="tok", account_id="1")
    return HarvestClient(config, transport=httpx.MockTransport(handler))


@pytest.mark.unit
async def test_send_returns_raw_response_without_status_check():
    async with make_client(lambda request: httpx.Response(500, text="boom")) as harvest:
        response = await harvest.send(build_request(harvest.base_url, "GET", "clients"))

    assert response.status_code == 500
    assert response.text == "boom"


@pytest.mark.unit
async def test_deadline_exceeded():
    async def slow(request):
        await asyncio.sleep(5)
        return httpx.Response(200, json={"id": 1})

    async with make_client(slow) as harvest:
        with pytest.raises(DeadlineExceededError) as exc_info:
            await harvest.clients.get(1, timeout=0.01)

    assert not isinstance(exc_info.value, HTTPStatusError)
    assert isinstance(exc_info.value.__cause__, TimeoutError)


@pytest.mark.unit
async def test_transport_timeout_is_deadline_exceeded():
    def timeout(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    async with make_client(timeout) as harvest:
        with pytest.raises(DeadlineExceededError):
            await harvest.clients.get(1)


@pytest.mark.unit
async def test_connection_failure_is_transport_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(refuse) as harvest:
        with pytest.raises(TransportError) as exc_info:
            await harvest.clients.list()

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.unit
async def test_cancellation_propagates_unchanged():
    started = asyncio.Event()

    async def hang(request):
        started.set()
        await asyncio.sleep(5)
        return httpx.Response(200)

    async with make_client(hang) as harvest:
        task = asyncio.create_task(harvest.clients.delete(1))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task


@pytest.mark.unit
async def test_concurrent_calls_do_not_share_state():
    async def echo(request):
        client_id = int(request.url.path.rsplit("/", 1)[-1])
        await asyncio.sleep(0.01 * (5 - client_id))
        return httpx.Response(200, json={"id": client_id, "name": f"Client {client_id}"})

    async with make_client(echo) as harvest:
        clients = await asyncio.gather(*(harvest.clients.get(i) for i in range(1, 5)))

    assert [client.id for client in clients] == [1, 2, 3, 4]
    assert [client.name for client in clients] == ["Client 1", "Client 2", "Client 3", "Client 4"]


@pytest.mark.unit
async def test_transport_raised_timeout_without_deadline():
    def stall(request):
        raise TimeoutError("socket stalled")

    async with make_client(stall) as harvest:
        with pytest.raises(DeadlineExceededError) as exc_info:
            await harvest.clients.get(1)

    assert "None" not in str(exc_info.value)
    assert "socket stalled" in str(exc_info.value)


@pytest.mark.unit
async def test_corrupt_compressed_body_is_decoding_error():
    def corrupt(request):
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"definitely not gzip")

    async with make_client(corrupt) as harvest:
        with pytest.raises(DecodingError) as exc_info:
            await harvest.clients.get(1)

    assert isinstance(exc_info.value.__cause__, httpx.DecodingError)


@pytest.mark.unit
async def test_other_request_errors_are_transport_errors():
    def loop(request):
        raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=request)

    async with make_client(loop) as harvest:
        with pytest.raises(TransportError) as exc_info:
            await harvest.clients.list()

    assert isinstance(exc_info.value, HarvestError)
    assert isinstance(exc_info.value.__cause__, httpx.TooManyRedirects)

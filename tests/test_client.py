import asyncio

import aiohttp
import pytest

from conftest import (
    BLOCK_NUMBER_OK,
    BLOCK_NUMBER_RATE_LIMITED,
    BLOCK_REWARD_OK,
    FakeResponse,
    make_client,
)
from eth_proxy.core.types import InvocationFailure


@pytest.mark.asyncio
async def test_fetch_current_block_number_query() -> None:
    client = make_client(BLOCK_NUMBER_OK)
    body = await client.fetch_current_block_number()
    assert body == BLOCK_NUMBER_OK
    assert client._session.calls == [
        {
            "url": "https://api.etherscan.io/api",
            "params": {"module": "proxy", "action": "eth_blockNumber", "apikey": "test-key"},
        }
    ]


@pytest.mark.asyncio
async def test_fetch_block_time_query() -> None:
    client = make_client(BLOCK_REWARD_OK)
    body = await client.fetch_block_time(427)
    assert body == BLOCK_REWARD_OK
    assert client._session.calls[0]["params"] == {
        "module": "block",
        "action": "getblockreward",
        "blockno": "427",
        "apikey": "test-key",
    }


@pytest.mark.asyncio
async def test_current_block_number_interprets_body() -> None:
    client = make_client(BLOCK_NUMBER_OK)
    assert await client.current_block_number() == 427


@pytest.mark.asyncio
async def test_block_time_interprets_body() -> None:
    client = make_client(BLOCK_REWARD_OK)
    assert await client.block_time(427) == 123456789


@pytest.mark.asyncio
async def test_upstream_reported_failure_passes_through() -> None:
    client = make_client(BLOCK_NUMBER_RATE_LIMITED)
    with pytest.raises(InvocationFailure) as excinfo:
        await client.current_block_number()
    assert excinfo.value == InvocationFailure(500, "Max rate limit reached")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "answer, status, message",
    [
        (aiohttp.ClientConnectionError("Connection refused"), 502, "Connection refused"),
        (asyncio.TimeoutError(), 504, "TimeoutError"),
        (FakeResponse(b"", status=403, reason="Forbidden"), 403, "Forbidden"),
        (
            FakeResponse(read_error=aiohttp.ClientPayloadError("Response payload is not completed")),
            400,
            "Response payload is not completed",
        ),
    ],
)
async def test_transport_failures_are_normalized(answer, status: int, message: str) -> None:
    client = make_client(answer)
    with pytest.raises(InvocationFailure) as excinfo:
        await client.fetch_current_block_number()
    assert excinfo.value.status == status
    assert excinfo.value.message == message


@pytest.mark.asyncio
async def test_api_key_not_in_failure_message() -> None:
    client = make_client(FakeResponse(b"", status=401, reason="Unauthorized"))
    with pytest.raises(InvocationFailure) as excinfo:
        await client.fetch_block_time(1)
    assert "test-key" not in excinfo.value.message

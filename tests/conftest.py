"""
Shared pytest fixtures: a stand-in for aiohttp.ClientSession that replays
canned upstream answers and records what was requested.
"""

import json
from typing import Any, Dict, List, Optional, Union

import aiohttp
import pytest

from eth_proxy.etherscan.client import EtherscanClient

BLOCK_NUMBER_OK = json.dumps({"jsonrpc": "2.0", "id": 83, "result": "0x01ab"}).encode()
BLOCK_NUMBER_RATE_LIMITED = json.dumps(
    {"status": "0", "message": "NOTOK", "result": "Max rate limit reached"}
).encode()
BLOCK_REWARD_OK = json.dumps(
    {
        "status": "1",
        "message": "OK",
        "result": {
            "blockNumber": "427",
            "timeStamp": "123456789",
            "blockMiner": "0x0000000000000000000000000000000000000000",
            "blockReward": "5000000000000000000",
            "uncles": [],
            "uncleInclusionReward": "0",
        },
    }
).encode()
BLOCK_REWARD_NO_RECORD = json.dumps(
    {"status": "0", "message": "No record found", "result": {}}
).encode()
BLOCK_REWARD_RATE_LIMITED = json.dumps(
    {"status": "0", "message": "NOTOK", "result": "Max rate limit reached"}
).encode()

Answer = Union[bytes, "FakeResponse", BaseException]


class FakeResponse:
    def __init__(self, body: bytes = b"", status: int = 200, reason: str = "OK",
                 read_error: Optional[BaseException] = None):
        self.status = status
        self.reason = reason
        self._body = body
        self._read_error = read_error

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                None, (), status=self.status, message=self.reason
            )

    async def read(self) -> bytes:
        if self._read_error is not None:
            raise self._read_error
        return self._body


class _RequestContext:
    def __init__(self, answer: Answer):
        self._answer = answer

    async def __aenter__(self) -> FakeResponse:
        if isinstance(self._answer, BaseException):
            raise self._answer
        if isinstance(self._answer, FakeResponse):
            return self._answer
        return FakeResponse(self._answer)

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


class FakeSession:
    """Replays ``answers`` in order, one per ``get`` call."""

    def __init__(self, *answers: Answer):
        self._answers = list(answers)
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, str]] = None) -> _RequestContext:
        self.calls.append({"url": url, "params": dict(params or {})})
        if not self._answers:
            raise AssertionError(f"unexpected upstream request: {url} {params}")
        return _RequestContext(self._answers.pop(0))

    async def __aenter__(self) -> "FakeSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


def make_client(*answers: Answer) -> EtherscanClient:
    return EtherscanClient("api.etherscan.io", "test-key", FakeSession(*answers))


@pytest.fixture
def env() -> Dict[str, str]:
    return {
        "HOST": "127.0.0.1",
        "PORT": "8080",
        "ETHERSCAN_DOMAIN": "api.etherscan.io",
        "ETHERSCAN_API_KEY": "test-key",
    }

"""
Etherscan Client

Issues the two upstream queries needed to date the current block and hands
back raw bodies. Every transport problem is normalized to InvocationFailure.
"""

import asyncio
from typing import Any, Dict, Optional

import aiohttp

from eth_proxy.core.setup import logger
from eth_proxy.core.types import BlockNumber, BlockTime
from eth_proxy.etherscan.errors import from_transport_error
from eth_proxy.etherscan.interpreter import interpret_block_number, interpret_block_time


def create_session() -> aiohttp.ClientSession:
    """Create the session shared by all requests of one process.

    No total timeout is set here; timeout policy belongs to the transport.
    """
    connector = aiohttp.TCPConnector(
        limit=100,
        limit_per_host=0,
        ttl_dns_cache=300,
        enable_cleanup_closed=True,
    )
    return aiohttp.ClientSession(
        connector=connector,
        timeout=aiohttp.ClientTimeout(total=None),
        connector_owner=True,
    )


class EtherscanClient:
    """HTTP client for the Etherscan ``/api`` endpoint.

    Holds no per-call state, so one instance may serve concurrent requests.
    """

    def __init__(self, domain: str, api_key: str, session: aiohttp.ClientSession):
        """Initialize Etherscan client.

        Args:
            domain: Upstream host (e.g., "api.etherscan.io")
            api_key: Upstream API key
            session: Shared ClientSession, owned by the caller
        """
        self.domain = domain
        self.api_key = api_key
        self._session = session

    @property
    def base_url(self) -> str:
        return f"https://{self.domain}/api"

    async def fetch_current_block_number(self) -> bytes:
        """Raw ``eth_blockNumber`` answer."""
        return await self._get({"module": "proxy", "action": "eth_blockNumber"})

    async def fetch_block_time(self, block_number: BlockNumber) -> bytes:
        """Raw ``getblockreward`` answer for ``block_number``."""
        return await self._get({
            "module": "block",
            "action": "getblockreward",
            "blockno": str(block_number),
        })

    async def current_block_number(self) -> BlockNumber:
        return interpret_block_number(await self.fetch_current_block_number())

    async def block_time(self, block_number: BlockNumber) -> BlockTime:
        return interpret_block_time(await self.fetch_block_time(block_number))

    async def _get(self, params: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> bytes:
        """GET ``base_url`` with ``params`` plus the API key.

        Raises:
            InvocationFailure: on any transport failure
        """
        logger.debug(f"GET {self.base_url} {params}")
        query = dict(params, apikey=self.api_key)
        try:
            async with self._session.get(self.base_url, params=query, headers=headers) as response:
                response.raise_for_status()
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            failure = from_transport_error(e)
            logger.debug(f"GET {self.base_url} {params} failed: {failure.status} {failure.message}")
            raise failure from e

        logger.trace(f"GET {self.base_url} {params} -> {len(body)} bytes")
        return body

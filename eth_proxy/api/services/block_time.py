"""
Current Block Time

Resolves the current block number, then that block's timestamp. The second
query is only issued once the first has succeeded; any InvocationFailure
propagates unchanged.
"""

from eth_proxy.core.setup import logger
from eth_proxy.core.types import CurrentBlockTime
from eth_proxy.etherscan.client import EtherscanClient


async def current_block_time(etherscan: EtherscanClient) -> CurrentBlockTime:
    """
    Get the current block number and its timestamp.

    Args:
        etherscan: Upstream client

    Returns:
        CurrentBlockTime pair

    Raises:
        InvocationFailure: from whichever upstream step failed first
    """
    block_number = await etherscan.current_block_number()
    timestamp = await etherscan.block_time(block_number)
    logger.debug(f"Block {block_number} has timestamp {timestamp}")
    return CurrentBlockTime(block_number=block_number, timestamp=timestamp)

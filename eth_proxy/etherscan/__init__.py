"""
Etherscan upstream: client, response envelopes and interpretation.
"""

from eth_proxy.etherscan.client import EtherscanClient, create_session
from eth_proxy.etherscan.interpreter import interpret_block_number, interpret_block_time

__all__ = [
    "EtherscanClient",
    "create_session",
    "interpret_block_number",
    "interpret_block_time",
]

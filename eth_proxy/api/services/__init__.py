"""
API Services

Pipelines composed from the upstream client, used by the routers and CLI.
"""

from eth_proxy.api.services.block_time import current_block_time

__all__ = ["current_block_time"]

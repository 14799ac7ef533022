"""
FastAPI Dependencies

Reusable dependencies for the upstream client and configuration.
"""

from fastapi import Request
from eth_proxy.etherscan.client import EtherscanClient


def get_etherscan_client(request: Request) -> EtherscanClient:
    """Get the EtherscanClient created by the application lifespan."""
    return request.app.state.etherscan

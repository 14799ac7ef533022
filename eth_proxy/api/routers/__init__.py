"""
API Routers

All endpoint routers for the eth-proxy API.
"""

from eth_proxy.api.routers.chain import router as chain_router
from eth_proxy.api.routers.health import router as health_router

__all__ = [
    "chain_router",
    "health_router",
]

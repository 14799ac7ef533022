"""
Chain Router

Endpoints for querying blockchain information.
"""

from fastapi import APIRouter, Depends
from eth_proxy.api.dependencies import get_etherscan_client
from eth_proxy.api.models import FailureResponse
from eth_proxy.api.services.block_time import current_block_time
from eth_proxy.core.types import CurrentBlockTime
from eth_proxy.etherscan.client import EtherscanClient

router = APIRouter(prefix="", tags=["Chain"])


@router.get(
    "/currentBlockTime",
    response_model=CurrentBlockTime,
    responses={
        "4XX": {"model": FailureResponse},
        "5XX": {"model": FailureResponse},
    },
)
async def get_current_block_time(
    etherscan: EtherscanClient = Depends(get_etherscan_client),
):
    """
    Get the current block number and its Unix timestamp.

    Failures are rendered by the InvocationFailure handler as
    ``{"message": ...}`` with the failure's status.
    """
    return await current_block_time(etherscan)

"""
Etherscan Response Envelopes

Pydantic models for the raw JSON bodies returned by the two upstream
endpoints. They are transient: validated, interpreted, then discarded.
"""

from typing import Annotated, Optional, Union
from pydantic import BaseModel, Field, TypeAdapter


class BlockNumberEnvelope(BaseModel):
    """Body of ``module=proxy&action=eth_blockNumber``.

    A clean JSON-RPC answer carries only ``result`` (hex string); errors add
    a ``status`` field and put the reason in ``result``.
    """

    status: Optional[str] = None
    result: str


class BlockRewardInfo(BaseModel):
    """Nested ``result`` object of a successful block reward query."""

    # Missing when upstream answers "No record found" (racy or just buggy?)
    timestamp: Optional[str] = Field(default=None, alias="timeStamp")


class BlockRewardSuccess(BaseModel):
    """``{status, message, result: {...}}`` shape of ``getblockreward``."""

    status: str
    message: str
    info: BlockRewardInfo = Field(alias="result")


class BlockRewardFailure(BaseModel):
    """``{status, result: "<reason>"}`` shape of ``getblockreward``."""

    status: str
    result: str


# Untagged union: the shapes share no discriminant, so they are matched
# structurally and strictly in this order.
BlockRewardEnvelope = Annotated[
    Union[BlockRewardSuccess, BlockRewardFailure],
    Field(union_mode="left_to_right"),
]

block_reward_adapter: TypeAdapter = TypeAdapter(BlockRewardEnvelope)

"""
Etherscan Response Interpreter

Turns the raw bytes of the two upstream answers into a BlockNumber or a
BlockTime, raising InvocationFailure for everything else.

The two endpoints disagree on how they signal failure:

- ``eth_blockNumber``: any ``status`` field at all means failure, and the
  reason sits in ``result``.
- ``getblockreward``: failure is told apart by the *shape* of ``result``
  (object vs string). A success-shaped answer may still lack ``timeStamp``,
  in which case the top-level ``message`` is the reason.
"""

from typing import Union

from pydantic import ValidationError

from eth_proxy.core.setup import logger
from eth_proxy.core.types import U64_MAX, BlockNumber, BlockTime, InvocationFailure
from eth_proxy.etherscan.errors import from_decode_error
from eth_proxy.etherscan.models import (
    BlockNumberEnvelope,
    BlockRewardFailure,
    BlockRewardSuccess,
    block_reward_adapter,
)

HEX_PREFIX = "0x"

INVALID_DIGIT = "invalid digit found in string"
EMPTY_STRING = "cannot parse integer from empty string"
NUMBER_TOO_LARGE = "number too large to fit in target type"

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def parse_unsigned(text: str, base: int) -> int:
    """Parse ``text`` as an unsigned 64-bit integer in ``base``.

    Stricter than ``int()``: no whitespace, no underscores, no sign other
    than a single leading ``+``.

    Raises:
        InvocationFailure: (500) with the reason the text does not parse
    """
    if not text:
        raise InvocationFailure.failure(EMPTY_STRING)
    digits = text[1:] if text[0] == "+" else text
    if not digits:
        raise InvocationFailure.failure(INVALID_DIGIT)

    allowed = _DIGITS[:base]
    value = 0
    for char in digits:
        digit = allowed.find(char.lower())
        if digit < 0:
            raise InvocationFailure.failure(INVALID_DIGIT)
        value = value * base + digit
        if value > U64_MAX:
            raise InvocationFailure.failure(NUMBER_TOO_LARGE)
    return value


def strip_hex_prefix(text: str) -> str:
    """Remove every leading ``0x`` from ``text``."""
    while text.startswith(HEX_PREFIX):
        text = text[len(HEX_PREFIX):]
    return text


def decode_block_number(body: bytes) -> BlockNumberEnvelope:
    try:
        return BlockNumberEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise from_decode_error(e) from e


def decode_block_reward(body: bytes) -> Union[BlockRewardSuccess, BlockRewardFailure]:
    try:
        return block_reward_adapter.validate_json(body)
    except ValidationError as e:
        raise from_decode_error(e, shape="block reward envelope") from e


def block_number_from_envelope(envelope: BlockNumberEnvelope) -> BlockNumber:
    if envelope.status is not None:
        raise InvocationFailure.failure(envelope.result)
    return parse_unsigned(strip_hex_prefix(envelope.result), 16)


def block_time_from_envelope(envelope: Union[BlockRewardSuccess, BlockRewardFailure]) -> BlockTime:
    if isinstance(envelope, BlockRewardFailure):
        raise InvocationFailure.failure(envelope.result)
    if envelope.info.timestamp is None:
        # Upstream reported success without a timestamp; surface its message.
        raise InvocationFailure.failure(envelope.message)
    return parse_unsigned(envelope.info.timestamp, 10)


def interpret_block_number(body: bytes) -> BlockNumber:
    """
    Interpret an ``eth_blockNumber`` answer.

    Args:
        body: Raw response body

    Returns:
        Current block number

    Raises:
        InvocationFailure: upstream error, undecodable body or bad hex
    """
    envelope = decode_block_number(body)
    block_number = block_number_from_envelope(envelope)
    logger.trace(f"Interpreted block number {block_number} from {envelope.result!r}")
    return block_number


def interpret_block_time(body: bytes) -> BlockTime:
    """
    Interpret a ``getblockreward`` answer.

    Args:
        body: Raw response body

    Returns:
        Block timestamp (Unix seconds)

    Raises:
        InvocationFailure: upstream error, missing timestamp, undecodable
            body or bad decimal
    """
    envelope = decode_block_reward(body)
    block_time = block_time_from_envelope(envelope)
    logger.trace(f"Interpreted block time {block_time}")
    return block_time

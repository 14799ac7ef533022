from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

# Both are unsigned 64-bit values parsed from upstream text.
BlockNumber = int
BlockTime = int

U64_MAX = 2**64 - 1


class CurrentBlockTime(BaseModel):
    """Current block number paired with the block's Unix timestamp."""

    model_config = ConfigDict(frozen=True)

    block_number: BlockNumber = Field(ge=0, le=U64_MAX)
    timestamp: BlockTime = Field(ge=0, le=U64_MAX)


class InvocationFailure(Exception):
    """The single failure type raised past the upstream client boundary.

    Carries the HTTP status to answer with and the message shown to the
    caller. The status is never part of the serialized body.
    """

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = int(status)
        self.message = message

    @classmethod
    def failure(cls, message: str) -> "InvocationFailure":
        """Internal failure (500) with the given message."""
        return cls(HTTPStatus.INTERNAL_SERVER_ERROR, message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvocationFailure):
            return NotImplemented
        return (self.status, self.message) == (other.status, other.message)

    def __hash__(self) -> int:
        return hash((self.status, self.message))

    def __repr__(self) -> str:
        return f"InvocationFailure(status={self.status}, message={self.message!r})"

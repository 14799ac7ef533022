"""Core types and logging for the eth-proxy service."""

from . import setup, types

__all__ = ["setup", "types"]

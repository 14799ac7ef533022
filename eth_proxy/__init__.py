#!/usr/bin/env python3
from __future__ import annotations
__version__ = "0.1.0"

# --------------------------------------------------------------------------- #
#                                Logging                                      #
# --------------------------------------------------------------------------- #
from eth_proxy.core.setup import (
    logger, setup_logging, info, debug, trace
)

# --------------------------------------------------------------------------- #
#                                Data Types                                   #
# --------------------------------------------------------------------------- #
from eth_proxy.core.types import (
    BlockNumber, BlockTime, CurrentBlockTime, InvocationFailure
)

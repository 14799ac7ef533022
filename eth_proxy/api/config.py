"""
API Configuration

Environment variables and settings for the API layer.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

import eth_proxy

HOST_VARIABLE_NAME = "HOST"
PORT_VARIABLE_NAME = "PORT"
ETHERSCAN_DOMAIN_VARIABLE_NAME = "ETHERSCAN_DOMAIN"
ETHERSCAN_API_KEY_VARIABLE_NAME = "ETHERSCAN_API_KEY"


class ConfigError(Exception):
    """Base class for configuration errors."""
    pass


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if value is None:
        raise ConfigError(f"Missing '{name}' variable")
    return value


@dataclass(frozen=True)
class APIConfig:
    """API configuration from environment variables."""

    # Server settings
    HOST: str
    PORT: int

    # Upstream
    ETHERSCAN_DOMAIN: str
    ETHERSCAN_API_KEY: str

    # Logging
    LOG_LEVEL: str = "INFO"

    # App metadata
    APP_NAME: str = "eth-proxy"
    APP_DESCRIPTION: str = "Timestamp of the current Ethereum block, via Etherscan"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "APIConfig":
        """Build the config from ``env`` (default ``os.environ``).

        Raises:
            ConfigError: a required variable is missing or PORT is not an integer
        """
        env = os.environ if env is None else env
        host = _require(env, HOST_VARIABLE_NAME)
        port = _require(env, PORT_VARIABLE_NAME)
        try:
            port_number = int(port)
        except ValueError:
            raise ConfigError(f"Invalid '{PORT_VARIABLE_NAME}' variable: {port!r}")

        return cls(
            HOST=host,
            PORT=port_number,
            ETHERSCAN_DOMAIN=_require(env, ETHERSCAN_DOMAIN_VARIABLE_NAME),
            ETHERSCAN_API_KEY=_require(env, ETHERSCAN_API_KEY_VARIABLE_NAME),
            LOG_LEVEL=env.get("LOG_LEVEL", "INFO"),
        )

    @property
    def version(self) -> str:
        return eth_proxy.__version__

    @property
    def address(self) -> str:
        return f"{self.HOST}:{self.PORT}"


@lru_cache()
def get_config() -> APIConfig:
    """Process-wide config, read from the environment once."""
    return APIConfig.from_env()

"""Configuration management for the brewery client."""

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Optional

from brewery_fetch import __version__

BASE_URL = "https://api.openbrewerydb.org/breweries"


def _timeout_from_env() -> Optional[float]:
    raw = os.getenv("BREWERY_API_TIMEOUT")
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ValueError(
            f"BREWERY_API_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from e
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"BREWERY_API_TIMEOUT must be positive, got {raw!r}")
    return timeout


def _log_level_from_env() -> str:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    # getLevelName maps unknown names to a "Level X" string
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {level!r}")
    return level


@dataclass
class APIConfig:
    """Configuration for the Open Brewery DB listing endpoint."""

    base_url: str = BASE_URL
    # No timeout unless one is configured
    timeout: Optional[float] = None
    user_agent: str = f"brewery-fetch/{__version__}"

    @property
    def headers(self) -> dict:
        return {"User-Agent": self.user_agent, "Accept": "application/json"}


@dataclass
class ClientConfig:
    """Main client configuration."""

    api: APIConfig = field(default_factory=APIConfig)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create configuration from environment variables.

        Raises:
            ValueError: If BREWERY_API_TIMEOUT or LOG_LEVEL is malformed
        """
        api_config = APIConfig(timeout=_timeout_from_env())
        log_level = _log_level_from_env()

        return cls(api=api_config, log_level=log_level)


def get_config() -> ClientConfig:
    """Get client configuration from the environment."""
    return ClientConfig.from_env()

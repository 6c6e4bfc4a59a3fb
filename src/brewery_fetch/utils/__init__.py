"""Utility modules for the brewery client."""

from .config import BASE_URL, APIConfig, ClientConfig, get_config
from .logger import set_package_level, setup_logger

__all__ = [
    "BASE_URL",
    "APIConfig",
    "ClientConfig",
    "get_config",
    "set_package_level",
    "setup_logger",
]

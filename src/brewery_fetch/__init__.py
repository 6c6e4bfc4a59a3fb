"""Client for the Open Brewery DB listing endpoint."""

__version__ = "0.1.0"

from .client import BreweryAPIClient
from .models import Brewery, decode_breweries
from .outcome import (
    BreweryServiceError,
    DecodeError,
    ErrorKind,
    Failure,
    InvalidURLError,
    NetworkError,
    RequestOutcome,
    Success,
)
from .request_builder import RequestBuilder, encode_query
from .utils.config import BASE_URL, APIConfig, ClientConfig, get_config

__all__ = [
    "BASE_URL",
    "APIConfig",
    "Brewery",
    "BreweryAPIClient",
    "BreweryServiceError",
    "ClientConfig",
    "DecodeError",
    "ErrorKind",
    "Failure",
    "InvalidURLError",
    "NetworkError",
    "RequestBuilder",
    "RequestOutcome",
    "Success",
    "decode_breweries",
    "encode_query",
    "get_config",
]

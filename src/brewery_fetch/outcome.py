"""Outcome of a single fetch and the classified errors it can carry."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from brewery_fetch.models import Brewery


class ErrorKind(str, Enum):
    INVALID_URL = "invalid_url"
    NETWORK_FAILURE = "network_failure"
    DECODE_FAILURE = "decode_failure"


class BreweryServiceError(Exception):
    """Base class for every failure a fetch can report."""

    kind: ErrorKind

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class InvalidURLError(BreweryServiceError):
    """The request URL could not be built."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str):
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url


class NetworkError(BreweryServiceError):
    """The transport did not deliver a response body."""

    kind = ErrorKind.NETWORK_FAILURE

    def __init__(self, cause: Optional[BaseException] = None):
        detail = str(cause) if cause is not None else "unknown transport error"
        super().__init__(f"Network failure: {detail}", cause)


class DecodeError(BreweryServiceError):
    """The response body did not match the brewery schema."""

    kind = ErrorKind.DECODE_FAILURE

    def __init__(self, cause: BaseException):
        super().__init__(f"Decode failure: {cause}", cause)


@dataclass(frozen=True)
class Success:
    breweries: List[Brewery]

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> List[Brewery]:
        return self.breweries


@dataclass(frozen=True)
class Failure:
    error: BreweryServiceError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    def unwrap(self) -> List[Brewery]:
        raise self.error


RequestOutcome = Union[Success, Failure]

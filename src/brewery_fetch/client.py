"""
Fetch-and-decode client for the Open Brewery DB listing endpoint.

Each call builds one GET request, sends it exactly once and decodes the
JSON array into Brewery records. The result is always a single outcome:
Success with the breweries in server order, or Failure carrying an
InvalidURLError, NetworkError or DecodeError.
"""

import asyncio
from typing import Optional

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from brewery_fetch.models import decode_breweries
from brewery_fetch.outcome import (
    DecodeError,
    Failure,
    InvalidURLError,
    NetworkError,
    RequestOutcome,
    Success,
)
from brewery_fetch.request_builder import QueryParameters, RequestBuilder
from brewery_fetch.utils.config import APIConfig
from brewery_fetch.utils.logger import setup_logger

logger = setup_logger(__name__)


class BreweryAPIClient:
    """
    Client for the Open Brewery DB listing endpoint.

    One client may serve concurrent fetches. Requests are prepared on the
    calling thread, so session headers, auth and cookies are only read
    there; worker threads only call session.send, which goes through the
    thread-safe urllib3 connection pool and the locked cookie jar. Callers
    must not mutate an injected session while fetches are in flight.
    """

    def __init__(self, config: APIConfig, session: Optional[requests.Session] = None):
        """
        Initialize the API client.

        Args:
            config: API configuration object
            session: Optional session to send requests with; one is created
                when omitted
        """
        self.config = config
        self.builder = RequestBuilder(config.base_url, headers=config.headers)
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """
        Create a pooled requests session that never retries.

        Returns:
            Configured requests session
        """
        session = requests.Session()

        retry_strategy = Retry(total=0, allowed_methods=["GET"])

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "BreweryAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _send(self, prepared: requests.PreparedRequest) -> requests.Response:
        return self.session.send(prepared, timeout=self.config.timeout)

    async def fetch(self, parameters: Optional[QueryParameters] = None) -> RequestOutcome:
        """
        Fetch and decode breweries matching the given query parameters.

        The blocking exchange runs in a worker thread; the calling coroutine
        resumes once with the terminal outcome. Cancelling the awaiting task
        raises asyncio.CancelledError in the caller; a cancelled fetch returns
        no outcome.

        Args:
            parameters: Query parameter names mapped to scalar values

        Returns:
            Success with the decoded breweries, or Failure with the error
        """
        try:
            prepared = self.builder.build(parameters, session=self.session)
        except InvalidURLError as e:
            logger.error(f"Not sending request: {str(e)}")
            return Failure(e)

        try:
            logger.info(f"Fetching breweries: GET {prepared.url}")
            response = await asyncio.to_thread(self._send, prepared)
        except requests.RequestException as e:
            logger.error(f"Error fetching breweries from {prepared.url}: {str(e)}")
            return Failure(NetworkError(e))
        except asyncio.CancelledError:
            logger.warning(f"Fetch cancelled: GET {prepared.url}")
            raise

        if not response.ok:
            logger.warning(
                f"Brewery API answered {response.status_code} for {prepared.url}"
            )

        try:
            breweries = decode_breweries(response.content)
        except ValidationError as e:
            logger.error(
                f"Could not decode breweries from {prepared.url}: "
                f"{e.error_count()} error(s)"
            )
            return Failure(DecodeError(e))

        logger.info(f"Successfully fetched {len(breweries)} breweries")
        return Success(breweries)

"""Builds GET requests against the brewery listing endpoint."""

from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

import requests

from brewery_fetch.outcome import InvalidURLError
from brewery_fetch.utils.logger import setup_logger

logger = setup_logger(__name__)

QueryParameters = Mapping[str, Any]


def encode_query(parameters: Optional[QueryParameters]) -> str:
    """
    Percent-encode a parameter mapping into a query string.

    Values are converted with str(). A literal '+' is always sent as %2B so
    the server never reads it as an encoded space.
    """
    if not parameters:
        return ""
    items = [(str(name), str(value)) for name, value in parameters.items()]
    query = urlencode(items, quote_via=quote)
    return query.replace("+", "%2B")


def validate_base_url(base_url: str) -> None:
    """Raise InvalidURLError unless base_url is an absolute http(s) URL."""
    if not base_url or any(ch.isspace() or not ch.isprintable() for ch in base_url):
        raise InvalidURLError(base_url)
    try:
        parts = urlsplit(base_url)
    except ValueError as e:
        raise InvalidURLError(base_url) from e
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise InvalidURLError(base_url)


class RequestBuilder:
    """Turns a parameter mapping into a prepared GET request for one base URL."""

    def __init__(self, base_url: str, headers: Optional[Dict[str, str]] = None):
        self.base_url = base_url
        self.headers = dict(headers or {})

    def build(
        self,
        parameters: Optional[QueryParameters] = None,
        session: Optional[requests.Session] = None,
    ) -> requests.PreparedRequest:
        """
        Build the GET request for the given query parameters.

        Args:
            parameters: Query parameter names mapped to scalar values
            session: Optional session whose headers, auth and cookies are
                merged into the request

        Returns:
            Prepared request bound to the fully encoded URL

        Raises:
            InvalidURLError: If the base URL is malformed or the final URL
                cannot be assembled
        """
        validate_base_url(self.base_url)

        scheme, netloc, path, base_query, fragment = urlsplit(self.base_url)
        query = "&".join(q for q in (base_query, encode_query(parameters)) if q)
        url = urlunsplit((scheme, netloc, path, query, fragment))

        try:
            request = requests.Request("GET", url, headers=self.headers)
            if session is not None:
                prepared = session.prepare_request(request)
            else:
                prepared = request.prepare()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Could not assemble request URL {url!r}: {str(e)}")
            raise InvalidURLError(url) from e

        logger.debug(f"Built request: GET {prepared.url}")
        return prepared

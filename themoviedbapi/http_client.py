"""
HTTP transport for TheMovieDB API client.

Wraps a caller-supplied requests.Session and returns raw response text.
The session is treated as a shared, externally owned capability: the
transport never closes it and keeps no per-request state.
"""

import logging
from enum import Enum
from typing import Optional

import requests

from .exceptions import MovieDbException, MovieDbExceptionType

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class HttpMethod(str, Enum):
    """HTTP verbs used by the endpoint methods."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class HttpTransport:
    """Issues GET/POST/DELETE requests and returns the response body."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            session: HTTP session to send requests through (a new one is created if omitted)
            timeout: Request timeout in seconds
        """
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def get(self, url: str) -> str:
        return self.request(HttpMethod.GET, url)

    def post(self, url: str, json_body: Optional[str]) -> str:
        return self.request(HttpMethod.POST, url, json_body)

    def delete(self, url: str, json_body: Optional[str] = None) -> str:
        return self.request(HttpMethod.DELETE, url, json_body)

    def request(self, method: HttpMethod, url: str, json_body: Optional[str] = None) -> str:
        """
        Send a request and return the response text.

        Args:
            method: HTTP verb
            url: Fully qualified request URL
            json_body: Serialized JSON payload, or None for no payload

        Returns:
            Response body as text

        Raises:
            MovieDbException: INVALID_URL, CONNECTION_ERROR or HTTP_ERROR
        """
        method = HttpMethod(method)
        logger.debug(f"Making request: {method.value} {_redact(url)}")

        try:
            response = self.session.request(
                method.value,
                url,
                data=json_body.encode("utf-8") if json_body is not None else None,
                headers=JSON_HEADERS,
                timeout=self.timeout,
            )
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema) as e:
            raise MovieDbException(MovieDbExceptionType.INVALID_URL, _redact(url), e)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Request failed: {method.value} {_redact(url)}: {e}")
            raise MovieDbException(MovieDbExceptionType.CONNECTION_ERROR, _redact(url), e)

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.warning(f"HTTP error {response.status_code} for {method.value} {_redact(url)}")
            raise MovieDbException(
                MovieDbExceptionType.HTTP_ERROR, response.text, e, status_code=response.status_code
            )

        return response.text


def _redact(url: str) -> str:
    """Hide the api_key query value in log and error messages."""
    head, sep, query = url.partition("?")
    if not sep:
        return url
    parts = []
    for part in query.split("&"):
        name, eq, _ = part.partition("=")
        parts.append(f"{name}=***" if eq and name == "api_key" else part)
    return f"{head}?{'&'.join(parts)}"

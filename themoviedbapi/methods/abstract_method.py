"""
Shared plumbing for the endpoint method groups.
"""

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

from ..api_url import TMDB_API_BASE, ApiUrl
from ..exceptions import MovieDbException
from ..http_client import HttpMethod, HttpTransport
from ..mapper import ResponseMapper
from ..model import AbstractJsonMapping

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=AbstractJsonMapping)


class AbstractMethod:
    """Base class holding the API key, transport and mapper for a method group."""

    def __init__(
        self,
        api_key: str,
        transport: HttpTransport,
        mapper: Optional[ResponseMapper] = None,
        base_url: str = TMDB_API_BASE,
    ):
        self.api_key = api_key
        self.transport = transport
        self.mapper = mapper or ResponseMapper()
        self.base_url = base_url

    def _api_url(self, method: str, submethod: str = "") -> ApiUrl:
        return ApiUrl(self.api_key, method, submethod, base_url=self.base_url)

    def _execute(
        self,
        http_method: HttpMethod,
        api_url: ApiUrl,
        model_cls: Type[T],
        body: Optional[Mapping[str, Any]] = None,
        action: str = "process request",
    ) -> T:
        """
        Run one request/response exchange.

        Args:
            http_method: Verb to send
            api_url: URL builder for the endpoint
            model_cls: Record type the response is mapped onto
            body: Request body mapping, serialized to JSON (None for no payload)
            action: Short description used in failure log messages

        Returns:
            The mapped record

        Raises:
            MovieDbException: On transport or mapping failure
        """
        url = api_url.build_url()
        json_body = self.mapper.to_json(body) if body is not None else None

        webpage = self.transport.request(http_method, url, json_body)

        try:
            return self.mapper.map(webpage, model_cls)
        except MovieDbException as e:
            logger.warning(f"Failed to {action}: {e.cause}")
            raise

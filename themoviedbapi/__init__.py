"""
TheMovieDB API Client Package

This package provides a thin client for the TheMovieDB (TMDb) v3 REST API,
including URL construction, HTTP transport, JSON response mapping onto typed
records, and the endpoint methods for configuration, authentication and lists.
"""

__version__ = "0.1.0"

from .api import TheMovieDbApi
from .api_url import ApiUrl
from .config import ClientConfig, load_config, setup_logging
from .exceptions import ConfigurationError, MovieDbException, MovieDbExceptionType
from .http_client import HttpMethod, HttpTransport
from .mapper import ResponseMapper
from .model import (
    Configuration,
    ImageConfiguration,
    ListItemStatus,
    MovieBasic,
    MovieDbList,
    StatusCode,
    StatusCodeList,
    TokenAuthorisation,
    TokenSession,
)

__all__ = [
    "TheMovieDbApi",
    "ApiUrl",
    "ClientConfig",
    "load_config",
    "setup_logging",
    "ConfigurationError",
    "MovieDbException",
    "MovieDbExceptionType",
    "HttpMethod",
    "HttpTransport",
    "ResponseMapper",
    "Configuration",
    "ImageConfiguration",
    "ListItemStatus",
    "MovieBasic",
    "MovieDbList",
    "StatusCode",
    "StatusCodeList",
    "TokenAuthorisation",
    "TokenSession",
]

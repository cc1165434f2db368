"""
Exception types raised by the TheMovieDB API client.

Every failure surfaced to callers (transport, HTTP status, JSON mapping,
authorisation) is a MovieDbException tagged with a MovieDbExceptionType.
"""

from enum import Enum
from typing import Optional


class MovieDbExceptionType(str, Enum):
    """Kinds of failure reported by the client."""

    MAPPING_FAILED = "MAPPING_FAILED"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    INVALID_URL = "INVALID_URL"
    INVALID_IMAGE = "INVALID_IMAGE"
    AUTHORISATION_FAILURE = "AUTHORISATION_FAILURE"


class MovieDbException(Exception):
    """Single exception kind for all client failures."""

    def __init__(
        self,
        exception_type: MovieDbExceptionType,
        response: Optional[str] = "",
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ):
        """
        Args:
            exception_type: Kind of failure
            response: Raw response text (or a message) associated with the failure
            cause: Underlying exception, if any
            status_code: HTTP status code for HTTP_ERROR failures
        """
        self.exception_type = exception_type
        self.response = response if response is not None else ""
        self.cause = cause
        self.status_code = status_code

        message = f"{exception_type.value}: {self.response}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class ConfigurationError(Exception):
    """Raised when a client configuration file cannot be parsed."""

    pass

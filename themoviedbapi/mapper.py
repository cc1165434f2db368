"""
JSON mapping between TMDb payloads and the typed records in model.py.

Unknown fields never fail a mapping: they are kept on the record and reported
through the mapper's logger so new TMDb fields show up in the logs instead of
breaking callers.
"""

import json
import logging
from typing import Any, Iterator, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import ValidationError

from .exceptions import MovieDbException, MovieDbExceptionType
from .model import AbstractJsonMapping

T = TypeVar("T", bound=AbstractJsonMapping)


class ResponseMapper:
    """Maps raw response text onto model classes."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Args:
            logger: Logger that receives unknown-field warnings (defaults to this module's logger)
        """
        self.logger = logger or logging.getLogger(__name__)

    def map(self, raw_text: str, model_cls: Type[T]) -> T:
        """
        Deserialize JSON text into model_cls.

        Args:
            raw_text: Response body as returned by the transport
            model_cls: Target record type

        Returns:
            Parsed, immutable record

        Raises:
            MovieDbException: MAPPING_FAILED with the raw text and the parse error attached
        """
        try:
            result = model_cls.model_validate_json(raw_text)
        except (ValidationError, TypeError) as e:
            raise MovieDbException(MovieDbExceptionType.MAPPING_FAILED, raw_text, e)

        self._log_unknown_fields(result)
        return result

    def to_json(self, body: Mapping[str, Any]) -> str:
        """Serialize a request body mapping to JSON text."""
        return json.dumps(dict(body))

    def _log_unknown_fields(self, record: AbstractJsonMapping) -> None:
        for owner, key, value in _iter_unknown_fields(record):
            self.logger.warning(f"Unknown property: '{key}' value: '{value}' ({owner})")


def _iter_unknown_fields(record: AbstractJsonMapping) -> Iterator[Tuple[str, str, Any]]:
    """Yield (model name, key, value) for every unknown field, nested records included."""
    owner = type(record).__name__
    for key, value in record.unknown_fields().items():
        yield owner, key, value

    for name in type(record).model_fields:
        value = getattr(record, name)
        if isinstance(value, AbstractJsonMapping):
            yield from _iter_unknown_fields(value)
        elif isinstance(value, (tuple, list, frozenset)):
            for item in value:
                if isinstance(item, AbstractJsonMapping):
                    yield from _iter_unknown_fields(item)

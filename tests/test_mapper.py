"""
Tests for JSON response mapping.

Covers unknown-field tolerance and logging, MAPPING_FAILED errors carrying
the raw payload, and re-serialization of known fields.
"""

import json
import logging
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from test_utils.tmdb_mock import get_mock_response
from themoviedbapi.exceptions import MovieDbException, MovieDbExceptionType
from themoviedbapi.mapper import ResponseMapper
from themoviedbapi.model import (
    Configuration,
    ListItemStatus,
    MovieDbList,
    StatusCode,
    StatusCodeList,
    TokenAuthorisation,
    TokenSession,
)


@pytest.fixture
def mapper():
    return ResponseMapper()


class TestResponseMapper:
    """Test suite for ResponseMapper.map."""

    def test_maps_configuration(self, mapper):
        payload = get_mock_response("configuration")

        config = mapper.map(json.dumps(payload), Configuration)

        assert config.images.base_url == "http://image.tmdb.org/t/p/"
        assert "w500" in config.images.poster_sizes
        assert config.change_keys == frozenset(payload["change_keys"])

    def test_maps_list_with_items(self, mapper):
        movie_list = mapper.map(json.dumps(get_mock_response("list")), MovieDbList)

        assert movie_list.name == "The Marvel Universe"
        assert movie_list.item_count == 2
        assert [movie.id for movie in movie_list.items] == [24428, 1726]
        assert movie_list.items[0].title == "The Avengers"

    @pytest.mark.parametrize(
        "model_cls, keys",
        [
            (Configuration, ("configuration",)),
            (MovieDbList, ("list",)),
            (ListItemStatus, ("item_status", "present")),
            (StatusCodeList, ("create_list",)),
            (StatusCode, ("status", "add_item")),
            (TokenSession, ("authentication", "session_new")),
        ],
    )
    def test_round_trip_known_fields(self, mapper, model_cls, keys):
        """Mapping then re-serializing keeps every known field value."""
        payload = get_mock_response(*keys)

        record = mapper.map(json.dumps(payload), model_cls)
        dumped = record.to_dict()

        for key, value in payload.items():
            if isinstance(value, list) and key == "change_keys":
                assert sorted(dumped[key]) == sorted(value)
            else:
                assert dumped[key] == value

        again = mapper.map(json.dumps(dumped), model_cls)
        assert again.to_dict() == dumped

    def test_unknown_fields_do_not_change_known_values(self, mapper):
        payload = get_mock_response("list")
        extended = dict(payload, brand_new_field={"nested": True}, another=1)
        extended["items"] = [dict(item, rating_breakdown=[1, 2]) for item in payload["items"]]

        plain = mapper.map(json.dumps(payload), MovieDbList)
        with_extras = mapper.map(json.dumps(extended), MovieDbList)

        assert with_extras.to_dict() == plain.to_dict()
        assert with_extras.unknown_fields() == {"brand_new_field": {"nested": True}, "another": 1}

    def test_unknown_fields_are_logged_as_warnings(self, caplog):
        mapper = ResponseMapper()
        raw = json.dumps({"status_code": 1, "status_message": "ok", "surprise": "value"})

        with caplog.at_level(logging.WARNING, logger="themoviedbapi.mapper"):
            status = mapper.map(raw, StatusCode)

        assert status.status_code == 1
        assert "Unknown property: 'surprise' value: 'value'" in caplog.text

    def test_nested_unknown_fields_use_injected_logger(self):
        injected = Mock(spec=logging.Logger)
        mapper = ResponseMapper(logger=injected)
        payload = get_mock_response("configuration")
        payload["images"]["vector_sizes"] = ["svg"]

        mapper.map(json.dumps(payload), Configuration)

        injected.warning.assert_called_once()
        message = injected.warning.call_args[0][0]
        assert "'vector_sizes'" in message
        assert "ImageConfiguration" in message

    def test_no_warning_without_unknown_fields(self):
        injected = Mock(spec=logging.Logger)
        ResponseMapper(logger=injected).map(json.dumps(get_mock_response("list")), MovieDbList)
        injected.warning.assert_not_called()

    def test_missing_fields_use_defaults(self, mapper):
        status = mapper.map("{}", ListItemStatus)
        assert status.item_present is False
        assert status.id is None

    @pytest.mark.parametrize(
        "model_cls, raw, expected",
        [
            (
                TokenSession,
                '{"session_id": null, "success": null, "status_code": 3, "status_message": "x"}',
                {"session_id": None, "success": False, "status_code": 3},
            ),
            (TokenAuthorisation, '{"request_token": "abc", "success": null}', {"success": False}),
            (MovieDbList, '{"id": "42", "items": null}', {"items": ()}),
            (ListItemStatus, '{"item_present": null}', {"item_present": False}),
            (Configuration, '{"images": null, "change_keys": null}', {"change_keys": frozenset()}),
        ],
    )
    def test_null_fields_use_defaults(self, mapper, model_cls, raw, expected):
        record = mapper.map(raw, model_cls)

        for name, value in expected.items():
            assert getattr(record, name) == value

    def test_null_image_sizes_use_defaults(self, mapper):
        raw = '{"images": {"base_url": "http://image.tmdb.org/t/p/", "poster_sizes": null, "still_sizes": null}}'

        config = mapper.map(raw, Configuration)

        assert config.images.poster_sizes == ()
        assert config.images.still_sizes == ()
        assert not config.images.is_valid_size("w500")

    def test_null_images_section_is_empty(self, mapper):
        config = mapper.map('{"images": null}', Configuration)

        assert config.images.base_url is None
        assert config.images.poster_sizes == ()

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            "",
            "<html><body>502 Bad Gateway</body></html>",
            '{"status_code": 1,',
        ],
    )
    def test_malformed_json_fails_with_raw_text(self, mapper, raw):
        with pytest.raises(MovieDbException) as exc_info:
            mapper.map(raw, StatusCode)

        error = exc_info.value
        assert error.exception_type == MovieDbExceptionType.MAPPING_FAILED
        assert error.response == raw
        assert isinstance(error.cause, ValidationError)
        assert error.__cause__ is error.cause

    @pytest.mark.parametrize("raw", ['["a", "b"]', '{"item_present": {"deep": 1}}', "null"])
    def test_structural_mismatch_fails(self, mapper, raw):
        with pytest.raises(MovieDbException) as exc_info:
            mapper.map(raw, ListItemStatus)

        assert exc_info.value.exception_type == MovieDbExceptionType.MAPPING_FAILED
        assert exc_info.value.response == raw


class TestToJson:
    """Test suite for request body serialization."""

    def test_serializes_mapping(self, mapper):
        body = mapper.to_json({"name": "Foo", "description": ""})
        assert json.loads(body) == {"name": "Foo", "description": ""}

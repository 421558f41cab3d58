from datetime import datetime, timedelta, timezone

import pytest

from graphloom.exceptions import ParseError
from graphloom.models import GraphPostType, GraphProfile
from graphloom.presence import FieldPresenceJson, parse_graph_datetime


@pytest.fixture
def payload():
    return FieldPresenceJson(
        {
            "id": 1234567890,
            "message": "hello",
            "story": None,
            "is_hidden": "true",
            "like_count": "42",
            "timezone": 2,
            "type": "Photo",
            "created_time": "2017-05-01T12:00:00+0000",
            "from": {"id": "10", "name": "Page"},
            "admin_creator": {"name": "no id"},
            "message_tags": [{"id": "1"}, "junk", {"name": "no id"}, {"id": "2"}],
            "tags": ["a", 1, "b"],
        }
    )


def test_rejects_non_object():
    with pytest.raises(ParseError):
        FieldPresenceJson(["not", "an", "object"])  # type: ignore[arg-type]


def test_has_key_is_independent_of_value(payload):
    assert payload.has_key("story")
    assert payload.get_string("story") is None
    assert not payload.has_key("caption")
    assert "story" in payload.keys()


def test_get_string(payload):
    assert payload.get_string("message") == "hello"
    assert payload.get_string("id") == "1234567890"
    assert payload.get_string("missing") is None
    assert payload.get_string("missing", "fallback") == "fallback"
    assert payload.get_string("from") is None


def test_get_bool(payload):
    assert payload.get_bool("is_hidden") is True
    assert payload.get_bool("missing") is False
    assert payload.get_bool("message") is False


def test_get_numbers(payload):
    assert payload.get_int("like_count") == 42
    assert payload.get_int("message") == 0
    assert payload.get_int("missing", default=-1) == -1
    assert payload.get_float("timezone") == 2.0
    assert FieldPresenceJson({"flag": True}).get_int("flag") == 0


def test_get_enum(payload):
    assert payload.get_enum("type", GraphPostType, GraphPostType.NOT_SPECIFIED) is GraphPostType.PHOTO
    unknown = FieldPresenceJson({"type": "hologram"})
    assert unknown.get_enum("type", GraphPostType, GraphPostType.NOT_SPECIFIED) is GraphPostType.NOT_SPECIFIED


def test_get_datetime(payload):
    assert payload.get_datetime("created_time") == datetime(2017, 5, 1, 12, 0, tzinfo=timezone.utc)
    assert payload.get_datetime("message") is None
    assert payload.get_datetime("missing") is None


def test_parse_graph_datetime_formats():
    assert parse_graph_datetime("2017-05-01T12:00:00+0200") == datetime(
        2017, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=2))
    )
    assert parse_graph_datetime("2017-05-01T12:00:00") == datetime(2017, 5, 1, 12, 0, tzinfo=timezone.utc)
    assert parse_graph_datetime("2017-05-01T12:00:00+01:00").utcoffset() == timedelta(hours=1)
    assert parse_graph_datetime("yesterday") is None


def test_get_object(payload):
    profile = payload.get_object("from", GraphProfile.parse)
    assert profile is not None
    assert profile.name == "Page"
    # Rejected by the sub-parser (no id): dropped instead of failing the parent
    assert payload.get_object("admin_creator", GraphProfile.parse) is None
    assert payload.get_object("message", GraphProfile.parse) is None
    assert payload.get_object("missing", GraphProfile.parse) is None


def test_get_array_skips_bad_items(payload):
    tags = payload.get_array("message_tags", GraphProfile.parse)
    assert [tag.id for tag in tags] == ["1", "2"]
    assert payload.get_array("missing", GraphProfile.parse) == []
    assert payload.get_array("message", GraphProfile.parse) == []


def test_get_string_array(payload):
    assert payload.get_string_array("tags") == ["a", "b"]
    assert payload.get_string_array("missing") == []

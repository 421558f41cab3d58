from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from graphloom.exceptions import ParseError
from graphloom.models import (
    GraphComment,
    GraphCommentsCollection,
    GraphLikesCollection,
    GraphPhoto,
    GraphPost,
    GraphPostAttachmentsCollection,
    GraphPostStatusType,
    GraphPostType,
    GraphPublishResult,
    GraphToken,
    GraphUser,
)

POST_JSON = {
    "id": "123_456",
    "message": "hello",
    "created_time": "2017-05-01T12:00:00+0000",
    "from": {"id": "123", "name": "Some Page", "category": "Community"},
    "type": "status",
    "status_type": "mobile_status_update",
    "privacy": {"value": "EVERYONE", "description": "Public"},
    "shares": {"count": 3},
    "likes": {
        "data": [{"id": "u1", "name": "Alice"}, {"id": "u2", "name": "Bob"}],
        "paging": {
            "cursors": {"before": "QVFIUj", "after": "QVFIUk"},
            "next": "https://graph.facebook.com/v2.9/123_456/likes?after=QVFIUk",
        },
        "summary": {"total_count": 17, "can_like": True, "has_liked": False},
    },
    "comments": {
        "data": [
            {
                "id": "123_456_1",
                "message": "first",
                "from": {"id": "u3", "name": "Carol"},
                "like_count": 2,
                "parent": {"id": "123_456_0"},
            }
        ],
        "paging": {"cursors": {"before": "A", "after": "B"}},
    },
    "message_tags": [{"id": "u1", "name": "Alice", "type": "user", "offset": 0, "length": 5}],
    "unknown_key": [1, 2, 3],
}


def test_parse_minimal_post():
    post = GraphPost.parse({"id": "123", "message": "hello"})

    assert post.id == "123"
    assert post.message == "hello"
    assert post.has_message is True
    assert post.has_likes is False
    assert post.likes is None
    assert post.type is GraphPostType.NOT_SPECIFIED
    assert post.has_type is False


def test_null_value_is_present():
    post = GraphPost.parse({"id": "123", "message": None})

    assert post.message is None
    assert post.has_message is True
    assert post.has("message")


def test_presence_matches_payload_keys():
    post = GraphPost.parse(POST_JSON)

    expected = {"id", "message", "created_time", "from_", "type", "status_type", "privacy",
                "shares", "likes", "comments", "message_tags"}  # fmt: skip
    assert post.present_fields == expected
    assert post.present_fields <= set(GraphPost.entity_fields())
    assert post.presence["caption"] is False
    assert post.presence["from_"] is True


def test_from_alias():
    post = GraphPost.parse(POST_JSON)

    assert post.from_ is not None
    assert post.from_.name == "Some Page"
    assert post.has("from")
    assert post.has("from_")
    assert post.has_from is True


def test_full_post():
    post = GraphPost.parse(POST_JSON)

    assert post.created_time == datetime(2017, 5, 1, 12, 0, tzinfo=timezone.utc)
    assert post.sort_date == post.created_time
    assert post.type is GraphPostType.STATUS
    assert post.status_type is GraphPostStatusType.MOBILE_STATUS_UPDATE
    assert post.privacy is not None and post.privacy.value == "EVERYONE"
    assert post.shares is not None and post.shares.count == 3
    assert post.message_tags[0].name == "Alice"
    assert post.raw_json["unknown_key"] == [1, 2, 3]


def test_nested_collections():
    post = GraphPost.parse(POST_JSON)

    assert isinstance(post.likes, GraphLikesCollection)
    assert [like.name for like in post.likes.data] == ["Alice", "Bob"]
    assert post.likes.after == "QVFIUk"
    assert post.likes.total_count == 17
    assert post.likes.summary.has_liked is False

    assert isinstance(post.comments, GraphCommentsCollection)
    comment = post.comments.data[0]
    assert isinstance(comment, GraphComment)
    assert comment.like_count == 2
    assert comment.parent is not None and comment.parent.id == "123_456_0"
    assert comment.parent.has_message is False
    # No "next" link: this is the last page
    assert post.comments.after is None
    assert post.comments.total_count is None


def test_parse_none_and_invalid():
    assert GraphPost.parse(None) is None
    with pytest.raises(ParseError):
        GraphPost.parse("not an object")  # type: ignore[arg-type]
    with pytest.raises(ParseError):
        GraphPost.parse({"message": "no id"})
    with pytest.raises(ParseError):
        GraphPost.parse({"id": ""})


def test_unknown_field_name():
    post = GraphPost.parse({"id": "1"})

    with pytest.raises(AttributeError):
        post.has("nonexistent")
    with pytest.raises(AttributeError):
        _ = post.has_nonexistent


def test_entities_are_immutable():
    post = GraphPost.parse({"id": "1", "message": "hello"})

    with pytest.raises(ValidationError):
        post.message = "changed"


def test_unknown_enum_value_is_present_but_defaulted():
    post = GraphPost.parse({"id": "1", "type": "hologram"})

    assert post.type is GraphPostType.NOT_SPECIFIED
    assert post.has_type is True


def test_photo_largest_image():
    photo = GraphPhoto.parse(
        {
            "id": "p1",
            "images": [
                {"source": "https://cdn.example.com/small.jpg", "width": 130, "height": 100},
                {"source": "https://cdn.example.com/large.jpg", "width": 1300, "height": 1000},
            ],
            "album": {"id": "a1", "name": "Timeline Photos"},
        }
    )

    assert photo.largest_image.source == "https://cdn.example.com/large.jpg"
    assert photo.album.name == "Timeline Photos"
    assert photo.has_name is False
    assert GraphPhoto.parse({"id": "p2"}).largest_image is None


def test_user():
    user = GraphUser.parse({"id": 42, "name": "Jane", "timezone": 2, "verified": True})

    assert user.id == "42"
    assert user.timezone == 2.0
    assert user.verified is True
    assert user.has_email is False


def test_token_from_json_and_form():
    token = GraphToken.parse({"access_token": "abc", "token_type": "bearer", "expires_in": 5183999})
    assert str(token) == "abc"
    assert token.expires_in == 5183999

    legacy = GraphToken.parse_form("access_token=abc&expires=5183999")
    assert legacy.access_token == "abc"
    assert legacy.expires_in == 5183999
    assert legacy.has_token_type is False

    with pytest.raises(ParseError):
        GraphToken.parse_form("expires=1")


def test_publish_result():
    result = GraphPublishResult.parse({"id": "p1", "post_id": "123_456"})
    assert result.post_id == "123_456"
    assert GraphPublishResult.parse({"id": "c1"}).has_post_id is False


def test_post_attachments():
    post = GraphPost.parse(
        {
            "id": "1_2",
            "attachments": {
                "data": [
                    {
                        "type": "album",
                        "title": "Summer",
                        "url": "https://www.facebook.com/album/1",
                        "target": {"id": "a1", "url": "https://www.facebook.com/album/1"},
                        "subattachments": {
                            "data": [
                                {
                                    "type": "photo",
                                    "media": {
                                        "image": {
                                            "src": "https://cdn.example.com/1.jpg",
                                            "width": 720,
                                            "height": 480,
                                        }
                                    },
                                    "target": {"id": "p1"},
                                }
                            ]
                        },
                    }
                ]
            },
        }
    )

    assert post.has_attachments is True
    assert isinstance(post.attachments, GraphPostAttachmentsCollection)
    album = post.attachments.data[0]
    assert album.title == "Summer"
    assert album.target.id == "a1"
    assert album.has_description is False
    photo = album.subattachments.data[0]
    assert photo.media.image.width == 720
    assert photo.subattachments is None
    assert GraphPost.parse({"id": "1"}).has_attachments is False


def test_raw_json_and_lists_are_read_only():
    source = {"id": "1_2", "message_tags": [{"id": "u1"}], "extra": {"nested": True}}
    post = GraphPost.parse(source)

    with pytest.raises(TypeError):
        post.raw_json["extra"] = None  # type: ignore[index]
    assert isinstance(post.message_tags, tuple)

    # Later changes to the source payload do not leak into the entity
    source["extra"]["nested"] = False
    assert post.raw_json["extra"] == {"nested": True}

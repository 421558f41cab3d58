from datetime import datetime

from pydantic import Field

from ..presence import FieldPresenceJson
from .base import GraphObject
from .common import GraphProfile
from .paging import GraphCollection


class GraphCommentParent(GraphObject):
    """The comment a reply was made to. Only a subset of fields is returned."""

    required_fields = ("id",)

    id: str
    message: str | None = None
    created_time: datetime | None = None
    from_: GraphProfile | None = Field(default=None, alias="from")

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphCommentParent":
        return cls._create(
            json,
            id=json.get_string("id"),
            message=json.get_string("message"),
            created_time=json.get_datetime("created_time"),
            from_=json.get_object("from", GraphProfile.parse),
        )


class GraphComment(GraphObject):
    required_fields = ("id",)

    id: str
    message: str | None = None
    created_time: datetime | None = None
    from_: GraphProfile | None = Field(default=None, alias="from")
    like_count: int = 0
    comment_count: int = 0
    user_likes: bool = False
    can_remove: bool = False
    parent: GraphCommentParent | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphComment":
        return cls._create(
            json,
            id=json.get_string("id"),
            message=json.get_string("message"),
            created_time=json.get_datetime("created_time"),
            from_=json.get_object("from", GraphProfile.parse),
            like_count=json.get_int("like_count"),
            comment_count=json.get_int("comment_count"),
            user_likes=json.get_bool("user_likes"),
            can_remove=json.get_bool("can_remove"),
            parent=json.get_object("parent", GraphCommentParent.parse),
        )


class GraphCommentsCollection(GraphCollection):
    item_class = GraphComment

    data: tuple[GraphComment, ...] = ()

"""Post entities.

Every field of :class:`GraphPost` is optional except ``id``. Which ones are
populated depends on the ``fields`` parameter of the request; use the
presence flags (``post.has_message``) to tell "not requested/returned" apart
from "returned empty".
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from ..presence import FieldPresenceJson
from .attachments import GraphPostAttachmentsCollection
from .base import GraphObject
from .comments import GraphCommentsCollection
from .common import (
    GraphApplication,
    GraphPlace,
    GraphPostProperty,
    GraphPrivacy,
    GraphProfile,
    GraphProfileTag,
    GraphShares,
)
from .likes import GraphLikesCollection
from .paging import GraphCollection


class GraphPostType(Enum):
    NOT_SPECIFIED = "not_specified"
    LINK = "link"
    STATUS = "status"
    PHOTO = "photo"
    VIDEO = "video"
    OFFER = "offer"
    EVENT = "event"
    NOTE = "note"


class GraphPostStatusType(Enum):
    NOT_SPECIFIED = "not_specified"
    MOBILE_STATUS_UPDATE = "mobile_status_update"
    CREATED_NOTE = "created_note"
    ADDED_PHOTOS = "added_photos"
    ADDED_VIDEO = "added_video"
    SHARED_STORY = "shared_story"
    CREATED_GROUP = "created_group"
    CREATED_EVENT = "created_event"
    WALL_POST = "wall_post"
    APP_CREATED_STORY = "app_created_story"
    PUBLISHED_STORY = "published_story"
    TAGGED_IN_PHOTO = "tagged_in_photo"
    APPROVED_FRIEND = "approved_friend"


class GraphPost(GraphObject):
    """A post in a feed, on a page or on a user's timeline."""

    required_fields = ("id",)

    id: str
    admin_creator: GraphProfile | None = None
    application: GraphApplication | None = None
    attachments: GraphPostAttachmentsCollection | None = None
    caption: str | None = None
    comments: GraphCommentsCollection | None = None
    created_time: datetime | None = None
    description: str | None = None
    from_: GraphProfile | None = Field(default=None, alias="from")
    full_picture: str | None = None
    icon: str | None = None
    is_hidden: bool = False
    is_published: bool = False
    likes: GraphLikesCollection | None = None
    link: str | None = None
    message: str | None = None
    message_tags: tuple[GraphProfileTag, ...] = ()
    name: str | None = None
    object_id: str | None = None
    parent_id: str | None = None
    permalink_url: str | None = None
    picture: str | None = None
    place: GraphPlace | None = None
    privacy: GraphPrivacy | None = None
    properties: tuple[GraphPostProperty, ...] = ()
    shares: GraphShares | None = None
    source: str | None = None
    status_type: GraphPostStatusType = GraphPostStatusType.NOT_SPECIFIED
    story: str | None = None
    story_tags: tuple[GraphProfileTag, ...] = ()
    type: GraphPostType = GraphPostType.NOT_SPECIFIED
    updated_time: datetime | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphPost":
        return cls._create(
            json,
            id=json.get_string("id"),
            admin_creator=json.get_object("admin_creator", GraphProfile.parse),
            application=json.get_object("application", GraphApplication.parse),
            attachments=json.get_object("attachments", GraphPostAttachmentsCollection.parse),
            caption=json.get_string("caption"),
            comments=json.get_object("comments", GraphCommentsCollection.parse),
            created_time=json.get_datetime("created_time"),
            description=json.get_string("description"),
            from_=json.get_object("from", GraphProfile.parse),
            full_picture=json.get_string("full_picture"),
            icon=json.get_string("icon"),
            is_hidden=json.get_bool("is_hidden"),
            is_published=json.get_bool("is_published"),
            likes=json.get_object("likes", GraphLikesCollection.parse),
            link=json.get_string("link"),
            message=json.get_string("message"),
            message_tags=json.get_array("message_tags", GraphProfileTag.parse),
            name=json.get_string("name"),
            object_id=json.get_string("object_id"),
            parent_id=json.get_string("parent_id"),
            permalink_url=json.get_string("permalink_url"),
            picture=json.get_string("picture"),
            place=json.get_object("place", GraphPlace.parse),
            privacy=json.get_object("privacy", GraphPrivacy.parse),
            properties=json.get_array("properties", GraphPostProperty.parse),
            shares=json.get_object("shares", GraphShares.parse),
            source=json.get_string("source"),
            status_type=json.get_enum("status_type", GraphPostStatusType, GraphPostStatusType.NOT_SPECIFIED),
            story=json.get_string("story"),
            story_tags=json.get_array("story_tags", GraphProfileTag.parse),
            type=json.get_enum("type", GraphPostType, GraphPostType.NOT_SPECIFIED),
            updated_time=json.get_datetime("updated_time"),
        )

    @property
    def sort_date(self) -> datetime | None:
        return self.created_time


class GraphPostsCollection(GraphCollection):
    item_class = GraphPost

    data: tuple[GraphPost, ...] = ()

"""Attachments of a post: links, photos, videos and albums.

Album-like attachments nest their items in ``subattachments``, which uses
the same ``data`` envelope as the top-level ``attachments`` edge.
"""

from ..presence import FieldPresenceJson
from .base import GraphObject
from .paging import GraphCollection


class GraphAttachmentImage(GraphObject):
    src: str | None = None
    width: int = 0
    height: int = 0

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphAttachmentImage":
        return cls._create(
            json,
            src=json.get_string("src"),
            width=json.get_int("width"),
            height=json.get_int("height"),
        )


class GraphAttachmentMedia(GraphObject):
    """Media of an attachment. Videos also carry a ``source`` URL."""

    image: GraphAttachmentImage | None = None
    source: str | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphAttachmentMedia":
        return cls._create(
            json,
            image=json.get_object("image", GraphAttachmentImage.parse),
            source=json.get_string("source"),
        )


class GraphAttachmentTarget(GraphObject):
    """The object an attachment points to, e.g. the photo or the shared page."""

    id: str | None = None
    url: str | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphAttachmentTarget":
        return cls._create(json, id=json.get_string("id"), url=json.get_string("url"))


class GraphPostAttachment(GraphObject):
    type: str | None = None
    title: str | None = None
    url: str | None = None
    description: str | None = None
    media: GraphAttachmentMedia | None = None
    target: GraphAttachmentTarget | None = None
    subattachments: "GraphPostAttachmentsCollection | None" = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphPostAttachment":
        return cls._create(
            json,
            type=json.get_string("type"),
            title=json.get_string("title"),
            url=json.get_string("url"),
            description=json.get_string("description"),
            media=json.get_object("media", GraphAttachmentMedia.parse),
            target=json.get_object("target", GraphAttachmentTarget.parse),
            subattachments=json.get_object("subattachments", GraphPostAttachmentsCollection.parse),
        )


class GraphPostAttachmentsCollection(GraphCollection):
    item_class = GraphPostAttachment

    data: tuple[GraphPostAttachment, ...] = ()


GraphPostAttachment.model_rebuild()

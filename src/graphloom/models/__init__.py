# graphloom/models/__init__.py
"""Parsed Graph API entities."""

from .attachments import (
    GraphAttachmentImage,
    GraphAttachmentMedia,
    GraphAttachmentTarget,
    GraphPostAttachment,
    GraphPostAttachmentsCollection,
)
from .base import GraphObject
from .comments import GraphComment, GraphCommentParent, GraphCommentsCollection
from .common import (
    GraphApplication,
    GraphImage,
    GraphLocation,
    GraphPlace,
    GraphPostProperty,
    GraphPrivacy,
    GraphProfile,
    GraphProfileTag,
    GraphShares,
)
from .likes import GraphLike, GraphLikesCollection
from .paging import GraphCollection, GraphCursors, GraphPaging, GraphSummary
from .photos import GraphAlbumReference, GraphPhoto, GraphPhotosCollection
from .posts import GraphPost, GraphPostsCollection, GraphPostStatusType, GraphPostType
from .results import GraphPublishResult, GraphToken
from .users import GraphUser

__all__ = [
    "GraphAlbumReference",
    "GraphApplication",
    "GraphAttachmentImage",
    "GraphAttachmentMedia",
    "GraphAttachmentTarget",
    "GraphCollection",
    "GraphComment",
    "GraphCommentParent",
    "GraphCommentsCollection",
    "GraphCursors",
    "GraphImage",
    "GraphLike",
    "GraphLikesCollection",
    "GraphLocation",
    "GraphObject",
    "GraphPaging",
    "GraphPhoto",
    "GraphPhotosCollection",
    "GraphPlace",
    "GraphPost",
    "GraphPostAttachment",
    "GraphPostAttachmentsCollection",
    "GraphPostProperty",
    "GraphPostStatusType",
    "GraphPostType",
    "GraphPostsCollection",
    "GraphPrivacy",
    "GraphProfile",
    "GraphProfileTag",
    "GraphPublishResult",
    "GraphShares",
    "GraphSummary",
    "GraphToken",
    "GraphUser",
]

# graphloom/fields.py
"""Field selection for Graph API read calls.

A :class:`GraphFieldsCollection` is sent as the ``fields`` query parameter.
The catalogues below list the fields graphloom knows per object type; any
other name can still be requested as a plain string.
"""

from functools import lru_cache

from .tokens import NamedToken, TokenCollection, TokenRegistry


class GraphField(NamedToken):
    """A field of a Graph API object, e.g. ``message`` on a post."""

    @classmethod
    def collection_class(cls) -> type["GraphFieldsCollection"]:
        return GraphFieldsCollection


class GraphFieldsCollection(TokenCollection[GraphField]):
    """Ordered set of fields, serialized as ``fields=a,b,c``."""

    token_class = GraphField


class PostFields:
    """Fields of a post object."""

    ID = GraphField("id", "The post ID.")
    ADMIN_CREATOR = GraphField("admin_creator", "The admin creator of a Page post.")
    APPLICATION = GraphField("application", "Information about the app this post was published by.")
    ATTACHMENTS = GraphField("attachments", "Any attachments that are associated with the story.")
    CAPTION = GraphField("caption", "The caption of a link in the post.")
    COMMENTS = GraphField("comments", "Comments made on the post.")
    CREATED_TIME = GraphField("created_time", "The time the post was initially published.")
    DESCRIPTION = GraphField("description", "A description of a link in the post.")
    FROM = GraphField("from", "Information about the profile that posted the message.")
    FULL_PICTURE = GraphField("full_picture", "Full size picture from the attachment.")
    ICON = GraphField("icon", "A link to an icon representing the type of this post.")
    IS_HIDDEN = GraphField("is_hidden", "Whether a post has been marked as hidden.")
    IS_PUBLISHED = GraphField("is_published", "Whether a scheduled post was published.")
    LIKES = GraphField("likes", "Likes of the post.")
    LINK = GraphField("link", "The link attached to this post.")
    MESSAGE = GraphField("message", "The status message in the post.")
    MESSAGE_TAGS = GraphField("message_tags", "Profiles tagged in the message text.")
    NAME = GraphField("name", "The name of the link.")
    OBJECT_ID = GraphField("object_id", "The ID of any uploaded photo or video attached to the post.")
    PARENT_ID = GraphField("parent_id", "The ID of a parent post for this post, if it exists.")
    PERMALINK_URL = GraphField("permalink_url", "The permanent static URL to the post.")
    PICTURE = GraphField("picture", "The picture scraped from any link included with the post.")
    PLACE = GraphField("place", "Any location information attached to the post.")
    PRIVACY = GraphField("privacy", "The privacy settings of the post.")
    PROPERTIES = GraphField("properties", "A list of properties for any attached video.")
    SHARES = GraphField("shares", "The share count of this post.")
    SOURCE = GraphField("source", "A URL to any Flash movie or video file attached to the post.")
    STATUS_TYPE = GraphField("status_type", "Description of the type of a status update.")
    STORY = GraphField("story", "Text from stories not intentionally generated by users.")
    STORY_TAGS = GraphField("story_tags", "Profiles tagged in the story text.")
    TYPE = GraphField("type", "A string indicating the object type of this post.")
    UPDATED_TIME = GraphField("updated_time", "The time of the last change to the post.")

    ALL = GraphFieldsCollection(
        ID, ADMIN_CREATOR, APPLICATION, ATTACHMENTS, CAPTION, COMMENTS,
        CREATED_TIME, DESCRIPTION, FROM, FULL_PICTURE, ICON, IS_HIDDEN,
        IS_PUBLISHED, LIKES, LINK, MESSAGE, MESSAGE_TAGS, NAME, OBJECT_ID,
        PARENT_ID, PERMALINK_URL, PICTURE, PLACE, PRIVACY, PROPERTIES, SHARES,
        SOURCE, STATUS_TYPE, STORY, STORY_TAGS, TYPE, UPDATED_TIME,
    )  # fmt: skip


class PhotoFields:
    """Fields of a photo object."""

    ID = GraphField("id", "The photo ID.")
    ALBUM = GraphField("album", "The album this photo is in.")
    CREATED_TIME = GraphField("created_time", "The time this photo was published.")
    FROM = GraphField("from", "The profile (user or page) that uploaded this photo.")
    HEIGHT = GraphField("height", "The height of this photo in pixels.")
    IMAGES = GraphField("images", "The different stored representations of the photo.")
    LINK = GraphField("link", "A link to the photo on Facebook.")
    NAME = GraphField("name", "The user-provided caption given to this photo.")
    PICTURE = GraphField("picture", "Link to the 100px wide representation of this photo.")
    PLACE = GraphField("place", "Location associated with the photo, if any.")
    UPDATED_TIME = GraphField("updated_time", "The last time the photo was updated.")
    WIDTH = GraphField("width", "The width of this photo in pixels.")

    ALL = GraphFieldsCollection(
        ID, ALBUM, CREATED_TIME, FROM, HEIGHT, IMAGES, LINK, NAME, PICTURE,
        PLACE, UPDATED_TIME, WIDTH,
    )  # fmt: skip


class CommentFields:
    """Fields of a comment object."""

    ID = GraphField("id", "The comment ID.")
    CAN_REMOVE = GraphField("can_remove", "Whether the viewer can remove this comment.")
    COMMENT_COUNT = GraphField("comment_count", "Number of replies to this comment.")
    CREATED_TIME = GraphField("created_time", "The time this comment was made.")
    FROM = GraphField("from", "The person that made this comment.")
    LIKE_COUNT = GraphField("like_count", "Number of times this comment was liked.")
    MESSAGE = GraphField("message", "The comment text.")
    PARENT = GraphField("parent", "For comment replies, the comment replied to.")
    USER_LIKES = GraphField("user_likes", "Whether the viewer has liked this comment.")

    ALL = GraphFieldsCollection(
        ID, CAN_REMOVE, COMMENT_COUNT, CREATED_TIME, FROM, LIKE_COUNT, MESSAGE,
        PARENT, USER_LIKES,
    )  # fmt: skip


class UserFields:
    """Fields of a user object."""

    ID = GraphField("id", "The ID of this person's user account.")
    EMAIL = GraphField("email", "The person's primary email address.")
    FIRST_NAME = GraphField("first_name", "The person's first name.")
    GENDER = GraphField("gender", "The gender selected by this person.")
    LAST_NAME = GraphField("last_name", "The person's last name.")
    LINK = GraphField("link", "A link to the person's Timeline.")
    LOCALE = GraphField("locale", "The person's locale.")
    NAME = GraphField("name", "The person's full name.")
    TIMEZONE = GraphField("timezone", "The person's current timezone offset from UTC.")
    UPDATED_TIME = GraphField("updated_time", "Updated time.")
    VERIFIED = GraphField("verified", "Indicates whether the account has been verified.")

    ALL = GraphFieldsCollection(
        ID, EMAIL, FIRST_NAME, GENDER, LAST_NAME, LINK, LOCALE, NAME, TIMEZONE,
        UPDATED_TIME, VERIFIED,
    )  # fmt: skip


@lru_cache
def default_field_registry() -> TokenRegistry[GraphField]:
    """A frozen registry of every field in the catalogues above.

    Several object types share field names (``id``, ``from``, ...); the first
    catalogue listing a name wins.
    """
    registry: TokenRegistry[GraphField] = TokenRegistry()
    for catalogue in (PostFields, PhotoFields, CommentFields, UserFields):
        for field in catalogue.ALL:
            if not registry.exists(field.name):
                registry.register(field)
    return registry.freeze()

"""Small entities embedded in posts, photos and comments."""

from ..presence import FieldPresenceJson
from .base import GraphObject


class GraphProfile(GraphObject):
    """A reference to a user or page, as found in ``from`` or ``admin_creator``."""

    required_fields = ("id",)

    id: str
    name: str | None = None
    category: str | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphProfile":
        return cls._create(
            json,
            id=json.get_string("id"),
            name=json.get_string("name"),
            category=json.get_string("category"),
        )


class GraphApplication(GraphObject):
    """The app a post was published through."""

    id: str | None = None
    name: str | None = None
    namespace: str | None = None
    category: str | None = None
    link: str | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphApplication":
        return cls._create(
            json,
            id=json.get_string("id"),
            name=json.get_string("name"),
            namespace=json.get_string("namespace"),
            category=json.get_string("category"),
            link=json.get_string("link"),
        )


class GraphLocation(GraphObject):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip: str | None = None
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphLocation":
        return cls._create(
            json,
            street=json.get_string("street"),
            city=json.get_string("city"),
            state=json.get_string("state"),
            country=json.get_string("country"),
            zip=json.get_string("zip"),
            latitude=json.get_float("latitude"),
            longitude=json.get_float("longitude"),
        )


class GraphPlace(GraphObject):
    id: str | None = None
    name: str | None = None
    location: GraphLocation | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphPlace":
        return cls._create(
            json,
            id=json.get_string("id"),
            name=json.get_string("name"),
            location=json.get_object("location", GraphLocation.parse),
        )


class GraphShares(GraphObject):
    """Share statistics of a post."""

    count: int = 0

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphShares":
        return cls._create(json, count=json.get_int("count"))


class GraphProfileTag(GraphObject):
    """A profile tagged in the text of a message or story.

    ``offset`` and ``length`` locate the tag within the text.
    """

    id: str | None = None
    name: str | None = None
    type: str | None = None
    offset: int = 0
    length: int = 0

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphProfileTag":
        return cls._create(
            json,
            id=json.get_string("id"),
            name=json.get_string("name"),
            type=json.get_string("type"),
            offset=json.get_int("offset"),
            length=json.get_int("length"),
        )


class GraphPrivacy(GraphObject):
    value: str | None = None
    description: str | None = None
    friends: str | None = None
    allow: str | None = None
    deny: str | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphPrivacy":
        return cls._create(
            json,
            value=json.get_string("value"),
            description=json.get_string("description"),
            friends=json.get_string("friends"),
            allow=json.get_string("allow"),
            deny=json.get_string("deny"),
        )


class GraphPostProperty(GraphObject):
    """A property of a video attached to a post, e.g. its length."""

    name: str | None = None
    text: str | None = None
    href: str | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphPostProperty":
        return cls._create(
            json,
            name=json.get_string("name"),
            text=json.get_string("text"),
            href=json.get_string("href"),
        )


class GraphImage(GraphObject):
    """One stored rendition of a photo."""

    source: str | None = None
    width: int = 0
    height: int = 0

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphImage":
        return cls._create(
            json,
            source=json.get_string("source"),
            width=json.get_int("width"),
            height=json.get_int("height"),
        )

from datetime import datetime

from pydantic import Field

from ..presence import FieldPresenceJson
from .base import GraphObject
from .common import GraphImage, GraphPlace, GraphProfile
from .paging import GraphCollection


class GraphAlbumReference(GraphObject):
    """The album a photo belongs to."""

    id: str | None = None
    name: str | None = None
    created_time: datetime | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphAlbumReference":
        return cls._create(
            json,
            id=json.get_string("id"),
            name=json.get_string("name"),
            created_time=json.get_datetime("created_time"),
        )


class GraphPhoto(GraphObject):
    """A photo uploaded to a user, page or album."""

    required_fields = ("id",)

    id: str
    album: GraphAlbumReference | None = None
    created_time: datetime | None = None
    from_: GraphProfile | None = Field(default=None, alias="from")
    height: int = 0
    width: int = 0
    images: tuple[GraphImage, ...] = ()
    link: str | None = None
    name: str | None = None
    picture: str | None = None
    place: GraphPlace | None = None
    updated_time: datetime | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphPhoto":
        return cls._create(
            json,
            id=json.get_string("id"),
            album=json.get_object("album", GraphAlbumReference.parse),
            created_time=json.get_datetime("created_time"),
            from_=json.get_object("from", GraphProfile.parse),
            height=json.get_int("height"),
            width=json.get_int("width"),
            images=json.get_array("images", GraphImage.parse),
            link=json.get_string("link"),
            name=json.get_string("name"),
            picture=json.get_string("picture"),
            place=json.get_object("place", GraphPlace.parse),
            updated_time=json.get_datetime("updated_time"),
        )

    @property
    def largest_image(self) -> GraphImage | None:
        if not self.images:
            return None
        return max(self.images, key=lambda image: image.width * image.height)


class GraphPhotosCollection(GraphCollection):
    item_class = GraphPhoto

    data: tuple[GraphPhoto, ...] = ()

from ..presence import FieldPresenceJson
from .base import GraphObject
from .paging import GraphCollection


class GraphLike(GraphObject):
    """A like, identified by the profile that made it."""

    required_fields = ("id",)

    id: str
    name: str | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphLike":
        return cls._create(json, id=json.get_string("id"), name=json.get_string("name"))


class GraphLikesCollection(GraphCollection):
    item_class = GraphLike

    data: tuple[GraphLike, ...] = ()

"""Cursor pagination and list envelopes.

Graph API edges (``/{id}/photos``, ``/{id}/likes``, ...) return
``{"data": [...], "paging": {...}, "summary": {...}}``. Cursors are parsed
and exposed so callers can request the next page themselves; graphloom never
follows them automatically.
"""

from typing import Any, ClassVar

from ..presence import FieldPresenceJson
from .base import GraphObject


class GraphCursors(GraphObject):
    before: str | None = None
    after: str | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphCursors":
        return cls._create(json, before=json.get_string("before"), after=json.get_string("after"))


class GraphPaging(GraphObject):
    """Pagination details of a list response.

    Attributes:
        cursors: The ``before``/``after`` cursors, if the edge is cursor based.
        previous: Absolute URL of the previous page, if any.
        next: Absolute URL of the next page, if any.
    """

    cursors: GraphCursors | None = None
    previous: str | None = None
    next: str | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphPaging":
        return cls._create(
            json,
            cursors=json.get_object("cursors", GraphCursors.parse),
            previous=json.get_string("previous"),
            next=json.get_string("next"),
        )


class GraphSummary(GraphObject):
    """The ``summary`` block returned when ``summary=true`` was requested."""

    total_count: int = 0
    order: str | None = None
    can_like: bool = False
    has_liked: bool = False
    can_comment: bool = False

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphSummary":
        return cls._create(
            json,
            total_count=json.get_int("total_count"),
            order=json.get_string("order"),
            can_like=json.get_bool("can_like"),
            has_liked=json.get_bool("has_liked"),
            can_comment=json.get_bool("can_comment"),
        )


class GraphCollection(GraphObject):
    """Base for ``data``/``paging``/``summary`` envelopes.

    Subclasses narrow ``data`` and set ``item_class`` to the entity parsed
    from each element.
    """

    item_class: ClassVar[type[GraphObject]] = GraphObject

    data: tuple[Any, ...] = ()
    paging: GraphPaging | None = None
    summary: GraphSummary | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson):
        return cls._create(
            json,
            data=json.get_array("data", cls.item_class.parse),
            paging=json.get_object("paging", GraphPaging.parse),
            summary=json.get_object("summary", GraphSummary.parse),
        )

    @property
    def after(self) -> str | None:
        """Cursor for the next page, or None on the last page."""
        if self.paging is None or self.paging.cursors is None:
            return None
        return self.paging.cursors.after if self.paging.next else None

    @property
    def total_count(self) -> int | None:
        return self.summary.total_count if self.summary is not None else None

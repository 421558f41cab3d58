from datetime import datetime

from ..presence import FieldPresenceJson
from .base import GraphObject


class GraphUser(GraphObject):
    required_fields = ("id",)

    id: str
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    gender: str | None = None
    link: str | None = None
    locale: str | None = None
    timezone: float = 0.0
    updated_time: datetime | None = None
    verified: bool = False

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphUser":
        return cls._create(
            json,
            id=json.get_string("id"),
            name=json.get_string("name"),
            first_name=json.get_string("first_name"),
            last_name=json.get_string("last_name"),
            email=json.get_string("email"),
            gender=json.get_string("gender"),
            link=json.get_string("link"),
            locale=json.get_string("locale"),
            timezone=json.get_float("timezone"),
            updated_time=json.get_datetime("updated_time"),
            verified=json.get_bool("verified"),
        )

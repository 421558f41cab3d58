"""Results of OAuth token operations and publishing calls."""

from typing import Any
from urllib.parse import parse_qsl

from ..presence import FieldPresenceJson
from .base import GraphObject


class GraphToken(GraphObject):
    """An access token returned by the ``/oauth/access_token`` endpoint.

    Attributes:
        access_token: The token itself.
        token_type: Usually ``bearer``.
        expires_in: Lifetime in seconds, ``0`` if the API did not say (app
            tokens do not expire).
    """

    required_fields = ("access_token",)

    access_token: str
    token_type: str | None = None
    expires_in: int = 0

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphToken":
        return cls._create(
            json,
            access_token=json.get_string("access_token"),
            token_type=json.get_string("token_type"),
            expires_in=json.get_int("expires_in"),
        )

    @classmethod
    def parse_form(cls, body: str) -> "GraphToken | None":
        """Parse the legacy ``access_token=...&expires=...`` form body.

        API versions before v2.3 answered token requests this way.
        """
        pairs: dict[str, Any] = dict(parse_qsl(body.strip()))
        if "expires" in pairs and "expires_in" not in pairs:
            pairs["expires_in"] = pairs.pop("expires")
        return cls.parse(pairs)

    def __str__(self) -> str:
        return self.access_token


class GraphPublishResult(GraphObject):
    """Identifiers returned after creating an object, e.g. uploading a photo.

    ``post_id`` is only set when the upload also produced a feed story.
    """

    required_fields = ("id",)

    id: str
    post_id: str | None = None

    @classmethod
    def from_json(cls, json: FieldPresenceJson) -> "GraphPublishResult":
        return cls._create(json, id=json.get_string("id"), post_id=json.get_string("post_id"))


# graphloom/endpoints/users.py
import httpx

from ..fields import GraphFieldsCollection
from ..models import GraphUser
from ..options import GetUserOptions
from ..responses import GraphResponse
from .base import BaseEndpoint, BaseRawEndpoint

FieldsArg = GraphFieldsCollection | str | list | None


class UsersRawEndpoint(BaseRawEndpoint):
    def get_user(
        self, identifier: str | GetUserOptions, *, fields: FieldsArg = None
    ) -> httpx.Response:
        """Get a user by ID or alias."""
        options = self._resolve_options(identifier, GetUserOptions, fields=fields)
        return self._send(options)

    def get_me(self, *, fields: FieldsArg = None) -> httpx.Response:
        """Get the user the access token belongs to."""
        return self.get_user("me", fields=fields)


class UsersEndpoint(BaseEndpoint):
    _raw: UsersRawEndpoint

    def __init__(self, raw: UsersRawEndpoint):
        super().__init__(raw)

    def get_user(
        self, identifier: str | GetUserOptions, *, fields: FieldsArg = None
    ) -> GraphResponse[GraphUser]:
        return self._wrap(self._raw.get_user(identifier, fields=fields), GraphUser.parse)

    def get_me(self, *, fields: FieldsArg = None) -> GraphResponse[GraphUser]:
        return self._wrap(self._raw.get_me(fields=fields), GraphUser.parse)

# graphloom/endpoints/likes.py
import httpx

from ..fields import GraphFieldsCollection
from ..models import GraphLikesCollection
from ..options import GetLikesOptions
from ..responses import GraphResponse
from .base import BaseEndpoint, BaseRawEndpoint


class LikesRawEndpoint(BaseRawEndpoint):
    def get_likes(
        self,
        identifier: str | GetLikesOptions,
        *,
        fields: GraphFieldsCollection | str | list | None = None,
        limit: int | None = None,
        after: str | None = None,
        summary: bool | None = None,
    ) -> httpx.Response:
        """Get the likes of a post, photo or comment."""
        options = self._resolve_options(
            identifier, GetLikesOptions, fields=fields, limit=limit, after=after, summary=summary
        )
        return self._send(options)


class LikesEndpoint(BaseEndpoint):
    _raw: LikesRawEndpoint

    def __init__(self, raw: LikesRawEndpoint):
        super().__init__(raw)

    def get_likes(
        self, identifier: str | GetLikesOptions, **kwargs
    ) -> GraphResponse[GraphLikesCollection]:
        return self._wrap(self._raw.get_likes(identifier, **kwargs), GraphLikesCollection.parse)

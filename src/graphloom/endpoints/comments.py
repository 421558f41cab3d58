# graphloom/endpoints/comments.py
"""Endpoints for ``/{id}/comments``."""

import httpx

from ..fields import GraphFieldsCollection
from ..models import GraphCommentsCollection, GraphPublishResult
from ..options import GetCommentsOptions, PostCommentOptions
from ..responses import GraphResponse
from .base import BaseEndpoint, BaseRawEndpoint


class CommentsRawEndpoint(BaseRawEndpoint):
    def get_comments(
        self,
        identifier: str | GetCommentsOptions,
        *,
        fields: GraphFieldsCollection | str | list | None = None,
        limit: int | None = None,
        after: str | None = None,
        summary: bool | None = None,
        order: str | None = None,
        filter: str | None = None,
    ) -> httpx.Response:
        """Get the comments of a post, photo or comment."""
        options = self._resolve_options(
            identifier,
            GetCommentsOptions,
            fields=fields,
            limit=limit,
            after=after,
            summary=summary,
            order=order,
            filter=filter,
        )
        return self._send(options)

    def post_comment(
        self, identifier: str | PostCommentOptions, message: str | None = None
    ) -> httpx.Response:
        """Comment on the object ``identifier``."""
        options = self._resolve_options(identifier, PostCommentOptions, message=message)
        return self._send(options)


class CommentsEndpoint(BaseEndpoint):
    _raw: CommentsRawEndpoint

    def __init__(self, raw: CommentsRawEndpoint):
        super().__init__(raw)

    def get_comments(
        self, identifier: str | GetCommentsOptions, **kwargs
    ) -> GraphResponse[GraphCommentsCollection]:
        response = self._raw.get_comments(identifier, **kwargs)
        return self._wrap(response, GraphCommentsCollection.parse)

    def post_comment(
        self, identifier: str | PostCommentOptions, message: str | None = None
    ) -> GraphResponse[GraphPublishResult]:
        response = self._raw.post_comment(identifier, message)
        return self._wrap(response, GraphPublishResult.parse)

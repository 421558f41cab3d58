# graphloom/endpoints/posts.py
"""Endpoints for posts and feeds."""

import httpx

from ..fields import GraphFieldsCollection
from ..models import GraphPost, GraphPostsCollection, GraphPublishResult
from ..options import (
    GetFeedOptions,
    GetPostOptions,
    GetPostsOptions,
    PostStatusMessageOptions,
)
from ..responses import GraphResponse
from .base import BaseEndpoint, BaseRawEndpoint

FieldsArg = GraphFieldsCollection | str | list | None


class PostsRawEndpoint(BaseRawEndpoint):
    def get_post(
        self, identifier: str | GetPostOptions, *, fields: FieldsArg = None
    ) -> httpx.Response:
        options = self._resolve_options(identifier, GetPostOptions, fields=fields)
        return self._send(options)

    def get_posts(
        self,
        identifier: str | GetPostsOptions,
        *,
        fields: FieldsArg = None,
        limit: int | None = None,
        after: str | None = None,
    ) -> httpx.Response:
        """Get the posts published by a user or page."""
        options = self._resolve_options(
            identifier, GetPostsOptions, fields=fields, limit=limit, after=after
        )
        return self._send(options)

    def get_feed(
        self,
        identifier: str | GetFeedOptions,
        *,
        fields: FieldsArg = None,
        limit: int | None = None,
        after: str | None = None,
    ) -> httpx.Response:
        """Get the feed of a user or page, including posts by others."""
        options = self._resolve_options(
            identifier, GetFeedOptions, fields=fields, limit=limit, after=after
        )
        return self._send(options)

    def post_status_message(
        self,
        identifier: str | PostStatusMessageOptions,
        *,
        message: str | None = None,
        link: str | None = None,
        place: str | None = None,
    ) -> httpx.Response:
        """Publish a status message or link to the feed of ``identifier``."""
        options = self._resolve_options(
            identifier, PostStatusMessageOptions, message=message, link=link, place=place
        )
        return self._send(options)


class PostsEndpoint(BaseEndpoint):
    _raw: PostsRawEndpoint

    def __init__(self, raw: PostsRawEndpoint):
        super().__init__(raw)

    def get_post(
        self, identifier: str | GetPostOptions, *, fields: FieldsArg = None
    ) -> GraphResponse[GraphPost]:
        return self._wrap(self._raw.get_post(identifier, fields=fields), GraphPost.parse)

    def get_posts(
        self,
        identifier: str | GetPostsOptions,
        *,
        fields: FieldsArg = None,
        limit: int | None = None,
        after: str | None = None,
    ) -> GraphResponse[GraphPostsCollection]:
        response = self._raw.get_posts(identifier, fields=fields, limit=limit, after=after)
        return self._wrap(response, GraphPostsCollection.parse)

    def get_feed(
        self,
        identifier: str | GetFeedOptions,
        *,
        fields: FieldsArg = None,
        limit: int | None = None,
        after: str | None = None,
    ) -> GraphResponse[GraphPostsCollection]:
        response = self._raw.get_feed(identifier, fields=fields, limit=limit, after=after)
        return self._wrap(response, GraphPostsCollection.parse)

    def post_status_message(
        self,
        identifier: str | PostStatusMessageOptions,
        *,
        message: str | None = None,
        link: str | None = None,
        place: str | None = None,
    ) -> GraphResponse[GraphPublishResult]:
        response = self._raw.post_status_message(
            identifier, message=message, link=link, place=place
        )
        return self._wrap(response, GraphPublishResult.parse)

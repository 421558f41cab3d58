# graphloom/service.py
"""Typed facade over :class:`~graphloom.oauth.GraphOAuthClient`."""

from typing import Any, Self

from .endpoints import (
    CommentsEndpoint,
    LikesEndpoint,
    PhotosEndpoint,
    PostsEndpoint,
    UsersEndpoint,
)
from .log_config import logger
from .oauth import GraphOAuthClient


class GraphService:
    """Entry point returning parsed entities instead of raw responses.

    Wraps an existing `GraphOAuthClient`, or creates one from the keyword
    arguments (which are passed to its constructor). A client created here is
    closed together with the service.

    ```python
    with GraphService(access_token="...") as service:
        photos = service.photos.get_photos("me", limit=5).body
        for photo in photos.data:
            print(photo.id, photo.has_name)
    ```
    """

    def __init__(self, client: GraphOAuthClient | None = None, **client_kwargs: Any):
        if client is not None and client_kwargs:
            raise TypeError("Pass either an existing client or client arguments, not both.")
        self._owns_client = client is None
        self._client = client or GraphOAuthClient(**client_kwargs)

        self.photos = PhotosEndpoint(self._client.photos)
        self.posts = PostsEndpoint(self._client.posts)
        self.likes = LikesEndpoint(self._client.likes)
        self.comments = CommentsEndpoint(self._client.comments)
        self.users = UsersEndpoint(self._client.users)
        logger.debug("GraphService initialized")

    @property
    def client(self) -> GraphOAuthClient:
        return self._client

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

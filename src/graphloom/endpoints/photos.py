# graphloom/endpoints/photos.py
"""Endpoints for photos: ``/{photo-id}`` and ``/{id}/photos``."""

from pathlib import Path

import httpx

from ..fields import GraphFieldsCollection
from ..models import GraphPhoto, GraphPhotosCollection, GraphPublishResult
from ..options import GetPhotoOptions, GetPhotosOptions, PostPhotoOptions
from ..responses import GraphResponse
from .base import BaseEndpoint, BaseRawEndpoint

FieldsArg = GraphFieldsCollection | str | list | None


class PhotosRawEndpoint(BaseRawEndpoint):
    def get_photo(
        self, identifier: str | GetPhotoOptions, *, fields: FieldsArg = None
    ) -> httpx.Response:
        """Get a single photo by its ID."""
        options = self._resolve_options(identifier, GetPhotoOptions, fields=fields)
        return self._send(options)

    def get_photos(
        self,
        identifier: str | GetPhotosOptions,
        *,
        fields: FieldsArg = None,
        limit: int | None = None,
        after: str | None = None,
    ) -> httpx.Response:
        """Get the photos of a user, page or album."""
        options = self._resolve_options(
            identifier, GetPhotosOptions, fields=fields, limit=limit, after=after
        )
        return self._send(options)

    def post_photo(
        self,
        identifier: str | PostPhotoOptions,
        *,
        url: str | None = None,
        source: bytes | Path | None = None,
        filename: str | None = None,
        message: str | None = None,
        place: str | None = None,
        published: bool | None = None,
        no_story: bool | None = None,
    ) -> httpx.Response:
        """Upload a photo, either from ``url`` or from ``source``."""
        options = self._resolve_options(
            identifier,
            PostPhotoOptions,
            url=url,
            source=source,
            filename=filename,
            message=message,
            place=place,
            published=published,
            no_story=no_story,
        )
        return self._send(options)


class PhotosEndpoint(BaseEndpoint):
    _raw: PhotosRawEndpoint

    def __init__(self, raw: PhotosRawEndpoint):
        super().__init__(raw)

    def get_photo(
        self, identifier: str | GetPhotoOptions, *, fields: FieldsArg = None
    ) -> GraphResponse[GraphPhoto]:
        return self._wrap(self._raw.get_photo(identifier, fields=fields), GraphPhoto.parse)

    def get_photos(
        self,
        identifier: str | GetPhotosOptions,
        *,
        fields: FieldsArg = None,
        limit: int | None = None,
        after: str | None = None,
    ) -> GraphResponse[GraphPhotosCollection]:
        response = self._raw.get_photos(identifier, fields=fields, limit=limit, after=after)
        return self._wrap(response, GraphPhotosCollection.parse)

    def post_photo(
        self, identifier: str | PostPhotoOptions, **kwargs
    ) -> GraphResponse[GraphPublishResult]:
        """Upload a photo. Accepts the keyword arguments of the raw method."""
        return self._wrap(self._raw.post_photo(identifier, **kwargs), GraphPublishResult.parse)

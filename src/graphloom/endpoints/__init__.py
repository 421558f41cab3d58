# graphloom/endpoints/__init__.py
"""Raw and typed endpoints, one module per resource family."""

from .base import BaseEndpoint, BaseRawEndpoint
from .comments import CommentsEndpoint, CommentsRawEndpoint
from .likes import LikesEndpoint, LikesRawEndpoint
from .photos import PhotosEndpoint, PhotosRawEndpoint
from .posts import PostsEndpoint, PostsRawEndpoint
from .users import UsersEndpoint, UsersRawEndpoint

__all__ = [
    "BaseEndpoint",
    "BaseRawEndpoint",
    "CommentsEndpoint",
    "CommentsRawEndpoint",
    "LikesEndpoint",
    "LikesRawEndpoint",
    "PhotosEndpoint",
    "PhotosRawEndpoint",
    "PostsEndpoint",
    "PostsRawEndpoint",
    "UsersEndpoint",
    "UsersRawEndpoint",
]

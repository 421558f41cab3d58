# graphloom/scopes.py
"""OAuth permission scopes.

Scopes are requested when building the login dialog URL
(:meth:`graphloom.oauth.GraphOAuthClient.get_authorization_url`) and are sent
as one comma-separated ``scope`` parameter.
"""

from enum import Enum
from functools import lru_cache
from typing import Any

from .tokens import NamedToken, TokenCollection, TokenRegistry


class ScopeReview(Enum):
    """Whether an app must pass review before it may request a scope."""

    UNSPECIFIED = "unspecified"
    REQUIRED = "required"
    NOT_REQUIRED = "not_required"


class GraphScope(NamedToken):
    """A permission that can be requested during login."""

    review: ScopeReview = ScopeReview.UNSPECIFIED

    def __init__(
        self,
        name: str,
        description: str | None = None,
        review: ScopeReview = ScopeReview.UNSPECIFIED,
        **data: Any,
    ):
        super().__init__(name, description, review=review, **data)

    @classmethod
    def collection_class(cls) -> type["GraphScopeCollection"]:
        return GraphScopeCollection


class GraphScopeCollection(TokenCollection[GraphScope]):
    """Ordered set of scopes, serialized as ``scope=a,b,c``."""

    token_class = GraphScope


class GraphScopes:
    """Catalogue of commonly used permissions."""

    PUBLIC_PROFILE = GraphScope(
        "public_profile",
        "Provides access to a subset of items that are part of a person's public profile.",
        ScopeReview.NOT_REQUIRED,
    )
    EMAIL = GraphScope(
        "email", "Provides access to the person's primary email address.", ScopeReview.NOT_REQUIRED
    )
    USER_FRIENDS = GraphScope(
        "user_friends",
        "Provides access to the list of friends that also use your app.",
        ScopeReview.NOT_REQUIRED,
    )
    USER_ABOUT_ME = GraphScope(
        "user_about_me", "Provides access to a person's personal description.", ScopeReview.REQUIRED
    )
    USER_BIRTHDAY = GraphScope(
        "user_birthday", "Access the date and month of a person's birthday.", ScopeReview.REQUIRED
    )
    USER_LIKES = GraphScope(
        "user_likes", "Provides access to the list of all Facebook Pages that a person has liked.",
        ScopeReview.REQUIRED,
    )
    USER_PHOTOS = GraphScope(
        "user_photos", "Provides access to the photos a person has uploaded or been tagged in.",
        ScopeReview.REQUIRED,
    )
    USER_POSTS = GraphScope(
        "user_posts", "Provides access to the posts on a person's Timeline.", ScopeReview.REQUIRED
    )
    USER_VIDEOS = GraphScope(
        "user_videos", "Provides access to the videos a person has uploaded or been tagged in.",
        ScopeReview.REQUIRED,
    )
    PUBLISH_ACTIONS = GraphScope(
        "publish_actions", "Provides access to publish Posts on behalf of a person.",
        ScopeReview.REQUIRED,
    )
    MANAGE_PAGES = GraphScope(
        "manage_pages", "Enables your app to retrieve Page Access Tokens for the Pages a person administers.",
        ScopeReview.REQUIRED,
    )
    PAGES_SHOW_LIST = GraphScope(
        "pages_show_list", "Provides access to show the list of the Pages that a person manages.",
        ScopeReview.REQUIRED,
    )
    PUBLISH_PAGES = GraphScope(
        "publish_pages", "Provides access to publish as Pages managed by a person.",
        ScopeReview.REQUIRED,
    )
    READ_INSIGHTS = GraphScope(
        "read_insights", "Provides read-only access to the Insights data for Pages and domains.",
        ScopeReview.REQUIRED,
    )

    ALL = GraphScopeCollection(
        PUBLIC_PROFILE, EMAIL, USER_FRIENDS, USER_ABOUT_ME, USER_BIRTHDAY,
        USER_LIKES, USER_PHOTOS, USER_POSTS, USER_VIDEOS, PUBLISH_ACTIONS,
        MANAGE_PAGES, PAGES_SHOW_LIST, PUBLISH_PAGES, READ_INSIGHTS,
    )  # fmt: skip


@lru_cache
def default_scope_registry() -> TokenRegistry[GraphScope]:
    """A frozen registry of every scope in :class:`GraphScopes`."""
    return TokenRegistry(GraphScopes.ALL).freeze()

"""graphloom: a typed client for the Facebook Graph API.

Entities are parsed through a presence-aware JSON layer, so every model can
tell a key that was absent from a key that was present but null. Requests
are described by options objects and decorated with base URL, API version,
access token and locale by :class:`GraphOAuthClient`.
"""

__version__ = "0.1.0"

from . import config, endpoints, exceptions, log_config, models, options, types
from .exceptions import (
    APIError,
    ConfigurationError,
    GraphloomError,
    GraphloomRequestError,
    NetworkError,
    ParseError,
    PreconditionError,
    PropertyNotSetError,
    TimeoutError,
)
from .fields import (
    CommentFields,
    GraphField,
    GraphFieldsCollection,
    PhotoFields,
    PostFields,
    UserFields,
    default_field_registry,
)
from .oauth import GraphOAuthClient
from .presence import FieldPresenceJson
from .responses import GraphResponse, GraphTokenResponse
from .scopes import GraphScope, GraphScopeCollection, GraphScopes, ScopeReview, default_scope_registry
from .service import GraphService

__all__ = [
    "__version__",
    "config",
    "endpoints",
    "exceptions",
    "log_config",
    "models",
    "options",
    "types",
    "APIError",
    "CommentFields",
    "ConfigurationError",
    "FieldPresenceJson",
    "GraphField",
    "GraphFieldsCollection",
    "GraphOAuthClient",
    "GraphResponse",
    "GraphScope",
    "GraphScopeCollection",
    "GraphScopes",
    "GraphService",
    "GraphTokenResponse",
    "GraphloomError",
    "GraphloomRequestError",
    "NetworkError",
    "ParseError",
    "PhotoFields",
    "PostFields",
    "PreconditionError",
    "PropertyNotSetError",
    "ScopeReview",
    "TimeoutError",
    "UserFields",
    "default_field_registry",
    "default_scope_registry",
]

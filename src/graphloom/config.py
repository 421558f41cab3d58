# graphloom/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_API_VERSION, DEFAULT_USER_AGENT
from .types import PostRequestHook, PreRequestHook


class GraphSettings(BaseSettings):
    """
    User-configurable settings for graphloom, loaded from environment variables
    (prefixed with ``GRAPHLOOM_``) or a .env/secrets.env file.

    The credential fields only seed a new ``GraphOAuthClient``; the client keeps
    its own mutable copy, so changing a token on a client never leaks back here.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="GRAPHLOOM_",
        extra="ignore",
        case_sensitive=False,
        arbitrary_types_allowed=True,  # Allow hook callables
    )

    # --- OAuth credentials ---
    client_id: str | None = Field(default=None, description="App ID of the Graph API app")
    client_secret: str | None = Field(default=None, description="App secret of the Graph API app")
    redirect_uri: str | None = Field(
        default=None, description="Redirect URI registered for the OAuth login flow"
    )
    access_token: str | None = Field(
        default=None, description="User, page or app access token attached to every call"
    )

    # --- API behavior ---
    api_version: str = Field(
        default=DEFAULT_API_VERSION, description="Graph API version segment, e.g. 'v2.9'"
    )
    locale: str | None = Field(
        default=None, description="Locale sent with every call unless overridden, e.g. 'da_DK'"
    )

    # --- Client Behavior Settings ---
    request_timeout: float = Field(default=30.0, description="Default request timeout in seconds")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header for requests")

    # --- Hook Settings ---
    pre_request_hooks: list[PreRequestHook] = Field(
        default_factory=list,
        description="List of hooks to call before a request is sent.",
    )
    post_request_hooks: list[PostRequestHook] = Field(
        default_factory=list,
        description="List of hooks to call after a response is received.",
    )


@lru_cache
def get_settings() -> GraphSettings:
    """
    Provides access to the library settings.

    Settings are loaded from environment variables or .env/secrets.env files.
    The instance is cached for performance.

    Returns:
        GraphSettings: The settings instance.
    """
    return GraphSettings()

import pytest

from graphloom.config import GraphSettings
from graphloom.oauth import GraphOAuthClient


@pytest.fixture
def settings():
    """Settings isolated from any .env file in the working directory."""
    return GraphSettings(_env_file=None)


@pytest.fixture
def client(settings):
    """A client with app credentials and a user access token."""
    with GraphOAuthClient(
        settings,
        client_id="app-id",
        client_secret="app-secret",
        redirect_uri="https://example.com/callback",
        access_token="user-token",
    ) as client:
        yield client

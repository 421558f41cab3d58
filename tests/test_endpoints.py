import httpx
import pytest

from graphloom.exceptions import APIError, PreconditionError, PropertyNotSetError
from graphloom.fields import PostFields
from graphloom.models import GraphPhoto, GraphPostsCollection, GraphPublishResult, GraphUser
from graphloom.options import GetPhotoOptions, GetPhotosOptions, GetPostsOptions
from graphloom.service import GraphService


@pytest.fixture
def service(client):
    return GraphService(client)


# --- Raw endpoints ---


def test_raw_endpoint_returns_undecoded_response(client, httpx_mock):
    httpx_mock.add_response(json={"data": [{"id": "p1"}]})

    response = client.photos.get_photos("me", limit=2)

    assert isinstance(response, httpx.Response)
    assert response.json() == {"data": [{"id": "p1"}]}
    request = httpx_mock.get_request()
    assert request.url.path == "/v2.9/me/photos"
    assert dict(request.url.params) == {"limit": "2", "access_token": "user-token"}


@pytest.mark.parametrize("identifier", [None, "", "   "])
def test_raw_endpoint_validates_identifier_before_sending(client, httpx_mock, identifier):
    with pytest.raises(PreconditionError):
        client.photos.get_photo(identifier)
    with pytest.raises(PreconditionError):
        client.comments.post_comment(identifier, "Nice")

    assert httpx_mock.get_requests() == []


def test_raw_endpoint_accepts_options(client, httpx_mock):
    httpx_mock.add_response(json={"id": "p1"})

    client.photos.get_photo(GetPhotoOptions(identifier="p1", fields="id,images"))

    request = httpx_mock.get_request()
    assert request.url.path == "/v2.9/p1"
    assert request.url.params["fields"] == "id,images"


def test_raw_endpoint_rejects_mismatched_options(client):
    with pytest.raises(TypeError):
        client.photos.get_photo(GetPostsOptions(identifier="me"))


def test_raw_endpoint_rejects_options_with_keyword_arguments(client, httpx_mock):
    with pytest.raises(TypeError):
        client.photos.get_photos(GetPhotosOptions(identifier="me"), limit=5)

    assert httpx_mock.get_requests() == []


def test_raw_endpoint_checks_required_properties(client, httpx_mock):
    with pytest.raises(PropertyNotSetError) as exc_info:
        client.posts.post_status_message("me")

    assert exc_info.value.property_name == "message"
    assert httpx_mock.get_requests() == []


def test_raw_error_response_is_not_raised(client, httpx_mock):
    httpx_mock.add_response(status_code=400, json={"error": {"message": "Invalid", "code": 100}})

    response = client.users.get_user("nobody")

    assert response.status_code == 400


# --- Typed endpoints ---


def test_get_photo(service, httpx_mock):
    httpx_mock.add_response(
        json={"id": "p1", "from": {"id": "u1", "name": "Jane"}, "width": 640, "height": 480}
    )

    response = service.photos.get_photo("p1")

    assert isinstance(response.body, GraphPhoto)
    assert response.body.from_.name == "Jane"
    assert response.body.has_name is False
    assert response.status_code == 200


def test_post_photo_upload(service, httpx_mock):
    httpx_mock.add_response(json={"id": "p2", "post_id": "u1_p2"})

    response = service.photos.post_photo("me", source=b"\x89PNG", filename="cat.png", message="Cat")

    request = httpx_mock.get_request()
    assert request.method == "POST"
    assert request.url.path == "/v2.9/me/photos"
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'filename="cat.png"' in request.content
    assert b"Cat" in request.content
    assert isinstance(response.body, GraphPublishResult)
    assert response.body.post_id == "u1_p2"


def test_get_feed_with_paging(service, httpx_mock):
    httpx_mock.add_response(
        json={
            "data": [{"id": "1_1", "message": "first"}, {"id": "1_2", "story": "shared a link"}],
            "paging": {
                "cursors": {"before": "b", "after": "a"},
                "next": "https://graph.facebook.com/v2.9/1/feed?after=a",
            },
        }
    )

    response = service.posts.get_feed("1", fields=PostFields.MESSAGE.union(PostFields.STORY), limit=2)

    request = httpx_mock.get_request()
    assert request.url.path == "/v2.9/1/feed"
    assert request.url.params["fields"] == "message,story"
    feed = response.body
    assert isinstance(feed, GraphPostsCollection)
    assert [post.has_message for post in feed.data] == [True, False]
    assert feed.after == "a"


def test_get_posts_and_post_status_message(service, httpx_mock):
    httpx_mock.add_response(method="GET", json={"data": []})
    httpx_mock.add_response(method="POST", json={"id": "1_3"})

    posts = service.posts.get_posts("1")
    result = service.posts.post_status_message("1", link="https://example.com")

    get_request, post_request = httpx_mock.get_requests()
    assert get_request.url.path == "/v2.9/1/posts"
    assert posts.body.data == ()
    assert post_request.url.path == "/v2.9/1/feed"
    assert post_request.content == b"link=https%3A%2F%2Fexample.com"
    assert result.body.id == "1_3"


def test_likes_and_comments(service, httpx_mock):
    httpx_mock.add_response(
        method="GET",
        url="https://graph.facebook.com/v2.9/1_2/likes?summary=true&access_token=user-token",
        json={"data": [{"id": "u1", "name": "Alice"}], "summary": {"total_count": 9}},
    )
    httpx_mock.add_response(
        method="GET",
        url="https://graph.facebook.com/v2.9/1_2/comments?order=chronological&access_token=user-token",
        json={"data": [{"id": "1_2_1", "message": "hi", "parent": {"id": "1_2_0"}}]},
    )
    httpx_mock.add_response(method="POST", json={"id": "1_2_2"})

    likes = service.likes.get_likes("1_2", summary=True)
    comments = service.comments.get_comments("1_2", order="chronological")
    posted = service.comments.post_comment("1_2", "Nice")

    assert likes.body.total_count == 9
    assert likes.body.data[0].name == "Alice"
    assert comments.body.data[0].parent.id == "1_2_0"
    assert posted.body.id == "1_2_2"
    assert httpx_mock.get_requests()[-1].content == b"message=Nice"


def test_get_me(service, httpx_mock):
    httpx_mock.add_response(json={"id": "42", "name": "Jane", "email": "jane@example.com"})

    response = service.users.get_me(fields="id,name,email")

    assert httpx_mock.get_request().url.path == "/v2.9/me"
    assert isinstance(response.body, GraphUser)
    assert response.body.email == "jane@example.com"


def test_typed_endpoint_raises_api_error(service, httpx_mock):
    httpx_mock.add_response(
        status_code=400,
        json={"error": {"message": "Invalid OAuth access token.", "type": "OAuthException", "code": 190}},
    )

    with pytest.raises(APIError) as exc_info:
        service.users.get_me()

    assert exc_info.value.code == 190


# --- Service ---


def test_service_owns_client_created_from_arguments(settings):
    with GraphService(settings=settings, access_token="token") as service:
        assert service.client.access_token == "token"
        http_client = service.client._http_client
    assert http_client.is_closed


def test_service_leaves_passed_client_open(client):
    with GraphService(client):
        pass
    assert not client._http_client.is_closed


def test_service_rejects_client_and_arguments(client):
    with pytest.raises(TypeError):
        GraphService(client, access_token="token")

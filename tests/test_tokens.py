import pytest
from pydantic import ValidationError

from graphloom.exceptions import ConfigurationError, PreconditionError
from graphloom.fields import GraphField, GraphFieldsCollection, PhotoFields, PostFields, default_field_registry
from graphloom.scopes import GraphScope, GraphScopeCollection, GraphScopes, ScopeReview, default_scope_registry
from graphloom.tokens import TokenRegistry


def test_named_token_validation():
    field = GraphField(" message ", "   ")
    assert field.name == "message"
    assert field.description is None
    assert str(field) == "message"

    with pytest.raises(ValidationError):
        GraphField("   ")


def test_collection_from_mixed_items():
    fields = GraphFieldsCollection("id,message", PostFields.LIKES, ["from", PostFields.ID])

    assert str(fields) == "id,message,likes,from"
    assert len(fields) == 4
    assert "message" in fields
    assert PostFields.LIKES in fields
    assert "caption" not in fields


def test_collection_is_immutable():
    fields = GraphFieldsCollection(PostFields.ID)
    extended = fields.add(PostFields.MESSAGE)

    assert str(fields) == "id"
    assert str(extended) == "id,message"
    assert isinstance(extended, GraphFieldsCollection)


def test_union():
    left = PostFields.ID.union(PostFields.MESSAGE)
    right = GraphFieldsCollection("message", "story")

    assert isinstance(left, GraphFieldsCollection)
    assert str(left.union(right)) == "id,message,story"
    assert left.union(right) == GraphFieldsCollection("id,message,story")


def test_empty_collection():
    assert not GraphFieldsCollection()
    assert str(GraphFieldsCollection(None, "")) == ""


def test_collection_rejects_unsupported_items():
    with pytest.raises(PreconditionError):
        GraphFieldsCollection(42)  # type: ignore[arg-type]


def test_parse_with_registry_keeps_unknown_names():
    scopes = GraphScopeCollection.parse("email, user_posts,some_new_scope", default_scope_registry())

    assert scopes.names == ["email", "user_posts", "some_new_scope"]
    email = next(iter(scopes))
    assert email is GraphScopes.EMAIL
    assert email.review is ScopeReview.NOT_REQUIRED
    assert list(scopes)[2].review is ScopeReview.UNSPECIFIED


def test_scope_catalogue():
    assert GraphScopes.PUBLISH_ACTIONS.review is ScopeReview.REQUIRED
    assert isinstance(GraphScopes.EMAIL.union(GraphScopes.USER_POSTS), GraphScopeCollection)
    assert len(GraphScopes.ALL) == 14


def test_default_field_registry():
    registry = default_field_registry()

    assert registry.frozen
    assert registry.get("message") is PostFields.MESSAGE
    assert registry.get("images") is PhotoFields.IMAGES
    assert registry.get("no_such_field") is None
    assert registry.exists("id")
    assert "from" in registry
    assert registry is default_field_registry()


def test_frozen_registry_rejects_registration():
    with pytest.raises(ConfigurationError):
        default_scope_registry().register(GraphScope("brand_new"))


def test_registry_rejects_duplicates():
    registry = TokenRegistry([GraphField("id")])

    with pytest.raises(ConfigurationError):
        registry.register(GraphField("id", "Another description"))
    assert len(registry) == 1

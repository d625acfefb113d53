"""Tests for graphql_scaffold.fields (name:type arguments)."""

import pytest


class TestParseField:
    def test_non_null_scalar(self) -> None:
        from graphql_scaffold.fields import parse_field

        f = parse_field("title:String!")
        assert f.name == "title"
        assert f.type_expr == "String"
        assert f.null is False

    def test_object_list(self) -> None:
        from graphql_scaffold.fields import NormalizedField, parse_field

        assert parse_field("comments:[Comment]") == NormalizedField(
            "comments", "[Types::CommentType]", True
        )

    def test_splits_on_first_colon_only(self) -> None:
        from graphql_scaffold.fields import parse_field

        f = parse_field("author:Types::User")
        assert f.name == "author"
        assert f.type_expr == "Types::UserType"

    def test_missing_separator(self) -> None:
        from graphql_scaffold.fields import MalformedFieldError, parse_field

        with pytest.raises(MalformedFieldError, match="name:type"):
            parse_field("title")

    def test_missing_type(self) -> None:
        from graphql_scaffold.fields import MalformedFieldError, parse_field

        with pytest.raises(MalformedFieldError, match="missing a type"):
            parse_field("title:")

    def test_missing_name(self) -> None:
        from graphql_scaffold.fields import MalformedFieldError, parse_field

        with pytest.raises(MalformedFieldError, match="missing a name"):
            parse_field(":String")

    def test_fields_are_immutable(self) -> None:
        from dataclasses import FrozenInstanceError

        from graphql_scaffold.fields import parse_field

        f = parse_field("id:ID!")
        with pytest.raises(FrozenInstanceError):
            f.name = "other"  # type: ignore[misc]


class TestToRuby:
    def test_renders_declaration(self) -> None:
        from graphql_scaffold.fields import parse_field

        assert parse_field("title:String!").to_ruby() == "field :title, String, null: false"
        assert parse_field("count:Int").to_ruby() == "field :count, Integer, null: true"
        assert (
            parse_field("posts:[types.post!]").to_ruby()
            == "field :posts, [Types::PostType], null: false"
        )


class TestParseFields:
    def test_order_preserved(self) -> None:
        from graphql_scaffold.fields import parse_fields

        got = parse_fields(["id:ID!", "title:String", "views:Int"])
        assert [f.name for f in got] == ["id", "title", "views"]

    def test_empty(self) -> None:
        from graphql_scaffold.fields import parse_fields

        assert parse_fields([]) == []

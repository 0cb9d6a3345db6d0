"""Tests for the Query builder."""

import pytest

from contentful_kit.models.request.query import Query


class TestQuery:
    """Tests for Query builder."""

    def test_empty_query(self) -> None:
        assert Query().to_query_params() == []
        assert str(Query()) == ""

    def test_keeps_insertion_order(self) -> None:
        query = Query().content_type("article").equal("fields.slug", "hello").limit(10)

        assert query.to_query_params() == [
            ("content_type", "article"),
            ("fields.slug", "hello"),
            ("limit", "10"),
        ]

    def test_set_replaces_value(self) -> None:
        query = Query().skip(0).skip(200)
        assert query.get("skip") == ["200"]

    def test_add_appends_value(self) -> None:
        query = Query().add("tag", "a").add("tag", "b")
        assert query.to_query_params() == [("tag", "a"), ("tag", "b")]

    def test_operators(self) -> None:
        query = (
            Query()
            .not_equal("fields.status", "draft")
            .in_("sys.id", ["a", "b"])
            .not_in("fields.tags", ["x"])
            .all("fields.categories", ["c1", "c2"])
            .exists("fields.image", False)
            .less_than_or_equal("sys.createdAt", "2024-01-01")
            .greater_than("fields.rating", 3)
            .match("fields.body", "python")
        )
        params = dict(query.to_query_params())

        assert params["fields.status[ne]"] == "draft"
        assert params["sys.id[in]"] == "a,b"
        assert params["fields.tags[nin]"] == "x"
        assert params["fields.categories[all]"] == "c1,c2"
        assert params["fields.image[exists]"] == "false"
        assert params["sys.createdAt[lte]"] == "2024-01-01"
        assert params["fields.rating[gt]"] == "3"
        assert params["fields.body[match]"] == "python"

    def test_selection(self) -> None:
        query = (
            Query()
            .select(["sys.id", "fields.title"])
            .order("-sys.createdAt", "fields.title")
            .locale("*")
            .include(2)
            .search("hello")
        )
        params = dict(query.to_query_params())

        assert params["select"] == "sys.id,fields.title"
        assert params["order"] == "-sys.createdAt,fields.title"
        assert params["locale"] == "*"
        assert params["include"] == "2"
        assert params["query"] == "hello"

    def test_sync_parameters(self) -> None:
        query = Query().initial().sync_type("Entry")
        assert query.to_query_params() == [("initial", "true"), ("type", "Entry")]

    @pytest.mark.parametrize("limit", [0, 1001])
    def test_limit_bounds(self, limit: int) -> None:
        with pytest.raises(ValueError):
            Query().limit(limit)

    def test_negative_skip(self) -> None:
        with pytest.raises(ValueError):
            Query().skip(-1)

    def test_include_bounds(self) -> None:
        with pytest.raises(ValueError):
            Query().include(11)

    def test_copy_is_independent(self) -> None:
        original = Query().limit(10)
        clone = original.copy().skip(20)

        assert "skip" not in original
        assert "skip" in clone
        assert original != clone

    def test_update_from_mapping_and_query(self) -> None:
        query = Query({"locale": "de-DE", "limit": 5})
        query.update(Query().locale("en-US"))
        query.update({"include": 1})

        assert query.get("locale") == ["en-US"]
        assert query.get("limit") == ["5"]
        assert query.get("include") == ["1"]
        assert len(query) == 3

    def test_remove(self) -> None:
        query = Query().limit(10).remove("limit").remove("missing")
        assert len(query) == 0

    def test_str_is_urlencoded(self) -> None:
        assert str(Query().equal("fields.title[match]", "a b")) == "fields.title%5Bmatch%5D=a+b"

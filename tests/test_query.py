"""Tests for file_bridge.http.query — request targets and QueryParams."""

import pytest

from file_bridge.http.query import QueryParams, split_target


class TestSplitTarget:
    def test_path_only(self) -> None:
        assert split_target("/as_server") == ("/as_server", "")

    def test_path_and_query(self) -> None:
        assert split_target("/as_client?id=3&lang=en") == ("/as_client", "id=3&lang=en")

    def test_splits_on_first_question_mark(self) -> None:
        assert split_target("/a?b=c?d") == ("/a", "b=c?d")

    def test_trailing_question_mark(self) -> None:
        assert split_target("/?") == ("/", "")


class TestQueryParams:
    def test_getitem(self) -> None:
        q = QueryParams(b"id=3&lang=en")
        assert q["id"] == "3"
        assert q["lang"] == "en"

    def test_accepts_str(self) -> None:
        assert QueryParams("id=3")["id"] == "3"

    def test_missing_key_raises(self) -> None:
        q = QueryParams(b"id=3")
        with pytest.raises(KeyError):
            q["missing"]

    def test_repeated_key_last_wins(self) -> None:
        q = QueryParams(b"lang=cn&lang=en")
        assert q["lang"] == "en"
        assert q.get("lang") == "en"

    def test_key_without_equals_is_empty_string(self) -> None:
        q = QueryParams(b"flag&id=1")
        assert "flag" in q
        assert q["flag"] == ""

    def test_percent_decoding(self) -> None:
        q = QueryParams(b"name=a%20b&plus=c+d")
        assert q["name"] == "a b"
        assert q["plus"] == "c d"

    def test_get_with_default(self) -> None:
        q = QueryParams(b"id=3")
        assert q.get("missing") is None
        assert q.get("missing", "fallback") == "fallback"

    def test_get_int(self) -> None:
        q = QueryParams(b"id=3&neg=-2&bad=x")
        assert q.get_int("id") == 3
        assert q.get_int("neg") == -2
        assert q.get_int("bad") is None
        assert q.get_int("missing") is None

    @pytest.mark.parametrize("value", ["1_000", " 7 ", "+7", "7.0", "", "%D9%A3"])
    def test_get_int_rejects_loose_forms(self, value: str) -> None:
        assert QueryParams(f"id={value}").get_int("id") is None

    def test_get_int_past_digit_limit(self) -> None:
        assert QueryParams("id=" + "9" * 5000).get_int("id") is None

    def test_len_and_iter(self) -> None:
        q = QueryParams(b"a=1&b=2&a=3")
        assert len(q) == 2
        assert list(q) == ["a", "b"]

    def test_empty(self) -> None:
        q = QueryParams()
        assert len(q) == 0
        assert dict(q) == {}


class TestWithout:
    def test_removes_key(self) -> None:
        q = QueryParams(b"lang=en&id=3").without("lang")
        assert "lang" not in q
        assert dict(q) == {"id": "3"}

    def test_original_unchanged(self) -> None:
        q = QueryParams(b"lang=en&id=3")
        q.without("lang")
        assert q["lang"] == "en"

    def test_missing_key_returns_same(self) -> None:
        q = QueryParams(b"id=3")
        assert q.without("lang") is q

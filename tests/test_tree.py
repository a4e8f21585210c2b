"""Tests for file_bridge.tree — directory entries and their wire form."""

import json

import pytest

from file_bridge.errors import MalformedTree
from file_bridge.tree import (
    MAX_TREE_DEPTH,
    Directory,
    File,
    children_from_json,
    children_to_json,
    count_entries,
    entry_from_json,
    entry_to_json,
    walk,
)


def _sample() -> tuple:
    return (
        File("a.txt"),
        Directory("sub", (File("b.txt"), Directory("empty"), File("c.txt"))),
        Directory("z"),
    )


class TestEncode:
    def test_file_has_no_children_key(self) -> None:
        assert entry_to_json(File("a.txt")) == {"name": "a.txt"}

    def test_empty_directory_keeps_children_key(self) -> None:
        assert entry_to_json(Directory("sub")) == {"name": "sub", "children": []}

    def test_nested(self) -> None:
        assert children_to_json(_sample()) == [
            {"name": "a.txt"},
            {
                "name": "sub",
                "children": [
                    {"name": "b.txt"},
                    {"name": "empty", "children": []},
                    {"name": "c.txt"},
                ],
            },
            {"name": "z", "children": []},
        ]

    def test_rejects_non_entry(self) -> None:
        with pytest.raises(TypeError):
            entry_to_json("a.txt")  # type: ignore[arg-type]


class TestDecode:
    def test_children_presence_selects_directory(self) -> None:
        assert entry_from_json({"name": "sub", "children": []}) == Directory("sub")
        assert entry_from_json({"name": "a.txt"}) == File("a.txt")

    def test_extra_fields_ignored(self) -> None:
        entry = entry_from_json({"name": "a.txt", "kind": "file", "size": 12})
        assert entry == File("a.txt")

    def test_type_tag_does_not_override_presence(self) -> None:
        entry = entry_from_json({"name": "sub", "kind": "file", "children": []})
        assert isinstance(entry, Directory)

    def test_preserves_order(self) -> None:
        children = children_from_json([{"name": "z"}, {"name": "a"}, {"name": "m"}])
        assert [c.name for c in children] == ["z", "a", "m"]

    @pytest.mark.parametrize("name", [None, 3, ["a"], {"x": 1}, True])
    def test_name_must_be_string(self, name: object) -> None:
        with pytest.raises(MalformedTree, match="'name' must be a string"):
            entry_from_json({"name": name})

    def test_missing_name(self) -> None:
        with pytest.raises(MalformedTree, match="'name' must be a string, got null"):
            entry_from_json({"children": []})

    def test_empty_name(self) -> None:
        with pytest.raises(MalformedTree, match="must not be empty"):
            entry_from_json({"name": ""})

    @pytest.mark.parametrize("name", ["bad\ud800.txt", "\udfff"])
    def test_lone_surrogate_name(self, name: str) -> None:
        with pytest.raises(MalformedTree, match="not valid Unicode"):
            entry_from_json({"name": name})

    def test_non_ascii_name_accepted(self) -> None:
        assert entry_from_json({"name": "文件.txt"}) == File("文件.txt")

    @pytest.mark.parametrize("children", [None, "abc", 1, {"name": "a"}])
    def test_children_must_be_list(self, children: object) -> None:
        with pytest.raises(MalformedTree, match="'children' must be a list"):
            entry_from_json({"name": "sub", "children": children})

    def test_entry_must_be_object(self) -> None:
        with pytest.raises(MalformedTree, match="entry must be an object"):
            children_from_json(["a.txt"])

    def test_root_must_be_list(self) -> None:
        with pytest.raises(MalformedTree, match="got object"):
            children_from_json({"name": "a"})

    def test_error_location_points_at_nested_entry(self) -> None:
        data = [{"name": "ok"}, {"name": "sub", "children": [{"name": "x"}, {"name": 5}]}]
        with pytest.raises(MalformedTree) as exc_info:
            children_from_json(data)
        assert exc_info.value.location == "children[1].children[1]"

    def test_depth_limit(self) -> None:
        data: dict = {"name": "leaf"}
        for _ in range(MAX_TREE_DEPTH + 2):
            data = {"name": "d", "children": [data]}
        with pytest.raises(MalformedTree, match="nested deeper"):
            entry_from_json(data)

    def test_depth_at_limit_is_accepted(self) -> None:
        data: dict = {"name": "leaf"}
        for _ in range(MAX_TREE_DEPTH):
            data = {"name": "d", "children": [data]}
        entry = entry_from_json(data)
        assert isinstance(entry, Directory)


class TestRoundTrip:
    def test_through_json_text(self) -> None:
        original = _sample()
        wire = json.dumps(children_to_json(original))
        assert children_from_json(json.loads(wire)) == original

    def test_empty_root(self) -> None:
        assert children_from_json(children_to_json(())) == ()


class TestWalk:
    def test_depth_first_paths(self) -> None:
        paths = [path for path, _ in walk(_sample())]
        assert paths == ["a.txt", "sub", "sub/b.txt", "sub/empty", "sub/c.txt", "z"]

    def test_count_entries(self) -> None:
        assert count_entries(_sample()) == (3, 3)
        assert count_entries(()) == (0, 0)

"""Directory tree model and its JSON wire form.

A published snapshot is an ordered sequence of entries, each either a
``File`` or a ``Directory``. The variant is explicit in Python; on the
wire a directory is simply an object that carries a ``children`` list::

    [{"name": "a.txt"}, {"name": "sub", "children": []}]

Only this module knows about that presence-based encoding.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from file_bridge.errors import MalformedTree

# Deeper trees are rejected rather than recursed into
MAX_TREE_DEPTH = 256


@dataclass(frozen=True, slots=True)
class File:
    """A leaf entry."""

    name: str


@dataclass(frozen=True, slots=True)
class Directory:
    """A folder entry. ``children`` keep the enumeration (display) order."""

    name: str
    children: tuple["DirectoryEntry", ...] = ()


DirectoryEntry: TypeAlias = File | Directory


# -- Encoding --


def entry_to_json(entry: DirectoryEntry) -> dict[str, Any]:
    """Encode one entry. Files omit ``children``; directories always carry it."""
    match entry:
        case Directory(name=name, children=children):
            return {"name": name, "children": children_to_json(children)}
        case File(name=name):
            return {"name": name}
    msg = f"Not a directory entry: {entry!r}"
    raise TypeError(msg)


def children_to_json(children: Sequence[DirectoryEntry]) -> list[dict[str, Any]]:
    """Encode a sequence of entries, preserving order."""
    return [entry_to_json(child) for child in children]


# -- Decoding --


def entry_from_json(data: Any) -> DirectoryEntry:
    """Decode one entry from parsed JSON.

    Raises ``MalformedTree`` on structural errors. Unknown fields are ignored.
    """
    return _decode_entry(data, "", 0)


def children_from_json(data: Any) -> tuple[DirectoryEntry, ...]:
    """Decode a ``children`` list (the implicit root's contents)."""
    return _decode_children(data, "children", 0)


def _decode_entry(data: Any, location: str, depth: int) -> DirectoryEntry:
    if depth > MAX_TREE_DEPTH:
        raise MalformedTree(f"tree is nested deeper than {MAX_TREE_DEPTH} levels", location)
    if not isinstance(data, dict):
        raise MalformedTree(f"entry must be an object, got {_json_type(data)}", location)

    name = data.get("name")
    if not isinstance(name, str):
        raise MalformedTree(f"'name' must be a string, got {_json_type(name)}", location)
    if not name:
        raise MalformedTree("'name' must not be empty", location)
    if not name.isascii():
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            # A lone surrogate (e.g. "\ud800") is legal JSON but can never be sent back
            raise MalformedTree("'name' is not valid Unicode text", location) from None

    if "children" not in data:
        return File(name=name)
    children_location = f"{location}.children" if location else "children"
    return Directory(
        name=name,
        children=_decode_children(data["children"], children_location, depth + 1),
    )


def _decode_children(data: Any, location: str, depth: int) -> tuple[DirectoryEntry, ...]:
    if not isinstance(data, list):
        raise MalformedTree(f"'children' must be a list, got {_json_type(data)}", location)
    return tuple(
        _decode_entry(item, f"{location}[{index}]", depth) for index, item in enumerate(data)
    )


def _json_type(value: Any) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list():
            return "array"
        case dict():
            return "object"
    return type(value).__name__


# -- Traversal --


def walk(
    children: Sequence[DirectoryEntry], prefix: str = ""
) -> Iterator[tuple[str, DirectoryEntry]]:
    """Yield ``(path, entry)`` depth-first, in display order.

    Paths are ``/``-joined names relative to the implicit root::

        walk((Directory("sub", (File("a.txt"),)),))
        # -> ("sub", Directory(...)), ("sub/a.txt", File("a.txt"))
    """
    for entry in children:
        path = f"{prefix}/{entry.name}" if prefix else entry.name
        yield path, entry
        if isinstance(entry, Directory):
            yield from walk(entry.children, path)


def count_entries(children: Sequence[DirectoryEntry]) -> tuple[int, int]:
    """Return ``(files, directories)`` across the whole tree."""
    files = directories = 0
    for _, entry in walk(children):
        if isinstance(entry, Directory):
            directories += 1
        else:
            files += 1
    return files, directories

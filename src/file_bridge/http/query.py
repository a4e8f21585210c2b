"""Request targets and their query strings."""

import re
from collections.abc import Iterator, Mapping
from urllib.parse import parse_qsl

# Optional minus sign, ASCII digits only: no "+", "_", spaces or other scripts
_INTEGER = re.compile(r"-?[0-9]+")


def split_target(target: str) -> tuple[str, str]:
    """``"/as_client?id=3"`` -> ``("/as_client", "id=3")``. Only the first ``?`` splits."""
    path, _, query_string = target.partition("?")
    return path, query_string


class QueryParams(Mapping[str, str]):
    """Read-only query parameters.

    A key repeated in the query string keeps its last value; a key
    written without ``=`` maps to ``""``.
    """

    __slots__ = ("_values",)

    def __init__(self, query_string: bytes | str = b"") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        # Later pairs overwrite earlier ones, first-seen key order is kept
        self._values: dict[str, str] = dict(parse_qsl(query_string, keep_blank_values=True))

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParams({self._values!r})"

    def get_int(self, key: str) -> int | None:
        """The value of *key* as an integer, or ``None`` if absent or not one."""
        value = self._values.get(key)
        if value is None or _INTEGER.fullmatch(value) is None:
            return None
        try:
            return int(value)
        except ValueError:
            # Longer than int() accepts from a string
            return None

    def without(self, key: str) -> "QueryParams":
        """A copy lacking *key*; ``self`` when *key* is not there."""
        if key not in self._values:
            return self
        stripped = QueryParams()
        stripped._values = {k: v for k, v in self._values.items() if k != key}
        return stripped

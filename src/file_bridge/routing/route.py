"""One entry in the route table."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Route:
    """*handler* serves requests whose path and method equal *path* and *method*.

    A route covers a single method; the same path is declared once per
    method it answers.
    """

    path: str
    handler: Callable[..., Any]
    method: str = "GET"
    name: str | None = None

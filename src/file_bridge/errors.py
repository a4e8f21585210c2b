"""File bridge exception hierarchy.

Shared across the tree codec, registry, router, and request handler so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class FileBridgeError(Exception):
    """Root of everything this package raises on purpose."""


class ConfigurationError(FileBridgeError):
    """``AppConfig`` settings contradict each other, or the app cannot be compiled."""


class MalformedTree(FileBridgeError):  # noqa: N818
    """A directory tree failed structural validation while decoding.

    ``location`` points at the offending entry, e.g. ``children[2].children[0]``.
    """

    def __init__(self, message: str, location: str = "") -> None:
        self.message = message
        self.location = location
        super().__init__(f"{location}: {message}" if location else message)


class ProviderNotFound(FileBridgeError, LookupError):  # noqa: N818
    """No tree has been published under this provider id."""

    def __init__(self, provider_id: int) -> None:
        self.provider_id = provider_id
        super().__init__(f"No provider published under id {provider_id}")


class ClientDisconnect(FileBridgeError):  # noqa: N818
    """The client went away before the request body was fully received."""


@dataclass(frozen=True, slots=True)
class HTTPError(FileBridgeError):
    """A failure answered with *status* and *detail* as a plain-text body."""

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — the requested resource does not exist."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class NoMatch(NotFound):  # noqa: N818
    """404 — no registered route matches the request path and method.

    The response body stays minimal; ``route`` is kept for logging.
    """

    def __init__(self, method: str, path: str) -> None:
        super().__init__()
        object.__setattr__(self, "route", f"{method} {path}")


class BadRequest(HTTPError):  # noqa: N818
    """400 — the request was understood but its content is invalid."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class BodyParseError(BadRequest):
    """400 — the request body is not valid UTF-8 JSON."""


class RequestTimeout(HTTPError):  # noqa: N818
    """408 — the request body did not arrive within the configured time."""

    def __init__(self, detail: str = "Request body timed out") -> None:
        super().__init__(status=408, detail=detail)


class PayloadTooLarge(HTTPError):  # noqa: N818
    """413 — the request body exceeds ``AppConfig.max_body_size``."""

    def __init__(self, limit: int) -> None:
        super().__init__(status=413, detail=f"Request body exceeds {limit} bytes")

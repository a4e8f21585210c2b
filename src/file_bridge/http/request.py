"""An incoming request: frozen metadata and a bounded, cached body.

Handlers never see raw ASGI messages. The body arrives through
``await request.body()`` (or ``json()``), which enforces the size and
time limits from ``AppConfig``.
"""

from __future__ import annotations

import asyncio
import json as json_module
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from file_bridge._internal.asgi import Receive, Scope
from file_bridge.errors import BodyParseError, ClientDisconnect, PayloadTooLarge, RequestTimeout
from file_bridge.http.query import QueryParams

DEFAULT_MAX_BODY_SIZE = 1024 * 1024
DEFAULT_BODY_TIMEOUT = 30.0


def decode_headers(raw: Iterable[tuple[bytes, bytes]]) -> dict[str, str]:
    """ASGI header pairs to a dict keyed by lowercase name; repeats keep the last value."""
    return {name.decode("latin-1").lower(): value.decode("latin-1") for name, value in raw}


@dataclass(frozen=True, slots=True)
class Request:
    method: str
    path: str
    query: QueryParams
    headers: dict[str, str]
    client: tuple[str, int] | None
    receive: Receive = field(repr=False, compare=False)
    max_body_size: int = DEFAULT_MAX_BODY_SIZE
    body_timeout: float | None = DEFAULT_BODY_TIMEOUT

    # Holds the body once read; the ASGI channel can only be drained once
    _body: list[bytes] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_asgi(
        cls,
        scope: Scope,
        receive: Receive,
        *,
        max_body_size: int = DEFAULT_MAX_BODY_SIZE,
        body_timeout: float | None = DEFAULT_BODY_TIMEOUT,
    ) -> Request:
        peer = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            query=QueryParams(scope.get("query_string", b"")),
            headers=decode_headers(scope.get("headers", ())),
            client=(peer[0], peer[1]) if peer else None,
            receive=receive,
            max_body_size=max_body_size,
            body_timeout=body_timeout,
        )

    @property
    def declared_length(self) -> int | None:
        """``Content-Length`` when present and numeric."""
        value = self.headers.get("content-length", "")
        return int(value) if value.isascii() and value.isdigit() else None

    async def body(self) -> bytes:
        """Wait for the complete body.

        Raises:
            PayloadTooLarge: declared or received size exceeds ``max_body_size``.
            RequestTimeout: the body took longer than ``body_timeout``.
            ClientDisconnect: the peer closed the connection first.
        """
        if self._body:
            return self._body[0]
        if (self.declared_length or 0) > self.max_body_size:
            raise PayloadTooLarge(self.max_body_size)
        try:
            async with asyncio.timeout(self.body_timeout):
                data = await self._drain()
        except TimeoutError:
            raise RequestTimeout() from None
        self._body.append(data)
        return data

    async def _drain(self) -> bytes:
        buffer = bytearray()
        more = True
        while more:
            message = await self.receive()
            if message["type"] == "http.disconnect":
                raise ClientDisconnect(f"{self.method} {self.path}: client left mid-body")
            buffer += message.get("body", b"")
            if len(buffer) > self.max_body_size:
                raise PayloadTooLarge(self.max_body_size)
            more = message.get("more_body", False)
        return bytes(buffer)

    async def json(self) -> Any:
        """The body decoded as UTF-8 JSON.

        Every way the body can fail to become a Python value is a
        ``BodyParseError``: bad UTF-8, bad syntax, integer literals past
        the interpreter's digit limit, and nesting past its recursion limit.
        """
        raw = await self.body()
        try:
            return json_module.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise BodyParseError(f"Request body is not valid UTF-8: {exc.reason}") from exc
        except ValueError as exc:
            raise BodyParseError(f"Request body is not valid JSON: {exc}") from exc
        except RecursionError as exc:
            raise BodyParseError("Request body is not valid JSON: nested too deeply") from exc

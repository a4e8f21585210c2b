"""What a bridge handler gets to work with for one request."""

from dataclasses import dataclass, field
from typing import Any

from file_bridge.http.query import QueryParams
from file_bridge.http.request import Request
from file_bridge.http.response import PLAIN, Response


@dataclass(frozen=True, slots=True)
class Exchange:
    """The request, its resolved language, and its query minus the language key.

    Usage::

        async def publish(exchange: Exchange):
            data = await exchange.read_json()
            ...
            return exchange.success()
    """

    request: Request
    lang: str
    query: QueryParams

    _consumed: list[bool] = field(default_factory=list, repr=False, compare=False)

    async def read_json(self) -> Any:
        """Parse the body as JSON. A handler may do this once.

        Raises ``BodyParseError`` for a malformed body, ``RuntimeError`` on
        a second call.
        """
        if self._consumed:
            msg = "The request body has already been read."
            raise RuntimeError(msg)
        self._consumed.append(True)
        return await self.request.json()

    def json(self, data: Any, *, status: int = 200) -> Response:
        return Response.from_json(data, status=status)

    def success(self) -> Response:
        """The bare ``success`` acknowledgement a publish answers with."""
        return Response("success", content_type=PLAIN)

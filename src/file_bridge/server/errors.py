"""Error replies.

An ``HTTPError`` is an expected outcome: it is answered with its own
status and detail as plain text. Anything else is a bug, logged with its
traceback and answered with a 500.
"""

import logging
import traceback

from file_bridge.errors import BodyParseError, HTTPError
from file_bridge.http.request import Request
from file_bridge.http.response import PLAIN, Response

logger = logging.getLogger("file_bridge.server")


def http_error_response(exc: HTTPError, request: Request, *, debug: bool) -> Response:
    # A body that does not parse is worth a warning; 404s and the like are routine
    level = logging.WARNING if isinstance(exc, BodyParseError) else logging.DEBUG
    logger.log(level, "%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    text = exc.detail or str(exc.status)
    if debug and exc.detail:
        text = str(exc)
    return Response(text, exc.status, PLAIN)


def internal_error_response(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Log *exc* with its traceback; show the traceback to the client only in debug mode."""
    logger.error("500 %s %s", request.method, request.path, exc_info=exc)
    if debug:
        return Response("".join(traceback.format_exception(exc)), 500, PLAIN)
    return Response("Internal Server Error", 500, PLAIN)

"""One HTTP request, start to finish.

``handle_request`` turns the ASGI scope into a ``Request``, finds the
route, resolves the language, calls the handler, and writes exactly one
response. It is the error boundary: whatever the handler raises, and
whatever fails while the reply is encoded, becomes a logged error
response instead of escaping to the server.
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from kida import Environment

from file_bridge._internal.asgi import Receive, Scope, Send
from file_bridge.config import AppConfig
from file_bridge.errors import ClientDisconnect, ConfigurationError, HTTPError
from file_bridge.http.request import Request
from file_bridge.http.response import Response
from file_bridge.lang import select_language
from file_bridge.routing.router import Router
from file_bridge.server.errors import http_error_response, internal_error_response
from file_bridge.server.exchange import Exchange
from file_bridge.templating import Page, render_page

logger = logging.getLogger("file_bridge.server")

Providers = dict[type, Callable[[], Any]]


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    config: AppConfig,
    kida_env: Environment | None = None,
    providers: Providers | None = None,
) -> None:
    request = Request.from_asgi(
        scope,
        receive,
        max_body_size=config.max_body_size,
        body_timeout=config.body_timeout,
    )
    logger.debug("%s %s", request.method, request.path)

    try:
        response = await _dispatch(request, router, config, kida_env, providers or {})
        body = response.encode()
    except ClientDisconnect as exc:
        # Nobody is left to read a reply
        logger.info("%s", exc)
        return
    except HTTPError as exc:
        response = http_error_response(exc, request, debug=config.debug)
        body = response.encode()
    except Exception as exc:
        response = internal_error_response(exc, request, debug=config.debug)
        body = response.encode()

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": [
                (b"content-type", response.content_type.encode("latin-1")),
                (b"content-length", str(len(body)).encode("latin-1")),
            ],
        }
    )
    await send({"type": "http.response.body", "body": body})


def build_exchange(request: Request, config: AppConfig) -> Exchange:
    """Pick the language from the reserved query key, then hide that key from handlers."""
    lang = select_language(
        request.query.get(config.lang_key),
        supported=config.languages,
        default=config.default_lang,
        fallback=config.fallback_lang,
    )
    return Exchange(request=request, lang=lang, query=request.query.without(config.lang_key))


async def _dispatch(
    request: Request,
    router: Router,
    config: AppConfig,
    kida_env: Environment | None,
    providers: Providers,
) -> Response:
    route = router.match(request.method, request.path)
    exchange = build_exchange(request, config)
    result = route.handler(**_handler_kwargs(route.handler, exchange, providers))
    if inspect.isawaitable(result):
        result = await result
    return _to_response(result, kida_env=kida_env, lang=exchange.lang)


def _handler_kwargs(
    handler: Callable[..., Any], exchange: Exchange, providers: Providers
) -> dict[str, Any]:
    """Fill handler parameters.

    By name: ``request``, ``exchange``, ``lang``, ``query``. By annotation:
    ``Request``, ``Exchange`` and any type registered with ``App.provide()``.
    Other parameters are left to their defaults.
    """
    by_name = {
        "request": exchange.request,
        "exchange": exchange,
        "lang": exchange.lang,
        "query": exchange.query,
    }
    by_type: Providers = {
        Request: lambda: exchange.request,
        Exchange: lambda: exchange,
        **providers,
    }

    kwargs: dict[str, Any] = {}
    for name, param in inspect.signature(handler, eval_str=True).parameters.items():
        if name in by_name:
            kwargs[name] = by_name[name]
        elif param.annotation in by_type:
            kwargs[name] = by_type[param.annotation]()
    return kwargs


def _to_response(value: Any, *, kida_env: Environment | None, lang: str) -> Response:
    """``Response`` as is, ``Page`` rendered, ``str`` as HTML, ``dict``/``list`` as JSON."""
    match value:
        case Response():
            return value
        case Page():
            if kida_env is None:
                msg = f"Cannot render {value.name!r}: no template environment configured."
                raise ConfigurationError(msg)
            return render_page(kida_env, value, lang)
        case str():
            return Response(value)
        case dict() | list():
            return Response.from_json(value)
    msg = f"Route handler returned {type(value).__name__}; expected str, dict, list or Response."
    raise TypeError(msg)

"""The bridge as an ASGI application.

Routes and service providers are registered while the app is built.
``freeze()`` (run by lifespan startup, ``run()``, or the first request)
validates the config and compiles the router and templates; after that
the app only serves.
"""

import logging
from collections.abc import Callable
from typing import Any

from kida import Environment

from file_bridge._internal.asgi import Receive, Scope, Send
from file_bridge.config import AppConfig
from file_bridge.routing.route import Route
from file_bridge.routing.router import Router
from file_bridge.server.handler import Providers, handle_request
from file_bridge.templating import create_environment

logger = logging.getLogger("file_bridge.server")


class App:
    """Exact-path routes plus the services their handlers ask for.

    Usage::

        registry = ProviderRegistry()
        app = App(AppConfig(port=8080))
        app.provide(ProviderRegistry, lambda: registry)

        @app.route("/provider", method="POST")
        async def publish(exchange: Exchange, registry: ProviderRegistry): ...
    """

    __slots__ = ("_env", "_providers", "_router", "config")

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self._router = Router()
        self._providers: Providers = {}
        self._env: Environment | None = None

    def route(
        self, path: str, *, method: str = "GET", name: str | None = None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Serve *path* for *method* with the decorated handler.

        Routes are tried in the order they are declared; the first exact
        match wins.
        """

        def register(handler: Callable[..., Any]) -> Callable[..., Any]:
            self._router.add(Route(path, handler, method.upper(), name))
            return handler

        return register

    def provide(self, annotation: type, factory: Callable[[], Any]) -> None:
        """Inject ``factory()`` into handler parameters annotated with *annotation*."""
        if self.frozen:
            msg = f"Cannot provide {annotation.__name__} after the app has been frozen."
            raise RuntimeError(msg)
        self._providers[annotation] = factory

    @property
    def frozen(self) -> bool:
        return self._env is not None

    @property
    def routes(self) -> list[Route]:
        """Declared routes in match order."""
        return self._router.routes

    def freeze(self) -> None:
        """Validate the config and compile routes and templates. Safe to repeat."""
        if self.frozen:
            return
        self.config.validate()
        self._router.compile()
        self._env = create_environment(self.config)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with pounce until interrupted."""
        self.freeze()

        from file_bridge.server.dev import serve

        host = host or self.config.host
        port = port or self.config.port
        logger.info("file bridge listening on %s:%d", host, port)
        serve(self, host, port, reload=self.config.debug, reload_dirs=self.config.reload_dirs)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        match scope["type"]:
            case "http":
                self.freeze()
                await handle_request(
                    scope,
                    receive,
                    send,
                    router=self._router,
                    config=self.config,
                    kida_env=self._env,
                    providers=self._providers,
                )
            case "lifespan":
                await self._lifespan(receive, send)

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        # Freezing at startup makes a bad config fail before the first request
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    self.freeze()
                except Exception as exc:
                    logger.exception("startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

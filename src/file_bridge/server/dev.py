"""Serving the app with pounce."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from file_bridge.app import App


def serve(
    app: App,
    host: str,
    port: int,
    *,
    reload: bool = False,
    reload_dirs: tuple[str, ...] = (),
) -> None:
    """Run pounce in the foreground with *app* as its ASGI callable.

    Always a single worker, since published trees live in this process.
    With *reload*, a code change restarts the process and the registry
    starts out empty again.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1, reload=reload, reload_dirs=reload_dirs)
    Server(config, app).run()

"""File Bridge — share a directory tree between two browser sessions.

A provider page publishes a snapshot of a local folder; a downloader
page resolves it later by a short numeric id.

Basic usage::

    from file_bridge import create_app

    app = create_app()
    app.run()
"""

from importlib import import_module

__version__ = "0.1.0"

# Public name -> module that defines it; imported on first attribute access
_EXPORTS = {
    "App": "file_bridge.app",
    "AppConfig": "file_bridge.config",
    "create_app": "file_bridge.views",
    "Directory": "file_bridge.tree",
    "DirectoryEntry": "file_bridge.tree",
    "File": "file_bridge.tree",
    "ProviderIdCounter": "file_bridge.registry",
    "ProviderRecord": "file_bridge.registry",
    "ProviderRegistry": "file_bridge.registry",
    "Route": "file_bridge.routing.route",
    "Router": "file_bridge.routing.router",
    "Request": "file_bridge.http.request",
    "Response": "file_bridge.http.response",
    "Exchange": "file_bridge.server.exchange",
    "FileBridgeError": "file_bridge.errors",
    "MalformedTree": "file_bridge.errors",
    "ProviderNotFound": "file_bridge.errors",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> object:
    module = _EXPORTS.get(name)
    if module is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module), name)

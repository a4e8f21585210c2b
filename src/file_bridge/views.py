"""Bridge routes and app composition.

| Path         | Method | Handler                                   |
|--------------|--------|-------------------------------------------|
| ``/``          | GET    | info page                                 |
| ``/as_server`` | GET    | provider page (directory picker, publish) |
| ``/as_client`` | GET    | downloader page (resolve, preview)        |
| ``/provider``  | POST   | publish a tree                            |
| ``/provider``  | GET    | resolve a tree by ``?id=``                |
"""

from __future__ import annotations

from file_bridge.app import App
from file_bridge.config import AppConfig
from file_bridge.errors import BadRequest, NotFound, ProviderNotFound
from file_bridge.http.query import QueryParams
from file_bridge.http.response import Response
from file_bridge.lang import Text
from file_bridge.protocol import decode_publish, encode_record
from file_bridge.registry import ProviderIdCounter, ProviderRegistry
from file_bridge.server.exchange import Exchange
from file_bridge.templating import Page

TITLE = Text("文件桥", "File Bridge")

TEXT = {
    "intro": Text("把这台电脑当作文件", "This computer is a file"),
    "provider": Text("提供端", "provider"),
    "provider_title": Text("提供端", "Provider"),
    "or": Text("或者", "or"),
    "downloader": Text("下载端", "downloader"),
    "downloader_title": Text("下载端", "Downloader"),
    "select_directory": Text("选择目录", "Select a directory"),
    "serving_on": Text("已开启，客户端访问", "serving on"),
    "this_link": Text("这个链接", "this link"),
    "publish_failed": Text("上报失败", "publish failed"),
    "provider_label": Text("提供端编号", "Provider id"),
    "open": Text("打开", "Open"),
    "not_published": Text("该提供端尚未发布目录", "Nothing has been published under this id"),
    "resolve_failed": Text("获取目录失败", "could not load the directory"),
}


def _title(lang: str, section: Text | None = None) -> str:
    if section is None:
        return TITLE(lang)
    return f"{TITLE(lang)} {section(lang)}"


def _parse_provider_id(query: QueryParams) -> int:
    if "id" not in query:
        raise BadRequest("Query parameter 'id' is required")
    provider_id = query.get_int("id")
    if provider_id is None:
        raise BadRequest(f"Query parameter 'id' must be an integer, got {query['id']!r}")
    return provider_id


def create_app(
    config: AppConfig | None = None,
    *,
    registry: ProviderRegistry | None = None,
    counter: ProviderIdCounter | None = None,
) -> App:
    """Compose the file bridge app around a registry and id counter.

    Pass your own instances to share or inspect them (tests do)::

        registry = ProviderRegistry()
        app = create_app(registry=registry)
    """
    app = App(config)
    _registry = registry if registry is not None else ProviderRegistry()
    _counter = counter if counter is not None else ProviderIdCounter()
    app.provide(ProviderRegistry, lambda: _registry)
    app.provide(ProviderIdCounter, lambda: _counter)

    @app.route("/", name="index")
    def index(lang: str) -> Page:
        return Page(
            "index.html",
            {
                "title": _title(lang),
                "intro": TEXT["intro"](lang),
                "provider_link": TEXT["provider"](lang),
                "conjunction": TEXT["or"](lang),
                "downloader_link": TEXT["downloader"](lang),
            },
        )

    @app.route("/as_server", name="provider_page")
    def as_server(lang: str, counter: ProviderIdCounter) -> Page:
        return Page(
            "as_server.html",
            {
                "title": _title(lang, TEXT["provider_title"]),
                "provider_id": counter.next_id(),
                "select_directory": TEXT["select_directory"](lang),
                "serving_on": TEXT["serving_on"](lang),
                "this_link": TEXT["this_link"](lang),
                "publish_failed": TEXT["publish_failed"](lang),
            },
        )

    @app.route("/as_client", name="downloader_page")
    def as_client(lang: str, query: QueryParams) -> Page:
        provider_id = query.get_int("id")
        return Page(
            "as_client.html",
            {
                "title": _title(lang, TEXT["downloader_title"]),
                "provider_id": "" if provider_id is None else provider_id,
                "provider_label": TEXT["provider_label"](lang),
                "open_label": TEXT["open"](lang),
                "not_published": TEXT["not_published"](lang),
                "resolve_failed": TEXT["resolve_failed"](lang),
            },
        )

    @app.route("/provider", method="POST", name="publish")
    async def publish(exchange: Exchange, registry: ProviderRegistry) -> Response:
        record = decode_publish(await exchange.read_json())
        registry.publish(record.provider_id, record.children)
        return exchange.success()

    @app.route("/provider", name="resolve")
    def resolve(exchange: Exchange, registry: ProviderRegistry) -> Response:
        provider_id = _parse_provider_id(exchange.query)
        try:
            record = registry.resolve(provider_id)
        except ProviderNotFound as exc:
            raise NotFound(str(exc)) from exc
        return exchange.json(encode_record(record))

    return app

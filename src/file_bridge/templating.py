"""Bridge pages rendered with kida.

Handlers return a ``Page``; the request handler renders it in the
request language with the environment ``App.freeze()`` built from the
``file_bridge/templates`` package data.
"""

from dataclasses import dataclass, field
from typing import Any

from kida import Environment, PackageLoader

from file_bridge.config import AppConfig
from file_bridge.http.response import Response
from file_bridge.lang import HTML_LANG


@dataclass(frozen=True, slots=True)
class Page:
    """Template name plus the strings it shows."""

    name: str
    context: dict[str, Any] = field(default_factory=dict)


def create_environment(config: AppConfig) -> Environment:
    """Load the bundled templates; reload them on change in debug mode."""
    return Environment(
        loader=PackageLoader("file_bridge", "templates"),
        autoescape=True,
        auto_reload=config.debug,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_page(env: Environment, page: Page, lang: str) -> Response:
    """HTML for *page*, with ``lang`` and ``html_lang`` added to its context."""
    context = {"lang": lang, "html_lang": HTML_LANG.get(lang, lang), **page.context}
    html = env.get_template(page.name).render(context)
    return Response(html)

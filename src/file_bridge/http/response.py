"""What a handler sends back: status, content type and text.

The bridge only ever answers with text (HTML pages, JSON, ``success``),
so the body is held as ``str`` and encoded to UTF-8 on the way out.
"""

import json as json_module
from dataclasses import dataclass
from typing import Any

HTML = "text/html; charset=utf-8"
JSON = "application/json; charset=utf-8"
PLAIN = "text/plain; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    text: str = ""
    status: int = 200
    content_type: str = HTML

    @classmethod
    def from_json(cls, data: Any, *, status: int = 200) -> "Response":
        """Serialize *data*; non-ASCII names stay readable in the body."""
        return cls(json_module.dumps(data, ensure_ascii=False), status, JSON)

    @property
    def json(self) -> Any:
        return json_module.loads(self.text)

    def encode(self) -> bytes:
        """The body as UTF-8. Raises ``UnicodeEncodeError`` on lone surrogates."""
        return self.text.encode("utf-8")

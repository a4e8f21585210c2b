"""Publish/resolve payloads.

Publish body (``POST /provider``) and resolve response (``GET /provider``)
share one shape::

    {"provider_id": 1, "children": [{"name": "a.txt"}, {"name": "sub", "children": []}]}
"""

from typing import Any

from file_bridge.errors import BadRequest, MalformedTree
from file_bridge.registry import ProviderRecord
from file_bridge.tree import children_from_json, children_to_json


def decode_publish(data: Any) -> ProviderRecord:
    """Validate a parsed publish body.

    Raises ``BadRequest`` when ``provider_id`` is not an integer or the
    tree is malformed, so nothing partial ever reaches the registry.
    """
    if not isinstance(data, dict):
        raise BadRequest("Publish body must be a JSON object")

    provider_id = data.get("provider_id")
    # bool is an int subclass, but true/false are not ids
    if not isinstance(provider_id, int) or isinstance(provider_id, bool):
        raise BadRequest("'provider_id' must be an integer")

    if "children" not in data:
        raise BadRequest("'children' is required")
    try:
        children = children_from_json(data["children"])
    except MalformedTree as exc:
        raise BadRequest(f"Malformed tree at {exc}") from exc

    return ProviderRecord(provider_id=provider_id, children=children)


def encode_record(record: ProviderRecord) -> dict[str, Any]:
    """Encode a stored record for the resolve response."""
    return {
        "provider_id": record.provider_id,
        "children": children_to_json(record.children),
    }

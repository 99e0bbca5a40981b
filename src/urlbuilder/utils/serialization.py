"""utils/serialization.py

Serialization utilities for urlbuilder (JSON views of parsed URLs).
"""

import json
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:  # pragma: no cover
    from urlbuilder.url.model import URL


def to_json(data: Any) -> str:
    """Serializes data to a JSON string."""
    return json.dumps(data, ensure_ascii=False)


def url_to_dict(url: "URL") -> Dict[str, Any]:
    """Decoded components of a URL as plain JSON-compatible values."""
    return {
        "scheme": url.scheme,
        "user_info": url.user_info,
        "host": url.host,
        "host_kind": url.host_kind.value if url.host_kind is not None else None,
        "port": url.port,
        "is_absolute": url.is_absolute,
        "path_segments": list(url.path_segments),
        "query": [list(pair) for pair in url.query_pairs],
        "fragment": url.fragment,
        "rendered": url.render(),
    }

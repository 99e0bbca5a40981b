"""src/urlbuilder/__init__.py

urlbuilder - Build, parse and render percent-encoded URLs.

urlbuilder is a zero-dependency library built entirely on Python's standard
library. It assembles URLs from structured components and applies the
RFC 3986 escaping rules of each component, so callers never hand-roll
percent-encoding.

Key Features:
    - Zero external dependencies
    - Per-component escaping (user-info, host, path, query, fragment)
    - Ordered query-parameter multimap keeping bare and empty values apart
    - URL templates with ``{placeholder}`` substitution
    - Immutable URL snapshots and a chainable mutable builder
    - Strict decoding by default, opt-in lenient and form-encoding modes
    - Full type hints (PEP 561)

Example:
    Parsing::

        from urlbuilder import parse

        url = parse("https://user:pw@example.com:8080/a%20b/c?x=1&y=&z#frag")
        url.host            # "example.com"
        url.path_segments   # ("a b", "c")
        url.query_pairs     # (("x", "1"), ("y", ""), ("z", None))

    Building::

        from urlbuilder import URLBuilder

        url = (
            URLBuilder()
            .with_scheme("https")
            .with_host("example.com")
            .append_path_segment("search")
            .add_query_parameter("q", "c++ & rust")
            .build()
        )
        str(url)  # "https://example.com/search?q=c%2B%2B%20%26%20rust"

    Templates::

        from urlbuilder import parse_template

        url = parse_template("https://example.com/search?q={term}", {"term": "c++"})
"""

from urlbuilder.encoding.codec import PercentCodec, decode, encode
from urlbuilder.encoding.options import CodecOptions
from urlbuilder.exceptions import (
    InvalidByteSequenceError,
    InvalidPercentEncodingError,
    MalformedUrlError,
    PercentEncodingError,
    UnencodableCharacterError,
    UnresolvedPlaceholderError,
    UnsupportedCharsetError,
    UrlBuilderError,
)
from urlbuilder.url.host import Host, HostKind
from urlbuilder.url.model import URL, URLBuilder, parse, parse_template
from urlbuilder.url.query import QueryParameterStore
from urlbuilder.version import __version__

__all__ = [
    "URL",
    "URLBuilder",
    "parse",
    "parse_template",
    "QueryParameterStore",
    "Host",
    "HostKind",
    "CodecOptions",
    "PercentCodec",
    "encode",
    "decode",
    "UrlBuilderError",
    "MalformedUrlError",
    "PercentEncodingError",
    "InvalidPercentEncodingError",
    "InvalidByteSequenceError",
    "UnencodableCharacterError",
    "UnresolvedPlaceholderError",
    "UnsupportedCharsetError",
]

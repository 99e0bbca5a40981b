"""src/urlbuilder/url/__init__.py

URL model layer for urlbuilder.

This module provides the parser, the query-parameter store, template
substitution and the URL / URLBuilder types built on top of them.
"""

from .host import Host, HostKind
from .model import URL, URLBuilder, parse, parse_template
from .parser import UrlParts, split_path, split_url
from .query import QueryPair, QueryParameterStore
from .template import PLACEHOLDER_PATTERN, substitute

__all__ = [
    "URL",
    "URLBuilder",
    "parse",
    "parse_template",
    "Host",
    "HostKind",
    "QueryParameterStore",
    "QueryPair",
    "UrlParts",
    "split_url",
    "split_path",
    "substitute",
    "PLACEHOLDER_PATTERN",
]

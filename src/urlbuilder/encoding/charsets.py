"""src/urlbuilder/encoding/charsets.py

Per-component allowed character tables (RFC 3986).

Every table lists the characters that may appear unescaped in one URL
component. Unreserved characters are part of every table.
"""

import enum
import string
from typing import Dict, FrozenSet

__all__ = [
    "Component",
    "UNRESERVED",
    "SUB_DELIMITERS",
    "USER_INFO_SAFE",
    "HOST_SAFE",
    "PATH_SEGMENT_SAFE",
    "QUERY_SAFE",
    "QUERY_ELEMENT_SAFE",
    "FRAGMENT_SAFE",
    "HEXDIGITS",
    "safe_set",
]

# https://datatracker.ietf.org/doc/html/rfc3986#section-2.3
UNRESERVED: FrozenSet[str] = frozenset(string.ascii_letters + string.digits + "-._~")

# https://datatracker.ietf.org/doc/html/rfc3986#section-2.2
SUB_DELIMITERS: FrozenSet[str] = frozenset("!$&'()*+,;=")

HEXDIGITS: FrozenSet[str] = frozenset(string.hexdigits)

USER_INFO_SAFE: FrozenSet[str] = UNRESERVED | SUB_DELIMITERS | {":"}

HOST_SAFE: FrozenSet[str] = UNRESERVED | SUB_DELIMITERS

PATH_SEGMENT_SAFE: FrozenSet[str] = UNRESERVED | SUB_DELIMITERS | {":", "@"}

# '=' and '&' separate query parameters, so they are always escaped.
QUERY_SAFE: FrozenSet[str] = UNRESERVED | frozenset("!$'()*+,;:@/")

# Form decoders read '+' as a space inside names and values.
QUERY_ELEMENT_SAFE: FrozenSet[str] = QUERY_SAFE - {"+"}

FRAGMENT_SAFE: FrozenSet[str] = PATH_SEGMENT_SAFE | {"/", "?"}


class Component(enum.Enum):
    """URL components with their own escaping rules."""

    USER_INFO = "user_info"
    HOST = "host"
    PATH_SEGMENT = "path_segment"
    QUERY = "query"
    QUERY_ELEMENT = "query_element"
    FRAGMENT = "fragment"


_SAFE_SETS: Dict[Component, FrozenSet[str]] = {
    Component.USER_INFO: USER_INFO_SAFE,
    Component.HOST: HOST_SAFE,
    Component.PATH_SEGMENT: PATH_SEGMENT_SAFE,
    Component.QUERY: QUERY_SAFE,
    Component.QUERY_ELEMENT: QUERY_ELEMENT_SAFE,
    Component.FRAGMENT: FRAGMENT_SAFE,
}


def safe_set(component: Component) -> FrozenSet[str]:
    """Return the allowed character table of a component."""
    return _SAFE_SETS[component]

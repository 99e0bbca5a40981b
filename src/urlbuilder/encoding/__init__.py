"""src/urlbuilder/encoding/__init__.py

Percent-encoding layer for urlbuilder.

This module provides the per-component allowed character tables and the
codec that escapes and unescapes text with them.
"""

from .charsets import (
    FRAGMENT_SAFE,
    HOST_SAFE,
    PATH_SEGMENT_SAFE,
    QUERY_ELEMENT_SAFE,
    QUERY_SAFE,
    UNRESERVED,
    USER_INFO_SAFE,
    Component,
)
from .codec import DEFAULT_CODEC, PercentCodec, decode, encode
from .options import CodecOptions

__all__ = [
    "Component",
    "CodecOptions",
    "PercentCodec",
    "DEFAULT_CODEC",
    "encode",
    "decode",
    "UNRESERVED",
    "USER_INFO_SAFE",
    "HOST_SAFE",
    "PATH_SEGMENT_SAFE",
    "QUERY_SAFE",
    "QUERY_ELEMENT_SAFE",
    "FRAGMENT_SAFE",
]

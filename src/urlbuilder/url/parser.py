"""src/urlbuilder/url/parser.py

URL parser: splits a raw URL into decoded components.
"""

# pylint: disable=too-many-locals

import re
from typing import List, NamedTuple, Optional, Tuple

from urlbuilder.encoding.codec import DEFAULT_CODEC, PercentCodec
from urlbuilder.exceptions import MalformedUrlError
from urlbuilder.url.host import Host
from urlbuilder.url.query import QueryParameterStore
from urlbuilder.utils.validators import parse_port

__all__ = ["UrlParts", "split_path", "split_url"]

# Scheme characters exclude '/', '?' and '#', so a match always sits before
# the authority, path, query and fragment delimiters.
_SCHEME_PREFIX = re.compile(r"([A-Za-z][A-Za-z0-9+.\-]*):")

_AUTHORITY_END = re.compile(r"[/?#]")
_PATH_END = re.compile(r"[?#]")


class UrlParts(NamedTuple):
    """Decoded components of a parsed URL."""

    scheme: Optional[str]
    user_info: Optional[str]
    host: Optional[Host]
    port: Optional[int]
    is_absolute: bool
    path_segments: Tuple[str, ...]
    query: QueryParameterStore
    fragment: Optional[str]


def _split_authority(
    authority: str, codec: PercentCodec, start: int
) -> Tuple[Optional[str], Host, Optional[int]]:
    """Split ``[userinfo@]host[:port]``."""
    user_info = None
    at = authority.rfind("@")
    if at != -1:
        user_info = codec.decode_user_info(authority[:at], start)
        start += at + 1
        authority = authority[at + 1 :]

    port_text: Optional[str]
    if authority.startswith("["):
        close = authority.find("]")
        if close == -1:
            raise MalformedUrlError(f"Unterminated IPv6 literal: {authority!r}")
        host_text, remainder = authority[: close + 1], authority[close + 1 :]
        if remainder and not remainder.startswith(":"):
            raise MalformedUrlError(f"Unexpected text after IPv6 literal: {remainder!r}")
        port_text = remainder[1:] if remainder else None
    else:
        host_text, colon, port_text = authority.rpartition(":")
        if not colon:
            host_text, port_text = port_text, None
        if "[" in host_text or "]" in host_text:
            raise MalformedUrlError(f"Misplaced bracket in host: {host_text!r}")

    # An empty port ("host:") means the scheme default.
    port = parse_port(port_text) if port_text else None
    return user_info, Host.from_wire(host_text, codec, start), port


def split_path(
    path: str, codec: Optional[PercentCodec] = None, start: int = 0
) -> Tuple[bool, Tuple[str, ...]]:
    """
    Split an encoded path into decoded segments.

    Returns:
        ``(is_absolute, segments)``. The leading '/' of an absolute path sets
        the flag instead of adding an empty first segment.
    """
    codec = codec or DEFAULT_CODEC
    if not path:
        return False, ()

    is_absolute = path.startswith("/")
    if is_absolute:
        path = path[1:]
        start += 1

    segments: List[str] = []
    for segment in path.split("/"):
        segments.append(codec.decode_path_segment(segment, start))
        start += len(segment) + 1
    return is_absolute, tuple(segments)


def split_url(raw: str, codec: Optional[PercentCodec] = None) -> UrlParts:
    """
    Parse a URL or URL reference into decoded components.

    Stages run in grammar order (scheme, authority, path, query, fragment)
    and each may be absent.

    Args:
        raw: URL text. Characters outside the URL grammar (such as spaces)
            are tolerated and taken literally.
        codec: Codec used to decode each component.

    Returns:
        UrlParts with every textual component percent-decoded.

    Raises:
        MalformedUrlError: On a bad bracketed host or port.
        InvalidPercentEncodingError: On a malformed escape, offset relative
            to ``raw``.
        InvalidByteSequenceError: On undecodable bytes (strict mode).
    """
    codec = codec or DEFAULT_CODEC
    length = len(raw)
    pos = 0

    scheme = None
    match = _SCHEME_PREFIX.match(raw)
    if match:
        scheme = match.group(1).lower()
        pos = match.end()

    user_info: Optional[str] = None
    host: Optional[Host] = None
    port: Optional[int] = None
    if raw.startswith("//", pos):
        authority_start = pos + 2
        end = _AUTHORITY_END.search(raw, authority_start)
        pos = end.start() if end else length
        user_info, host, port = _split_authority(
            raw[authority_start:pos], codec, authority_start
        )

    end = _PATH_END.search(raw, pos)
    path_end = end.start() if end else length
    is_absolute, segments = split_path(raw[pos:path_end], codec, pos)
    pos = path_end

    query = QueryParameterStore()
    if raw.startswith("?", pos):
        hash_index = raw.find("#", pos)
        query_end = hash_index if hash_index != -1 else length
        query.parse_from(raw[pos + 1 : query_end], codec, pos + 1)
        pos = query_end

    fragment = None
    if raw.startswith("#", pos):
        fragment = codec.decode_fragment(raw[pos + 1 :], pos + 1)

    return UrlParts(
        scheme=scheme,
        user_info=user_info,
        host=host,
        port=port,
        is_absolute=is_absolute,
        path_segments=segments,
        query=query,
        fragment=fragment,
    )

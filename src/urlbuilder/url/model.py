"""src/urlbuilder/url/model.py

URL model: immutable URL snapshots and the mutable builder that makes them.
"""

# pylint: disable=protected-access,too-many-instance-attributes

import urllib.parse
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from urlbuilder.encoding.codec import PercentCodec
from urlbuilder.encoding.options import CodecOptions
from urlbuilder.url.host import Host, HostKind
from urlbuilder.url.parser import UrlParts, split_path, split_url
from urlbuilder.url.query import QueryPair, QueryParameterStore
from urlbuilder.url.template import substitute
from urlbuilder.utils.validators import validate_port, validate_scheme

__all__ = ["URL", "URLBuilder", "parse", "parse_template"]


class _UrlState:
    """Component storage and rendering shared by URL and URLBuilder."""

    __slots__ = (
        "_codec",
        "_scheme",
        "_user_info",
        "_host",
        "_port",
        "_is_absolute",
        "_path_segments",
        "_query",
        "_fragment",
    )

    _path_segments: Union[List[str], Tuple[str, ...]]

    def _load(self, parts: UrlParts, codec: PercentCodec) -> None:
        # URL blocks normal attribute assignment.
        assign = object.__setattr__
        assign(self, "_codec", codec)
        assign(self, "_scheme", parts.scheme)
        assign(self, "_user_info", parts.user_info)
        assign(self, "_host", parts.host)
        assign(self, "_port", parts.port)
        assign(self, "_is_absolute", parts.is_absolute)
        assign(self, "_path_segments", parts.path_segments)
        assign(self, "_query", parts.query)
        assign(self, "_fragment", parts.fragment)

    def _parts(self) -> UrlParts:
        return UrlParts(
            scheme=self._scheme,
            user_info=self._user_info,
            host=self._host,
            port=self._port,
            is_absolute=self.is_absolute,
            path_segments=tuple(self._path_segments),
            query=self._query.copy(),
            fragment=self._fragment,
        )

    @property
    def options(self) -> CodecOptions:
        return self._codec.options

    @property
    def scheme(self) -> Optional[str]:
        return self._scheme

    @property
    def user_info(self) -> Optional[str]:
        return self._user_info

    @property
    def username(self) -> Optional[str]:
        if self._user_info is None:
            return None
        return self._user_info.partition(":")[0]

    @property
    def password(self) -> Optional[str]:
        if self._user_info is None:
            return None
        _, sep, password = self._user_info.partition(":")
        return password if sep else None

    @property
    def host(self) -> Optional[str]:
        """Decoded host, without brackets for IPv6 literals."""
        return self._host.value if self._host is not None else None

    @property
    def host_kind(self) -> Optional[HostKind]:
        return self._host.kind if self._host is not None else None

    @property
    def port(self) -> Optional[int]:
        return self._port

    @property
    def has_authority(self) -> bool:
        return not (self._host is None and self._user_info is None and self._port is None)

    @property
    def is_absolute(self) -> bool:
        """Whether the path starts with '/'. Always true for a non-empty path
        under an authority."""
        return self._is_absolute or (self.has_authority and bool(self._path_segments))

    @property
    def path_segments(self) -> Tuple[str, ...]:
        return tuple(self._path_segments)

    @property
    def path(self) -> str:
        """Decoded path, segments joined with '/'."""
        return ("/" if self.is_absolute else "") + "/".join(self._path_segments)

    @property
    def fragment(self) -> Optional[str]:
        return self._fragment

    def _render_path(self) -> str:
        codec = self._codec
        segments = self._path_segments
        if not segments:
            return "/" if self._is_absolute else ""

        encoded = [codec.encode_path_segment(segment) for segment in segments]
        if self.is_absolute:
            if not self.has_authority and len(segments) > 1 and segments[0] == "":
                # "//" at the start of the path would read as an authority.
                return "/./" + "/".join(encoded)
            return "/" + "/".join(encoded)

        if self._scheme is None and ":" in segments[0]:
            # A colon in the first segment of a relative path reads as a scheme.
            encoded[0] = encoded[0].replace(":", "%3A")
        return "/".join(encoded)

    def _render_netloc(self) -> str:
        codec = self._codec
        netloc = ""
        if self._user_info is not None:
            netloc += codec.encode_user_info(self._user_info) + "@"
        if self._host is not None:
            netloc += self._host.render(codec)
        if self._port is not None:
            netloc += f":{self._port}"
        return netloc

    def render(self) -> str:
        """
        Assemble the URL string.

        Separators are only written when the component after them is
        present. Rendering never changes the object.
        """
        pieces = []
        if self._scheme is not None:
            pieces.append(self._scheme + ":")
        if self.has_authority:
            pieces.append("//" + self._render_netloc())
        pieces.append(self._render_path())
        if self._query:
            pieces.append("?" + self._query.serialize(self._codec))
        if self._fragment is not None:
            pieces.append("#" + self._codec.encode_fragment(self._fragment))
        return "".join(pieces)

    def to_split_result(self) -> urllib.parse.SplitResult:
        """Encoded components as a :class:`urllib.parse.SplitResult`."""
        return urllib.parse.SplitResult(
            scheme=self._scheme or "",
            netloc=self._render_netloc(),
            path=self._render_path(),
            query=self._query.serialize(self._codec),
            fragment=(
                self._codec.encode_fragment(self._fragment)
                if self._fragment is not None
                else ""
            ),
        )

    def __str__(self) -> str:
        return self.render()


class URL(_UrlState):
    """
    Immutable, parsed or built URL.

    ``URL(raw)`` parses a URL string. Components are exposed decoded;
    :meth:`render` and ``str()`` percent-encode them again. Instances never
    change after construction and can be shared between threads.

    Example::

        url = URL("https://user:pw@example.com:8080/a%20b/c?x=1&y=&z#frag")
        url.path_segments   # ("a b", "c")
        url.query_pairs     # (("x", "1"), ("y", ""), ("z", None))
    """

    __slots__ = ()

    def __init__(self, raw: str = "", options: Optional[CodecOptions] = None):
        codec = PercentCodec(options)
        self._load(split_url(raw, codec), codec)

    @classmethod
    def _from_parts(cls, parts: UrlParts, codec: PercentCodec) -> "URL":
        url = cls.__new__(cls)
        url._load(parts, codec)
        return url

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def _load(self, parts: UrlParts, codec: PercentCodec) -> None:
        # Snapshots own their containers.
        super()._load(
            parts._replace(
                path_segments=tuple(parts.path_segments), query=parts.query.copy()
            ),
            codec,
        )

    @property
    def host_info(self) -> Optional[Host]:
        return self._host

    @property
    def query(self) -> QueryParameterStore:
        """A copy of the query parameters."""
        return self._query.copy()

    @property
    def query_pairs(self) -> Tuple[QueryPair, ...]:
        return self._query.pairs()

    def _key(self) -> Tuple[Any, ...]:
        return (
            self._scheme,
            self._user_info,
            self._host,
            self._port,
            self.is_absolute,
            self._path_segments,
            self._query.pairs(),
            self._fragment,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"URL({self.render()!r})"

    def to_builder(self) -> "URLBuilder":
        """Mutable copy of this URL."""
        return URLBuilder._from_parts(self._parts(), self._codec)


class URLBuilder(_UrlState):
    """
    Mutable URL builder.

    Every ``with_*``, ``append_*``, ``add_*``, ``set_*`` and ``remove_*``
    method changes the builder in place and returns it, so calls can be
    chained. :meth:`build` takes an immutable :class:`URL` snapshot.

    Example::

        url = (
            URLBuilder()
            .with_scheme("https")
            .with_host("example.com")
            .append_path_segment("search")
            .add_query_parameter("q", "c++")
            .build()
        )
        str(url)  # "https://example.com/search?q=c%2B%2B"
    """

    __slots__ = ("_absorb_trailing_slash",)

    def __init__(self, options: Optional[CodecOptions] = None):
        self._load(
            UrlParts(None, None, None, None, False, (), QueryParameterStore(), None),
            PercentCodec(options),
        )

    def _load(self, parts: UrlParts, codec: PercentCodec) -> None:
        super()._load(parts, codec)
        self._path_segments = list(parts.path_segments)
        # A trailing slash of a parsed or assigned path is replaced by the
        # next appended segment; slashes made by appending are kept.
        self._absorb_trailing_slash = True

    @classmethod
    def _from_parts(cls, parts: UrlParts, codec: PercentCodec) -> "URLBuilder":
        builder = cls.__new__(cls)
        builder._load(parts, codec)
        return builder

    @classmethod
    def from_string(cls, raw: str, options: Optional[CodecOptions] = None) -> "URLBuilder":
        """Start from a parsed URL string."""
        codec = PercentCodec(options)
        return cls._from_parts(split_url(raw, codec), codec)

    @classmethod
    def from_template(
        cls,
        template: str,
        placeholders: Mapping[str, Any],
        options: Optional[CodecOptions] = None,
    ) -> "URLBuilder":
        """Start from a URL template with ``{name}`` placeholders filled in."""
        codec = PercentCodec(options)
        return cls._from_parts(split_url(substitute(template, placeholders, codec), codec), codec)

    @classmethod
    def from_split_result(
        cls,
        result: Union[urllib.parse.SplitResult, urllib.parse.ParseResult],
        options: Optional[CodecOptions] = None,
    ) -> "URLBuilder":
        """
        Start from the result of :func:`urllib.parse.urlsplit` or
        :func:`urllib.parse.urlparse`.

        The components are taken as percent-encoded and decoded with the
        builder's codec. ``;params`` of a ParseResult stay part of the last
        path segment. urllib does not keep empty queries or fragments, so
        ``?`` and ``#`` are only written when they have content.
        """
        path = result.path
        if isinstance(result, urllib.parse.ParseResult) and result.params:
            path += ";" + result.params

        raw = result.scheme + ":" if result.scheme else ""
        if result.netloc or path.startswith("//"):
            raw += "//" + result.netloc
        raw += path
        if result.query:
            raw += "?" + result.query
        if result.fragment:
            raw += "#" + result.fragment
        return cls.from_string(raw, options)

    def __repr__(self) -> str:
        return f"URLBuilder({self.render()!r})"

    @property
    def query(self) -> QueryParameterStore:
        """The live query parameter store."""
        return self._query

    def with_options(self, options: CodecOptions) -> "URLBuilder":
        """Render with different encoding options (charset, form mode)."""
        self._codec = PercentCodec(options)
        return self

    def with_scheme(self, scheme: Optional[str]) -> "URLBuilder":
        self._scheme = validate_scheme(scheme) if scheme is not None else None
        return self

    def with_user_info(self, user_info: Optional[str]) -> "URLBuilder":
        """Set the decoded user-info, usually ``user`` or ``user:password``."""
        self._user_info = user_info
        return self

    def with_host(self, host: Union[str, Host, None]) -> "URLBuilder":
        """
        Set the decoded host.

        Strings with brackets or colons are taken as IPv6 literals and
        dotted quads as IPv4; a :class:`Host` is used as given.
        """
        if host is None or isinstance(host, Host):
            self._host = host
        else:
            self._host = Host.from_value(host)
        return self

    def with_port(self, port: Optional[int]) -> "URLBuilder":
        """Set the port, or None for the scheme default."""
        self._port = validate_port(port) if port is not None else None
        return self

    def with_path(self, path: Optional[str]) -> "URLBuilder":
        """Replace the path with a decoded path string split on '/'."""
        self._absorb_trailing_slash = True
        if not path:
            self._is_absolute, self._path_segments = False, []
            return self
        self._is_absolute = path.startswith("/")
        self._path_segments = (path[1:] if self._is_absolute else path).split("/")
        return self

    def with_raw_path(self, path: str) -> "URLBuilder":
        """Replace the path with a percent-encoded path string."""
        self._is_absolute, segments = split_path(path, self._codec)
        self._path_segments = list(segments)
        self._absorb_trailing_slash = True
        return self

    def append_path_segment(self, segment: str) -> "URLBuilder":
        """
        Append one decoded path segment.

        A '/' inside the segment is encoded, not treated as a separator. A
        trailing slash of a parsed or assigned path is replaced by the new
        segment; empty segments appended earlier are kept, so appending
        ``""`` twice and then ``"b"`` gives ``a///b``.
        """
        segments = self._path_segments
        if self._absorb_trailing_slash and segments and segments[-1] == "":
            segments[-1] = segment
        else:
            segments.append(segment)
        self._absorb_trailing_slash = False
        return self

    def append_path_segments(self, *segments: str) -> "URLBuilder":
        for segment in segments:
            self.append_path_segment(segment)
        return self

    def with_query(
        self, query: Union[str, QueryParameterStore, Iterable[QueryPair], None]
    ) -> "URLBuilder":
        """
        Replace the query.

        Accepts an encoded query string (without '?'), a store or pairs to
        copy, or None to drop the query.
        """
        if query is None:
            self._query = QueryParameterStore()
        elif isinstance(query, str):
            self._query = QueryParameterStore.from_string(query, self._codec)
        else:
            self._query = QueryParameterStore(query)
        return self

    def add_query_parameter(self, name: str, value: Optional[str] = None) -> "URLBuilder":
        """Append a parameter after the existing ones."""
        self._query.add(name, value)
        return self

    def set_query_parameter(self, name: str, value: Optional[str] = None) -> "URLBuilder":
        """Drop every parameter called ``name`` and append a new one."""
        self._query.set(name, value)
        return self

    def remove_query_parameter(self, name: str, value: Optional[str]) -> "URLBuilder":
        self._query.remove(name, value)
        return self

    def remove_query_parameters(self, name: str) -> "URLBuilder":
        self._query.remove_all(name)
        return self

    def with_fragment(self, fragment: Optional[str]) -> "URLBuilder":
        self._fragment = fragment
        return self

    def build(self) -> URL:
        """Take an immutable snapshot of the current state."""
        return URL._from_parts(self._parts(), self._codec)


def parse(raw: str, options: Optional[CodecOptions] = None) -> URL:
    """
    Parse a URL string.

    Raises:
        MalformedUrlError: On a grammar violation.
        PercentEncodingError: On a malformed escape or undecodable bytes.
    """
    return URL(raw, options)


def parse_template(
    template: str,
    placeholders: Mapping[str, Any],
    options: Optional[CodecOptions] = None,
) -> URL:
    """
    Fill in ``{name}`` placeholders, then parse the result.

    Raises:
        UnresolvedPlaceholderError: If a placeholder has no value.
        MalformedUrlError: On a grammar violation.
        PercentEncodingError: On a malformed escape or undecodable bytes.
    """
    return URLBuilder.from_template(template, placeholders, options).build()

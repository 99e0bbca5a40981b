"""src/urlbuilder/url/query.py

Ordered query-parameter multimap.
"""

from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
)

from urlbuilder.encoding.codec import DEFAULT_CODEC, PercentCodec

__all__ = ["QueryParameterStore", "QueryPair"]

QueryPair = Tuple[str, Optional[str]]


class QueryParameterStore:
    """
    Ordered multimap of decoded query parameter names and values.

    The same name may appear several times, and pairs keep the order in
    which they were added. A value of None means the parameter was given
    without '=' (``?flag``), which is not the same as an empty value
    (``?flag=``).
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Optional[Iterable[QueryPair]] = None):
        self._pairs: List[QueryPair] = []
        if pairs:
            for name, value in pairs:
                self.add(name, value)

    @classmethod
    def from_string(
        cls, query: str, codec: Optional[PercentCodec] = None
    ) -> "QueryParameterStore":
        """Build a store from a percent-encoded query string."""
        return cls().parse_from(query, codec)

    def __iter__(self) -> Iterator[QueryPair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParameterStore):
            return NotImplemented
        return self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"QueryParameterStore({self._pairs!r})"

    def add(self, name: str, value: Optional[str] = None) -> "QueryParameterStore":
        """
        Append a parameter.

        Args:
            name: Decoded parameter name.
            value: Decoded value, or None for a bare parameter.

        Returns:
            The store itself, for chaining.
        """
        if not isinstance(name, str):
            raise TypeError(f"Parameter name must be str, not {type(name).__name__}")
        if value is not None and not isinstance(value, str):
            raise TypeError(
                f"Parameter value must be str or None, not {type(value).__name__}"
            )
        self._pairs.append((name, value))
        return self

    def set(self, name: str, value: Optional[str] = None) -> "QueryParameterStore":
        """Replace every parameter called ``name`` with a single new one at the end."""
        self.remove_all(name)
        return self.add(name, value)

    def values(self, name: str) -> Iterator[Optional[str]]:
        """Iterate over the values of ``name`` in order."""
        return (value for key, value in self._pairs if key == name)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get the first value of a parameter.

        Note that a bare parameter also returns None; use ``in`` to tell it
        apart from a missing one.
        """
        return next(self.values(name), default)

    def names(self) -> List[str]:
        """Distinct parameter names in first-seen order."""
        return list(dict.fromkeys(key for key, _ in self._pairs))

    def remove(self, name: str, value: Optional[str]) -> "QueryParameterStore":
        """Remove the parameters matching both ``name`` and ``value``."""
        self._pairs = [pair for pair in self._pairs if pair != (name, value)]
        return self

    def remove_all(self, name: str) -> List[Optional[str]]:
        """
        Remove every parameter called ``name``.

        Returns:
            The removed values, in order.
        """
        removed = list(self.values(name))
        self._pairs = [pair for pair in self._pairs if pair[0] != name]
        return removed

    def clear(self) -> None:
        self._pairs.clear()

    def copy(self) -> "QueryParameterStore":
        return QueryParameterStore(self._pairs)

    def pairs(self) -> Tuple[QueryPair, ...]:
        return tuple(self._pairs)

    def to_dict(self) -> Dict[str, List[Optional[str]]]:
        """Group values by name, names in first-seen order."""
        grouped: Dict[str, List[Optional[str]]] = {}
        for name, value in self._pairs:
            grouped.setdefault(name, []).append(value)
        return grouped

    def serialize(self, codec: Optional[PercentCodec] = None) -> str:
        """
        Percent-encode the parameters into a query string.

        Returns:
            ``name=value`` pairs (bare ``name`` for absent values) joined by
            '&', or an empty string when there are no parameters. The leading
            '?' is left to the caller.
        """
        codec = codec or DEFAULT_CODEC
        pieces = []
        for name, value in self._pairs:
            piece = codec.encode_query_element(name)
            if value is not None:
                piece += "=" + codec.encode_query_element(value)
            pieces.append(piece)
        return "&".join(pieces)

    def parse_from(
        self, query: str, codec: Optional[PercentCodec] = None, start: int = 0
    ) -> "QueryParameterStore":
        """
        Decode a query string and append its parameters.

        Pieces are split on '&' and then on the first '='. Empty pieces from
        '&&' or a trailing '&' are skipped.

        Args:
            query: Percent-encoded query string, without the leading '?'.
            codec: Codec to decode with.
            start: Offset of ``query`` in the whole URL, for error reporting.

        Returns:
            The store itself.

        Raises:
            InvalidPercentEncodingError: On a malformed escape.
            InvalidByteSequenceError: On undecodable bytes (strict mode).
        """
        codec = codec or DEFAULT_CODEC
        offset = start
        for piece in query.split("&"):
            if piece:
                name, sep, value = piece.partition("=")
                self.add(
                    codec.decode_query_element(name, offset),
                    codec.decode_query_element(value, offset + len(name) + 1)
                    if sep
                    else None,
                )
            offset += len(piece) + 1
        return self

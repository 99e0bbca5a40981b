"""src/urlbuilder/encoding/codec.py

Percent-encoding and decoding according to RFC 3986.
"""

from typing import AbstractSet, List, Optional

from urlbuilder.encoding.charsets import HEXDIGITS, UNRESERVED, Component, safe_set
from urlbuilder.encoding.options import CodecOptions
from urlbuilder.exceptions import (
    InvalidByteSequenceError,
    InvalidPercentEncodingError,
    UnencodableCharacterError,
)

__all__ = ["encode", "decode", "PercentCodec", "DEFAULT_CODEC"]

_QUERY_COMPONENTS = (Component.QUERY, Component.QUERY_ELEMENT)


def _percent(char: str, charset: str, offset: int) -> str:
    try:
        data = char.encode(charset)
    except UnicodeEncodeError as exc:
        raise UnencodableCharacterError(offset) from exc
    return "".join(f"%{byte:02X}" for byte in data)


def encode(
    text: str,
    safe: AbstractSet[str],
    *,
    charset: str = "utf-8",
    space_as_plus: bool = False,
) -> str:
    """
    Percent-encode text for one URL component.

    Unreserved characters and characters in ``safe`` are copied as-is, every
    other character is encoded with ``charset`` and each resulting byte is
    written as ``%XY`` with uppercase hex digits.

    Args:
        text: Decoded text.
        safe: Characters allowed unescaped in the target component.
        charset: Charset used to turn escaped characters into bytes.
        space_as_plus: Write a space as '+'. A literal '+' is then always
            escaped so the result stays unambiguous.

    Returns:
        The encoded text.

    Raises:
        UnencodableCharacterError: If a character has no representation in
            ``charset``.
    """
    # Fast path if the string is already safe.
    if not space_as_plus and all(c in UNRESERVED or c in safe for c in text):
        return text

    parts: List[str] = []
    for offset, char in enumerate(text):
        if space_as_plus and char == " ":
            parts.append("+")
        elif space_as_plus and char == "+":
            parts.append("%2B")
        elif char in UNRESERVED or char in safe:
            parts.append(char)
        else:
            parts.append(_percent(char, charset, offset))
    return "".join(parts)


def _decode_bytes(data: bytes, charset: str, lenient: bool, offset: int) -> str:
    try:
        return data.decode(charset)
    except UnicodeDecodeError as exc:
        if lenient:
            return data.decode(charset, errors="replace")
        # Each byte came from a three character escape.
        raise InvalidByteSequenceError(offset + exc.start * 3) from exc


def decode(
    text: str,
    *,
    charset: str = "utf-8",
    plus_as_space: bool = False,
    lenient: bool = False,
    start: int = 0,
) -> str:
    """
    Percent-decode text.

    Consecutive escapes are gathered into one byte string before decoding so
    multi-byte characters survive. Nothing is decoded twice: the output of
    one call is never scanned again.

    Args:
        text: Percent-encoded text.
        charset: Charset the escaped bytes were written in.
        plus_as_space: Decode '+' as a space (form-encoded query strings).
        lenient: Replace invalid byte sequences with U+FFFD instead of raising.
        start: Added to every reported offset, for callers decoding a slice
            of a longer string.

    Returns:
        The decoded text.

    Raises:
        InvalidPercentEncodingError: On a truncated or non-hex escape.
        InvalidByteSequenceError: If the escaped bytes are not valid in
            ``charset`` and ``lenient`` is not set.
    """
    if "%" not in text:
        return text.replace("+", " ") if plus_as_space else text

    parts: List[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == "%":
            run_start = index
            data = bytearray()
            while index < length and text[index] == "%":
                pair = text[index + 1 : index + 3]
                if len(pair) != 2 or not all(c in HEXDIGITS for c in pair):
                    raise InvalidPercentEncodingError(start + index)
                data.append(int(pair, 16))
                index += 3
            parts.append(_decode_bytes(bytes(data), charset, lenient, start + run_start))
            continue

        parts.append(" " if plus_as_space and char == "+" else char)
        index += 1

    return "".join(parts)


class PercentCodec:
    """
    Percent codec bound to one set of encoding options.

    Instances hold no mutable state and can be shared freely.
    """

    __slots__ = ("options",)

    def __init__(self, options: Optional[CodecOptions] = None) -> None:
        self.options = options or CodecOptions()

    def __repr__(self) -> str:
        return f"PercentCodec({self.options!r})"

    def _form_mode(self, component: Optional[Component]) -> bool:
        return self.options.legacy_form_query_space and component in _QUERY_COMPONENTS

    def encode(self, text: str, component: Component) -> str:
        """Encode decoded text with the allowed set of a component."""
        return encode(
            text,
            safe_set(component),
            charset=self.options.charset,
            space_as_plus=self._form_mode(component),
        )

    def decode(
        self, text: str, component: Optional[Component] = None, start: int = 0
    ) -> str:
        """Decode text that was encoded for a component."""
        return decode(
            text,
            charset=self.options.charset,
            plus_as_space=self._form_mode(component),
            lenient=self.options.lenient_decoding,
            start=start,
        )

    def encode_user_info(self, text: str) -> str:
        return self.encode(text, Component.USER_INFO)

    def encode_host(self, text: str) -> str:
        return self.encode(text, Component.HOST)

    def encode_path_segment(self, text: str) -> str:
        return self.encode(text, Component.PATH_SEGMENT)

    def encode_query_element(self, text: str) -> str:
        return self.encode(text, Component.QUERY_ELEMENT)

    def encode_fragment(self, text: str) -> str:
        return self.encode(text, Component.FRAGMENT)

    def decode_user_info(self, text: str, start: int = 0) -> str:
        return self.decode(text, Component.USER_INFO, start)

    def decode_host(self, text: str, start: int = 0) -> str:
        return self.decode(text, Component.HOST, start)

    def decode_path_segment(self, text: str, start: int = 0) -> str:
        return self.decode(text, Component.PATH_SEGMENT, start)

    def decode_query_element(self, text: str, start: int = 0) -> str:
        return self.decode(text, Component.QUERY_ELEMENT, start)

    def decode_fragment(self, text: str, start: int = 0) -> str:
        return self.decode(text, Component.FRAGMENT, start)


DEFAULT_CODEC = PercentCodec()

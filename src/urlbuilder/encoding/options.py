"""src/urlbuilder/encoding/options.py

Encoding mode configuration.
"""

import codecs
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from urlbuilder.exceptions import UnsupportedCharsetError

__all__ = ["CodecOptions"]

_PRINTABLE_ASCII = "".join(chr(code) for code in range(0x20, 0x7F))


@dataclass(frozen=True)
class CodecOptions:
    """
    Encoding mode flags, fixed at construction or parse time.

    Attributes:
        legacy_form_query_space: Encode spaces in query names and values as
            '+' and decode '+' back to a space (HTML form interop).
        lenient_decoding: Substitute U+FFFD for invalid byte sequences
            instead of raising InvalidByteSequenceError.
        charset: Charset used to turn characters into bytes before
            percent-encoding them, and back. Must be ASCII compatible.
    """

    legacy_form_query_space: bool = False
    lenient_decoding: bool = False
    charset: str = "utf-8"

    def __post_init__(self) -> None:
        try:
            name = codecs.lookup(self.charset).name
        except LookupError as exc:
            raise UnsupportedCharsetError(f"Unknown charset: {self.charset!r}") from exc
        try:
            ascii_compatible = (
                _PRINTABLE_ASCII.encode(name) == _PRINTABLE_ASCII.encode("ascii")
            )
        except (LookupError, UnicodeError):
            # Binary transforms such as rot13 are not text encodings.
            ascii_compatible = False
        if not ascii_compatible:
            raise UnsupportedCharsetError(
                f"Charset is not ASCII compatible: {self.charset!r}"
            )
        object.__setattr__(self, "charset", name)

    @classmethod
    def from_flags(cls, flags: Optional[Mapping[str, Any]]) -> "CodecOptions":
        """Create a CodecOptions instance from a mapping of flag names."""
        if not flags:
            return cls()
        known = {field.name for field in fields(cls)}
        unknown = set(flags) - known
        if unknown:
            raise ValueError(f"Unknown encoding flags: {', '.join(sorted(unknown))}")
        return cls(**flags)

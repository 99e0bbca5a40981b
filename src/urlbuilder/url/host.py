"""src/urlbuilder/url/host.py

Host representation with IPv4/IPv6/reg-name tagging.
"""

import enum
from typing import NamedTuple, Optional

from urlbuilder.encoding.codec import DEFAULT_CODEC, PercentCodec
from urlbuilder.exceptions import MalformedUrlError
from urlbuilder.utils.validators import is_ip_literal, is_ipv4_literal

__all__ = ["Host", "HostKind"]


class HostKind(enum.Enum):
    """Syntactic form of a host."""

    REG_NAME = "reg-name"
    IPV4 = "ipv4"
    IPV6 = "ipv6"


class Host(NamedTuple):
    """
    A decoded host and the form it was written in.

    IPv6 values are stored without brackets. The kind decides how the host
    is rendered: IPv6 inside brackets and verbatim, IPv4 verbatim, and
    registered names percent-encoded.
    """

    value: str
    kind: HostKind = HostKind.REG_NAME

    @classmethod
    def from_value(cls, value: str) -> "Host":
        """
        Tag a decoded host given by a caller.

        A bracketed value or one containing ':' must be an IPv6 (or
        IPvFuture) literal, a dotted quad is IPv4, and everything else is a
        registered name.

        Raises:
            MalformedUrlError: If a bracketed or colon-bearing value is not
                an IP literal.
        """
        if value.startswith("["):
            if not value.endswith("]"):
                raise MalformedUrlError(f"Unterminated IPv6 literal: {value!r}")
            value = value[1:-1]
        elif ":" not in value:
            if is_ipv4_literal(value):
                return cls(value, HostKind.IPV4)
            return cls(value, HostKind.REG_NAME)

        if not is_ip_literal(value):
            raise MalformedUrlError(f"Invalid IPv6 literal: {value!r}")
        return cls(value, HostKind.IPV6)

    @classmethod
    def from_wire(
        cls, text: str, codec: Optional[PercentCodec] = None, start: int = 0
    ) -> "Host":
        """Tag and decode a host as it appears in an authority."""
        if text.startswith("["):
            # Brackets were matched by the authority parser.
            return cls(text[1:-1], HostKind.IPV6)
        # Tag after decoding: "%31.2.3.4" is the IPv4 address 1.2.3.4.
        value = (codec or DEFAULT_CODEC).decode_host(text, start)
        if is_ipv4_literal(value):
            return cls(value, HostKind.IPV4)
        return cls(value, HostKind.REG_NAME)

    def render(self, codec: Optional[PercentCodec] = None) -> str:
        if self.kind is HostKind.IPV6:
            return f"[{self.value}]"
        if self.kind is HostKind.IPV4:
            return self.value
        return (codec or DEFAULT_CODEC).encode_host(self.value)

    def __str__(self) -> str:
        return self.value

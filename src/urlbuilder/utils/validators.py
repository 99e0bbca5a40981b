"""utils/validators.py

Validation utilities for urlbuilder.
"""

import ipaddress
import re
from typing import Any

from urlbuilder.exceptions import MalformedUrlError

SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*\Z")

_IPV4_PATTERN = re.compile(r"(?:0|[1-9][0-9]{0,2})(?:\.(?:0|[1-9][0-9]{0,2})){3}\Z")

_IPVFUTURE_PATTERN = re.compile(r"[vV][0-9A-Fa-f]+\.[A-Za-z0-9\-._~!$&'()*+,;=:]+\Z")

MAX_PORT = 65535


def validate_scheme(scheme: str) -> str:
    """Check a scheme against RFC 3986 and return it lowercased."""
    if not SCHEME_PATTERN.match(scheme):
        raise MalformedUrlError(f"Invalid scheme: {scheme!r}")
    return scheme.lower()


def validate_port(port: Any) -> int:
    """Check that a port is an integer between 0 and 65535."""
    if isinstance(port, bool) or not isinstance(port, int):
        raise MalformedUrlError(f"Invalid port: {port!r}")
    if not 0 <= port <= MAX_PORT:
        raise MalformedUrlError(f"Port out of range 0-{MAX_PORT}: {port}")
    return port


def parse_port(text: str) -> int:
    """Parse the port digits of an authority."""
    if not (text.isascii() and text.isdigit()):
        raise MalformedUrlError(f"Invalid port: {text!r}")
    return validate_port(int(text))


def is_ipv4_literal(host: str) -> bool:
    """Dotted-quad IPv4 check (RFC 3986 IPv4address)."""
    if not _IPV4_PATTERN.match(host):
        return False
    return all(int(octet) <= 255 for octet in host.split("."))


def is_ip_literal(host: str) -> bool:
    """
    Check the inside of a bracketed host (RFC 3986 IP-literal).

    Accepts IPv6 addresses, with an optional zone identifier after '%', and
    IPvFuture literals such as ``v1.fe``.
    """
    if _IPVFUTURE_PATTERN.match(host):
        return True
    try:
        ipaddress.IPv6Address(host.split("%", 1)[0])
    except ValueError:
        return False
    return True

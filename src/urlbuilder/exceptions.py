"""src/urlbuilder/exceptions.py

urlbuilder Exceptions hierarchy.
"""

from typing import Optional


class UrlBuilderError(Exception):
    """Base exception for all urlbuilder errors."""


class MalformedUrlError(UrlBuilderError):
    """
    The input violates the URL grammar.

    Raised for unterminated bracketed hosts, invalid scheme prefixes and
    ports that are non-numeric or outside 0-65535.
    """


class PercentEncodingError(UrlBuilderError):
    """
    Base exception for percent-encoding and decoding errors.

    Attributes:
        offset: Character offset in the input where the problem starts.
    """

    def __init__(self, message: str, offset: int):
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


class InvalidPercentEncodingError(PercentEncodingError):
    """A '%' not followed by exactly two hexadecimal digits."""

    def __init__(self, offset: int, message: str = "Invalid percent-escape"):
        super().__init__(message, offset)


class InvalidByteSequenceError(PercentEncodingError):
    """Decoded bytes are not valid text in the selected charset."""

    def __init__(self, offset: int, message: str = "Invalid byte sequence"):
        super().__init__(message, offset)


class UnencodableCharacterError(PercentEncodingError):
    """A character cannot be represented in the selected charset."""

    def __init__(self, offset: int, message: str = "Unencodable character"):
        super().__init__(message, offset)


class UnsupportedCharsetError(UrlBuilderError, ValueError):
    """The charset is unknown or does not encode ASCII as itself."""


class TemplateError(UrlBuilderError):
    """Errors raised while substituting URL template placeholders."""


class UnresolvedPlaceholderError(TemplateError):
    """
    A template placeholder has no supplied replacement.

    Attributes:
        name: Identifier of the unresolved placeholder.
    """

    def __init__(self, name: str, message: Optional[str] = None):
        super().__init__(message or f"Unresolved placeholder: {{{name}}}")
        self.name = name

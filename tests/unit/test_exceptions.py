"""tests/unit/test_exceptions.py"""

import pytest

from urlbuilder.exceptions import (
    InvalidByteSequenceError,
    InvalidPercentEncodingError,
    MalformedUrlError,
    PercentEncodingError,
    TemplateError,
    UnencodableCharacterError,
    UnresolvedPlaceholderError,
    UnsupportedCharsetError,
    UrlBuilderError,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of urlbuilder exceptions."""
    assert issubclass(MalformedUrlError, UrlBuilderError)
    assert issubclass(PercentEncodingError, UrlBuilderError)
    assert issubclass(InvalidPercentEncodingError, PercentEncodingError)
    assert issubclass(InvalidByteSequenceError, PercentEncodingError)
    assert issubclass(UnencodableCharacterError, PercentEncodingError)
    assert issubclass(TemplateError, UrlBuilderError)
    assert issubclass(UnresolvedPlaceholderError, TemplateError)
    assert issubclass(UnsupportedCharsetError, UrlBuilderError)
    assert issubclass(UnsupportedCharsetError, ValueError)


@pytest.mark.parametrize(
    "exception_class",
    [InvalidPercentEncodingError, InvalidByteSequenceError, UnencodableCharacterError],
)
def test_encoding_errors_carry_offset(exception_class):
    """Verify that codec errors expose the offset and mention it."""
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(7)
    assert exc_info.value.offset == 7
    assert "offset 7" in str(exc_info.value)


def test_unresolved_placeholder_default_message():
    """Verify that UnresolvedPlaceholderError names the placeholder."""
    with pytest.raises(UnresolvedPlaceholderError) as exc_info:
        raise UnresolvedPlaceholderError("term")
    assert exc_info.value.name == "term"
    assert "{term}" in str(exc_info.value)


@pytest.mark.parametrize(
    "exception_class",
    [UrlBuilderError, MalformedUrlError, TemplateError],
)
def test_generic_exceptions_accept_message(exception_class):
    """Verify that generic exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)

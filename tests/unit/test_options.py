"""tests/unit/test_options.py"""

import dataclasses

import pytest

from urlbuilder.encoding.options import CodecOptions
from urlbuilder.exceptions import UnsupportedCharsetError, UrlBuilderError


class TestCodecOptions:
    """Tests for CodecOptions class."""

    def test_defaults(self):
        """Test default options are strict UTF-8 with %20 spaces."""
        options = CodecOptions()

        assert options.legacy_form_query_space is False
        assert options.lenient_decoding is False
        assert options.charset == "utf-8"

    def test_charset_is_normalized(self):
        """Test charset aliases are resolved to the codec name."""
        assert CodecOptions(charset="latin-1").charset == "iso8859-1"
        assert CodecOptions(charset="UTF8").charset == "utf-8"

    def test_unknown_charset(self):
        """Test an unknown charset is rejected."""
        with pytest.raises(ValueError, match="Unknown charset"):
            CodecOptions(charset="no-such-charset")

    @pytest.mark.parametrize("charset", ["utf-16", "utf-32", "rot13", "base64"])
    def test_non_ascii_compatible_charset(self, charset):
        """Test charsets that do not write ASCII as itself are rejected."""
        with pytest.raises(UnsupportedCharsetError, match="not ASCII compatible"):
            CodecOptions(charset=charset)

    def test_charset_error_types(self):
        """Test charset errors are library errors and ValueErrors."""
        with pytest.raises(UnsupportedCharsetError) as exc_info:
            CodecOptions(charset="no-such-charset")
        assert isinstance(exc_info.value, UrlBuilderError)
        assert isinstance(exc_info.value, ValueError)

    def test_frozen(self):
        """Test options cannot be changed after construction."""
        options = CodecOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.lenient_decoding = True

    def test_from_flags_with_none(self):
        """Test CodecOptions.from_flags() with None returns defaults."""
        assert CodecOptions.from_flags(None) == CodecOptions()

    def test_from_flags_with_values(self):
        """Test CodecOptions.from_flags() with a mapping of flags."""
        options = CodecOptions.from_flags(
            {"legacy_form_query_space": True, "lenient_decoding": True}
        )

        assert options.legacy_form_query_space is True
        assert options.lenient_decoding is True

    def test_from_flags_unknown(self):
        """Test unknown flag names are rejected."""
        with pytest.raises(ValueError, match="bogus"):
            CodecOptions.from_flags({"bogus": True})

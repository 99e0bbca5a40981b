import pytest

from urlbuilder.encoding.codec import PercentCodec
from urlbuilder.encoding.options import CodecOptions

E2E_URL = "https://user:pw@example.com:8080/a b/c?x=1&y=&z#frag"


@pytest.fixture
def form_options():
    """Options with legacy form-encoded query spaces."""
    return CodecOptions(legacy_form_query_space=True)


@pytest.fixture
def form_codec(form_options):
    """Codec writing query spaces as '+'."""
    return PercentCodec(form_options)


@pytest.fixture
def lenient_codec():
    """Codec replacing undecodable bytes with U+FFFD."""
    return PercentCodec(CodecOptions(lenient_decoding=True))


@pytest.fixture
def latin1_options():
    """Options percent-encoding ISO-8859-1 bytes."""
    return CodecOptions(charset="latin-1")


@pytest.fixture
def e2e_url():
    """URL string exercising every component."""
    return E2E_URL

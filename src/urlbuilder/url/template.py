"""src/urlbuilder/url/template.py

URL template placeholder substitution.
"""

import re
from typing import Any, Mapping, Optional

from urlbuilder.encoding.codec import DEFAULT_CODEC, PercentCodec
from urlbuilder.exceptions import UnresolvedPlaceholderError

__all__ = ["PLACEHOLDER_PATTERN", "substitute"]

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def substitute(
    template: str,
    placeholders: Mapping[str, Any],
    codec: Optional[PercentCodec] = None,
) -> str:
    """
    Replace ``{name}`` placeholders with percent-encoded values.

    Values are converted with ``str()`` and encoded as query values, so a
    '/' in a value used inside a path segment splits the segment, and in
    legacy form mode a space in such a value comes back as a literal '+'.
    Braces that do not enclose an identifier are left untouched.

    Args:
        template: Raw URL template.
        placeholders: Replacement values keyed by placeholder name.
        codec: Codec used to encode the values.

    Returns:
        The template with every placeholder replaced.

    Raises:
        UnresolvedPlaceholderError: If a placeholder has no value.
    """
    codec = codec or DEFAULT_CODEC

    def replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name not in placeholders:
            raise UnresolvedPlaceholderError(name)
        return codec.encode_query_element(str(placeholders[name]))

    return PLACEHOLDER_PATTERN.sub(replace, template)

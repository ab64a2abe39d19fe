"""Default slug function for outline anchors."""

import re
from urllib.parse import quote

_WHITESPACE = re.compile(r"\s+")

# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_.~"
_SAFE_CHARS = "!*'()"


def slugify(text: str) -> str:
    """Turn heading text into a URL-safe anchor.

    Lowercases and trims the text, collapses whitespace runs to a single
    hyphen, then percent-encodes the result.

    Examples:
        >>> slugify("Hello World!")
        'hello-world!'
    """
    collapsed = _WHITESPACE.sub("-", str(text).strip().lower())
    return quote(collapsed, safe=_SAFE_CHARS)

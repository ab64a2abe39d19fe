"""Headline extraction from a markdown-it token stream."""

from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass

from markdown_it.token import Token

# Inline child token types whose content makes up the headline text
TEXT_TOKEN_TYPES = frozenset(["text", "code_inline"])


@dataclass
class Headline:
    """A heading found in the document, in document order."""

    level: int  # 1 for h1, 2 for h2, etc.
    anchor: str | None  # Link target, pre-assigned id or slug of the text
    text: str | None  # Flattened text content, None if the heading had no inline token


def heading_level(token: Token) -> int:
    """Get the numeric level from a heading token's tag ("h2" -> 2)."""
    return int(token.tag.lower().replace("h", ""))


def find_existing_id(token: Token) -> str | None:
    """Get an id attribute already assigned to a token by an earlier rule.

    Plugins such as ``mdit_py_plugins.anchors`` or ``mdit_py_plugins.attrs``
    set this on ``heading_open`` tokens.
    """
    value = token.attrGet("id")
    if value is None or value == "":
        return None
    return str(value)


def inline_text(token: Token) -> str:
    """Concatenate the literal text and inline code of an inline token."""
    return "".join(
        child.content for child in (token.children or []) if child.type in TEXT_TOKEN_TYPES
    )


def find_headlines(
    tokens: Sequence[Token],
    levels: Collection[int],
    slugify: Callable[[str], str],
) -> list[Headline]:
    """Find all headlines of the included levels in a token stream.

    Args:
        tokens: Block-level tokens of a fully parsed document
        levels: Heading levels to include, e.g. ``(1, 2, 3)``
        slugify: Function deriving an anchor from headline text

    Returns:
        Headlines in document order.
    """
    headlines: list[Headline] = []
    current: Headline | None = None

    for token in tokens:
        if token.type == "heading_open":
            level = heading_level(token)
            if level in levels:
                current = Headline(level=level, anchor=find_existing_id(token), text=None)
        elif current is not None and token.type == "inline":
            current.text = inline_text(token)
            if not current.anchor:
                current.anchor = slugify(current.text)
        elif token.type == "heading_close":
            if current is not None:
                headlines.append(current)
            current = None

    return headlines

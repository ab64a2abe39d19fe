"""markdown-it plugin that inserts a table of contents at a marker.

The outline is assembled in three steps:

1. Gather all headline tokens of the document into a flat list.
2. Turn the flat list into a nested tree, respecting the headline levels.
3. Render the tree as nested HTML lists.

The marker is detected by an inline rule, but the headlines are only known
once the whole document has been parsed. A core rule therefore captures the
finished token stream into the per-render ``env`` mapping, and the body of the
outline is built when the renderer reaches the placeholder token.
"""

import logging
from collections.abc import Callable, MutableMapping, Sequence
from enum import Enum
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.rules_inline import StateInline
from markdown_it.token import Token

from .headlines import find_headlines
from .options import TocOptions
from .renderer import render_outline
from .tree import build_outline_tree

logger = logging.getLogger(__name__)

# Key under which the parsed document's tokens are stored in env
TOC_ENV_KEY = "mdtoc_tokens"

MARKER_MARKUP = "[[toc]]"

RenderRule = Callable[[Sequence[Token], int, Any, MutableMapping], str]


class MarkerKind(Enum):
    """Token types emitted for a table of contents marker."""

    TOC_OPEN = "toc_open"
    TOC_BODY = "toc_body"
    TOC_CLOSE = "toc_close"


class RemovedOptionError(Exception):
    """Raised when a removed plugin option is used."""

    pass


class TocPlugin:
    """Marker detection and rendering for one configured markdown-it instance.

    Holds only configuration; all per-document data travels through ``env``.
    """

    def __init__(self, md: MarkdownIt, options: TocOptions):
        self.md = md
        self.options = options

    def render_rules(self) -> dict[MarkerKind, RenderRule]:
        """Get the renderer hook for each marker token kind."""
        return {
            MarkerKind.TOC_OPEN: self.render_open,
            MarkerKind.TOC_BODY: self.render_body,
            MarkerKind.TOC_CLOSE: self.render_close,
        }

    def install(self) -> None:
        """Register the inline rule, the capture rule and the render hooks."""
        self.md.inline.ruler.after("emphasis", "toc", self.detect_marker)
        self.md.core.ruler.push("toc_capture", self.capture_tokens)
        for kind, rule in self.render_rules().items():
            self.md.renderer.rules[kind.value] = rule

    def detect_marker(self, state: StateInline, silent: bool) -> bool:
        """Inline rule: replace a marker line with open/body/close tokens."""
        if state.pos >= state.posMax or state.src[state.pos] != "[":
            return False
        # Don't run in validation mode
        if silent:
            return False

        match = self.options.marker_pattern.match(state.src[state.pos :])
        if match is None:
            return False

        token = state.push(MarkerKind.TOC_OPEN.value, "toc", 1)
        token.markup = MARKER_MARKUP
        state.push(MarkerKind.TOC_BODY.value, "", 0)
        state.push(MarkerKind.TOC_CLOSE.value, "toc", -1)

        # Continue after the marker line
        newline = state.src.find("\n", state.pos)
        state.pos = newline if newline != -1 else state.posMax

        logger.debug("Found table of contents marker %r", match.group(0))
        return True

    def capture_tokens(self, state: StateCore) -> None:
        """Core rule: keep the document's tokens for the body renderer."""
        state.env[TOC_ENV_KEY] = state.tokens

    def render_open(self, tokens: Sequence[Token], idx: int, options: Any, env: MutableMapping) -> str:
        html = f'<div class="{self.options.container_class}">'
        if self.options.container_header_html:
            html += self.options.container_header_html
        return html

    def render_close(self, tokens: Sequence[Token], idx: int, options: Any, env: MutableMapping) -> str:
        footer = self.options.container_footer_html or ""
        return f"{footer}</div>"

    def render_body(self, tokens: Sequence[Token], idx: int, options: Any, env: MutableMapping) -> str:
        """Build the outline from the captured document tokens.

        Raises:
            RemovedOptionError: If the removed force_full_toc option is set.
        """
        if self.options.force_full_toc:
            raise RemovedOptionError(
                "force_full_toc was removed in version 0.5.0 and is no longer supported. "
                "Remove it from your table of contents options."
            )

        document_tokens = env.get(TOC_ENV_KEY) if env is not None else None
        if document_tokens is None:
            logger.warning("No parsed document available for table of contents, rendering it empty")
            document_tokens = []

        headlines = find_headlines(
            document_tokens, self.options.include_levels, self.options.slugify
        )
        logger.debug("Rendering table of contents with %d headlines", len(headlines))
        root = build_outline_tree(headlines)
        return render_outline(root, self.options, self.md)


def toc_plugin(md: MarkdownIt, options: TocOptions | None = None, **overrides: Any) -> None:
    """Add table of contents support to a markdown-it instance.

    Args:
        md: The markdown-it instance
        options: Plugin options (defaults to TocOptions())
        **overrides: Individual option fields, e.g. ``include_levels=[1, 2, 3]``

    Example:
        >>> md = MarkdownIt().use(toc_plugin, include_levels=[2, 3])
        >>> html = md.render(text)
    """
    resolved = (options or TocOptions()).with_overrides(**overrides)
    TocPlugin(md, resolved).install()

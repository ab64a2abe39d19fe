"""Render an outline tree to nested HTML lists."""

from typing import TYPE_CHECKING

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from .tree import OutlineNode

if TYPE_CHECKING:
    from .options import TocOptions


def render_inline_text(text: str, md: MarkdownIt, anchor: str | None = None) -> str:
    """Default link text formatter: render the text as inline markdown."""
    return md.renderInline(text)


def render_outline(root: OutlineNode, options: "TocOptions", md: MarkdownIt) -> str:
    """Render the children of an outline root as a nested list.

    Args:
        root: Root node returned by build_outline_tree (not rendered itself)
        options: Plugin options (list type, formatting, link transform)
        md: The markdown-it instance, passed on to the format function

    Returns:
        HTML for the outermost list, e.g. ``<ul><li>...</li></ul>``.
    """
    return _render_list(root, options, md, depth=0)


def _render_list(node: OutlineNode, options: "TocOptions", md: MarkdownIt, depth: int) -> str:
    # List attributes only go on the outermost list
    attrs = f" {options.list_attrs}" if depth == 0 and options.list_attrs else ""
    items = "".join(_render_item(child, options, md, depth) for child in node.children)
    return f"<{options.list_type}{attrs}>{items}</{options.list_type}>"


def _render_item(node: OutlineNode, options: "TocOptions", md: MarkdownIt, depth: int) -> str:
    anchor = node.anchor
    # Anchorless and synthetic nodes pass through too, as None
    if options.transform_link is not None:
        anchor = options.transform_link(anchor)

    text = options.format(node.text, md, anchor) if node.text else None

    if anchor:
        html = f'<a href="#{escapeHtml(anchor)}">{text or ""}</a>'
    else:
        html = text or ""

    if node.children:
        html += _render_list(node, options, md, depth + 1)
    return f"<li>{html}</li>"

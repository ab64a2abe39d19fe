"""Table of contents generation for markdown-it."""

from .headlines import Headline, find_headlines
from .options import TocOptions
from .plugin import TOC_ENV_KEY, MarkerKind, RemovedOptionError, TocPlugin, toc_plugin
from .renderer import render_inline_text, render_outline
from .slug import slugify
from .tree import OutlineNode, build_outline_tree

__all__ = [
    "Headline",
    "find_headlines",
    "OutlineNode",
    "build_outline_tree",
    "render_outline",
    "render_inline_text",
    "slugify",
    "TocOptions",
    "TocPlugin",
    "toc_plugin",
    "MarkerKind",
    "RemovedOptionError",
    "TOC_ENV_KEY",
]

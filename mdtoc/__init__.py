"""mdtoc - table of contents plugin for markdown-it-py."""

from mdtoc._version import __version__
from mdtoc.toc import RemovedOptionError, TocOptions, slugify, toc_plugin

__all__ = ["__version__", "toc_plugin", "TocOptions", "RemovedOptionError", "slugify"]

"""Pytest configuration and fixtures."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from markdown_it import MarkdownIt

from mdtoc.toc import toc_plugin


@pytest.fixture
def temp_workspace() -> Generator[Path, None, None]:
    """Create a temporary workspace directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def md() -> MarkdownIt:
    """A commonmark markdown-it instance with the toc plugin and default options."""
    return MarkdownIt().use(toc_plugin)

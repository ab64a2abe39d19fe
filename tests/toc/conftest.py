"""Pytest fixtures for table of contents tests."""

import pytest


@pytest.fixture
def simple_doc() -> str:
    """A document with a title, a marker and two sections."""
    return """# Title

[[toc]]

## Intro

## Usage
"""


@pytest.fixture
def doc_with_skipped_level() -> str:
    """A document that jumps from h1 straight to h3."""
    return """[[toc]]

# Alpha

### Beta

# Gamma
"""


@pytest.fixture
def doc_with_inline_markup() -> str:
    """A document whose headings contain code and emphasis."""
    return """[[toc]]

# The `run` command

## *Quick* start
"""


@pytest.fixture
def doc_without_marker() -> str:
    """A document with headings but no marker."""
    return """# Title

## Section

Some text.
"""

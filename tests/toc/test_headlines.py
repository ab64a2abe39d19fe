"""Tests for headline extraction."""

from markdown_it import MarkdownIt
from markdown_it.token import Token

from mdtoc.toc.headlines import Headline, find_existing_id, find_headlines, heading_level
from mdtoc.toc.slug import slugify


def parse(text: str) -> list[Token]:
    return MarkdownIt().parse(text)


class TestHeadingHelpers:
    """Tests for token helper functions."""

    def test_heading_level_from_tag(self):
        """Test that the level is read from the tag name."""
        assert heading_level(Token("heading_open", "h3", 1)) == 3
        assert heading_level(Token("heading_open", "H2", 1)) == 2

    def test_find_existing_id(self):
        """Test reading an id attribute set by an earlier rule."""
        token = Token("heading_open", "h1", 1)
        assert find_existing_id(token) is None

        token.attrSet("id", "custom-id")
        assert find_existing_id(token) == "custom-id"

    def test_empty_id_is_ignored(self):
        """Test that an empty id does not count as an anchor."""
        token = Token("heading_open", "h1", 1)
        token.attrSet("id", "")
        assert find_existing_id(token) is None


class TestFindHeadlines:
    """Test cases for find_headlines."""

    def test_finds_included_levels_in_order(self):
        """Test that only included levels are returned, in document order."""
        tokens = parse("# One\n\n## Two\n\n### Three\n\n## Four\n")

        headlines = find_headlines(tokens, (1, 2), slugify)

        assert headlines == [
            Headline(level=1, anchor="one", text="One"),
            Headline(level=2, anchor="two", text="Two"),
            Headline(level=2, anchor="four", text="Four"),
        ]

    def test_every_level_is_included(self):
        """Test that no headline falls outside the included levels."""
        tokens = parse("# A\n\n## B\n\n### C\n\n#### D\n")

        headlines = find_headlines(tokens, (2, 4), slugify)

        assert [h.level for h in headlines] == [2, 4]

    def test_setext_headings(self):
        """Test that underlined headings are found as well."""
        tokens = parse("Title\n=====\n\nSection\n-------\n")

        headlines = find_headlines(tokens, (1, 2), slugify)

        assert [(h.level, h.text) for h in headlines] == [(1, "Title"), (2, "Section")]

    def test_concatenates_text_and_inline_code(self):
        """Test that text and code spans are joined without separators."""
        tokens = parse("# The `run` command\n")

        headlines = find_headlines(tokens, (1,), slugify)

        assert headlines[0].text == "The run command"
        assert headlines[0].anchor == "the-run-command"

    def test_other_inline_markup_contributes_text_only(self):
        """Test that emphasis markup is dropped but its text is kept."""
        tokens = parse("# *Quick* start\n")

        headlines = find_headlines(tokens, (1,), slugify)

        assert headlines[0].text == "Quick start"

    def test_existing_id_wins_over_slug(self):
        """Test that an id assigned upstream is used as the anchor."""
        tokens = parse("# Hello World\n")
        tokens[0].attrSet("id", "custom-id")

        headlines = find_headlines(tokens, (1,), slugify)

        assert headlines[0].anchor == "custom-id"
        assert headlines[0].text == "Hello World"

    def test_custom_slug_function(self):
        """Test that the given slug function derives anchors."""
        tokens = parse("# Hello World\n")

        headlines = find_headlines(tokens, (1,), lambda text: f"h-{len(text)}")

        assert headlines[0].anchor == "h-11"

    def test_heading_without_inline_token(self):
        """Test that a heading with no inline content has no text."""
        tokens = [Token("heading_open", "h2", 1), Token("heading_close", "h2", -1)]

        headlines = find_headlines(tokens, (2,), slugify)

        assert headlines == [Headline(level=2, anchor=None, text=None)]

    def test_excluded_heading_text_is_ignored(self):
        """Test that inline content of excluded headings is not picked up."""
        tokens = parse("### Skipped\n\nParagraph text\n\n# Kept\n")

        headlines = find_headlines(tokens, (1,), slugify)

        assert headlines == [Headline(level=1, anchor="kept", text="Kept")]

    def test_paragraph_inline_tokens_are_ignored(self):
        """Test that inline tokens outside headings are not headlines."""
        tokens = parse("Just a paragraph.\n\nAnother one.\n")

        assert find_headlines(tokens, (1, 2), slugify) == []

    def test_no_matching_levels(self):
        """Test that an empty list is returned when nothing matches."""
        tokens = parse("# One\n\n## Two\n")

        assert find_headlines(tokens, (5, 6), slugify) == []

"""Options for the table of contents plugin."""

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Literal

from .renderer import render_inline_text
from .slug import slugify

DEFAULT_INCLUDE_LEVELS = (1, 2)
DEFAULT_CONTAINER_CLASS = "table-of-contents"
DEFAULT_MARKER_PATTERN = r"^\[\[toc\]\]"
LIST_TYPES = frozenset(["ul", "ol"])

# Options that can be set from a config file (callables can only be passed in code)
FILE_OPTIONS = frozenset(
    [
        "include_levels",
        "container_class",
        "marker_pattern",
        "list_type",
        "container_header_html",
        "container_footer_html",
        "list_attrs",
        "force_full_toc",
    ]
)


@dataclass
class TocOptions:
    """Options for the table of contents plugin."""

    include_levels: Iterable[int] = DEFAULT_INCLUDE_LEVELS
    container_class: str = DEFAULT_CONTAINER_CLASS
    slugify: Callable[[str], str] = slugify
    # Strings are compiled case-insensitive and multiline
    marker_pattern: str | re.Pattern[str] = DEFAULT_MARKER_PATTERN
    list_type: Literal["ul", "ol"] = "ul"
    # Called as format(text, md, anchor) and returns HTML for the link text
    format: Callable[..., str] = render_inline_text
    container_header_html: str | None = None
    container_footer_html: str | None = None
    transform_link: Callable[[str | None], str | None] | None = None
    list_attrs: str = ""
    # Removed in 0.5.0, kept only so that using it fails loudly
    force_full_toc: bool = False

    def __post_init__(self) -> None:
        self.include_levels = tuple(self.include_levels)
        for level in self.include_levels:
            if not isinstance(level, int) or isinstance(level, bool) or level < 1:
                raise ValueError(f"Heading levels must be positive integers, got {level!r}")

        if isinstance(self.marker_pattern, str):
            self.marker_pattern = re.compile(self.marker_pattern, re.IGNORECASE | re.MULTILINE)

        if self.list_type not in LIST_TYPES:
            available = ", ".join(sorted(LIST_TYPES))
            raise ValueError(f"Unknown list type: {self.list_type}. Available: {available}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TocOptions":
        """Create options from a mapping such as a parsed TOML table.

        Raises:
            ValueError: If the mapping has keys that are not file options.
        """
        unknown = set(data) - FILE_OPTIONS
        if unknown:
            raise ValueError(f"Unknown toc options: {', '.join(sorted(unknown))}")
        return cls(**data)

    def with_overrides(self, **overrides: Any) -> "TocOptions":
        """Return a copy with the given fields replaced."""
        if not overrides:
            return self
        names = {f.name for f in fields(self)}
        unknown = set(overrides) - names
        if unknown:
            raise ValueError(f"Unknown toc options: {', '.join(sorted(unknown))}")
        return replace(self, **overrides)

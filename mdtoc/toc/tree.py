"""Outline tree construction from a flat headline sequence."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .headlines import Headline


@dataclass
class OutlineNode:
    """A node in the outline tree.

    Nodes with no text and no anchor are synthetic: they bridge a skipped
    heading level and render as an unlabeled list item wrapping a nested list.
    """

    level: int
    text: str | None = None
    anchor: str | None = None
    children: list["OutlineNode"] = field(default_factory=list)
    # Back-reference for walking up on level decrease; children own the tree
    parent: "OutlineNode | None" = field(default=None, repr=False, compare=False)

    @property
    def is_synthetic(self) -> bool:
        """Check if this node only bridges a level skip."""
        return self.text is None and self.anchor is None

    def add_child(self, level: int, text: str | None = None, anchor: str | None = None) -> "OutlineNode":
        """Append a new child node and return it."""
        child = OutlineNode(level=level, text=text, anchor=anchor, parent=self)
        self.children.append(child)
        return child

    def walk(self) -> Iterator["OutlineNode"]:
        """Yield all descendants in pre-order (document order)."""
        for child in self.children:
            yield child
            yield from child.walk()


def build_outline_tree(headlines: Sequence[Headline]) -> OutlineNode:
    """Turn a flat list of headlines into a nested outline tree.

    The returned root is never rendered itself, only its children. Its level
    is one less than the smallest headline level, so the first headline always
    starts a new list below it.

    Args:
        headlines: Headlines in document order

    Returns:
        Root node of the outline tree (no children for empty input).
    """
    if not headlines:
        return OutlineNode(level=0)

    root = OutlineNode(level=min(h.level for h in headlines) - 1)
    # List that new siblings are appended to
    current_root = root
    # Last item added, becomes the list root when the level increases
    prev_item = root

    for headline in headlines:
        if headline.level > prev_item.level:
            for _ in range(headline.level - prev_item.level):
                current_root = prev_item
                prev_item = current_root.add_child(current_root.level + 1)
            prev_item.text = headline.text
            prev_item.anchor = headline.anchor
        elif headline.level == prev_item.level:
            prev_item = current_root.add_child(headline.level, headline.text, headline.anchor)
        else:
            for _ in range(prev_item.level - headline.level):
                current_root = current_root.parent or root
            prev_item = current_root.add_child(headline.level, headline.text, headline.anchor)

    return root

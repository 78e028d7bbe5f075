"""Flattened text projection of a markup tree.

The flattened text is every text node's content in document order, plus one
``"\\n"`` per line break.  Horizontal rules contribute nothing.  These rules
must agree exactly with what the renderer emits, otherwise every highlight
after the first disagreement is misaligned.
"""

# Pattern: Functional Core

from __future__ import annotations

from annotext.models import ElementNode, MarkupNode, TextNode

LINE_BREAK_TAG = "br"
RULE_TAG = "hr"
LINE_BREAK_TEXT = "\n"


def text_length(node: MarkupNode) -> int:
    """Return the flattened-text length contributed by *node*'s subtree."""
    if isinstance(node, TextNode):
        return len(node.content)
    tag = node.tag.lower()
    if tag == LINE_BREAK_TAG:
        return len(LINE_BREAK_TEXT)
    if tag == RULE_TAG:
        return 0
    return sum(text_length(child) for child in node.children)


def flatten_text(node: MarkupNode) -> str:
    """Return the flattened text of *node*'s subtree."""
    parts: list[str] = []

    def _walk(n: MarkupNode) -> None:
        if isinstance(n, TextNode):
            parts.append(n.content)
            return
        tag = n.tag.lower()
        if tag == LINE_BREAK_TAG:
            parts.append(LINE_BREAK_TEXT)
            return
        if tag == RULE_TAG:
            return
        for child in n.children:
            _walk(child)

    _walk(node)
    return "".join(parts)


def child_offsets(node: ElementNode, offset: int = 0) -> list[int]:
    """Absolute start offset of each child of *node*, given its own *offset*."""
    offsets: list[int] = []
    current = offset
    for child in node.children:
        offsets.append(current)
        current += text_length(child)
    return offsets

"""Markup parsing into the engine's immutable node tree.

Parsing itself is delegated to selectolax's lexbor backend.  This module only
adapts the parser's DOM into :class:`~annotext.models.TextNode` /
:class:`~annotext.models.ElementNode` values so the rest of the engine never
touches parser objects.
"""

from __future__ import annotations

import logging
from typing import Any

from selectolax.lexbor import LexborHTMLParser

from annotext.models import ElementNode, MarkupNode, TextNode

logger = logging.getLogger(__name__)

# selectolax pseudo-tag for text nodes; comments and other non-element nodes
# use names that do not start with a letter ("_comment", "!doctype")
_TEXT_TAG = "-text"

# Tag name used for the synthetic root returned by parse_markup()
ROOT_TAG = "body"


def _convert(node: Any) -> MarkupNode | None:
    tag = node.tag
    if tag == _TEXT_TAG:
        text = node.text_content
        if not text:
            return None
        return TextNode(text)
    if not tag or not tag[0].isalpha():
        return None
    return ElementNode(
        tag=tag.lower(),
        attributes={k.lower(): v or "" for k, v in node.attributes.items()},
        children=_convert_children(node),
    )


def _convert_children(node: Any) -> tuple[MarkupNode, ...]:
    children: list[MarkupNode] = []
    child = node.child
    while child is not None:
        converted = _convert(child)
        if converted is not None:
            children.append(converted)
        child = child.next
    return tuple(children)


def parse_markup(markup: str) -> ElementNode:
    """Parse raw markup into an :class:`ElementNode` rooted at ``<body>``.

    Fragments and full documents are both accepted; for documents only the
    body content is kept.  Entity decoding and any tree repair are the
    parser's; no whitespace normalisation is applied.

    Returns:
        An element with tag ``"body"`` whose children are the document
        content.  Empty input gives an empty body.
    """
    if not markup:
        return ElementNode(ROOT_TAG)

    tree = LexborHTMLParser(markup)
    root = tree.body if tree.body is not None else tree.root
    if root is None:
        logger.debug("Parser produced no root for %d chars of markup", len(markup))
        return ElementNode(ROOT_TAG)

    return ElementNode(ROOT_TAG, {}, _convert_children(root))

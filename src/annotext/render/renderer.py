"""Recursive markup-to-run rendering with highlight overlay.

``render_node`` is a pure function of ``(node, style, offset, highlights)``:
it returns the node's runs plus the offset just past them.  No style object
is shared between calls, and the offset a child starts at is always the
offset the previous sibling returned.

Tag handling:
    b/strong, i/em, u     bold, italic, underline
    font[color]           text colour (when the token decodes)
    br                    a one-character ``"\\n"`` leaf; highlights cover it
    hr                    an empty ``RunKind.RULE`` placeholder
    a[href]               link colour + underline, ``LINK`` interaction
    anything else         transparent container
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from annotext.config import RenderConfig, get_settings
from annotext.highlights.keywords import find_all_keyword_highlights
from annotext.highlights.reanchor import reanchor_highlights
from annotext.highlights.regions import clip_to_leaf, resolve_segments
from annotext.markup.flatten import (
    LINE_BREAK_TAG,
    LINE_BREAK_TEXT,
    RULE_TAG,
    flatten_text,
)
from annotext.markup.tree import parse_markup
from annotext.models import (
    ElementNode,
    HighlightRange,
    Interaction,
    MarkupNode,
    RenderedDocument,
    RenderRun,
    RunKind,
    StyleDescriptor,
    TextNode,
)
from annotext.render.style import (
    LINK_TAG,
    base_style,
    compose_style,
    highlight_interaction,
    style_for_element,
)

logger = logging.getLogger(__name__)


def _render_text(
    text: str,
    style: StyleDescriptor,
    offset: int,
    highlights: Sequence[HighlightRange],
    config: RenderConfig,
) -> tuple[list[RenderRun], int]:
    local = clip_to_leaf(highlights, offset, len(text))
    runs: list[RenderRun] = []
    for segment in resolve_segments(text, local):
        if segment.highlight is None:
            runs.append(RenderRun(segment.text, style))
        else:
            runs.append(
                RenderRun(
                    segment.text,
                    compose_style(style, segment.highlight, config),
                    highlight_interaction(segment.text, segment.highlight),
                )
            )
    return runs, offset + len(text)


def _render_children(
    node: ElementNode,
    style: StyleDescriptor,
    offset: int,
    highlights: Sequence[HighlightRange],
    config: RenderConfig,
) -> tuple[list[RenderRun], int]:
    runs: list[RenderRun] = []
    current = offset
    for child in node.children:
        child_runs, current = render_node(child, style, current, highlights, config)
        runs.extend(child_runs)
    return runs, current


def _attach_link(runs: Iterable[RenderRun], href: str) -> list[RenderRun]:
    """Give every text run without an interaction the link's interaction.

    Highlight interactions and inner links are kept.
    """
    link = Interaction.for_link(href)
    return [
        replace(run, interaction=link)
        if run.interaction is None and run.kind is RunKind.TEXT
        else run
        for run in runs
    ]


def render_node(
    node: MarkupNode,
    style: StyleDescriptor,
    offset: int,
    highlights: Sequence[HighlightRange],
    config: RenderConfig,
) -> tuple[list[RenderRun], int]:
    """Render *node* starting at absolute flattened-text *offset*.

    Args:
        node: Subtree to render.
        style: Style inherited from the ancestors.
        offset: Flattened-text position of the subtree's first character.
        highlights: Full, already reanchored, global highlight set.
        config: Render configuration (link colour, note underline).

    Returns:
        ``(runs, next_offset)`` where ``next_offset - offset`` equals the
        total length of the runs' text.
    """
    if isinstance(node, TextNode):
        return _render_text(node.content, style, offset, highlights, config)

    tag = node.tag.lower()
    if tag == LINE_BREAK_TAG:
        return _render_text(LINE_BREAK_TEXT, style, offset, highlights, config)
    if tag == RULE_TAG:
        return [RenderRun("", style, kind=RunKind.RULE)], offset

    child_style = style_for_element(tag, node.attributes, style, config)
    runs, next_offset = _render_children(
        node, child_style, offset, highlights, config
    )
    if tag == LINK_TAG:
        runs = _attach_link(runs, node.attributes.get("href", ""))
    return runs, next_offset


def _collect_keywords(keyword: str | None, keywords: Iterable[str] | None) -> list[str]:
    collected = [keyword] if keyword else []
    if keywords is not None:
        collected.extend(k for k in keywords if k)
    return collected


def render_tree(
    root: MarkupNode,
    highlights: Iterable[HighlightRange] = (),
    keyword: str | None = None,
    *,
    keywords: Iterable[str] | None = None,
    base: StyleDescriptor | None = None,
    config: RenderConfig | None = None,
) -> RenderedDocument:
    """Render an already-parsed tree with user and keyword highlights.

    Keyword matches are found in the flattened text, appended after the user
    highlights, and the combined set is reanchored against the flattened
    text before the render pass.

    Args:
        root: Parsed markup tree.
        highlights: User highlights (offsets into the flattened text).
        keyword: Single search keyword (case-insensitive substring).
        keywords: Additional search keywords, each scanned independently.
        base: Root style; defaults to the configured base style.
        config: Render configuration; defaults to ``get_settings().render``.
    """
    if config is None:
        config = get_settings().render

    text = flatten_text(root)
    combined = list(highlights)
    search_terms = _collect_keywords(keyword, keywords)
    if search_terms:
        combined.extend(
            find_all_keyword_highlights(text, search_terms, config.search_color)
        )
    reanchored = reanchor_highlights(combined, text, config.reanchor_window)

    runs, end = render_node(
        root, base or base_style(config), 0, reanchored, config
    )
    if end != len(text):
        logger.warning(
            "Render pass ended at offset %d but flattened text has %d chars",
            end,
            len(text),
        )

    logger.debug(
        "Rendered %d chars into %d runs with %d highlight(s)",
        len(text),
        len(runs),
        len(reanchored),
    )
    return RenderedDocument(text=text, runs=tuple(runs), highlights=tuple(reanchored))


def render_document(
    markup: str,
    highlights: Iterable[HighlightRange] = (),
    keyword: str | None = None,
    *,
    keywords: Iterable[str] | None = None,
    base: StyleDescriptor | None = None,
    config: RenderConfig | None = None,
) -> RenderedDocument:
    """Parse *markup* and render it.  See :func:`render_tree`."""
    return render_tree(
        parse_markup(markup),
        highlights,
        keyword,
        keywords=keywords,
        base=base,
        config=config,
    )

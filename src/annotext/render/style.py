"""Style composition for elements and highlighted segments."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from annotext.colors import decode_color
from annotext.config import RenderConfig
from annotext.models import HighlightRange, Interaction, StyleDescriptor

BOLD_TAGS = frozenset(("b", "strong"))
ITALIC_TAGS = frozenset(("i", "em"))
UNDERLINE_TAGS = frozenset(("u",))
FONT_TAG = "font"
LINK_TAG = "a"


def base_style(config: RenderConfig) -> StyleDescriptor:
    """Root style: configured font, size, line height and text colour."""
    return StyleDescriptor(
        color=decode_color(config.text_color),
        font_family=config.font_family,
        font_size=config.font_size,
        line_height=config.line_height,
    )


def link_style(inherited: StyleDescriptor, config: RenderConfig) -> StyleDescriptor:
    return replace(
        inherited,
        color=decode_color(config.link_color) or inherited.color,
        underline=True,
    )


def style_for_element(
    tag: str,
    attributes: Mapping[str, str],
    inherited: StyleDescriptor,
    config: RenderConfig,
) -> StyleDescriptor:
    """Apply the tag's own semantics to *inherited*.

    Unknown tags, and ``font`` without a decodable ``color``, leave the style
    unchanged.
    """
    tag = tag.lower()
    if tag in BOLD_TAGS:
        return replace(inherited, bold=True)
    if tag in ITALIC_TAGS:
        return replace(inherited, italic=True)
    if tag in UNDERLINE_TAGS:
        return replace(inherited, underline=True)
    if tag == FONT_TAG:
        color = decode_color(attributes.get("color"))
        return replace(inherited, color=color) if color is not None else inherited
    if tag == LINK_TAG:
        return link_style(inherited, config)
    return inherited


def compose_style(
    inherited: StyleDescriptor,
    highlight: HighlightRange | None,
    config: RenderConfig,
) -> StyleDescriptor:
    """Overlay the winning highlight, if any, on *inherited*.

    The background comes from the highlight's colour token (undecodable
    tokens leave it alone).  A non-blank note adds a fixed underline, the
    only inline sign that a note exists.
    """
    if highlight is None:
        return inherited

    style = inherited
    background = decode_color(highlight.color_token)
    if background is not None:
        style = replace(style, background_color=background)
    if highlight.has_note:
        style = replace(
            style,
            underline=True,
            underline_color=decode_color(config.note_underline_color),
            underline_thickness=config.note_underline_thickness,
        )
    return style


def highlight_interaction(segment_text: str, highlight: HighlightRange) -> Interaction:
    return Interaction.for_highlight(segment_text, highlight.note)

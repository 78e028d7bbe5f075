"""Style composition, tree rendering and presentation of render runs."""

from annotext.render.renderer import render_document, render_node, render_tree
from annotext.render.style import (
    base_style,
    compose_style,
    highlight_interaction,
    style_for_element,
)

__all__ = [
    "base_style",
    "compose_style",
    "highlight_interaction",
    "render_document",
    "render_node",
    "render_tree",
    "style_for_element",
]

"""Markup tree parsing and flattened-text tracking."""

from annotext.markup.flatten import (
    child_offsets,
    flatten_text,
    text_length,
)
from annotext.markup.tree import parse_markup

__all__ = [
    "child_offsets",
    "flatten_text",
    "parse_markup",
    "text_length",
]

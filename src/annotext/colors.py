"""Colour token decoding.

The only accepted token formats are ``#RRGGBB`` and ``#AARRGGBB``.  Every
component that reads a colour (``font`` attributes, highlight tokens,
configured theme colours) goes through :func:`decode_color` so the rules
live in one place.
"""

# Pattern: Functional Core

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


@dataclass(frozen=True)
class Color:
    """A 32-bit ARGB colour value."""

    argb: int

    @property
    def alpha(self) -> int:
        return (self.argb >> 24) & 0xFF

    @property
    def red(self) -> int:
        return (self.argb >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self.argb >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self.argb & 0xFF

    @property
    def hex(self) -> str:
        """``#AARRGGBB`` form, round-trips through :func:`decode_color`."""
        return f"#{self.argb:08x}"

    @property
    def rgb_hex(self) -> str:
        """``#rrggbb`` form with alpha dropped (for terminal/CSS consumers)."""
        return f"#{self.argb & 0xFFFFFF:06x}"


def decode_color(token: str | None) -> Color | None:
    """Decode a ``#RRGGBB`` or ``#AARRGGBB`` token.

    Six-digit tokens are fully opaque.  Anything else (missing ``#``, wrong
    length, non-hex digits, ``None``) yields ``None`` rather than an error.
    """
    if not token or not token.startswith("#"):
        return None
    digits = token[1:]
    if len(digits) not in (6, 8) or not _HEX_DIGITS.fullmatch(digits):
        return None
    if len(digits) == 6:
        digits = "ff" + digits
    return Color(int(digits, 16))

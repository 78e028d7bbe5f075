"""Data models for the annotated rendering engine.

Plain frozen dataclasses.  Nothing here is mutated after construction:
styles are derived with ``dataclasses.replace`` and reanchored highlights are
new instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from annotext.colors import Color

# ---------------------------------------------------------------------------
# Markup tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextNode:
    """A run of literal text from the parsed markup."""

    content: str


@dataclass(frozen=True)
class ElementNode:
    """An element with a lower-cased local tag name.

    Attributes:
        tag: Local tag name, e.g. ``"b"`` or ``"a"``.
        attributes: Attribute map as produced by the parser.
        children: Child nodes in document order.
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[MarkupNode, ...] = ()


type MarkupNode = TextNode | ElementNode


# ---------------------------------------------------------------------------
# Highlights
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HighlightRange:
    """A half-open interval over the flattened document text.

    Attributes:
        start_offset: First highlighted character (inclusive).
        end_offset: End of the highlight (exclusive).
        color_token: ``#RRGGBB`` or ``#AARRGGBB`` background colour.
        annotated_text: The text the range covered when it was recorded;
            used to reanchor the range when the document has drifted.
        note: Optional note; a non-blank note underlines the range.
    """

    start_offset: int
    end_offset: int
    color_token: str
    annotated_text: str
    note: str = ""

    @property
    def has_note(self) -> bool:
        return bool(self.note.strip())


class BoundaryKind(StrEnum):
    START = "start"
    END = "end"


@dataclass(frozen=True)
class Boundary:
    """A sweep event.  ``owner`` is the sweep-local identity of the range."""

    index: int
    kind: BoundaryKind
    owner: int


@dataclass(frozen=True)
class Segment:
    """A slice of a text leaf with its winning highlight (if any)."""

    text: str
    highlight: HighlightRange | None = None


# ---------------------------------------------------------------------------
# Render output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StyleDescriptor:
    """Resolved text style for one run."""

    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: Color | None = None
    background_color: Color | None = None
    underline_color: Color | None = None
    underline_thickness: float | None = None
    font_family: str | None = None
    font_size: float | None = None
    line_height: float | None = None


class InteractionKind(StrEnum):
    HIGHLIGHT = "highlight"
    LINK = "link"


@dataclass(frozen=True)
class HighlightPayload:
    """What a presentation layer shows when a highlighted run is activated."""

    text: str
    note: str


@dataclass(frozen=True)
class Interaction:
    """Interaction handle attached to a run.

    ``payload`` is a :class:`HighlightPayload` for highlights and the raw
    ``href`` string for links.
    """

    kind: InteractionKind
    payload: HighlightPayload | str

    @classmethod
    def for_highlight(cls, text: str, note: str) -> Interaction:
        return cls(InteractionKind.HIGHLIGHT, HighlightPayload(text, note))

    @classmethod
    def for_link(cls, href: str) -> Interaction:
        return cls(InteractionKind.LINK, href)


class RunKind(StrEnum):
    TEXT = "text"
    RULE = "rule"


@dataclass(frozen=True)
class RenderRun:
    """The engine's output unit.

    Attributes:
        text: Contiguous text slice (empty for ``RunKind.RULE``).
        style: Resolved style.
        interaction: At most one interaction handle.
        kind: ``TEXT`` for text, ``RULE`` for the horizontal-rule placeholder.
    """

    text: str
    style: StyleDescriptor
    interaction: Interaction | None = None
    kind: RunKind = RunKind.TEXT


@dataclass(frozen=True)
class RenderedDocument:
    """Result of one render call.

    Attributes:
        text: Flattened document text; equals the concatenation of run texts.
        runs: Ordered render runs.
        highlights: The reanchored highlight set the runs were resolved from
            (user ranges first, then keyword ranges).
    """

    text: str
    runs: tuple[RenderRun, ...]
    highlights: tuple[HighlightRange, ...] = ()


# ---------------------------------------------------------------------------
# Highlight creation boundary
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HighlightRequest:
    """Data a selection toolbar needs to create a highlight.

    Attributes:
        selected_text: The selected slice of ``full_text``.
        start_offset: Selection start in flattened-text coordinates.
        end_offset: Selection end (exclusive).
        full_text: The flattened document text the offsets refer to.
        page_number: Optional page the selection came from.
        metadata: Opaque caller data passed through untouched.
    """

    selected_text: str
    start_offset: int
    end_offset: int
    full_text: str
    page_number: int | None = None
    metadata: Any = None

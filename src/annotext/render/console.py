"""Terminal presentation of render runs using Rich.

A reference presentation layer: runs become styled ``rich.text.Text``,
link runs become terminal hyperlinks, and rule placeholders become
``rich.rule.Rule`` separators.  Highlight notes are listed after the text
since a terminal has no tap-to-show-note gesture.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import RenderableType
from rich.rule import Rule
from rich.style import Style
from rich.text import Text

from annotext.models import (
    HighlightPayload,
    InteractionKind,
    RenderRun,
    RunKind,
    StyleDescriptor,
)


def rich_style(style: StyleDescriptor, href: str | None = None) -> Style:
    """Map a run style (and optional link target) to a Rich style."""
    return Style(
        bold=style.bold,
        italic=style.italic,
        underline=style.underline,
        color=style.color.rgb_hex if style.color is not None else None,
        bgcolor=(
            style.background_color.rgb_hex
            if style.background_color is not None
            else None
        ),
        link=href or None,
    )


def _href(run: RenderRun) -> str | None:
    if run.interaction is not None and run.interaction.kind is InteractionKind.LINK:
        return str(run.interaction.payload)
    return None


def runs_to_rich_text(runs: Iterable[RenderRun]) -> Text:
    """Concatenate text runs into one Rich ``Text``; rule runs are skipped."""
    text = Text()
    for run in runs:
        if run.kind is RunKind.TEXT and run.text:
            text.append(run.text, style=rich_style(run.style, _href(run)))
    return text


def runs_to_renderables(runs: Iterable[RenderRun]) -> list[RenderableType]:
    """Split runs at rule placeholders into ``Text`` blocks and ``Rule``s."""
    renderables: list[RenderableType] = []
    pending: list[RenderRun] = []
    for run in runs:
        if run.kind is RunKind.RULE:
            if pending:
                renderables.append(runs_to_rich_text(pending))
                pending = []
            renderables.append(Rule(style="grey50"))
        else:
            pending.append(run)
    if pending:
        renderables.append(runs_to_rich_text(pending))
    return renderables


def collect_notes(runs: Iterable[RenderRun]) -> list[HighlightPayload]:
    """Noted highlight payloads in document order, adjacent repeats merged.

    A highlight split across several leaves yields several runs with the
    same note; consecutive ones are merged into one payload.
    """
    notes: list[HighlightPayload] = []
    extending = False
    for run in runs:
        interaction = run.interaction
        payload = interaction.payload if interaction is not None else None
        if (
            interaction is None
            or interaction.kind is not InteractionKind.HIGHLIGHT
            or not isinstance(payload, HighlightPayload)
            or not payload.note.strip()
        ):
            extending = False
            continue
        if extending and notes[-1].note == payload.note:
            notes[-1] = HighlightPayload(notes[-1].text + payload.text, payload.note)
        else:
            notes.append(payload)
        extending = True
    return notes

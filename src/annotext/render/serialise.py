"""JSON-friendly serialisation of render output."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from annotext.models import HighlightPayload, RenderRun, StyleDescriptor


def style_to_dict(style: StyleDescriptor) -> dict[str, Any]:
    return {
        "bold": style.bold,
        "italic": style.italic,
        "underline": style.underline,
        "color": style.color.hex if style.color else None,
        "background_color": (
            style.background_color.hex if style.background_color else None
        ),
        "underline_color": (
            style.underline_color.hex if style.underline_color else None
        ),
        "underline_thickness": style.underline_thickness,
        "font_family": style.font_family,
        "font_size": style.font_size,
        "line_height": style.line_height,
    }


def run_to_dict(run: RenderRun) -> dict[str, Any]:
    interaction: dict[str, Any] | None = None
    if run.interaction is not None:
        payload = run.interaction.payload
        if isinstance(payload, HighlightPayload):
            interaction = {
                "kind": str(run.interaction.kind),
                "text": payload.text,
                "note": payload.note,
            }
        else:
            interaction = {"kind": str(run.interaction.kind), "href": payload}
    return {
        "kind": str(run.kind),
        "text": run.text,
        "style": style_to_dict(run.style),
        "interaction": interaction,
    }


def runs_to_json(runs: Iterable[RenderRun], *, indent: int | None = 2) -> str:
    return json.dumps([run_to_dict(r) for r in runs], indent=indent, ensure_ascii=False)

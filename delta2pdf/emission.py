"""
Final pass handing finished elements to a rendering target.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol

from .config import DEFAULT_CONFIG
from .elements import ImageRef, TextRun


@dataclass(frozen=True, slots=True)
class TextSpan:
    text: str
    bold: bool
    italic: bool
    font_size: int


class RenderTarget(Protocol):
    def add_paragraph(self, spans: List[TextSpan]) -> None:
        ...

    def add_image(self, path: str, padding: float) -> None:
        ...


def split_lines(run: TextRun) -> List[List[TextSpan]]:
    """Split a run into paragraphs of spans at any embedded line breaks."""
    lines = [[]]
    for span in run.spans:
        first, *rest = span.text.split('\n')
        if first:
            lines[-1].append(TextSpan(first, span.bold, span.italic, run.font_size))
        for piece in rest:
            lines.append([TextSpan(piece, span.bold, span.italic, run.font_size)] if piece else [])
    return lines


def emit_elements(elements, target: RenderTarget, config=None) -> None:
    """Emit every element, in order, to ``target``.

    Must only be called on a finished (frozen) element sequence.
    """
    if config is None:
        config = DEFAULT_CONFIG

    for element in elements:
        if isinstance(element, TextRun):
            for spans in split_lines(element):
                target.add_paragraph(spans)
        elif isinstance(element, ImageRef):
            target.add_image(element.path, config.IMAGE_PADDING_MM)
        else:
            raise TypeError(f"Unknown element: {element!r}")

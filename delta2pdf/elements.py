"""
Layout-ready elements and the buffer they are built in.

The buffer is the only place elements are mutated after being appended:
heading and list attributes arrive on the newline *after* the line they
describe, so they are applied to the last element already in the buffer.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import List, Optional, Union

from .attributes import Heading, ListPrefix, Style

logger = logging.getLogger('delta2pdf')


@dataclass(slots=True)
class StyledSpan:
    """Contiguous text sharing the same inline flags."""

    text: str
    bold: bool = False
    italic: bool = False


@dataclass(slots=True)
class TextRun:
    """One line of text; spans keep inline bold/italic, the font size is per run."""

    spans: List[StyledSpan]
    font_size: int

    @classmethod
    def from_style(cls, text, style: Style) -> "TextRun":
        return cls(spans=[StyledSpan(text, style.bold, style.italic)], font_size=style.font_size)

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)

    @property
    def style(self) -> Style:
        first = self.spans[0] if self.spans else StyledSpan("")
        return Style(bold=first.bold, italic=first.italic, font_size=self.font_size)

    def append(self, text, style: Style) -> None:
        """Concatenate text onto the run, merging into the last span when flags match."""
        if not text:
            return
        last = self.spans[-1] if self.spans else None
        if last is not None and not last.text:
            # An empty span carries no text worth keeping its flags for
            last.text = text
            last.bold = style.bold
            last.italic = style.italic
        elif last is not None and (last.bold, last.italic) == (style.bold, style.italic):
            last.text += text
        else:
            self.spans.append(StyledSpan(text, style.bold, style.italic))

    def prepend(self, text) -> None:
        if self.spans:
            self.spans[0].text = text + self.spans[0].text
        else:
            self.spans.append(StyledSpan(text))


@dataclass(slots=True)
class ImageRef:
    path: str


Element = Union[TextRun, ImageRef]


@dataclass(slots=True)
class ElementBuffer:
    """Growable, exclusively owned element sequence."""

    items: List[Element] = field(default_factory=list)

    def __len__(self):
        return len(self.items)

    def push(self, element: Element) -> int:
        self.items.append(element)
        return len(self.items) - 1

    def last_index(self) -> Optional[int]:
        return len(self.items) - 1 if self.items else None

    def at(self, offset_from_end) -> Optional[Element]:
        """Return the element ``offset_from_end`` places before the last one."""
        index = len(self.items) - 1 - offset_from_end
        if index < 0:
            return None
        return self.items[index]

    def last_text_run(self) -> Optional[TextRun]:
        index = self.last_index()
        if index is None or not isinstance(self.items[index], TextRun):
            return None
        return self.items[index]

    def apply(self, directive) -> bool:
        """Apply a Heading or ListPrefix directive to the last emitted element.

        Returns:
            True if an element was mutated, False for the no-op cases (empty
            buffer or last element is an image).
        """
        index = self.last_index()
        if index is None or not isinstance(self.items[index], TextRun):
            logger.debug("No text run to receive %s", directive)
            return False

        run = self.items[index]
        if isinstance(directive, Heading):
            run.font_size = directive.size
        elif isinstance(directive, ListPrefix):
            run.prepend(directive.text)
        else:
            raise TypeError(f"Not a retroactive directive: {directive!r}")
        return True

    def freeze(self):
        return tuple(self.items)


def elements_to_dicts(elements):
    """Serialize elements for the JSON debug output."""
    result = []
    for element in elements:
        if isinstance(element, TextRun):
            result.append({'type': 'text', 'text': element.text, **asdict(element)})
        else:
            result.append({'type': 'image', **asdict(element)})
    return result

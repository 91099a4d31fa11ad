"""
Attribute interpretation: turns an operation's attributes into a style for
the operation itself plus directives aimed at the previously emitted element.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple, Union

from .config import DEFAULT_CONFIG
from .delta_model import Bold, Header, Italic, ListAttr, ListKind

logger = logging.getLogger('delta2pdf')


@dataclass(frozen=True, slots=True)
class Style:
    bold: bool = False
    italic: bool = False
    font_size: int = DEFAULT_CONFIG.DEFAULT_FONT_SIZE


@dataclass(frozen=True, slots=True)
class Heading:
    """Set the font size of the last emitted text run."""

    size: int


@dataclass(frozen=True, slots=True)
class ListItem:
    """The last emitted line is a list item; numbering turns it into a ListPrefix."""

    kind: ListKind


@dataclass(frozen=True, slots=True)
class ListPrefix:
    """Insert text at the start of the last emitted text run."""

    text: str


Directive = Union[Heading, ListItem, ListPrefix]


def interpret_attributes(attributes, config=None) -> Tuple[Style, List[Directive]]:
    """Fold attributes, in source order, into a style and a list of directives.

    Every operation starts from a fresh default style, so a false flag never
    has anything to unset.

    Args:
        attributes: Sequence of Attribute values from a parsed Operation
        config: Optional ConversionConfig instance

    Returns:
        (style, directives)
    """
    if config is None:
        config = DEFAULT_CONFIG

    bold = False
    italic = False
    directives = []

    for attribute in attributes:
        if isinstance(attribute, Bold):
            bold = bold or attribute.value
        elif isinstance(attribute, Italic):
            italic = italic or attribute.value
        elif isinstance(attribute, Header):
            size = config.HEADER_FONT_SIZES.get(attribute.level)
            if size is None:
                logger.debug("Ignoring unsupported header level %d", attribute.level)
            else:
                directives.append(Heading(size))
        elif isinstance(attribute, ListAttr):
            directives.append(ListItem(attribute.kind))

    style = Style(bold=bold, italic=italic, font_size=config.DEFAULT_FONT_SIZE)
    return style, directives

"""
List numbering for ``list`` attributes.

Bullets always get the same marker. Ordered items keep a running counter that
restarts at 1 whenever the line before the item does not carry the previous
ordinal, i.e. whenever anything other than the preceding ordered item sits
between them.
"""
from __future__ import annotations

import logging

from .attributes import ListPrefix
from .config import DEFAULT_CONFIG
from .delta_model import ListKind
from .elements import TextRun

logger = logging.getLogger('delta2pdf')


class ListNumbering:
    """Ordinal state for ordered lists within a single conversion."""

    def __init__(self, config=None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.next_ordinal = 1

    def prefix_for(self, kind, buffer) -> ListPrefix:
        """Return the prefix directive for a list item ending at the last element.

        Args:
            kind: ListKind of the item
            buffer: ElementBuffer whose last element is the item's line

        Returns:
            ListPrefix to apply to the last element
        """
        if kind is ListKind.BULLET:
            return ListPrefix(self.config.BULLET_PREFIX)

        ordinal = self.next_ordinal
        previous_marker = self.config.ORDERED_PREFIX_FORMAT.format(max(ordinal - 1, 1))
        preceding = buffer.at(1)
        if not isinstance(preceding, TextRun) or previous_marker not in preceding.text:
            if ordinal != 1:
                logger.debug("Ordered list broken before item %d, restarting at 1", ordinal)
            ordinal = 1

        self.next_ordinal = ordinal + 1
        return ListPrefix(self.config.ORDERED_PREFIX_FORMAT.format(ordinal))

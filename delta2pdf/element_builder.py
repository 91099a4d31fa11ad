"""
Walk a parsed delta and build the ordered element sequence.
"""
from __future__ import annotations

import logging

from .attributes import ListItem, interpret_attributes
from .config import DEFAULT_CONFIG
from .delta_model import ImageContent, TextContent
from .elements import ElementBuffer, ImageRef, TextRun
from .images import ImageResolver
from .numbering import ListNumbering

logger = logging.getLogger('delta2pdf')


class ElementBuilder:
    """Single-use builder turning inserts into TextRun/ImageRef elements.

    Text inserts are split on newlines: the first segment continues the open
    run (the current line), every further segment starts a new line. Images
    close the open run. Heading and list attributes are applied to the last
    element before the insert's own text is added.
    """

    def __init__(self, image_resolver=None, config=None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.image_resolver = image_resolver if image_resolver is not None else ImageResolver()
        self.numbering = ListNumbering(self.config)
        self.buffer = ElementBuffer()
        self._run_open = False

    def build(self, delta):
        """Build and freeze the elements for ``delta``.

        Raises:
            ImageUrlError: If an image URL has no file name.
            ImagePathNotSet: If the delta has images but no image directory.
        """
        for op in delta.inserts():
            content = op.change.content
            if isinstance(content, TextContent):
                self._handle_text(content.text, op.attributes)
            elif isinstance(content, ImageContent):
                self._handle_image(content.url)
            else:
                raise TypeError(f"Unknown content type: {content!r}")

        last = self.buffer.at(0)
        if isinstance(last, TextRun) and not last.text:
            # Deltas end with a newline; it does not open a visible line
            self.buffer.items.pop()

        elements = self.buffer.freeze()
        logger.debug("Built %d elements from %d operations", len(elements), len(delta.ops))
        return elements

    def _handle_text(self, text, attributes):
        style, directives = interpret_attributes(attributes, self.config)

        for directive in directives:
            if isinstance(directive, ListItem):
                directive = self.numbering.prefix_for(directive.kind, self.buffer)
            self.buffer.apply(directive)

        first, *rest = text.split('\n')
        if self._run_open:
            self.buffer.last_text_run().append(first, style)
        elif first or not isinstance(self.buffer.at(0), ImageRef):
            self.buffer.push(TextRun.from_style(first, style))
            self._run_open = True
        # else: the newline ending an image's own line

        for segment in rest:
            self.buffer.push(TextRun.from_style(segment, style))
            self._run_open = True

    def _handle_image(self, url):
        path = self.image_resolver.resolve(url)
        last = self.buffer.last_text_run()
        if self._run_open and last is not None and not last.text:
            # The image takes the empty line it was inserted on
            self.buffer.items.pop()
        self.buffer.push(ImageRef(path))
        self._run_open = False

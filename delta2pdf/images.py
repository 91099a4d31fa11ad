"""
Resolve image URLs from a delta to files in a local image directory.

The last path segment of the URL is used as the file name, so
``https://example.com/uploads/pic.png`` resolves to ``<image_dir>/pic.png``.
"""
from __future__ import annotations

import logging
import os
import posixpath
from urllib.parse import urlsplit

from .exceptions import ImagePathNotSet, ImageUrlError

logger = logging.getLogger('delta2pdf')


class ImageResolver:
    def __init__(self, base_dir=None):
        self.base_dir = None
        if base_dir is not None:
            self.set_base_dir(base_dir)

    def set_base_dir(self, path):
        """Set the directory images are looked up in."""
        self.base_dir = os.fspath(path)

    @staticmethod
    def file_name(url):
        """Extract the file name (last path segment) from an absolute URL.

        Raises:
            ImageUrlError: If the URL has no usable path segment.
        """
        parts = urlsplit(url)
        path = parts.path
        # data:, mailto: and friends have no hierarchical path
        if not path.startswith('/'):
            raise ImageUrlError(url)
        if path.endswith('/'):
            raise ImageUrlError(url, "The image url has no file name")

        name = posixpath.normpath(path).split('/')[-1]
        if name in ('', '.', '..'):
            raise ImageUrlError(url, "The image url has no file name")
        return name

    def resolve(self, url):
        """Return the local path for an image URL.

        Raises:
            ImageUrlError: If the URL has no path segments.
            ImagePathNotSet: If no base directory was configured.
        """
        name = self.file_name(url)
        if self.base_dir is None:
            raise ImagePathNotSet()
        resolved = os.path.join(self.base_dir, name)
        logger.debug("Resolved image %s -> %s", url, resolved)
        return resolved

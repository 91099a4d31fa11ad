"""
Custom exception classes for delta2pdf converter.
"""


class DeltaPdfError(Exception):
    """Base exception for all delta2pdf errors."""
    pass


class ParseError(DeltaPdfError):
    """The delta is not well-formed or carries an unsupported operation/attribute."""
    pass


class ImageUrlError(DeltaPdfError):
    """An image URL has no path segment to use as a file name."""

    def __init__(self, url, reason="The image url could not be parsed"):
        super().__init__(f"{reason}: {url}")
        self.url = url


class ImagePathNotSet(DeltaPdfError):
    """The delta contains an image but no image directory was configured."""

    def __init__(self, message="Parsed Delta had an image but the image directory is not set."):
        super().__init__(message)


class ImageError(DeltaPdfError):
    """Error related to reading an image file while rendering."""
    pass


class RenderError(DeltaPdfError):
    """The rendering engine failed to produce the document."""
    pass


class SecurityError(DeltaPdfError):
    """Error related to security validation (size limits, etc.)."""
    pass

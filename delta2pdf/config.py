"""
Configuration constants for delta2pdf converter.

This module centralizes all magic numbers and default values used throughout
the conversion process. Values can be overridden by assigning attributes on a
ConversionConfig instance and passing it to the converter.
"""


class ConversionConfig:
    """Default configuration values for Delta conversion."""

    # === Text ===
    DEFAULT_FONT_SIZE = 12  # Font size (pt) of runs without a heading

    # Header level -> font size (pt). Levels not listed are ignored.
    HEADER_FONT_SIZES = {
        1: 18,
        2: 16,
    }

    # === Lists ===
    BULLET_PREFIX = '• '
    ORDERED_PREFIX_FORMAT = '{}. '  # Formatted with the item ordinal

    # === Images ===
    IMAGE_PADDING_MM = 1  # Padding around every image block
    IMAGE_DPI = 96  # Pixel density assumed when sizing images from pixels
    HTML_MAX_IMAGE_WIDTH_PX = 600

    # === Page Layout (PDF) ===
    PAGE_WIDTH_MM = 210  # A4
    PAGE_HEIGHT_MM = 297
    PAGE_MARGIN_MM = 20
    FONT_NAME = 'Helvetica'
    LINE_SPACING = 1.2  # Leading as a multiple of the font size

    # === Security Limits ===
    MAX_INPUT_FILE_SIZE = 50 * 1024 * 1024  # 50 MB max input file


# Global default config instance
DEFAULT_CONFIG = ConversionConfig()

"""
High-level convenience API for delta2pdf.

Provides simple functions to convert Delta JSON strings to PDF without
needing to understand the internal pipeline.
"""

from .DeltaToPdf import DeltaToPdf


def convert_string(delta_json, output_path, image_dir=None, config=None):
    """Convert a Delta JSON string to a PDF file.

    Args:
        delta_json: Delta as JSON text (``{"ops": [...]}``)
        output_path: Output .pdf file path
        image_dir: Directory holding the images referenced by the delta.
                   Required only if the delta contains images.
        config: Optional ConversionConfig instance. Uses DEFAULT_CONFIG if None.

    Raises:
        ParseError: If the delta is invalid.
        ImagePathNotSet: If the delta has images but image_dir is None.
    """
    DeltaToPdf.convert_to_pdf(delta_json, output_path, image_dir=image_dir, config=config)


def convert_to_bytes(delta_json, image_dir=None, config=None):
    """Convert a Delta JSON string and return the PDF as bytes."""
    return DeltaToPdf(delta_json, image_dir=image_dir, config=config).to_pdf_bytes()

"""
delta2pdf - Convert Quill Deltas to PDF documents

This package parses a Quill Delta (a list of insert/delete/retain operations)
and renders its inserts, with bold, italic, header, list and image support,
into a PDF using ReportLab.
"""

from .DeltaToPdf import DeltaToPdf, PdfRenderer
from .DeltaToHtml import DeltaToHtml
from .delta_model import Delta, parse_delta
from .element_builder import ElementBuilder
from .elements import TextRun, ImageRef
from .emission import emit_elements
from .config import ConversionConfig, DEFAULT_CONFIG
from .exceptions import (
    DeltaPdfError,
    ParseError,
    ImageUrlError,
    ImagePathNotSet,
    ImageError,
    RenderError,
    SecurityError,
)
from .converter_api import convert_string, convert_to_bytes

__version__ = "0.1.0"
__all__ = [
    "DeltaToPdf",
    "PdfRenderer",
    "DeltaToHtml",
    "Delta",
    "parse_delta",
    "ElementBuilder",
    "TextRun",
    "ImageRef",
    "emit_elements",
    "ConversionConfig",
    "DEFAULT_CONFIG",
    "DeltaPdfError",
    "ParseError",
    "ImageUrlError",
    "ImagePathNotSet",
    "ImageError",
    "RenderError",
    "SecurityError",
    "convert_string",
    "convert_to_bytes",
]

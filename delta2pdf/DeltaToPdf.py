import io
import logging
import xml.sax.saxutils as saxutils

from PIL import Image
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import Image as PdfImage
from reportlab.platypus import Indenter, Paragraph, SimpleDocTemplate, Spacer

from .config import DEFAULT_CONFIG
from .delta_model import Delta, parse_delta
from .element_builder import ElementBuilder
from .emission import emit_elements
from .exceptions import ImageError, RenderError, SecurityError
from .images import ImageResolver

logger = logging.getLogger('delta2pdf')

# SimpleDocTemplate frames pad their content by 6pt on every side
FRAME_PADDING = 6


class PdfRenderer:
    """Render target collecting ReportLab flowables for a single document."""

    def __init__(self, config=None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.flowables = []
        self.page_size = (self.config.PAGE_WIDTH_MM * mm, self.config.PAGE_HEIGHT_MM * mm)
        margin = self.config.PAGE_MARGIN_MM * mm
        self.frame_width = self.page_size[0] - 2 * margin - 2 * FRAME_PADDING
        self.frame_height = self.page_size[1] - 2 * margin - 2 * FRAME_PADDING
        self._styles = {}  # font size -> ParagraphStyle

    def _paragraph_style(self, font_size):
        if font_size not in self._styles:
            self._styles[font_size] = ParagraphStyle(
                name=f'Delta{font_size}',
                fontName=self.config.FONT_NAME,
                fontSize=font_size,
                leading=font_size * self.config.LINE_SPACING,
            )
        return self._styles[font_size]

    @staticmethod
    def _span_markup(span):
        markup = saxutils.escape(span.text)
        if span.bold:
            markup = f'<b>{markup}</b>'
        if span.italic:
            markup = f'<i>{markup}</i>'
        return f'<font size="{span.font_size}">{markup}</font>'

    def add_paragraph(self, spans):
        if not spans:
            # Blank line: keep the vertical space an empty paragraph would take
            leading = self.config.DEFAULT_FONT_SIZE * self.config.LINE_SPACING
            self.flowables.append(Spacer(1, leading))
            return

        font_size = max(span.font_size for span in spans)
        markup = "".join(self._span_markup(span) for span in spans)
        self.flowables.append(Paragraph(markup, self._paragraph_style(font_size)))

    def _image_size(self, path, padding):
        """Return (width, height) in points, scaled down to fit the frame."""
        try:
            with Image.open(path) as im:
                px_width, px_height = im.size
        except OSError as e:
            raise ImageError(f"Cannot read image {path}: {e}") from e

        points_per_px = 72.0 / self.config.IMAGE_DPI
        width = px_width * points_per_px
        height = px_height * points_per_px

        max_width = self.frame_width - 2 * padding
        max_height = self.frame_height - 2 * padding
        ratio = min(1.0, max_width / width if width else 1.0, max_height / height if height else 1.0)
        return width * ratio, height * ratio

    def add_image(self, path, padding):
        pad = padding * mm
        width, height = self._image_size(path, pad)

        image = PdfImage(path, width=width, height=height)
        image.hAlign = 'LEFT'
        self.flowables.extend([
            Spacer(1, pad),
            Indenter(left=pad, right=pad),
            image,
            Indenter(left=-pad, right=-pad),
            Spacer(1, pad),
        ])

    def to_bytes(self):
        """Lay out the collected flowables and return the PDF bytes.

        Raises:
            RenderError: If ReportLab fails to build the document.
        """
        margin = self.config.PAGE_MARGIN_MM * mm
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self.page_size,
            leftMargin=margin,
            rightMargin=margin,
            topMargin=margin,
            bottomMargin=margin,
        )
        try:
            doc.build(list(self.flowables) or [Spacer(1, 0)])
        except Exception as e:
            logger.error("PDF creation failed: %s", e, exc_info=True)
            raise RenderError(f"PDF creation failed: {e}") from e
        return buffer.getvalue()


class DeltaToPdf:
    """Convert a Quill Delta into a PDF document.

    Only inserts are rendered; deletes and retains are parsed and ignored.
    Supported attributes: bold, italic, header (levels 1 and 2), list.
    """

    def __init__(self, delta, image_dir=None, config=None):
        """
        Raises:
            SecurityError: If JSON input exceeds config.MAX_INPUT_FILE_SIZE
            ParseError: If the delta is invalid
        """
        self.config = config if config is not None else DEFAULT_CONFIG
        if isinstance(delta, (str, bytes)) and len(delta) > self.config.MAX_INPUT_FILE_SIZE:
            raise SecurityError(
                f"Delta too large: {len(delta)} bytes "
                f"(max {self.config.MAX_INPUT_FILE_SIZE} bytes)"
            )
        self.delta = delta if isinstance(delta, Delta) else parse_delta(delta)
        self.image_resolver = ImageResolver(image_dir)

    def set_image_dir(self, path):
        """Set the location of where images are located.

        The last segment of the image url is used as the image name: for
        ``https://example.com/image.png`` the converter looks for
        ``image.png`` in this directory.
        """
        self.image_resolver.set_base_dir(path)

    def build_elements(self):
        return ElementBuilder(self.image_resolver, self.config).build(self.delta)

    def write_to(self, target):
        """Build every element, then emit them to a render target.

        Nothing reaches the target if building fails.
        """
        elements = self.build_elements()
        emit_elements(elements, target, self.config)
        return elements

    def to_pdf_bytes(self):
        renderer = PdfRenderer(self.config)
        self.write_to(renderer)
        return renderer.to_bytes()

    @staticmethod
    def convert_to_pdf(delta, output_path, image_dir=None, config=None):
        """
        Convert a Delta to a PDF file.

        Args:
            delta: Delta JSON string, decoded dict/list, or parsed Delta
            output_path: Output PDF file path
            image_dir: Directory holding the images referenced by the delta
            config: Optional ConversionConfig instance

        Raises:
            ParseError: If the delta is invalid.
            ImageUrlError, ImagePathNotSet, ImageError: For unresolvable images.
            RenderError: If the PDF could not be built.
        """
        converter = DeltaToPdf(delta, image_dir=image_dir, config=config)
        pdf_bytes = converter.to_pdf_bytes()

        # Written only once the whole document has been built
        with open(output_path, 'wb') as f:
            f.write(pdf_bytes)

        logger.info("Successfully created %s", output_path)

import html
import logging
import os

from PIL import Image

from .config import DEFAULT_CONFIG
from .DeltaToPdf import DeltaToPdf
from .exceptions import ImageError

logger = logging.getLogger('delta2pdf')


class DeltaToHtml:
    """Render target producing a standalone HTML page (debug output)."""

    @staticmethod
    def convert_to_html(delta, output_path, image_dir=None, config=None):
        """
        Convert a Delta to HTML.

        Args:
            delta: Delta JSON string, decoded dict/list, or parsed Delta
            output_path: Output HTML file path
            image_dir: Directory holding the images referenced by the delta
            config: Optional ConversionConfig instance
        """
        converter = DeltaToHtml(config)
        DeltaToPdf(delta, image_dir=image_dir, config=config).write_to(converter)
        final_html = converter.convert()

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(final_html)

        logger.info("Successfully created %s", output_path)

    def __init__(self, config=None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.output = []

    def add_paragraph(self, spans):
        parts = []
        for span in spans:
            text = html.escape(span.text)
            if span.bold:
                text = f"<strong>{text}</strong>"
            if span.italic:
                text = f"<em>{text}</em>"
            parts.append(f'<span style="font-size: {span.font_size}pt">{text}</span>')
        body = "".join(parts) or "<br />"
        self.output.append(f"<p>{body}</p>")

    def add_image(self, path, padding):
        width_attr_val = ""
        height_attr_val = ""

        # Pillow Auto-Sizing
        if os.path.exists(path):
            try:
                with Image.open(path) as im:
                    w_int, h_int = im.size
            except OSError as e:
                raise ImageError(f"Cannot read image {path}: {e}") from e

            # Max Width Logic
            max_width = self.config.HTML_MAX_IMAGE_WIDTH_PX
            if w_int > max_width:
                h_int = int(h_int * max_width / w_int)
                w_int = max_width
            width_attr_val = f' width="{w_int}"'
            height_attr_val = f' height="{h_int}"'
        else:
            logger.warning("Image not found: %s", path)

        src = html.escape(path, quote=True)
        self.output.append(
            f'<div style="padding: {padding}mm"><img src="{src}"{width_attr_val}{height_attr_val} /></div>'
        )

    def convert(self):
        body_content = "\n".join(self.output)
        return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>Document</title>
<style>
  body {{ font-family: sans-serif; line-height: {self.config.LINE_SPACING}; max-width: 800px; margin: 0 auto; padding: 2rem; }}
  p {{ margin: 0; }}
  img {{ max-width: 100%; height: auto; }}
</style>
</head>
<body>
{body_content}
</body>
</html>"""

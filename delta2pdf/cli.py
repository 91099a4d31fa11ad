"""
delta2pdf - Quill Delta to PDF Converter

Command-line entry point.
"""

import argparse
import sys
import json
import os
import logging

from . import __version__
from .delta_model import parse_delta
from .DeltaToPdf import DeltaToPdf
from .DeltaToHtml import DeltaToHtml
from .elements import elements_to_dicts
from .exceptions import DeltaPdfError
from .config import DEFAULT_CONFIG

logger = logging.getLogger('delta2pdf')


def setup_logging(verbose=False, quiet=False):
    """Configure logging based on CLI flags.

    Args:
        verbose: If True, show DEBUG level messages
        quiet: If True, suppress all non-error output
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger = logging.getLogger('delta2pdf')
    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="delta2pdf",
        description="Convert a Quill Delta (JSON) to PDF.",
        epilog="Examples:\n"
               "  delta2pdf delta.json -o output.pdf\n"
               "  delta2pdf delta.json -o output.pdf --image-dir ./images\n"
               "  delta2pdf delta.json -o debug.json\n"
               "  delta2pdf delta.json -o output.pdf --verbose",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("input_file", help="Input Delta file (.json)")
    parser.add_argument("-o", "--output", required=True,
                        help="Output file (.pdf, .json for debug)")
    parser.add_argument("-i", "--image-dir", required=False, default=None,
                        help="Directory holding the images referenced by the delta")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", default=False,
                        help="Show detailed debug output")
    parser.add_argument("-q", "--quiet", action="store_true", default=False,
                        help="Suppress all non-error output")

    args = parser.parse_args(argv)

    # Set up logging
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    input_file = args.input_file

    if not os.path.exists(input_file):
        logger.error("Input file not found: %s", input_file)
        sys.exit(1)

    # Validate input file size
    input_size = os.path.getsize(input_file)
    if input_size > DEFAULT_CONFIG.MAX_INPUT_FILE_SIZE:
        logger.error(
            "Input file too large: %d bytes (max %d bytes)",
            input_size, DEFAULT_CONFIG.MAX_INPUT_FILE_SIZE
        )
        sys.exit(1)

    output_ext = os.path.splitext(args.output)[1].lower()

    try:
        with open(input_file, 'r', encoding='utf-8') as f:
            delta = parse_delta(f.read())

        if output_ext == ".pdf":
            DeltaToPdf.convert_to_pdf(delta, args.output, image_dir=args.image_dir)

        elif output_ext == ".json":
            # Debug: output the built elements
            elements = DeltaToPdf(delta, image_dir=args.image_dir).build_elements()
            with open(args.output, 'w', encoding='utf-8') as f:
                json.dump(elements_to_dicts(elements), f, indent=2, ensure_ascii=False)
            logger.info("Successfully wrote elements to %s", args.output)

        elif output_ext in [".htm", ".html"]:
            # Hidden feature: HTML output for debugging
            DeltaToHtml.convert_to_html(delta, args.output, image_dir=args.image_dir)

        else:
            logger.error("Unsupported output format: %s", output_ext)
            logger.error("Supported formats: .pdf, .json")
            sys.exit(1)

    except DeltaPdfError as e:
        logger.error("%s", e)
        sys.exit(1)
    except Exception as e:
        logger.error("Unexpected error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()

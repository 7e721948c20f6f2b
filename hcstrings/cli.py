"""
Command line entry point.

    replacehcstrings <html_file_path> <json_file_path> [language]

Converts an HTML file into a Handlebars template (.hbs) and writes the
extracted strings to <basename>.<language>.json.
"""
import argparse
import logging
import sys
from typing import List, Optional

from hcstrings.core import config
from hcstrings.core.constants import ABORT, SKIP
from hcstrings.core.errors import ConversionError
from hcstrings.rewriter.line_rewriter import LineRewriter
from hcstrings.services.converter import process_files
from hcstrings.services.output_writer import OutputWriter
from hcstrings.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="replacehcstrings",
        description=(
            "Replace hard-coded strings in an HTML file with Handlebars "
            "{{t 'key'}} lookups and extract them to <basename>.<language>.json."
        ),
    )
    parser.add_argument("html_file_path", help="HTML document to convert.")
    parser.add_argument("json_file_path", help="Findings JSON produced by the HTML linter.")
    parser.add_argument(
        "language",
        nargs="?",
        default=config.DEFAULT_LANG,
        help=f"Language code used in the mapping file name (default: {config.DEFAULT_LANG}).",
    )
    parser.add_argument(
        "--output-dir",
        default=config.OUTPUT_DIR or None,
        help="Directory for the mapping file (default: current directory).",
    )
    parser.add_argument(
        "--skip-invalid-patterns",
        action="store_true",
        default=config.ON_INVALID_PATTERN == SKIP,
        help="Skip findings whose evidence is not a valid regex instead of aborting.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=config.FAIL_ON_NO_MATCH,
        help="Fail when a finding's evidence is not found on its line.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every evidence pattern.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, config.LOG_LEVEL, logging.INFO)
    setup_logging(level=level, log_dir=config.LOG_DIR or None)

    rewriter = LineRewriter(
        on_invalid_pattern=SKIP if args.skip_invalid_patterns else ABORT,
        fail_on_no_match=args.strict,
    )
    writer = OutputWriter(extension=config.TEMPLATE_EXTENSION, output_dir=args.output_dir)

    try:
        result = process_files(
            args.html_file_path,
            args.json_file_path,
            lang=args.language,
            rewriter=rewriter,
            writer=writer,
        )
    except (ConversionError, OSError) as e:
        logger.error("Error: %s", e)
        return 1

    for outcome in result.unmatched:
        logger.warning(
            "Line %d not rewritten (%s): %s",
            outcome.finding.line, outcome.status, outcome.message,
        )
    print("File processed and saved successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

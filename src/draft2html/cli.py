"""Command-line interface for draft2html.

Usage::

    draft2html content.json                  # writes content.html
    draft2html content.json -o page.html     # explicit output path
    draft2html content.json -e latin-1       # non-UTF-8 input
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from draft2html import __version__
from draft2html.converter import Converter
from draft2html.errors import DraftConversionError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="draft2html",
        description="Convert Draft.js raw content (JSON) to HTML.",
    )
    parser.add_argument(
        "input",
        help="Path to the raw content JSON file to convert.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output HTML file path. Defaults to <input>.html.",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="File encoding (default: %(default)s).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: file not found: {input_path}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = input_path.with_suffix(".html")

    if args.verbose:
        print(f"Input:  {input_path}")
        print(f"Output: {output_path}")

    try:
        Converter().convert_file(input_path, output_path, encoding=args.encoding)
    except json.JSONDecodeError as exc:
        print(f"Error: invalid JSON in {input_path}: {exc}", file=sys.stderr)
        return 1
    except UnicodeError as exc:
        print(f"Error: encoding {args.encoding!r} failed: {exc}", file=sys.stderr)
        return 1
    except (DraftConversionError, LookupError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Done. {output_path.stat().st_size} bytes written.")
    else:
        print(f"Converted: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

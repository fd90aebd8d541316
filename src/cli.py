"""Command-line interface for xmp-tagmap.

Provides the ``xmp-tagmap`` entry point, which extracts XMP from one or
more JPEG files (or, with ``--segment``, from dumped segment files) and
prints the typed tags, the raw property walk, and any errors recorded
along the way.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from metadata_handler import (
    SUPPORTED_FORMATS,
    XmpDirectory,
    describe,
    extract_xmp,
    extract_xmp_from_file,
    get_tag_name,
    is_supported_format,
)
from utils import read_segment_file

logger = logging.getLogger(__name__)


def _heading(text: str) -> str:
    """Bold section heading unless ``NO_COLOR`` is set."""
    if os.environ.get("NO_COLOR"):
        return text
    return f"\033[1m{text}\033[0m"


# ── Output formatting ───────────────────────────────────────────────

def _format_value(value: str) -> str:
    """Return a single-line representation of a raw property value."""
    value = value.replace("\n", " ")
    if len(value) > 100:
        return f"{value[:100]}..."
    return value


def _print_directory(path: Path, directory: XmpDirectory, show_properties: bool) -> None:
    print(_heading(f"=== {path} ==="))

    if directory.is_empty():
        print("No XMP data found.")
        return

    for tag_id, value in directory.tags.items():
        print(f"[{directory.name}] {get_tag_name(tag_id)} - {describe(tag_id, value)}")

    if show_properties and directory.raw_properties:
        print()
        print("Properties:")
        for prop_path, value in directory.raw_properties:
            print(f"  {prop_path} = {_format_value(value)}")

    for error in directory.errors:
        print(f"Error: {error}", file=sys.stderr)


# ── Argument parser construction ────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="xmp-tagmap",
        description="Extract typed camera tags and raw properties from XMP metadata.",
        epilog="Example: xmp-tagmap photo.jpg --no-properties",
    )

    parser.add_argument(
        "files", type=Path, nargs="+",
        help=f"Image files (formats: {', '.join(sorted(SUPPORTED_FORMATS))}) or segment dumps",
    )
    parser.add_argument(
        "--segment", action="store_true",
        help="Treat each file as a dumped XMP segment (preamble + packet) rather than an image",
    )
    parser.add_argument(
        "--no-properties", action="store_true",
        help="Only print typed tags, not the raw property walk",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    return parser


# ── Command handlers ────────────────────────────────────────────────

def _handle_file(path: Path, args: argparse.Namespace) -> int:
    """Extract and print one file; return its exit status."""
    if not path.exists():
        print(f"Error: File '{path}' does not exist.", file=sys.stderr)
        return 1

    try:
        if args.segment:
            directory = extract_xmp(read_segment_file(path))
        else:
            if not is_supported_format(path):
                print(
                    f"Warning: File '{path}' may not be a supported format "
                    f"({', '.join(sorted(SUPPORTED_FORMATS))}).",
                    file=sys.stderr,
                )
            directory = extract_xmp_from_file(path)
    except Exception as e:
        logger.debug("Extraction failed for %s", path, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_directory(path, directory, show_properties=not args.no_properties)
    return 1 if directory.has_errors() else 0


# ── Entry point ─────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    """Parse arguments and extract every requested file."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    status = 0
    for path in args.files:
        status = max(status, _handle_file(path, args))
    return status


if __name__ == "__main__":
    sys.exit(main())

"""Low-level utility helpers used by the command-line front end.

Kept deliberately small so that higher-level modules can import without
circular dependencies.
"""

from __future__ import annotations

from pathlib import Path

from constants import SUPPORTED_FORMATS


def is_supported_format(file_path: Path) -> bool:
    """
    Check if the file format is supported.

    Args:
        file_path: Path to the image file.

    Returns:
        True if the format is supported, False otherwise.
    """
    return file_path.suffix.lower() in SUPPORTED_FORMATS


def read_segment_file(file_path: Path) -> bytes:
    """
    Read a segment dump (preamble plus packet) from disk.

    Args:
        file_path: Path to the dumped segment.

    Returns:
        The file contents.
    """
    return file_path.read_bytes()

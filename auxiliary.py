#!/usr/bin/env python3
"""
Auxiliary formatting functions for Kenosis

Pure helpers for rendering byte sizes, counts and paths.
"""

import pathlib
import sys
from typing import Union

SIZE_SUFFIXES = ("B", "K", "M", "G", "T", "P", "E", "Z", "Y")

_VERBATIM_PREFIX = "\\\\?\\"


def humanize(size_bytes: int) -> str:
    """Format byte size with binary scaling

    Args:
        size_bytes: Size in bytes to format

    Returns:
        Formatted string like "0.00 B", "1.50 K" or "3.25 G"
    """
    order = 0
    size = float(size_bytes)
    while size >= 1024.0 and order + 1 < len(SIZE_SUFFIXES):
        order += 1
        size /= 1024.0

    return f"{size:.2f} {SIZE_SUFFIXES[order]}"


def commaize(count: int) -> str:
    """Format a count with comma thousands separators, e.g. "1,234,567" """
    if count < 1000:
        return str(count)
    return f"{commaize(count // 1000)},{count % 1000:03d}"


def fix_display_path(path: Union[str, pathlib.Path]) -> str:
    """Render a path for display, dropping the Windows verbatim prefix"""
    text = str(path)
    if sys.platform == "win32" and text.startswith(_VERBATIM_PREFIX):
        return text[len(_VERBATIM_PREFIX) :]
    return text

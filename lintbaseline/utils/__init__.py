"""
Utility functions for baseline handling.
"""

import os
from typing import Optional


def normalize_path(path: str) -> str:
    """Normalize a file path."""
    return os.path.normpath(os.path.abspath(path))


def relative_path(path: str, base: Optional[str] = None) -> str:
    """
    Express a path the way it is recorded in a baseline.

    Paths under ``base`` (default: the working directory) become relative
    to it; others stay absolute. Separators are always forward slashes.
    """
    base_dir = normalize_path(base or os.getcwd())
    full_path = normalize_path(path)

    try:
        common = os.path.commonpath([base_dir, full_path])
    except ValueError:
        # Different drives on Windows
        common = ""

    if common == base_dir:
        full_path = os.path.relpath(full_path, base_dir)

    return full_path.replace(os.sep, "/")

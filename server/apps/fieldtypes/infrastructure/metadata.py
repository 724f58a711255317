"""Metadata lookups for files referenced by binary field values."""

import os
from pathlib import Path


def file_exists(path: str | os.PathLike[str] | None) -> bool:
    """Check whether path references an existing regular file.

    Args:
        path: Local filesystem path, may be None.

    Returns:
        True if the file exists, False otherwise (including None, ''
        and values that are not paths).
    """
    if not path or not isinstance(path, str | os.PathLike):
        return False
    return Path(path).is_file()


def extract_filename(path: str) -> str:
    """Extract filename from path.

    Args:
        path: Full path (e.g., '/var/uploads/docs/file.pdf').

    Returns:
        Filename (e.g., 'file.pdf').
    """
    return Path(path).name


def get_file_size(path: str) -> int:
    """Get size of file on disk.

    Args:
        path: Path of an existing file.

    Returns:
        Size in bytes.
    """
    return Path(path).stat().st_size

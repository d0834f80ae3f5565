"""Small helpers shared across the package."""

from __future__ import annotations

import os

VERSION = (0, 6, 5)


def icasecmp(left: str, right: str) -> bool:
    """Compare two strings character by character, ignoring case."""
    return len(left) == len(right) and all(
        a.upper() == b.upper() for a, b in zip(left, right)
    )


def trim(text: str, whitespace: str = " \t") -> str:
    """Strip the given characters from both ends of the text."""
    return text.strip(whitespace)


def get_version_number() -> str:
    """Return the program version as 'major.minor.patch'."""
    return ".".join(str(part) for part in VERSION)


def get_file_size(path: str | os.PathLike) -> int:
    """Return the size of a file in bytes."""
    return os.stat(path).st_size
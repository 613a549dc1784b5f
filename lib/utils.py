# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Small helpers used across the application.
# =============================================================================

import posixpath
import time
from urllib.parse import unquote, urlparse


def current_millis() -> int:
    """Current Unix time in milliseconds."""
    return int(time.time() * 1000)


def timestamped_name(filename: str, millis: int | None = None) -> str:
    """
    Build a collision-resistant object name from an uploaded filename.

    Any directory part of the filename is dropped so the name stays a single
    path segment.

    Example:
        timestamped_name("shoe.png", 1700000000000)  # "1700000000000-shoe.png"
    """
    base = posixpath.basename(filename.replace("\\", "/")) or "image"
    stamp = current_millis() if millis is None else millis
    return f"{stamp}-{base}"


def last_path_segment(url: str) -> str:
    """
    Return the decoded trailing path segment of a URL ("" if there is none).

    Example:
        last_path_segment("https://x.co/storage/v1/object/public/b/1-a.png")  # "1-a.png"
    """
    path = urlparse(url).path
    return unquote(path.rsplit("/", 1)[-1]) if path else ""

"""Helper utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, urlparse


def normalize_base_url(url: str) -> str:
    """Validate an admin API base URL and ensure a trailing slash.

    Relative paths are resolved against the base URL, so without the
    trailing slash its last path segment would be dropped.
    """
    if not url:
        raise ValueError("Base URL must not be empty")

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid admin API base URL: {url!r}")

    if not url.endswith("/"):
        url = url + "/"
    return url


def quote_segment(value: Any) -> str:
    """Quote a resource key for use as a single path segment."""
    text = str(value)
    if not text:
        raise ValueError("Resource key must not be empty")
    if text in (".", ".."):
        # Dot segments are collapsed when the path is resolved
        raise ValueError(f"Resource key must not be {text!r}")
    return quote(text, safe=":@")


def join_path(*parts: str) -> str:
    """Join path parts with single slashes."""
    cleaned = [p.strip("/") for p in parts if p and p.strip("/")]
    return "/".join(cleaned)


__all__ = [
    "normalize_base_url",
    "quote_segment",
    "join_path",
]

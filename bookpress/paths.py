"""Path normalization and print-page ids for book-relative paths."""

from __future__ import annotations

import posixpath
import re

SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


def has_scheme(target: str) -> bool:
    """Return True when ``target`` starts with a URL scheme such as ``https:``."""
    return SCHEME_PATTERN.match(target) is not None


def normalize_path(path: str) -> str:
    """Resolve ``.`` and ``..`` segments and strip any leading slash.

    A trailing slash on the input is preserved. ``..`` segments that climb
    above the start of the path are kept, so callers can detect links that
    escape the book root with :func:`escapes_root`.
    """
    if not path:
        return ""
    normalized = posixpath.normpath(path.replace("\\", "/"))
    if normalized == ".":
        normalized = ""
    normalized = normalized.lstrip("/")
    if path.endswith("/") and normalized:
        normalized = f"{normalized}/"
    return normalized


def escapes_root(normalized: str) -> bool:
    """Return True when a normalized path still points above the book root."""
    return (
        normalized == ".."
        or normalized.startswith("../")
        or "/../" in normalized
    )


def parent_dir(path: str) -> str:
    """Return the directory portion of ``path`` (empty for top-level files)."""
    return posixpath.dirname(path)


def normalize_print_page_id(path: str) -> str:
    """Turn an already normalized relative URL into a print-page anchor id."""
    page_id = (
        path.replace("/", "-").replace(".html#", "-").replace("#", "-").lower()
    )
    return page_id.removesuffix(".html")


def print_page_id(page_path: str) -> str:
    """Return the anchor prefix for a chapter source path.

    Examples
    --------
    >>> print_page_id("chapter/Sub.md")
    'chapter-sub'
    """
    return normalize_print_page_id(normalize_path(page_path.removesuffix(".md")))


__all__ = [
    "SCHEME_PATTERN",
    "escapes_root",
    "has_scheme",
    "normalize_path",
    "normalize_print_page_id",
    "parent_dir",
    "print_page_id",
]

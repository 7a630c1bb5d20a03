r"""Derive HTML element ids from heading text.

Heading ids must be stable across builds and unique within a page (or within
the whole print page). ``unique_id_from_content`` threads a caller-owned
counter through every call so repeated headings receive numeric suffixes.

Example
-------
>>> from bookpress.anchors import unique_id_from_content
>>> counter: dict[str, int] = {}
>>> unique_id_from_content("## Setup", counter)
'setup'
>>> unique_id_from_content("## Setup", counter)
'setup-1'
"""

from __future__ import annotations

import re

TAG_PATTERN = re.compile(r"<.*?>")
ENTITY_ESCAPES = ("&lt;", "&gt;", "&amp;", "&#39;", "&quot;")


def normalize_id(content: str) -> str:
    """Map ``content`` onto characters that are safe in an element id.

    Alphanumerics, ``_`` and ``-`` are kept (ASCII letters lowercased),
    whitespace becomes ``-`` and everything else is dropped.
    """
    chars: list[str] = []
    for ch in content:
        if ch.isalnum() or ch in "_-":
            chars.append(ch.lower() if ch.isascii() else ch)
        elif ch.isspace():
            chars.append("-")
    return "".join(chars)


def id_from_content(content: str) -> str:
    """Return the normalized id for heading ``content`` without uniqueness."""
    text = TAG_PATTERN.sub("", content)
    for entity in ENTITY_ESCAPES:
        text = text.replace(entity, "")
    return normalize_id(text.strip().lstrip("#").strip())


def unique_id_from_content(content: str, id_counter: dict[str, int]) -> str:
    """Return an id for ``content`` that is unique for ``id_counter``.

    Parameters
    ----------
    content : str
        Heading text, optionally still carrying markup or ``#`` marks.
    id_counter : dict[str, int]
        Caller-owned mapping of normalized id to the number of times it has
        been handed out. Mutated in place.

    Returns
    -------
    str
        The normalized id on first use, then ``id-1``, ``id-2`` and so on.
    """
    base = id_from_content(content)
    seen = id_counter.get(base, 0)
    id_counter[base] = seen + 1
    if seen == 0:
        return base
    return f"{base}-{seen}"


__all__ = [
    "id_from_content",
    "normalize_id",
    "unique_id_from_content",
]

"""HTML escaping helpers for identifiers and bracket-only contexts.

``escape_special`` is used wherever text ends up inside an attribute value or
an element id (footnote names, for example). ``escape_brackets`` only guards
against tag injection and leaves quotes, backslashes and ampersands intact.

Examples
--------
>>> from bookpress.escaping import escape_brackets, escape_special
>>> escape_special("a<b>&'c'")
'a&lt;b&gt;&amp;&#39;c&#39;'
>>> escape_brackets("<tag attr='x'>")
"&lt;tag attr='x'&gt;"
"""

from __future__ import annotations

_SPECIAL_ESCAPES = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        "'": "&#39;",
        '"': "&quot;",
        "\\": "&#92;",
        "&": "&amp;",
    }
)
_BRACKET_ESCAPES = str.maketrans({"<": "&lt;", ">": "&gt;"})


def escape_special(text: str) -> str:
    """Escape ``< > ' " \\ &`` using fixed entity spellings."""
    return text.translate(_SPECIAL_ESCAPES)


def escape_brackets(text: str) -> str:
    """Escape only ``<`` and ``>``."""
    return text.translate(_BRACKET_ESCAPES)


__all__ = ["escape_brackets", "escape_special"]
